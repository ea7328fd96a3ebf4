import pytest

import httpcodes


@pytest.fixture()
def status_registry():
    return httpcodes.StatusRegistry()


@pytest.fixture()
def method_registry():
    return httpcodes.MethodRegistry()


@pytest.fixture()
def catalog():
    return httpcodes.Catalog()
