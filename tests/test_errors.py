import pytest

import httpcodes


class TestErrors:
    def test_invalid_status_code(self):
        ex = httpcodes.InvalidStatusCode(600)

        assert isinstance(ex, ValueError)
        assert ex.code == 600
        assert str(ex) == 'invalid status code: 600'

    def test_invalid_status_code_from_status_code(self):
        ex = httpcodes.InvalidStatusCode(httpcodes.StatusCode(99))

        assert ex.code == 99
        assert str(ex) == 'invalid status code: 99'

    def test_invalid_method(self):
        ex = httpcodes.InvalidMethod(httpcodes.Method('INVALID'))

        assert isinstance(ex, ValueError)
        assert ex.method == 'INVALID'
        assert str(ex) == 'invalid method: INVALID'

    @pytest.mark.parametrize(
        'error',
        [httpcodes.InvalidStatusCode(1000), httpcodes.InvalidMethod('BREW')],
    )
    def test_catchable_as_value_error(self, error):
        with pytest.raises(ValueError):
            raise error
