# Copyright 2024 by the httpcodes authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Validation errors raised by httpcodes.

Both error classes derive from :class:`ValueError`, so callers that only
care about "bad value" can catch that instead::

    import httpcodes

    try:
        registry.validate(code)
    except httpcodes.InvalidStatusCode as ex:
        print('rejected', ex.code)

Lookups never raise; an unknown key resolves to a sentinel description.
These errors are only raised by explicit validation.
"""

from __future__ import annotations

__all__ = (
    'InvalidMethod',
    'InvalidStatusCode',
)


class InvalidStatusCode(ValueError):
    """The status code lies outside of the 100-599 range.

    Args:
        code (int): The offending status code.
    """

    def __init__(self, code: int) -> None:
        super().__init__('invalid status code: {}'.format(int(code)))
        self.code = code


class InvalidMethod(ValueError):
    """The method is not present in the method registry.

    Args:
        method (str): The offending method token.
    """

    def __init__(self, method: str) -> None:
        super().__init__('invalid method: {}'.format(method))
        self.method = method
