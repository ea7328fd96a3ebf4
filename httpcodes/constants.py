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

from enum import Enum
import sys

__all__ = (
    'HTTP_METHODS',
    'MAX_STATUS_CODE',
    'MIN_STATUS_CODE',
    'StatusCategory',
    'UNKNOWN_METHOD',
    'UNKNOWN_STATUS_CODE',
)

PYTHON_VERSION = tuple(sys.version_info[:3])
"""Python version information triplet: (major, minor, micro)."""

HTTPCODES_SUPPORTED = PYTHON_VERSION >= (3, 8, 0)
"""Whether this version of httpcodes supports the current Python version."""

if not HTTPCODES_SUPPORTED:  # pragma: nocover
    raise ImportError(
        'httpcodes requires Python 3.8+. '
        '(Recent Pip should automatically pick a suitable httpcodes version.)'
    )

# NOTE: Status codes are valid when MIN_STATUS_CODE <= code < MAX_STATUS_CODE.
#   Validity is purely a function of the value; a code does not need to be
#   registered in order to be valid.
MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 600

# Lower bounds of the five status bands; each band spans one hundred codes.
_INFORMATIONAL_START = 100
_SUCCESS_START = 200
_REDIRECTION_START = 300
_CLIENT_ERROR_START = 400
_SERVER_ERROR_START = 500

UNKNOWN_STATUS_CODE = 'Unknown Status Code'
"""Description returned when looking up an unregistered status code."""

UNKNOWN_METHOD = 'Unknown Method'
"""Description returned when looking up an unregistered method."""

# RFC 7231, 5789 methods
HTTP_METHODS = [
    'CONNECT',
    'DELETE',
    'GET',
    'HEAD',
    'OPTIONS',
    'PATCH',
    'POST',
    'PUT',
    'TRACE',
]


class StatusCategory(Enum):
    """Enum representing the band a status code falls into."""

    INFORMATIONAL = 'informational'
    SUCCESS = 'success'
    REDIRECTION = 'redirection'
    CLIENT_ERROR = 'client_error'
    SERVER_ERROR = 'server_error'
    INVALID = 'invalid'
