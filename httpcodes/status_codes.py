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

"""HTTP status code constants, descriptions, and band predicates.

Status codes are plain integers wrapped in :class:`StatusCode`, so they
compare, hash, and sort exactly like the corresponding ``int``::

    from httpcodes import status_codes

    if status_codes.is_success(response_code):
        ...
    elif status_codes.is_client_error(response_code):
        print(status_codes.NOT_FOUND.format())

Validity of a code is a function of its value alone (100-599); a code does
not need a description to be valid.
"""

from __future__ import annotations

import types
from typing import Final, IO, Mapping, Optional, TYPE_CHECKING

from httpcodes.constants import _CLIENT_ERROR_START
from httpcodes.constants import _INFORMATIONAL_START
from httpcodes.constants import _REDIRECTION_START
from httpcodes.constants import _SERVER_ERROR_START
from httpcodes.constants import _SUCCESS_START
from httpcodes.constants import MAX_STATUS_CODE
from httpcodes.constants import MIN_STATUS_CODE
from httpcodes.constants import StatusCategory
from httpcodes.constants import UNKNOWN_STATUS_CODE
from httpcodes.errors import InvalidStatusCode
from httpcodes.util.misc import format_entry
from httpcodes.util.misc import http_status_to_code

if TYPE_CHECKING:
    from httpcodes._typing import StatusLike
    from httpcodes.registry import StatusRegistry


__all__ = (
    'StatusCode',
    'STATUS_DESCRIPTIONS',
    'classify',
    'is_client_error',
    'is_informational',
    'is_redirection',
    'is_server_error',
    'is_success',
    'is_valid_status_code',
    'validate_status_code',
    'CONTINUE',
    'SWITCHING_PROTOCOLS',
    'PROCESSING',
    'OK',
    'CREATED',
    'ACCEPTED',
    'NON_AUTHORITATIVE_INFO',
    'NO_CONTENT',
    'RESET_CONTENT',
    'PARTIAL_CONTENT',
    'MULTIPLE_CHOICES',
    'MOVED_PERMANENTLY',
    'FOUND',
    'SEE_OTHER',
    'NOT_MODIFIED',
    'USE_PROXY',
    'TEMPORARY_REDIRECT',
    'PERMANENT_REDIRECT',
    'BAD_REQUEST',
    'UNAUTHORIZED',
    'PAYMENT_REQUIRED',
    'FORBIDDEN',
    'NOT_FOUND',
    'METHOD_NOT_ALLOWED',
    'NOT_ACCEPTABLE',
    'PROXY_AUTH_REQUIRED',
    'REQUEST_TIMEOUT',
    'CONFLICT',
    'GONE',
    'LENGTH_REQUIRED',
    'PRECONDITION_FAILED',
    'PAYLOAD_TOO_LARGE',
    'URI_TOO_LONG',
    'UNSUPPORTED_MEDIA_TYPE',
    'RANGE_NOT_SATISFIABLE',
    'EXPECTATION_FAILED',
    'IM_A_TEAPOT',
    'UNPROCESSABLE_ENTITY',
    'TOO_EARLY',
    'UPGRADE_REQUIRED',
    'PRECONDITION_REQUIRED',
    'TOO_MANY_REQUESTS',
    'REQUEST_HEADER_FIELDS_TOO_LARGE',
    'UNAVAILABLE_FOR_LEGAL_REASONS',
    'INTERNAL_SERVER_ERROR',
    'NOT_IMPLEMENTED',
    'BAD_GATEWAY',
    'SERVICE_UNAVAILABLE',
    'GATEWAY_TIMEOUT',
    'HTTP_VERSION_NOT_SUPPORTED',
    'VARIANT_ALSO_NEGOTIATES',
    'INSUFFICIENT_STORAGE',
    'LOOP_DETECTED',
    'NOT_EXTENDED',
    'NETWORK_AUTHENTICATION_REQUIRED',
    'CONTINUE_DESC',
    'SWITCHING_PROTOCOLS_DESC',
    'PROCESSING_DESC',
    'OK_DESC',
    'CREATED_DESC',
    'ACCEPTED_DESC',
    'NON_AUTHORITATIVE_INFO_DESC',
    'NO_CONTENT_DESC',
    'RESET_CONTENT_DESC',
    'PARTIAL_CONTENT_DESC',
    'MULTIPLE_CHOICES_DESC',
    'MOVED_PERMANENTLY_DESC',
    'FOUND_DESC',
    'SEE_OTHER_DESC',
    'NOT_MODIFIED_DESC',
    'USE_PROXY_DESC',
    'TEMPORARY_REDIRECT_DESC',
    'PERMANENT_REDIRECT_DESC',
    'BAD_REQUEST_DESC',
    'UNAUTHORIZED_DESC',
    'PAYMENT_REQUIRED_DESC',
    'FORBIDDEN_DESC',
    'NOT_FOUND_DESC',
    'METHOD_NOT_ALLOWED_DESC',
    'NOT_ACCEPTABLE_DESC',
    'PROXY_AUTH_REQUIRED_DESC',
    'REQUEST_TIMEOUT_DESC',
    'CONFLICT_DESC',
    'GONE_DESC',
    'LENGTH_REQUIRED_DESC',
    'PRECONDITION_FAILED_DESC',
    'PAYLOAD_TOO_LARGE_DESC',
    'URI_TOO_LONG_DESC',
    'UNSUPPORTED_MEDIA_TYPE_DESC',
    'RANGE_NOT_SATISFIABLE_DESC',
    'EXPECTATION_FAILED_DESC',
    'IM_A_TEAPOT_DESC',
    'UNPROCESSABLE_ENTITY_DESC',
    'TOO_EARLY_DESC',
    'UPGRADE_REQUIRED_DESC',
    'PRECONDITION_REQUIRED_DESC',
    'TOO_MANY_REQUESTS_DESC',
    'REQUEST_HEADER_FIELDS_TOO_LARGE_DESC',
    'UNAVAILABLE_FOR_LEGAL_REASONS_DESC',
    'INTERNAL_SERVER_ERROR_DESC',
    'NOT_IMPLEMENTED_DESC',
    'BAD_GATEWAY_DESC',
    'SERVICE_UNAVAILABLE_DESC',
    'GATEWAY_TIMEOUT_DESC',
    'HTTP_VERSION_NOT_SUPPORTED_DESC',
    'VARIANT_ALSO_NEGOTIATES_DESC',
    'INSUFFICIENT_STORAGE_DESC',
    'LOOP_DETECTED_DESC',
    'NOT_EXTENDED_DESC',
    'NETWORK_AUTHENTICATION_REQUIRED_DESC',
)


class StatusCode(int):
    """An HTTP status code.

    Args:
        value: The code as an ``int``, a member of :class:`http.HTTPStatus`,
            or an HTTP status line string or byte string (e.g.,
            ``'404 Not Found'``). Out-of-range values are accepted; use
            :meth:`is_valid` or :func:`validate_status_code` to check them.
    """

    __slots__ = ()

    def __new__(cls, value: StatusLike) -> StatusCode:
        return super().__new__(cls, http_status_to_code(value))

    def __repr__(self) -> str:
        return '{}({})'.format(type(self).__name__, int(self))

    # NOTE: Keep str() and format() rendering the bare digits.
    __str__ = int.__repr__

    @property
    def category(self) -> StatusCategory:
        """The band this code belongs to (see :func:`classify`)."""
        return classify(self)

    def is_valid(self) -> bool:
        return is_valid_status_code(self)

    def is_informational(self) -> bool:
        return is_informational(self)

    def is_success(self) -> bool:
        return is_success(self)

    def is_redirection(self) -> bool:
        return is_redirection(self)

    def is_client_error(self) -> bool:
        return is_client_error(self)

    def is_server_error(self) -> bool:
        return is_server_error(self)

    def describe(self, registry: Optional[StatusRegistry] = None) -> str:
        """Look up the description of this code.

        Args:
            registry (StatusRegistry): Registry to consult. When omitted, the
                read-only table of standard descriptions is used.

        Returns:
            str: The description, or ``'Unknown Status Code'``.
        """

        if registry is None:
            return STATUS_DESCRIPTIONS.get(self, UNKNOWN_STATUS_CODE)
        return registry.lookup(self)

    def format(self, registry: Optional[StatusRegistry] = None) -> str:
        """Render this code as ``'<code> -> <description>'``.

        Args:
            registry (StatusRegistry): Registry to consult for the description
                (see :meth:`describe`).
        """

        return format_entry(int(self), self.describe(registry))

    def print(
        self,
        registry: Optional[StatusRegistry] = None,
        file: Optional[IO[str]] = None,
    ) -> None:
        """Print the output of :meth:`format` to `file` (default stdout)."""
        print(self.format(registry), file=file)


def is_valid_status_code(code: int) -> bool:
    """Check if the code lies within the standard 100-599 range."""
    return MIN_STATUS_CODE <= code < MAX_STATUS_CODE


def is_informational(code: int) -> bool:
    """Check if the code indicates an informational response (1xx)."""
    return _INFORMATIONAL_START <= code < _SUCCESS_START


def is_success(code: int) -> bool:
    """Check if the code indicates a successful request (2xx)."""
    return _SUCCESS_START <= code < _REDIRECTION_START


def is_redirection(code: int) -> bool:
    """Check if the code indicates a redirection (3xx)."""
    return _REDIRECTION_START <= code < _CLIENT_ERROR_START


def is_client_error(code: int) -> bool:
    """Check if the code indicates a client error (4xx)."""
    return _CLIENT_ERROR_START <= code < _SERVER_ERROR_START


def is_server_error(code: int) -> bool:
    """Check if the code indicates a server error (5xx)."""
    return _SERVER_ERROR_START <= code < MAX_STATUS_CODE


_BANDS = (
    (is_informational, StatusCategory.INFORMATIONAL),
    (is_success, StatusCategory.SUCCESS),
    (is_redirection, StatusCategory.REDIRECTION),
    (is_client_error, StatusCategory.CLIENT_ERROR),
    (is_server_error, StatusCategory.SERVER_ERROR),
)


def classify(code: int) -> StatusCategory:
    """Determine the band a status code falls into.

    Classification depends only on the numeric value and never consults a
    registry.

    Args:
        code (int): The status code to classify.

    Returns:
        StatusCategory: The matching band, or ``StatusCategory.INVALID``
        when the code lies outside of the 100-599 range.
    """

    for predicate, category in _BANDS:
        if predicate(code):
            return category

    return StatusCategory.INVALID


def validate_status_code(code: int) -> None:
    """Validate the status code.

    Raises:
        InvalidStatusCode: The code lies outside of the 100-599 range.
    """

    if not is_valid_status_code(code):
        raise InvalidStatusCode(code)


# 1xx - Informational
CONTINUE: Final[StatusCode] = StatusCode(100)
SWITCHING_PROTOCOLS: Final[StatusCode] = StatusCode(101)
PROCESSING: Final[StatusCode] = StatusCode(102)

# 2xx - Success
OK: Final[StatusCode] = StatusCode(200)
CREATED: Final[StatusCode] = StatusCode(201)
ACCEPTED: Final[StatusCode] = StatusCode(202)
NON_AUTHORITATIVE_INFO: Final[StatusCode] = StatusCode(203)
NO_CONTENT: Final[StatusCode] = StatusCode(204)
RESET_CONTENT: Final[StatusCode] = StatusCode(205)
PARTIAL_CONTENT: Final[StatusCode] = StatusCode(206)

# 3xx - Redirection
MULTIPLE_CHOICES: Final[StatusCode] = StatusCode(300)
MOVED_PERMANENTLY: Final[StatusCode] = StatusCode(301)
FOUND: Final[StatusCode] = StatusCode(302)
SEE_OTHER: Final[StatusCode] = StatusCode(303)
NOT_MODIFIED: Final[StatusCode] = StatusCode(304)
USE_PROXY: Final[StatusCode] = StatusCode(305)
TEMPORARY_REDIRECT: Final[StatusCode] = StatusCode(307)
PERMANENT_REDIRECT: Final[StatusCode] = StatusCode(308)

# 4xx - Client Error
BAD_REQUEST: Final[StatusCode] = StatusCode(400)
UNAUTHORIZED: Final[StatusCode] = StatusCode(401)  # <-- Really means "unauthenticated"
PAYMENT_REQUIRED: Final[StatusCode] = StatusCode(402)
FORBIDDEN: Final[StatusCode] = StatusCode(403)
NOT_FOUND: Final[StatusCode] = StatusCode(404)
METHOD_NOT_ALLOWED: Final[StatusCode] = StatusCode(405)
NOT_ACCEPTABLE: Final[StatusCode] = StatusCode(406)
PROXY_AUTH_REQUIRED: Final[StatusCode] = StatusCode(407)
REQUEST_TIMEOUT: Final[StatusCode] = StatusCode(408)
CONFLICT: Final[StatusCode] = StatusCode(409)
GONE: Final[StatusCode] = StatusCode(410)
LENGTH_REQUIRED: Final[StatusCode] = StatusCode(411)
PRECONDITION_FAILED: Final[StatusCode] = StatusCode(412)
PAYLOAD_TOO_LARGE: Final[StatusCode] = StatusCode(413)
URI_TOO_LONG: Final[StatusCode] = StatusCode(414)
UNSUPPORTED_MEDIA_TYPE: Final[StatusCode] = StatusCode(415)
RANGE_NOT_SATISFIABLE: Final[StatusCode] = StatusCode(416)
EXPECTATION_FAILED: Final[StatusCode] = StatusCode(417)
IM_A_TEAPOT: Final[StatusCode] = StatusCode(418)
UNPROCESSABLE_ENTITY: Final[StatusCode] = StatusCode(422)
TOO_EARLY: Final[StatusCode] = StatusCode(425)
UPGRADE_REQUIRED: Final[StatusCode] = StatusCode(426)
PRECONDITION_REQUIRED: Final[StatusCode] = StatusCode(428)
TOO_MANY_REQUESTS: Final[StatusCode] = StatusCode(429)
REQUEST_HEADER_FIELDS_TOO_LARGE: Final[StatusCode] = StatusCode(431)
UNAVAILABLE_FOR_LEGAL_REASONS: Final[StatusCode] = StatusCode(451)

# 5xx - Server Error
INTERNAL_SERVER_ERROR: Final[StatusCode] = StatusCode(500)
NOT_IMPLEMENTED: Final[StatusCode] = StatusCode(501)
BAD_GATEWAY: Final[StatusCode] = StatusCode(502)
SERVICE_UNAVAILABLE: Final[StatusCode] = StatusCode(503)
GATEWAY_TIMEOUT: Final[StatusCode] = StatusCode(504)
HTTP_VERSION_NOT_SUPPORTED: Final[StatusCode] = StatusCode(505)
VARIANT_ALSO_NEGOTIATES: Final[StatusCode] = StatusCode(506)
INSUFFICIENT_STORAGE: Final[StatusCode] = StatusCode(507)
LOOP_DETECTED: Final[StatusCode] = StatusCode(508)
NOT_EXTENDED: Final[StatusCode] = StatusCode(510)
NETWORK_AUTHENTICATION_REQUIRED: Final[StatusCode] = StatusCode(511)

# 1xx - Informational
CONTINUE_DESC: Final[str] = 'Request received, processing continues'
SWITCHING_PROTOCOLS_DESC: Final[str] = 'Server is switching protocols'
PROCESSING_DESC: Final[str] = 'Server is processing the request'

# 2xx - Success
OK_DESC: Final[str] = 'Request succeeded and response contains requested data'
CREATED_DESC: Final[str] = 'Resource created successfully and location provided'
ACCEPTED_DESC: Final[str] = (
    'Request accepted for processing but processing not completed'
)
NON_AUTHORITATIVE_INFO_DESC: Final[str] = (
    'Response contains non-authoritative information'
)
NO_CONTENT_DESC: Final[str] = 'Request succeeded but no content returned'
RESET_CONTENT_DESC: Final[str] = 'Request succeeded, client should reset document view'
PARTIAL_CONTENT_DESC: Final[str] = 'Partial content delivered as per range request'

# 3xx - Redirection
MULTIPLE_CHOICES_DESC: Final[str] = 'Multiple options for resource available'
MOVED_PERMANENTLY_DESC: Final[str] = 'Resource moved permanently to new location'
FOUND_DESC: Final[str] = 'Resource temporarily found at different location'
SEE_OTHER_DESC: Final[str] = 'Client should get resource from different URI'
NOT_MODIFIED_DESC: Final[str] = 'Resource not modified since last request'
USE_PROXY_DESC: Final[str] = 'Requested resource must be accessed through proxy'
TEMPORARY_REDIRECT_DESC: Final[str] = 'Resource temporarily moved to different location'
PERMANENT_REDIRECT_DESC: Final[str] = 'Resource permanently moved to different location'

# 4xx - Client Error
BAD_REQUEST_DESC: Final[str] = 'Server cannot process request due to client error'
UNAUTHORIZED_DESC: Final[str] = 'Authentication required for resource access'
PAYMENT_REQUIRED_DESC: Final[str] = 'Payment required before processing request'
FORBIDDEN_DESC: Final[str] = 'Server refuses to fulfill request despite authentication'
NOT_FOUND_DESC: Final[str] = 'Requested resource could not be found'
METHOD_NOT_ALLOWED_DESC: Final[str] = 'Request method not supported for this resource'
NOT_ACCEPTABLE_DESC: Final[str] = 'Resource cannot generate acceptable response'
PROXY_AUTH_REQUIRED_DESC: Final[str] = 'Authentication with proxy required'
REQUEST_TIMEOUT_DESC: Final[str] = 'Server timed out waiting for request'
CONFLICT_DESC: Final[str] = 'Request conflicts with current state of resource'
GONE_DESC: Final[str] = 'Resource permanently removed with no forwarding address'
LENGTH_REQUIRED_DESC: Final[str] = 'Content-Length header required for request'
PRECONDITION_FAILED_DESC: Final[str] = 'Server precondition check failed'
PAYLOAD_TOO_LARGE_DESC: Final[str] = (
    'Request payload larger than server willing to process'
)
URI_TOO_LONG_DESC: Final[str] = 'Request URI too long for server to process'
UNSUPPORTED_MEDIA_TYPE_DESC: Final[str] = 'Media format not supported by server'
RANGE_NOT_SATISFIABLE_DESC: Final[str] = 'Requested range cannot be satisfied'
EXPECTATION_FAILED_DESC: Final[str] = 'Server cannot meet client expectation'
IM_A_TEAPOT_DESC: Final[str] = "I'm a teapot - RFC 2324 April Fools' joke"
UNPROCESSABLE_ENTITY_DESC: Final[str] = 'Request well-formed but semantically invalid'
TOO_EARLY_DESC: Final[str] = (
    'Server unwilling to risk processing due to replay attack'
)
UPGRADE_REQUIRED_DESC: Final[str] = 'Client must switch to different protocol'
PRECONDITION_REQUIRED_DESC: Final[str] = 'Resource access requires conditional request'
TOO_MANY_REQUESTS_DESC: Final[str] = 'Too many requests in given time period'
REQUEST_HEADER_FIELDS_TOO_LARGE_DESC: Final[str] = (
    'Header fields too large for server to process'
)
UNAVAILABLE_FOR_LEGAL_REASONS_DESC: Final[str] = (
    'Resource access denied for legal reasons'
)

# 5xx - Server Error
INTERNAL_SERVER_ERROR_DESC: Final[str] = 'Server encountered unexpected condition'
NOT_IMPLEMENTED_DESC: Final[str] = 'Server does not support functionality required'
BAD_GATEWAY_DESC: Final[str] = 'Invalid response received from upstream server'
SERVICE_UNAVAILABLE_DESC: Final[str] = 'Server temporarily unavailable'
GATEWAY_TIMEOUT_DESC: Final[str] = 'Upstream server failed to respond in time'
HTTP_VERSION_NOT_SUPPORTED_DESC: Final[str] = 'HTTP version not supported by server'
VARIANT_ALSO_NEGOTIATES_DESC: Final[str] = (
    'Server configuration error with transparent content negotiation'
)
INSUFFICIENT_STORAGE_DESC: Final[str] = (
    'Server unable to store resource to complete request'
)
LOOP_DETECTED_DESC: Final[str] = (
    'Server detected infinite loop while processing request'
)
NOT_EXTENDED_DESC: Final[str] = 'Further extensions required to fulfill request'
NETWORK_AUTHENTICATION_REQUIRED_DESC: Final[str] = (
    'Client must authenticate to gain network access'
)

STATUS_DESCRIPTIONS: Final[Mapping[StatusCode, str]] = types.MappingProxyType(
    {
        # 1xx - Informational
        CONTINUE: CONTINUE_DESC,
        SWITCHING_PROTOCOLS: SWITCHING_PROTOCOLS_DESC,
        PROCESSING: PROCESSING_DESC,
        # 2xx - Success
        OK: OK_DESC,
        CREATED: CREATED_DESC,
        ACCEPTED: ACCEPTED_DESC,
        NON_AUTHORITATIVE_INFO: NON_AUTHORITATIVE_INFO_DESC,
        NO_CONTENT: NO_CONTENT_DESC,
        RESET_CONTENT: RESET_CONTENT_DESC,
        PARTIAL_CONTENT: PARTIAL_CONTENT_DESC,
        # 3xx - Redirection
        MULTIPLE_CHOICES: MULTIPLE_CHOICES_DESC,
        MOVED_PERMANENTLY: MOVED_PERMANENTLY_DESC,
        FOUND: FOUND_DESC,
        SEE_OTHER: SEE_OTHER_DESC,
        NOT_MODIFIED: NOT_MODIFIED_DESC,
        USE_PROXY: USE_PROXY_DESC,
        TEMPORARY_REDIRECT: TEMPORARY_REDIRECT_DESC,
        PERMANENT_REDIRECT: PERMANENT_REDIRECT_DESC,
        # 4xx - Client Error
        BAD_REQUEST: BAD_REQUEST_DESC,
        UNAUTHORIZED: UNAUTHORIZED_DESC,
        PAYMENT_REQUIRED: PAYMENT_REQUIRED_DESC,
        FORBIDDEN: FORBIDDEN_DESC,
        NOT_FOUND: NOT_FOUND_DESC,
        METHOD_NOT_ALLOWED: METHOD_NOT_ALLOWED_DESC,
        NOT_ACCEPTABLE: NOT_ACCEPTABLE_DESC,
        PROXY_AUTH_REQUIRED: PROXY_AUTH_REQUIRED_DESC,
        REQUEST_TIMEOUT: REQUEST_TIMEOUT_DESC,
        CONFLICT: CONFLICT_DESC,
        GONE: GONE_DESC,
        LENGTH_REQUIRED: LENGTH_REQUIRED_DESC,
        PRECONDITION_FAILED: PRECONDITION_FAILED_DESC,
        PAYLOAD_TOO_LARGE: PAYLOAD_TOO_LARGE_DESC,
        URI_TOO_LONG: URI_TOO_LONG_DESC,
        UNSUPPORTED_MEDIA_TYPE: UNSUPPORTED_MEDIA_TYPE_DESC,
        RANGE_NOT_SATISFIABLE: RANGE_NOT_SATISFIABLE_DESC,
        EXPECTATION_FAILED: EXPECTATION_FAILED_DESC,
        IM_A_TEAPOT: IM_A_TEAPOT_DESC,
        UNPROCESSABLE_ENTITY: UNPROCESSABLE_ENTITY_DESC,
        TOO_EARLY: TOO_EARLY_DESC,
        UPGRADE_REQUIRED: UPGRADE_REQUIRED_DESC,
        PRECONDITION_REQUIRED: PRECONDITION_REQUIRED_DESC,
        TOO_MANY_REQUESTS: TOO_MANY_REQUESTS_DESC,
        REQUEST_HEADER_FIELDS_TOO_LARGE: REQUEST_HEADER_FIELDS_TOO_LARGE_DESC,
        UNAVAILABLE_FOR_LEGAL_REASONS: UNAVAILABLE_FOR_LEGAL_REASONS_DESC,
        # 5xx - Server Error
        INTERNAL_SERVER_ERROR: INTERNAL_SERVER_ERROR_DESC,
        NOT_IMPLEMENTED: NOT_IMPLEMENTED_DESC,
        BAD_GATEWAY: BAD_GATEWAY_DESC,
        SERVICE_UNAVAILABLE: SERVICE_UNAVAILABLE_DESC,
        GATEWAY_TIMEOUT: GATEWAY_TIMEOUT_DESC,
        HTTP_VERSION_NOT_SUPPORTED: HTTP_VERSION_NOT_SUPPORTED_DESC,
        VARIANT_ALSO_NEGOTIATES: VARIANT_ALSO_NEGOTIATES_DESC,
        INSUFFICIENT_STORAGE: INSUFFICIENT_STORAGE_DESC,
        LOOP_DETECTED: LOOP_DETECTED_DESC,
        NOT_EXTENDED: NOT_EXTENDED_DESC,
        NETWORK_AUTHENTICATION_REQUIRED: NETWORK_AUTHENTICATION_REQUIRED_DESC,
    }
)
"""Read-only table of the standard status codes and their descriptions."""
