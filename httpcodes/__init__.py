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

"""Primary package for httpcodes, a catalogue of HTTP status codes and methods.

The `httpcodes` package can be used to directly access the constants,
predicates, and registries::

    import httpcodes

    catalog = httpcodes.Catalog()

    if httpcodes.is_client_error(code):
        print(catalog.statuses.format(code))

    catalog.methods.register('PURGE', 'Invalidate cached content')
    catalog.methods.validate('PURGE')
"""

import logging as _logging

__all__ = (
    # Registries
    'Catalog',
    'MethodRegistry',
    'Registry',
    'StatusRegistry',
    # Errors
    'InvalidMethod',
    'InvalidStatusCode',
    # Constants
    'HTTP_METHODS',
    'MAX_STATUS_CODE',
    'MIN_STATUS_CODE',
    'StatusCategory',
    'UNKNOWN_METHOD',
    'UNKNOWN_STATUS_CODE',
    # Utilities
    'dump_methods',
    'dump_status_codes',
    'format_entry',
    'http_status_to_code',
    'print_methods',
    'print_status_codes',
    'RWLock',
    # Status codes
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
    # Methods
    'Method',
    'METHOD_DESCRIPTIONS',
    'CONNECT',
    'CONNECT_DESC',
    'DELETE',
    'DELETE_DESC',
    'GET',
    'GET_DESC',
    'HEAD',
    'HEAD_DESC',
    'OPTIONS',
    'OPTIONS_DESC',
    'PATCH',
    'PATCH_DESC',
    'POST',
    'POST_DESC',
    'PUT',
    'PUT_DESC',
    'TRACE',
    'TRACE_DESC',
)

from httpcodes.constants import HTTP_METHODS
from httpcodes.constants import MAX_STATUS_CODE
from httpcodes.constants import MIN_STATUS_CODE
from httpcodes.constants import StatusCategory
from httpcodes.constants import UNKNOWN_METHOD
from httpcodes.constants import UNKNOWN_STATUS_CODE
from httpcodes.errors import InvalidMethod
from httpcodes.errors import InvalidStatusCode
from httpcodes.methods import Method
from httpcodes.methods import METHOD_DESCRIPTIONS
from httpcodes.methods import CONNECT
from httpcodes.methods import CONNECT_DESC
from httpcodes.methods import DELETE
from httpcodes.methods import DELETE_DESC
from httpcodes.methods import GET
from httpcodes.methods import GET_DESC
from httpcodes.methods import HEAD
from httpcodes.methods import HEAD_DESC
from httpcodes.methods import OPTIONS
from httpcodes.methods import OPTIONS_DESC
from httpcodes.methods import PATCH
from httpcodes.methods import PATCH_DESC
from httpcodes.methods import POST
from httpcodes.methods import POST_DESC
from httpcodes.methods import PUT
from httpcodes.methods import PUT_DESC
from httpcodes.methods import TRACE
from httpcodes.methods import TRACE_DESC
from httpcodes.registry import Catalog
from httpcodes.registry import MethodRegistry
from httpcodes.registry import Registry
from httpcodes.registry import StatusRegistry
from httpcodes.status_codes import StatusCode
from httpcodes.status_codes import STATUS_DESCRIPTIONS
from httpcodes.status_codes import classify
from httpcodes.status_codes import is_client_error
from httpcodes.status_codes import is_informational
from httpcodes.status_codes import is_redirection
from httpcodes.status_codes import is_server_error
from httpcodes.status_codes import is_success
from httpcodes.status_codes import is_valid_status_code
from httpcodes.status_codes import validate_status_code
from httpcodes.status_codes import CONTINUE
from httpcodes.status_codes import SWITCHING_PROTOCOLS
from httpcodes.status_codes import PROCESSING
from httpcodes.status_codes import OK
from httpcodes.status_codes import CREATED
from httpcodes.status_codes import ACCEPTED
from httpcodes.status_codes import NON_AUTHORITATIVE_INFO
from httpcodes.status_codes import NO_CONTENT
from httpcodes.status_codes import RESET_CONTENT
from httpcodes.status_codes import PARTIAL_CONTENT
from httpcodes.status_codes import MULTIPLE_CHOICES
from httpcodes.status_codes import MOVED_PERMANENTLY
from httpcodes.status_codes import FOUND
from httpcodes.status_codes import SEE_OTHER
from httpcodes.status_codes import NOT_MODIFIED
from httpcodes.status_codes import USE_PROXY
from httpcodes.status_codes import TEMPORARY_REDIRECT
from httpcodes.status_codes import PERMANENT_REDIRECT
from httpcodes.status_codes import BAD_REQUEST
from httpcodes.status_codes import UNAUTHORIZED
from httpcodes.status_codes import PAYMENT_REQUIRED
from httpcodes.status_codes import FORBIDDEN
from httpcodes.status_codes import NOT_FOUND
from httpcodes.status_codes import METHOD_NOT_ALLOWED
from httpcodes.status_codes import NOT_ACCEPTABLE
from httpcodes.status_codes import PROXY_AUTH_REQUIRED
from httpcodes.status_codes import REQUEST_TIMEOUT
from httpcodes.status_codes import CONFLICT
from httpcodes.status_codes import GONE
from httpcodes.status_codes import LENGTH_REQUIRED
from httpcodes.status_codes import PRECONDITION_FAILED
from httpcodes.status_codes import PAYLOAD_TOO_LARGE
from httpcodes.status_codes import URI_TOO_LONG
from httpcodes.status_codes import UNSUPPORTED_MEDIA_TYPE
from httpcodes.status_codes import RANGE_NOT_SATISFIABLE
from httpcodes.status_codes import EXPECTATION_FAILED
from httpcodes.status_codes import IM_A_TEAPOT
from httpcodes.status_codes import UNPROCESSABLE_ENTITY
from httpcodes.status_codes import TOO_EARLY
from httpcodes.status_codes import UPGRADE_REQUIRED
from httpcodes.status_codes import PRECONDITION_REQUIRED
from httpcodes.status_codes import TOO_MANY_REQUESTS
from httpcodes.status_codes import REQUEST_HEADER_FIELDS_TOO_LARGE
from httpcodes.status_codes import UNAVAILABLE_FOR_LEGAL_REASONS
from httpcodes.status_codes import INTERNAL_SERVER_ERROR
from httpcodes.status_codes import NOT_IMPLEMENTED
from httpcodes.status_codes import BAD_GATEWAY
from httpcodes.status_codes import SERVICE_UNAVAILABLE
from httpcodes.status_codes import GATEWAY_TIMEOUT
from httpcodes.status_codes import HTTP_VERSION_NOT_SUPPORTED
from httpcodes.status_codes import VARIANT_ALSO_NEGOTIATES
from httpcodes.status_codes import INSUFFICIENT_STORAGE
from httpcodes.status_codes import LOOP_DETECTED
from httpcodes.status_codes import NOT_EXTENDED
from httpcodes.status_codes import NETWORK_AUTHENTICATION_REQUIRED
from httpcodes.status_codes import CONTINUE_DESC
from httpcodes.status_codes import SWITCHING_PROTOCOLS_DESC
from httpcodes.status_codes import PROCESSING_DESC
from httpcodes.status_codes import OK_DESC
from httpcodes.status_codes import CREATED_DESC
from httpcodes.status_codes import ACCEPTED_DESC
from httpcodes.status_codes import NON_AUTHORITATIVE_INFO_DESC
from httpcodes.status_codes import NO_CONTENT_DESC
from httpcodes.status_codes import RESET_CONTENT_DESC
from httpcodes.status_codes import PARTIAL_CONTENT_DESC
from httpcodes.status_codes import MULTIPLE_CHOICES_DESC
from httpcodes.status_codes import MOVED_PERMANENTLY_DESC
from httpcodes.status_codes import FOUND_DESC
from httpcodes.status_codes import SEE_OTHER_DESC
from httpcodes.status_codes import NOT_MODIFIED_DESC
from httpcodes.status_codes import USE_PROXY_DESC
from httpcodes.status_codes import TEMPORARY_REDIRECT_DESC
from httpcodes.status_codes import PERMANENT_REDIRECT_DESC
from httpcodes.status_codes import BAD_REQUEST_DESC
from httpcodes.status_codes import UNAUTHORIZED_DESC
from httpcodes.status_codes import PAYMENT_REQUIRED_DESC
from httpcodes.status_codes import FORBIDDEN_DESC
from httpcodes.status_codes import NOT_FOUND_DESC
from httpcodes.status_codes import METHOD_NOT_ALLOWED_DESC
from httpcodes.status_codes import NOT_ACCEPTABLE_DESC
from httpcodes.status_codes import PROXY_AUTH_REQUIRED_DESC
from httpcodes.status_codes import REQUEST_TIMEOUT_DESC
from httpcodes.status_codes import CONFLICT_DESC
from httpcodes.status_codes import GONE_DESC
from httpcodes.status_codes import LENGTH_REQUIRED_DESC
from httpcodes.status_codes import PRECONDITION_FAILED_DESC
from httpcodes.status_codes import PAYLOAD_TOO_LARGE_DESC
from httpcodes.status_codes import URI_TOO_LONG_DESC
from httpcodes.status_codes import UNSUPPORTED_MEDIA_TYPE_DESC
from httpcodes.status_codes import RANGE_NOT_SATISFIABLE_DESC
from httpcodes.status_codes import EXPECTATION_FAILED_DESC
from httpcodes.status_codes import IM_A_TEAPOT_DESC
from httpcodes.status_codes import UNPROCESSABLE_ENTITY_DESC
from httpcodes.status_codes import TOO_EARLY_DESC
from httpcodes.status_codes import UPGRADE_REQUIRED_DESC
from httpcodes.status_codes import PRECONDITION_REQUIRED_DESC
from httpcodes.status_codes import TOO_MANY_REQUESTS_DESC
from httpcodes.status_codes import REQUEST_HEADER_FIELDS_TOO_LARGE_DESC
from httpcodes.status_codes import UNAVAILABLE_FOR_LEGAL_REASONS_DESC
from httpcodes.status_codes import INTERNAL_SERVER_ERROR_DESC
from httpcodes.status_codes import NOT_IMPLEMENTED_DESC
from httpcodes.status_codes import BAD_GATEWAY_DESC
from httpcodes.status_codes import SERVICE_UNAVAILABLE_DESC
from httpcodes.status_codes import GATEWAY_TIMEOUT_DESC
from httpcodes.status_codes import HTTP_VERSION_NOT_SUPPORTED_DESC
from httpcodes.status_codes import VARIANT_ALSO_NEGOTIATES_DESC
from httpcodes.status_codes import INSUFFICIENT_STORAGE_DESC
from httpcodes.status_codes import LOOP_DETECTED_DESC
from httpcodes.status_codes import NOT_EXTENDED_DESC
from httpcodes.status_codes import NETWORK_AUTHENTICATION_REQUIRED_DESC
from httpcodes.util import dump_methods
from httpcodes.util import dump_status_codes
from httpcodes.util import format_entry
from httpcodes.util import http_status_to_code
from httpcodes.util import print_methods
from httpcodes.util import print_status_codes
from httpcodes.util import RWLock

# Package version
from httpcodes.version import __version__  # NOQA: F401

# NOTE: Registries log at DEBUG level; nothing is emitted unless the
#   application configures logging for the 'httpcodes' logger.
_logger = _logging.getLogger('httpcodes')
_logger.addHandler(_logging.NullHandler())
