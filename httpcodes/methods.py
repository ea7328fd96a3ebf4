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

"""HTTP request method constants and descriptions.

Methods are open-ended: :class:`Method` wraps any text token, and a method
is considered valid once it is known to a
:class:`~httpcodes.MethodRegistry`. The constants below cover the methods
defined by RFC 7231 and RFC 5789.
"""

from __future__ import annotations

import types
from typing import Final, IO, Mapping, Optional, TYPE_CHECKING

from httpcodes.constants import UNKNOWN_METHOD
from httpcodes.util.misc import format_entry

if TYPE_CHECKING:
    from httpcodes.registry import MethodRegistry

__all__ = (
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


class Method(str):
    """An HTTP request method token.

    Tokens are case-sensitive and are not checked for shape; ``Method('get')``
    and ``Method('GET')`` are two different methods.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return '{}({})'.format(type(self).__name__, str.__repr__(self))

    def describe(self, registry: Optional[MethodRegistry] = None) -> str:
        """Look up the description of this method.

        Args:
            registry (MethodRegistry): Registry to consult. When omitted, the
                read-only table of standard descriptions is used.

        Returns:
            str: The description, or ``'Unknown Method'``.
        """

        if registry is None:
            return METHOD_DESCRIPTIONS.get(self, UNKNOWN_METHOD)
        return registry.lookup(self)

    # NOTE: This intentionally shadows str.format(); a method token is never
    #   used as a template.
    def format(  # type: ignore[override]
        self, registry: Optional[MethodRegistry] = None
    ) -> str:
        """Render this method as ``'<method> -> <description>'``.

        Args:
            registry (MethodRegistry): Registry to consult for the description
                (see :meth:`describe`).
        """

        return format_entry(self, self.describe(registry))

    def print(
        self,
        registry: Optional[MethodRegistry] = None,
        file: Optional[IO[str]] = None,
    ) -> None:
        """Print the output of :meth:`format` to `file` (default stdout)."""
        print(self.format(registry), file=file)


CONNECT: Final[Method] = Method('CONNECT')
DELETE: Final[Method] = Method('DELETE')
GET: Final[Method] = Method('GET')
HEAD: Final[Method] = Method('HEAD')
OPTIONS: Final[Method] = Method('OPTIONS')
PATCH: Final[Method] = Method('PATCH')
POST: Final[Method] = Method('POST')
PUT: Final[Method] = Method('PUT')
TRACE: Final[Method] = Method('TRACE')

CONNECT_DESC: Final[str] = 'Connect to server'
DELETE_DESC: Final[str] = 'Delete data from server'
GET_DESC: Final[str] = 'Retrieve data from server'
HEAD_DESC: Final[str] = 'Retrieve metadata from server'
OPTIONS_DESC: Final[str] = 'Retrieve options from server'
PATCH_DESC: Final[str] = 'Partially update data on server'
POST_DESC: Final[str] = 'Send data to server for processing'
PUT_DESC: Final[str] = 'Update data on server'
TRACE_DESC: Final[str] = 'Trace route to server'

METHOD_DESCRIPTIONS: Final[Mapping[Method, str]] = types.MappingProxyType(
    {
        GET: GET_DESC,
        POST: POST_DESC,
        PUT: PUT_DESC,
        DELETE: DELETE_DESC,
        PATCH: PATCH_DESC,
        HEAD: HEAD_DESC,
        OPTIONS: OPTIONS_DESC,
        CONNECT: CONNECT_DESC,
        TRACE: TRACE_DESC,
    }
)
"""Read-only table of the standard methods and their descriptions."""
