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

"""Miscellaneous utilities.

This module provides helpers for normalizing status values and for
rendering status and method tables as text. These functions are hoisted into
the front-door `httpcodes` module for convenience::

    import httpcodes

    registry = httpcodes.StatusRegistry()
    httpcodes.print_status_codes(registry.snapshot())

The dump and print helpers work on any mapping supplied by the caller. They
do not synchronize access to it; pass a snapshot (see
:meth:`httpcodes.Registry.snapshot`) when other threads may be mutating the
underlying registry.
"""

from __future__ import annotations

import functools
import http
from typing import Any, IO, Mapping, Optional, Union

__all__ = (
    'dump_methods',
    'dump_status_codes',
    'format_entry',
    'http_status_to_code',
    'print_methods',
    'print_status_codes',
)

# NOTE: Every entry is rendered as "<key> -> <description>".
_ENTRY_TEMPLATE = '{} -> {}'


@functools.lru_cache(maxsize=64)
def http_status_to_code(status: Union[http.HTTPStatus, int, bytes, str]) -> int:
    """Normalize an HTTP status to an integer code.

    This function takes a member of :class:`http.HTTPStatus`, an HTTP status
    line string or byte string (e.g., ``'200 OK'``), or an ``int`` and
    returns the corresponding integer code. The code is not range-checked.

    An LRU is used to minimize lookup time.

    Args:
        status: The status code or enum to normalize.

    Returns:
        int: Integer code for the HTTP status (e.g., 200)
    """

    if isinstance(status, http.HTTPStatus):
        return status.value

    if isinstance(status, int):
        return int(status)

    if isinstance(status, bytes):
        status = status.decode()

    if not isinstance(status, str):
        raise ValueError('status must be an int, str, or a member of http.HTTPStatus')

    if len(status) < 3:
        raise ValueError('status strings must be at least three characters long')

    try:
        return int(status[:3])
    except ValueError:
        raise ValueError('status strings must start with a three-digit integer')


def format_entry(key: Any, description: str) -> str:
    """Render a single table entry.

    Args:
        key: Status code or method token. Integers are rendered as their
            base-10 digits and tokens verbatim.
        description (str): Description attached to `key`.

    Returns:
        str: The entry formatted as ``'<key> -> <description>'``.
    """

    return _ENTRY_TEMPLATE.format(key, description)


def _dump(mapping: Mapping[Any, str]) -> str:
    # NOTE: One line per entry, each terminated by a newline, in the
    #   mapping's own iteration order.
    return ''.join(
        format_entry(key, description) + '\n' for key, description in mapping.items()
    )


def dump_status_codes(mapping: Mapping[int, str]) -> str:
    """Render a mapping of status codes to descriptions.

    Each entry is formatted as ``'<code> -> <description>'`` and terminated
    by a line break.

    Example::

        >>> dump_status_codes({200: 'Request succeeded'})
        '200 -> Request succeeded\\n'

    Args:
        mapping (Mapping[int, str]): Status codes mapped to descriptions.

    Returns:
        str: The rendered table. An empty mapping yields an empty string.
    """

    return _dump({int(code): description for code, description in mapping.items()})


def dump_methods(mapping: Mapping[str, str]) -> str:
    """Render a mapping of methods to descriptions.

    Each entry is formatted as ``'<method> -> <description>'`` and
    terminated by a line break.

    Args:
        mapping (Mapping[str, str]): Methods mapped to descriptions.

    Returns:
        str: The rendered table. An empty mapping yields an empty string.
    """

    return _dump(mapping)


def print_status_codes(
    mapping: Mapping[int, str], file: Optional[IO[str]] = None
) -> None:
    """Print a mapping of status codes to descriptions.

    Args:
        mapping (Mapping[int, str]): Status codes mapped to descriptions.
        file: Text stream to write to (default ``sys.stdout``).
    """

    print(dump_status_codes(mapping), file=file)


def print_methods(
    mapping: Mapping[str, str], file: Optional[IO[str]] = None
) -> None:
    """Print a mapping of methods to descriptions.

    Args:
        mapping (Mapping[str, str]): Methods mapped to descriptions.
        file: Text stream to write to (default ``sys.stdout``).
    """

    print(dump_methods(mapping), file=file)
