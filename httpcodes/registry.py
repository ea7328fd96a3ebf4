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

"""Thread-safe registries of status code and method descriptions.

A registry maps keys to human-readable descriptions. It starts out holding
the standard table and can be extended at runtime::

    import httpcodes

    statuses = httpcodes.StatusRegistry()
    statuses.register(599, 'Network connect timeout')
    statuses.lookup(599)  # 'Network connect timeout'

Registration follows first-write-wins semantics: registering a key that is
already present is silently ignored. Lookups never raise; unknown keys
resolve to a sentinel description. Registries are plain objects owned by
the application, so independent instances never share state unless they
are explicitly given the same lock via :class:`Catalog`.
"""

from __future__ import annotations

import abc
import logging
from typing import (
    Any,
    ClassVar,
    Dict,
    Generic,
    Iterator,
    Mapping,
    Optional,
    TYPE_CHECKING,
    TypeVar,
)

from httpcodes.constants import StatusCategory
from httpcodes.constants import UNKNOWN_METHOD
from httpcodes.constants import UNKNOWN_STATUS_CODE
from httpcodes.errors import InvalidMethod
from httpcodes.methods import Method
from httpcodes.methods import METHOD_DESCRIPTIONS
from httpcodes.status_codes import classify
from httpcodes.status_codes import is_valid_status_code
from httpcodes.status_codes import STATUS_DESCRIPTIONS
from httpcodes.status_codes import StatusCode
from httpcodes.status_codes import validate_status_code
from httpcodes.util.misc import dump_methods
from httpcodes.util.misc import dump_status_codes
from httpcodes.util.misc import format_entry
from httpcodes.util.sync import RWLock

if TYPE_CHECKING:
    from httpcodes._typing import Description
    from httpcodes._typing import MethodLike
    from httpcodes._typing import StatusLike

__all__ = (
    'Catalog',
    'MethodRegistry',
    'Registry',
    'StatusRegistry',
)

_logger = logging.getLogger(__name__)

_K = TypeVar('_K', StatusCode, Method)


class Registry(abc.ABC, Generic[_K]):
    """Base class for a lock-guarded key to description mapping.

    Subclasses supply the key type, the standard table used to pre-populate
    new instances, and the sentinel returned for unknown keys.

    Mutations (:meth:`register`, :meth:`delete`, :meth:`reset`) hold the
    exclusive half of the lock; reads hold the shared half, so any number of
    lookups may proceed concurrently while no writer is active.

    Keyword Arguments:
        entries (Mapping): Initial entries, replacing the standard table
            (default ``None``). The registry keeps its own copy.
        lock (RWLock): Lock guarding this registry. Pass the same lock to
            several registries to serialize their writers together
            (default: a new lock per registry).
    """

    __slots__ = ('_entries', '_initial', '_lock')

    sentinel: ClassVar[str]
    """Description returned by :meth:`lookup` for unregistered keys."""

    _defaults: ClassVar[Mapping[Any, str]]

    def __init__(
        self,
        entries: Optional[Mapping[Any, Description]] = None,
        lock: Optional[RWLock] = None,
    ) -> None:
        if entries is None:
            entries = self._defaults

        self._initial: Dict[_K, Description] = {
            self._coerce(key): description for key, description in entries.items()
        }
        self._entries: Dict[_K, Description] = dict(self._initial)
        self._lock = lock if lock is not None else RWLock()

    @property
    def lock(self) -> RWLock:
        """The :class:`~httpcodes.util.RWLock` guarding this registry."""
        return self._lock

    @abc.abstractmethod
    def _coerce(self, key: Any) -> _K:
        """Convert a caller-supplied key to the registry key type.

        Raises:
            TypeError: The key has an unsupported type.
            ValueError: The key cannot be converted.
        """

    @abc.abstractmethod
    def _render(self, entries: Mapping[_K, Description]) -> str:
        """Render a snapshot of the entries as text."""

    @abc.abstractmethod
    def validate(self, key: Any) -> None:
        """Validate the key.

        Raises:
            ValueError: The key is invalid. Subclasses raise a more specific
                subclass of :class:`ValueError`.
        """

    def register(self, key: Any, description: Description) -> bool:
        """Add a custom entry.

        The entry is only added when `key` is not registered yet; an existing
        description is never overwritten, and no error is signaled in that
        case.

        Args:
            key: Key to register.
            description (str): Human-readable description of the key.

        Returns:
            bool: ``True`` if the entry was added, ``False`` if the key was
            already present.
        """

        key = self._coerce(key)

        with self._lock.write_lock():
            inserted = key not in self._entries
            if inserted:
                self._entries[key] = description

        if inserted:
            _logger.debug('Registered %r: %r', key, description)
        else:
            _logger.debug('Ignored registration of %r: already registered', key)

        return inserted

    def delete(self, key: Any) -> bool:
        """Remove an entry, standard or custom.

        Deleting a key that is not registered is a no-op.

        Returns:
            bool: ``True`` if an entry was removed.
        """

        key = self._coerce(key)

        with self._lock.write_lock():
            removed = key in self._entries
            if removed:
                del self._entries[key]

        if removed:
            _logger.debug('Deleted %r', key)

        return removed

    def reset(self) -> None:
        """Restore the entries this registry was constructed with."""
        with self._lock.write_lock():
            self._entries = dict(self._initial)

        _logger.debug('Reset %s to %d entries', type(self).__name__, len(self._initial))

    def lookup(self, key: Any) -> Description:
        """Get the description of a key.

        Returns:
            str: The registered description, or :attr:`sentinel` when the key
            is not registered or cannot be converted to the key type.
        """

        try:
            key = self._coerce(key)
        except (TypeError, ValueError):
            return self.sentinel

        with self._lock.read_lock():
            return self._entries.get(key, self.sentinel)

    def is_valid(self, key: Any) -> bool:
        """Check the key without raising (see :meth:`validate`)."""
        try:
            self.validate(key)
        except ValueError:
            return False

        return True

    def format(self, key: Any) -> str:
        """Render the key as ``'<key> -> <description>'``."""
        key = self._coerce(key)
        return format_entry(key, self.lookup(key))

    def snapshot(self) -> Dict[_K, Description]:
        """Copy the current entries.

        The copy is taken under the shared lock and is owned by the caller,
        so it may be iterated or mutated freely.
        """

        with self._lock.read_lock():
            return dict(self._entries)

    call_map = snapshot

    def dump(self) -> str:
        """Render every entry, one ``'<key> -> <description>'`` line each.

        Lines follow the iteration order of the underlying ``dict``; callers
        should not rely on any particular order.
        """

        return self._render(self.snapshot())

    def __contains__(self, key: Any) -> bool:
        try:
            key = self._coerce(key)
        except (TypeError, ValueError):
            return False

        with self._lock.read_lock():
            return key in self._entries

    def __len__(self) -> int:
        with self._lock.read_lock():
            return len(self._entries)

    def __iter__(self) -> Iterator[_K]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return '<{} entries={}>'.format(type(self).__name__, len(self))


class StatusRegistry(Registry[StatusCode]):
    """Registry of status code descriptions.

    Keys may be given as an ``int``, a :class:`~httpcodes.StatusCode`, a
    member of :class:`http.HTTPStatus`, or an HTTP status line (e.g.,
    ``'404 Not Found'``).

    Unlike methods, the validity of a status code does not depend on the
    registry: any code within 100-599 is valid whether or not it has a
    description.
    """

    __slots__ = ()

    sentinel = UNKNOWN_STATUS_CODE
    _defaults = STATUS_DESCRIPTIONS

    def _coerce(self, key: StatusLike) -> StatusCode:
        if isinstance(key, StatusCode):
            return key
        return StatusCode(key)

    def _render(self, entries: Mapping[StatusCode, Description]) -> str:
        return dump_status_codes(entries)

    def validate(self, key: StatusLike) -> None:
        """Validate the status code.

        Raises:
            InvalidStatusCode: The code lies outside of the 100-599 range.
        """

        validate_status_code(self._coerce(key))

    def is_valid(self, key: StatusLike) -> bool:
        return is_valid_status_code(self._coerce(key))

    @staticmethod
    def classify(key: StatusLike) -> StatusCategory:
        """Determine the band of a status code.

        This does not consult the registry and takes no lock.
        """

        return classify(StatusCode(key))


class MethodRegistry(Registry[Method]):
    """Registry of method descriptions.

    A method is valid if and only if it is registered; there is no
    structural check on the token itself, so any string becomes valid as
    soon as it is registered.
    """

    __slots__ = ()

    sentinel = UNKNOWN_METHOD
    _defaults = METHOD_DESCRIPTIONS

    def _coerce(self, key: MethodLike) -> Method:
        if isinstance(key, Method):
            return key
        if not isinstance(key, str):
            raise TypeError(
                'method must be a str, not {}'.format(type(key).__name__)
            )
        return Method(key)

    def _render(self, entries: Mapping[Method, Description]) -> str:
        return dump_methods(entries)

    def validate(self, key: MethodLike) -> None:
        """Validate the method.

        Raises:
            InvalidMethod: The method is not registered.
        """

        method = self._coerce(key)

        with self._lock.read_lock():
            known = method in self._entries

        if not known:
            raise InvalidMethod(method)


class Catalog:
    """A status registry and a method registry guarded by a single lock.

    Keyword Arguments:
        status_entries (Mapping): Initial status entries (default: the
            standard table).
        method_entries (Mapping): Initial method entries (default: the
            standard table).

    Attributes:
        lock (RWLock): The lock shared by both registries.
        statuses (StatusRegistry): Status code descriptions.
        methods (MethodRegistry): Method descriptions.
    """

    __slots__ = ('lock', 'methods', 'statuses')

    def __init__(
        self,
        status_entries: Optional[Mapping[Any, Description]] = None,
        method_entries: Optional[Mapping[Any, Description]] = None,
    ) -> None:
        self.lock = RWLock()
        self.statuses = StatusRegistry(status_entries, lock=self.lock)
        self.methods = MethodRegistry(method_entries, lock=self.lock)

    def reset(self) -> None:
        """Restore both registries to their initial entries."""
        self.statuses.reset()
        self.methods.reset()

    def __repr__(self) -> str:
        return '<{} statuses={} methods={}>'.format(
            type(self).__name__, len(self.statuses), len(self.methods)
        )
