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

"""Synchronization primitives.

This module provides a reader/writer lock used to guard the registries. The
standard library only ships exclusive locks, so the shared half is built on
top of :class:`threading.Condition`.
"""

from __future__ import annotations

import contextlib
import threading
from typing import Iterator

__all__ = ('RWLock',)


class RWLock:
    """A reader/writer lock.

    Any number of threads may hold the lock for reading at the same time,
    while a writer requires exclusive access. Once a writer is waiting, new
    readers queue up behind it so that writers are not starved by a steady
    stream of readers.

    The lock is not reentrant: a thread holding either half must not try to
    acquire the lock again.
    """

    __slots__ = ('_cond', '_readers', '_writer', '_writers_waiting')

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError('cannot release an un-acquired read lock')

            self._readers -= 1
            if not self._readers:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            except BaseException:
                # NOTE: Readers parked behind this writer must be woken up
                #   if it gives up waiting.
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise

            self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError('cannot release an un-acquired write lock')

            self._writer = False
            self._cond.notify_all()

    @contextlib.contextmanager
    def read_lock(self) -> Iterator[None]:
        """Hold the shared (read) half of the lock for the ``with`` block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextlib.contextmanager
    def write_lock(self) -> Iterator[None]:
        """Hold the exclusive (write) half of the lock for the ``with`` block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    def __repr__(self) -> str:
        return '<{} readers={} writer={}>'.format(
            type(self).__name__, self._readers, self._writer
        )
