"""Shared values guarded by a readers-writer lock."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class _Shared(Generic[T]):
    """The value and the lock state shared by all handles."""

    def __init__(self, value: T) -> None:
        self.value = value
        self._condition = threading.Condition()
        self._readers = 0
        self._writing = False
        self._writers_waiting = 0

    @contextmanager
    def reading(self) -> Iterator[T]:
        with self._condition:
            while self._writing or self._writers_waiting:
                self._condition.wait()
            self._readers += 1
        try:
            yield self.value
        finally:
            with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()

    @contextmanager
    def writing(self) -> Iterator[WriteGuard[T]]:
        with self._condition:
            self._writers_waiting += 1
            try:
                while self._writing or self._readers:
                    self._condition.wait()
            finally:
                self._writers_waiting -= 1
            self._writing = True
        try:
            yield WriteGuard(self)
        finally:
            with self._condition:
                self._writing = False
                self._condition.notify_all()


class WriteGuard(Generic[T]):
    """Exclusive access to a shared value; assign ``value`` to replace it."""

    def __init__(self, shared: _Shared[T]) -> None:
        self._shared = shared

    @property
    def value(self) -> T:
        return self._shared.value

    @value.setter
    def value(self, new_value: T) -> None:
        self._shared.value = new_value


class ArcLock(Generic[T]):
    """A handle to a shared value; copies share the same value and lock."""

    def __init__(self, value: T) -> None:
        self._shared: _Shared[T] = _Shared(value)

    @classmethod
    def _sharing(cls, shared: _Shared[Any]) -> ArcLock[Any]:
        handle = cls.__new__(cls)
        handle._shared = shared
        return handle

    def read(self):
        """Context manager yielding the value under a shared lock."""
        return self._shared.reading()

    def write(self):
        """Context manager yielding a :class:`WriteGuard` under an exclusive lock."""
        return self._shared.writing()

    def read_only(self) -> ReadOnlyArcLock[T]:
        """A handle to the same value that can only read it."""
        return ReadOnlyArcLock(self._shared)

    def __copy__(self) -> ArcLock[T]:
        return ArcLock._sharing(self._shared)


class ReadOnlyArcLock(Generic[T]):
    """A read-only handle to a value shared with an :class:`ArcLock`."""

    def __init__(self, shared: _Shared[T]) -> None:
        self._shared = shared

    def read(self):
        """Context manager yielding the value under a shared lock."""
        return self._shared.reading()

    def __copy__(self) -> ReadOnlyArcLock[T]:
        return ReadOnlyArcLock(self._shared)