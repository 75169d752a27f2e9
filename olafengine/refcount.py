"""A shared, thread-safe reference count."""

from __future__ import annotations

import threading
from typing import Optional

__all__ = ["ReferenceCounter"]


class _Count:
    __slots__ = ("value", "lock")

    def __init__(self) -> None:
        self.value = 1
        self.lock = threading.Lock()


class ReferenceCounter:
    """One handle on a shared count of references.

    A new counter starts at one. :meth:`share` makes another handle and adds a
    reference; :meth:`take` moves this handle's reference to a new one;
    :meth:`release` drops this handle's reference. Used as a context manager,
    the handle is released on exit.
    """

    def __init__(self) -> None:
        self._count: Optional[_Count] = _Count()

    @classmethod
    def _attached(cls, count: Optional[_Count]) -> ReferenceCounter:
        handle = cls.__new__(cls)
        handle._count = count
        return handle

    @property
    def ref_count(self) -> int:
        """The number of live references, or 0 for a released handle."""
        count = self._count
        if count is None:
            return 0
        with count.lock:
            return count.value

    def share(self) -> ReferenceCounter:
        """Return a new handle on the same count, adding one reference."""
        count = self._count
        if count is not None:
            with count.lock:
                count.value += 1
        return self._attached(count)

    def take(self) -> ReferenceCounter:
        """Move this handle's reference into a new handle and detach this one."""
        count, self._count = self._count, None
        return self._attached(count)

    def release(self) -> None:
        """Drop this handle's reference; releasing twice does nothing."""
        count, self._count = self._count, None
        if count is not None:
            with count.lock:
                count.value -= 1

    def __enter__(self) -> ReferenceCounter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"ReferenceCounter(ref_count={self.ref_count})"