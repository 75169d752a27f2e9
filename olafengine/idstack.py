"""A LIFO stack of integer ids, used to recycle released ids."""

from __future__ import annotations

__all__ = ["IdStack"]


class IdStack:
    """Stack of integer ids."""

    def __init__(self) -> None:
        self._ids: list[int] = []

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"ids must be integers, got {value!r}")
        self._ids.append(value)

    def pop(self) -> int:
        """Remove and return the top id."""
        if not self._ids:
            raise IndexError("pop from an empty id stack")
        return self._ids.pop()

    def top(self) -> int:
        """Return the top id without removing it."""
        if not self._ids:
            raise IndexError("top of an empty id stack")
        return self._ids[-1]

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, value: object) -> bool:
        return value in self._ids

    def __repr__(self) -> str:
        return f"IdStack({self._ids!r})"