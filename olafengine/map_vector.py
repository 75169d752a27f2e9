"""A vector of slots that can also be reached by key, with slot reuse."""

from __future__ import annotations

from collections.abc import Hashable, Iterator
from typing import Generic, Optional, TypeVar, Union

__all__ = ["MapVector"]

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

_EMPTY = object()


class MapVector(Generic[K, T]):
    """Elements stored in slots, each reachable by slot index and by key.

    Removing an element frees its slot; the next :meth:`add` reuses the most
    recently freed slot. ``len()`` counts slots, freed ones included, while
    iteration yields only the live elements.
    """

    def __init__(self) -> None:
        self._index_of: dict[K, int] = {}
        self._slots: list[object] = []
        self._free: list[int] = []

    def by_key(self, key: K) -> Optional[T]:
        """Return the element stored under ``key``, or None."""
        index = self._index_of.get(key)
        return None if index is None else self._slots[index]  # type: ignore[return-value]

    def at(self, index: int) -> Optional[T]:
        """Return the element in slot ``index``, or None if absent or freed."""
        if 0 <= index < len(self._slots) and self._slots[index] is not _EMPTY:
            return self._slots[index]  # type: ignore[return-value]
        return None

    def add(self, key: K, element: T) -> None:
        """Store ``element`` under ``key``, reusing a freed slot if there is one."""
        if self._free:
            index = self._free.pop()
            self._index_of[key] = index
            self._slots[index] = element
        elif key in self._index_of:
            self._slots[self._index_of[key]] = element
        else:
            self._index_of[key] = len(self._slots)
            self._slots.append(element)

    def remove_key(self, key: K) -> None:
        """Remove the element stored under ``key``; unknown keys are ignored."""
        index = self._index_of.pop(key, None)
        if index is not None:
            self._free_slot(index)

    def remove_index(self, index: int) -> None:
        """Remove the element in slot ``index`` together with its key."""
        if not 0 <= index < len(self._slots) or self._slots[index] is _EMPTY:
            return
        for key, slot in self._index_of.items():
            if slot == index:
                del self._index_of[key]
                break
        self._free_slot(index)

    def _free_slot(self, index: int) -> None:
        self._slots[index] = _EMPTY
        self._free.append(index)

    def get(self, key_or_index: Union[K, int]) -> Optional[T]:
        """Look up by slot index when given an int, otherwise by key."""
        if isinstance(key_or_index, int) and not isinstance(key_or_index, bool):
            return self.at(key_or_index)
        return self.by_key(key_or_index)

    def back(self) -> T:
        """Return the element in the last slot."""
        return self[len(self._slots) - 1]

    def __contains__(self, key: object) -> bool:
        return key in self._index_of

    def __iter__(self) -> Iterator[T]:
        for element in self._slots:
            if element is not _EMPTY:
                yield element  # type: ignore[misc]

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < len(self._slots):
            raise IndexError(f"slot {index} is out of range")
        element = self._slots[index]
        if element is _EMPTY:
            raise IndexError(f"slot {index} has been removed")
        return element  # type: ignore[return-value]