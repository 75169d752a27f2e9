"""Per-frame record of which keyboard keys are held down."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain, islice, repeat
from typing import Union

from .keys import InvalidKeyError, KeypressType, scancode_for_char

__all__ = ["KeyboardState"]

Key = Union[str, int, KeypressType]


class KeyboardState:
    """Holds one held/not-held flag per scancode.

    Keys may be given as a single character, a :class:`KeypressType`, or a raw
    integer scancode.
    """

    MAX_KEYS = 256

    def __init__(self) -> None:
        self._keys = [False] * self.MAX_KEYS

    def _index(self, key: Key) -> int:
        if isinstance(key, str):
            return scancode_for_char(key)
        if isinstance(key, bool) or not isinstance(key, int):
            raise InvalidKeyError(f"{key!r} is not a valid key")
        if not 0 <= key < self.MAX_KEYS:
            raise InvalidKeyError(
                f"the scancode {int(key)} is not a valid scancode for retrieving user input; "
                f"scancodes must be less than {self.MAX_KEYS}"
            )
        return int(key)

    def is_held(self, key: Key) -> bool:
        """Return True if ``key`` is held down this frame."""
        return self._keys[self._index(key)]

    def is_all_held(self, *args: Key) -> bool:
        """Return True if every given key is held down."""
        if not args:
            raise TypeError("is_all_held() needs at least one key")
        return all([self.is_held(key) for key in args])

    def is_any_held(self, *args: Key) -> bool:
        """Return True if at least one of the given keys is held down."""
        if not args:
            raise TypeError("is_any_held() needs at least one key")
        return any([self.is_held(key) for key in args])

    def release(self, key: Key) -> None:
        """Mark ``key`` as not held for the rest of the current frame."""
        self._keys[self._index(key)] = False

    def update(self, pressed: Iterable[object]) -> None:
        """Replace the key table with a new snapshot indexed by scancode.

        Only the first ``MAX_KEYS`` entries are used; missing entries count as
        released.
        """
        snapshot = chain(islice(pressed, self.MAX_KEYS), repeat(False))
        self._keys = [bool(value) for value in islice(snapshot, self.MAX_KEYS)]