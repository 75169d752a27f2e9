"""Fixed-width bit masks recording which components an entity carries."""

from __future__ import annotations

__all__ = ["ECS_BITSET_SIZE", "ECSBitmask", "EntityBitmask", "ComponentBitmask"]

ECS_BITSET_SIZE = 128
_FULL = (1 << ECS_BITSET_SIZE) - 1


def _check_id(component_id: int) -> int:
    if isinstance(component_id, bool) or not isinstance(component_id, int):
        raise TypeError(f"component id must be an int, got {component_id!r}")
    if not 0 <= component_id < ECS_BITSET_SIZE:
        raise IndexError(
            f"component id {component_id} is outside 0..{ECS_BITSET_SIZE - 1}"
        )
    return component_id


class ECSBitmask:
    """A 128-bit mask: bit ``n`` is set when component ``n`` is present."""

    __slots__ = ("_bits",)

    def __init__(self, bits: int = 0) -> None:
        self._bits = int(bits) & _FULL

    @property
    def bits(self) -> int:
        """The mask as a plain integer."""
        return self._bits

    def assign(self, component_id: int) -> None:
        """Mark ``component_id`` as present."""
        self._bits |= 1 << _check_id(component_id)

    def unassign(self, component_id: int) -> None:
        """Mark ``component_id`` as absent."""
        self._bits &= ~(1 << _check_id(component_id))

    def has(self, component_id: int) -> bool:
        """Return True if ``component_id`` is present."""
        return bool(self._bits >> _check_id(component_id) & 1)

    def __and__(self, other: ECSBitmask) -> ECSBitmask:
        if not isinstance(other, ECSBitmask):
            return NotImplemented
        return ECSBitmask(self._bits & other._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ECSBitmask):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __bool__(self) -> bool:
        return self._bits != 0

    def __str__(self) -> str:
        digits = format(self._bits, f"0{ECS_BITSET_SIZE}b")
        return "".join(digits[i:i + 8] + " " for i in range(0, ECS_BITSET_SIZE, 8))

    def __repr__(self) -> str:
        return f"ECSBitmask({self._bits:#x})"


EntityBitmask = ECSBitmask
ComponentBitmask = ECSBitmask