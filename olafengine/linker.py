"""Entity handles and the table linking each entity to its component mask."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .bitmask import ECSBitmask

__all__ = ["Entity", "EntityLinker"]


@dataclass(frozen=True)
class Entity:
    """An entity, identified by its index in the linker."""

    id: int

    @property
    def value(self) -> int:
        return self.id


class EntityLinker:
    """One component mask per entity, indexed by entity id.

    The table does not grow on its own; callers size it with :meth:`resize`.
    """

    def __init__(self) -> None:
        self._masks: list[ECSBitmask] = []

    def _mask(self, entity_id: int) -> ECSBitmask:
        if not 0 <= entity_id < len(self._masks):
            raise IndexError(f"entity {entity_id} is outside the linker")
        return self._masks[entity_id]

    def assign(self, entity_id: int, component_id: int) -> None:
        """Record that the entity carries the component."""
        self._mask(entity_id).assign(component_id)

    def unassign(self, entity_id: int, component_id: int) -> None:
        """Record that the entity no longer carries the component."""
        self._mask(entity_id).unassign(component_id)

    def has(self, entity_id: int, component_id: int) -> bool:
        """Return True if the entity carries the component."""
        return self._mask(entity_id).has(component_id)

    def resize(self, new_size: int) -> None:
        """Grow with empty masks or truncate to ``new_size`` entries."""
        if new_size < 0:
            raise ValueError("size cannot be negative")
        del self._masks[new_size:]
        self._masks.extend(ECSBitmask() for _ in range(new_size - len(self._masks)))

    def __len__(self) -> int:
        return len(self._masks)

    def __getitem__(self, index: int) -> ECSBitmask:
        return ECSBitmask(self._mask(index).bits)

    def __iter__(self) -> Iterator[ECSBitmask]:
        for mask in self._masks:
            yield ECSBitmask(mask.bits)