"""Host-facing capabilities used when an entity is removed."""
from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterable, List, Protocol

from eggers.core.types import EntityTypeId, Position


@dataclass(frozen=True, slots=True)
class EntityRemovedEvent:
    """Delivered by the host whenever a qualifying entity dies."""

    entity_type: EntityTypeId
    position: Position = (0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class ItemDrop:
    """A single spawn egg item to materialize in the world."""

    entity_type: EntityTypeId
    position: Position


class EggCatalog(Protocol):
    def has_spawn_egg(self, entity_type: EntityTypeId) -> bool: ...


class ItemSpawner(Protocol):
    def spawn_items(self, drops: Iterable[ItemDrop]) -> None: ...


class InMemoryWorld:
    """Item spawner that records every materialized drop."""

    def __init__(self) -> None:
        self._items: List[ItemDrop] = []
        self._lock = threading.Lock()

    def spawn_items(self, drops: Iterable[ItemDrop]) -> None:
        with self._lock:
            self._items.extend(drops)

    @property
    def items(self) -> List[ItemDrop]:
        with self._lock:
            return list(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
