"""Domain model exports."""

from .configuration import Configuration
from .entity_type import EntityTypeDef
from .world import EggCatalog, EntityRemovedEvent, InMemoryWorld, ItemDrop, ItemSpawner

__all__ = [
    "Configuration",
    "EntityTypeDef",
    "EggCatalog",
    "EntityRemovedEvent",
    "InMemoryWorld",
    "ItemDrop",
    "ItemSpawner",
]
