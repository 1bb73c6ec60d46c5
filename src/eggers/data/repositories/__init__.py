"""Repository exports."""

from .entity_types_repo import EntityTypesRepository

__all__ = [
    "EntityTypesRepository",
]
