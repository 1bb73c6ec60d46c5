"""Repository for the host's entity type catalog."""
from __future__ import annotations

from typing import Dict

from eggers.core.types import EntityTypeId
from eggers.data.errors import DataValidationError
from eggers.data.repositories.base import RepositoryBase
from eggers.domain.entity_type import EntityTypeDef

DEFAULT_NAMESPACE = "minecraft"


class EntityTypesRepository(RepositoryBase[EntityTypeDef]):
    """Loads entity type definitions and resolves operator input to ids.

    Ids are namespaced (``minecraft:zombie``). Input without a namespace is
    tried under the default namespace, then against the declared aliases.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("entity_types.json", base_path)
        self._aliases: Dict[str, EntityTypeId] = {}

    def _build(self, raw: dict[str, object]) -> Dict[str, EntityTypeDef]:
        entries = self._require_mapping(raw.get("entity_types"), "entity_types")
        definitions: Dict[str, EntityTypeDef] = {}
        aliases: Dict[str, EntityTypeId] = {}
        for type_id, payload in entries.items():
            context = f"entity_types.{type_id}"
            if ":" not in type_id:
                raise DataValidationError(f"{context} id must be namespaced (e.g. minecraft:zombie).")
            data = self._require_mapping(payload, context)
            name = self._require_type(data.get("name"), str, f"{context}.name")
            spawn_egg = self._require_type(data.get("spawn_egg", False), bool, f"{context}.spawn_egg")
            raw_aliases = self._require_type(data.get("aliases", []), list, f"{context}.aliases")
            for alias in raw_aliases:
                self._require_type(alias, str, f"{context}.aliases[]")
                aliases[alias.lower()] = type_id.lower()
            definitions[type_id.lower()] = EntityTypeDef(
                id=type_id.lower(),
                name=name,
                has_spawn_egg=spawn_egg,
                aliases=tuple(raw_aliases),
            )
        self._aliases = aliases
        return definitions

    def resolve(self, raw_id: str) -> EntityTypeDef | None:
        """Resolve a user-supplied id, short name or alias, or return None."""
        definitions = self._loaded()
        key = raw_id.strip().lower()
        if not key:
            return None
        if key in definitions:
            return definitions[key]
        if ":" not in key:
            namespaced = f"{DEFAULT_NAMESPACE}:{key}"
            if namespaced in definitions:
                return definitions[namespaced]
        type_id = self._aliases.get(key)
        return definitions.get(type_id) if type_id is not None else None

    def has_spawn_egg(self, entity_type: EntityTypeId) -> bool:
        """Return True if the type is known and has a spawn egg item."""
        definition = self._loaded().get(entity_type)
        return definition is not None and definition.has_spawn_egg
