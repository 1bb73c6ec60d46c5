"""Operator commands for setting, removing and reading drop chances."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List

from eggers.data.repositories import EntityTypesRepository
from eggers.services.config_manager import ConfigManager
from eggers.services.errors import ConfigSaveError

logger = logging.getLogger(__name__)

PLUGIN_DESCRIPTION = "Eggers - A plugin which allows mobs to drop their spawn eggs."


@dataclass(slots=True)
class CommandEvent:
    """Base class for command results."""


@dataclass(slots=True)
class DropChanceSetEvent(CommandEvent):
    entity_type: str
    chance: float


@dataclass(slots=True)
class DropChanceRemovedEvent(CommandEvent):
    entity_type: str


@dataclass(slots=True)
class DropChanceReportedEvent(CommandEvent):
    entity_type: str
    chance: float


@dataclass(slots=True)
class PluginInfoEvent(CommandEvent):
    message: str


@dataclass(slots=True)
class CommandFailedEvent(CommandEvent):
    reason: str
    message: str


class CommandService:
    """Validates operator input and applies it to the guarded configuration.

    Each command returns result events rather than raising; a failure is a
    single ``CommandFailedEvent`` and leaves the configuration untouched,
    except ``save_failed`` where the in-memory change is kept.
    """

    def __init__(self, *, config_manager: ConfigManager, entity_types_repo: EntityTypesRepository) -> None:
        self._config_manager = config_manager
        self._entity_types_repo = entity_types_repo

    def info(self) -> List[CommandEvent]:
        return [PluginInfoEvent(message=PLUGIN_DESCRIPTION)]

    def set_drop_chance(self, raw_entity: str, raw_chance: str | float | None) -> List[CommandEvent]:
        entity = self._entity_types_repo.resolve(raw_entity) if raw_entity else None
        if entity is None:
            return [_unknown_entity()]
        with self._config_manager.transaction() as config:
            if config.check_if_applicable_on_command and not entity.has_spawn_egg:
                return [CommandFailedEvent("no_spawn_egg", "This entity type does not have a spawn egg!")]
            chance = _parse_chance(raw_chance)
            if chance is None:
                return [CommandFailedEvent("invalid_chance", "You must specify a drop chance!")]
            if config.warn_on_zero_or_below and chance <= 0:
                return [
                    CommandFailedEvent(
                        "chance_zero_or_below",
                        "You cannot set a drop chance as zero or below, consider removing instead.",
                    )
                ]
            if config.warn_on_above_hundred and chance > 100:
                return [CommandFailedEvent("chance_above_hundred", "You cannot set a drop chance as over 100.")]
            config.set_drop_chance(entity.id, chance)
        failure = self._save()
        if failure is not None:
            return [failure]
        logger.info("Drop chance for %s set to %s", entity.id, chance)
        return [DropChanceSetEvent(entity_type=entity.id, chance=chance)]

    def remove_drop_chance(self, raw_entity: str) -> List[CommandEvent]:
        entity = self._entity_types_repo.resolve(raw_entity) if raw_entity else None
        if entity is None:
            return [_unknown_entity()]
        with self._config_manager.transaction() as config:
            if config.get_drop_chance(entity.id) is None:
                return [_no_chance_set()]
            config.remove_drop_chance(entity.id)
        failure = self._save()
        if failure is not None:
            return [failure]
        logger.info("Drop chance for %s removed", entity.id)
        return [DropChanceRemovedEvent(entity_type=entity.id)]

    def get_drop_chance(self, raw_entity: str) -> List[CommandEvent]:
        entity = self._entity_types_repo.resolve(raw_entity) if raw_entity else None
        if entity is None:
            return [_unknown_entity()]
        with self._config_manager.transaction() as config:
            chance = config.get_drop_chance(entity.id)
        if chance is None:
            return [_no_chance_set()]
        return [DropChanceReportedEvent(entity_type=entity.id, chance=chance)]

    def _save(self) -> CommandFailedEvent | None:
        try:
            self._config_manager.save()
        except ConfigSaveError as exc:
            logger.error("Failed to save drop chance changes: %s", exc)
            return CommandFailedEvent("save_failed", "Failed to save the mob chance changes!")
        return None


def _parse_chance(raw_chance: str | float | None) -> float | None:
    if raw_chance is None:
        return None
    try:
        chance = float(raw_chance)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(chance):
        return None
    return chance


def _unknown_entity() -> CommandFailedEvent:
    return CommandFailedEvent("unknown_entity", "You must specify an entity type!")


def _no_chance_set() -> CommandFailedEvent:
    return CommandFailedEvent("no_chance_set", "This entity type does not have a drop chance set!")
