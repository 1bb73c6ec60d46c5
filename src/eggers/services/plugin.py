"""Plugin lifecycle: startup, reload and the disabled state."""
from __future__ import annotations

import logging
from typing import List

from eggers.domain.world import EntityRemovedEvent, ItemDrop
from eggers.services.command_service import CommandEvent, CommandFailedEvent, CommandService
from eggers.services.config_manager import ConfigManager
from eggers.services.egg_drop_service import EggDropService
from eggers.services.errors import ConfigError
from eggers.services.validator import find_errors

logger = logging.getLogger(__name__)


class EggersPlugin:
    """Wires the services together and gates them on a successful startup."""

    def __init__(
        self,
        *,
        config_manager: ConfigManager,
        command_service: CommandService,
        egg_drop_service: EggDropService,
    ) -> None:
        self._config_manager = config_manager
        self._command_service = command_service
        self._egg_drop_service = egg_drop_service
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    def start(self) -> bool:
        """Load the configuration and report validation warnings.

        Any load or save failure disables the plugin for the rest of the
        process.
        """
        try:
            self._config_manager.load()
            self._config_manager.save()
        except ConfigError as exc:
            self._enabled = False
            logger.error("Eggers had errors and failed to start properly, so it is disabling itself: %s", exc)
            return False
        with self._config_manager.transaction() as config:
            warnings = find_errors(config)
        for message in warnings:
            logger.warning(message)
        self._enabled = True
        return True

    def reload(self) -> bool:
        """Re-read the document and write it back; failures are only logged.

        A plugin that failed to start ignores reloads.
        """
        if not self._enabled:
            logger.warning("Eggers is disabled, ignoring reload.")
            return False
        try:
            self._config_manager.load()
            self._config_manager.save()
        except ConfigError:
            logger.exception("There was a problem reloading Eggers! Please report this.")
            return False
        logger.info("Reloaded configuration from %s", self._config_manager.path)
        return True

    def on_entity_removed(self, event: EntityRemovedEvent) -> List[ItemDrop]:
        if not self._enabled:
            return []
        return self._egg_drop_service.handle_entity_removed(event)

    def info(self) -> List[CommandEvent]:
        return self._command_service.info()

    def set_drop_chance(self, raw_entity: str, raw_chance: str | float | None) -> List[CommandEvent]:
        if not self._enabled:
            return [_disabled()]
        return self._command_service.set_drop_chance(raw_entity, raw_chance)

    def remove_drop_chance(self, raw_entity: str) -> List[CommandEvent]:
        if not self._enabled:
            return [_disabled()]
        return self._command_service.remove_drop_chance(raw_entity)

    def get_drop_chance(self, raw_entity: str) -> List[CommandEvent]:
        if not self._enabled:
            return [_disabled()]
        return self._command_service.get_drop_chance(raw_entity)


def _disabled() -> CommandFailedEvent:
    return CommandFailedEvent("plugin_disabled", "Eggers is disabled because it failed to start.")
