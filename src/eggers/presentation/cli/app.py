"""Console front end for operating Eggers against a simulated world."""
from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import List, Sequence

from eggers.core.rng import RNG
from eggers.data.errors import DataError
from eggers.data.repositories import EntityTypesRepository
from eggers.domain.world import EntityRemovedEvent, InMemoryWorld
from eggers.presentation.cli import config as cli_config
from eggers.services import (
    CommandEvent,
    CommandFailedEvent,
    CommandService,
    ConfigManager,
    DropChanceRemovedEvent,
    DropChanceReportedEvent,
    DropChanceSetEvent,
    EggDropService,
    EggersPlugin,
    PluginInfoEvent,
)

logger = logging.getLogger(__name__)

_HELP_LINES = (
    "Commands:",
    "  set <entity> <chance>   Set a mob's spawn egg drop chance",
    "  remove <entity>         Remove a mob's drop chance",
    "  get <entity>            Show a mob's drop chance",
    "  list                    Show every configured drop chance",
    "  kill <entity> [count]   Simulate mob deaths and report eggs dropped",
    "  reload                  Reload the configuration from disk",
    "  info                    Describe the plugin",
    "  quit                    Exit",
)
_MAX_KILLS = 10_000


class ConsoleSession:
    """Parses console lines into plugin calls and formats the replies."""

    def __init__(
        self,
        *,
        plugin: EggersPlugin,
        config_manager: ConfigManager,
        entity_types_repo: EntityTypesRepository,
        world: InMemoryWorld,
    ) -> None:
        self._plugin = plugin
        self._config_manager = config_manager
        self._entity_types_repo = entity_types_repo
        self._world = world

    def start(self) -> bool:
        """Load the entity catalog, then start the plugin."""
        self._entity_types_repo.all()
        return self._plugin.start()

    def execute(self, line: str) -> List[str] | None:
        """Run one console line and return the reply lines, or None to exit."""
        try:
            tokens = shlex.split(line)
        except ValueError as exc:
            return [f"Could not parse command: {exc}"]
        if not tokens:
            return []
        command, args = tokens[0].lower(), tokens[1:]
        if command in {"quit", "exit"}:
            return None
        if command == "help":
            return list(_HELP_LINES)
        if command == "info":
            return _render_events(self._plugin.info())
        if command == "set":
            if len(args) != 2:
                return ["Usage: set <entity> <chance>"]
            return _render_events(self._plugin.set_drop_chance(args[0], args[1]))
        if command == "remove":
            if len(args) != 1:
                return ["Usage: remove <entity>"]
            return _render_events(self._plugin.remove_drop_chance(args[0]))
        if command == "get":
            if len(args) != 1:
                return ["Usage: get <entity>"]
            return _render_events(self._plugin.get_drop_chance(args[0]))
        if command == "list":
            return self._list_chances()
        if command == "kill":
            return self._kill(args)
        if command == "reload":
            if self._plugin.reload():
                return ["Configuration reloaded."]
            return ["Reload failed, see the log for details."]
        return [f"Unknown command: {command}. Type 'help' for a list of commands."]

    def _list_chances(self) -> List[str]:
        with self._config_manager.transaction() as config:
            snapshot = config.copy()
        entries = snapshot.entries()
        if not entries:
            return ["No drop chances are set."]
        return [f"{entity_type}: {chance}" for entity_type, chance in entries]

    def _kill(self, args: Sequence[str]) -> List[str]:
        if not 1 <= len(args) <= 2:
            return ["Usage: kill <entity> [count]"]
        entity = self._entity_types_repo.resolve(args[0])
        if entity is None:
            return ["You must specify an entity type!"]
        count = 1
        if len(args) == 2:
            try:
                count = int(args[1])
            except ValueError:
                return ["Count must be a whole number."]
            if not 1 <= count <= _MAX_KILLS:
                return [f"Count must be between 1 and {_MAX_KILLS}."]
        dropped = 0
        for _ in range(count):
            dropped += len(self._plugin.on_entity_removed(EntityRemovedEvent(entity_type=entity.id)))
        return [
            f"Killed {count} {entity.name} and dropped {dropped} spawn egg(s) "
            f"({len(self._world.items)} on the ground)."
        ]


def _render_events(events: Sequence[CommandEvent]) -> List[str]:
    lines: List[str] = []
    for event in events:
        if isinstance(event, DropChanceSetEvent):
            lines.append(f"You have set the drop chance for {event.entity_type} to {event.chance}!")
        elif isinstance(event, DropChanceRemovedEvent):
            lines.append(f"You have removed the drop chance for: {event.entity_type}")
        elif isinstance(event, DropChanceReportedEvent):
            lines.append(f"The drop chance for {event.entity_type} is {event.chance}.")
        elif isinstance(event, PluginInfoEvent):
            lines.append(event.message)
        elif isinstance(event, CommandFailedEvent):
            lines.append(event.message)
    return lines


def build_session(
    *,
    config_path: Path | str | None = None,
    definitions_path: Path | str | None = None,
    seed: int | None = None,
) -> ConsoleSession:
    """Construct the plugin and its collaborators without starting it."""
    entity_types_repo = EntityTypesRepository(base_path=definitions_path)
    config_manager = ConfigManager(config_path or cli_config.get_default_config_path())
    world = InMemoryWorld()
    command_service = CommandService(config_manager=config_manager, entity_types_repo=entity_types_repo)
    egg_drop_service = EggDropService(
        config_manager=config_manager,
        catalog=entity_types_repo,
        spawner=world,
        rng=RNG(seed),
    )
    plugin = EggersPlugin(
        config_manager=config_manager,
        command_service=command_service,
        egg_drop_service=egg_drop_service,
    )
    return ConsoleSession(
        plugin=plugin,
        config_manager=config_manager,
        entity_types_repo=entity_types_repo,
        world=world,
    )


def main() -> None:
    """Start the interactive console session."""
    logging.basicConfig(
        level=logging.DEBUG if cli_config.debug_enabled() else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    session = build_session()
    try:
        session.start()
    except DataError as exc:
        logger.error("Unable to load entity type definitions: %s", exc)
        return
    print("=== Eggers console ===  (type 'help' for commands)")
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        reply = session.execute(line)
        if reply is None:
            break
        for message in reply:
            print(message)
    print("Goodbye!")
