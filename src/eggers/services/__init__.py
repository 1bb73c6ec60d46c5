"""Service layer exports."""

from .errors import ConfigError, ConfigLoadError, ConfigSaveError
from .command_service import (
    CommandEvent,
    CommandFailedEvent,
    CommandService,
    DropChanceRemovedEvent,
    DropChanceReportedEvent,
    DropChanceSetEvent,
    PluginInfoEvent,
)
from .config_manager import ConfigManager
from .drop_engine import DropSignal, compute_drops
from .egg_drop_service import EggDropService
from .plugin import EggersPlugin
from .validator import find_errors

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigSaveError",
    "CommandEvent",
    "CommandFailedEvent",
    "CommandService",
    "DropChanceRemovedEvent",
    "DropChanceReportedEvent",
    "DropChanceSetEvent",
    "PluginInfoEvent",
    "ConfigManager",
    "DropSignal",
    "compute_drops",
    "EggDropService",
    "EggersPlugin",
    "find_errors",
]
