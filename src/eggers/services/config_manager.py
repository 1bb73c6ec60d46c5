"""Loads, saves and guards the live drop chance configuration."""
from __future__ import annotations

import logging
import math
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping

from eggers.data.errors import DataLoadError
from eggers.data.json_loader import dump_json, load_json
from eggers.domain.configuration import Configuration
from eggers.services.errors import ConfigLoadError, ConfigSaveError

logger = logging.getLogger(__name__)

ConfigPayload = Dict[str, Any]

_FLAG_KEYS = (
    "warn_on_zero_or_below",
    "warn_on_above_hundred",
    "warn_on_no_egg",
    "check_if_applicable_on_command",
)


class ConfigManager:
    """Owns the on-disk document and the lock around the live Configuration.

    Every read or write of the configuration from commands or event handling
    happens inside ``transaction()``. ``load`` holds that lock throughout.
    ``save`` snapshots the payload under it, so a save never observes a
    half-applied mutation, and then writes the file under a separate write
    lock so event handling is not held up by disk I/O.
    """

    CONFIG_VERSION = 1

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._lock = threading.RLock()
        self._write_lock = threading.Lock()
        self._config = Configuration()
        self._snapshot_generation = 0
        self._written_generation = 0

    @property
    def path(self) -> Path:
        return self._path

    def get_config(self) -> Configuration:
        """Return the live configuration; mutations must be followed by save()."""
        return self._config

    @contextmanager
    def transaction(self) -> Iterator[Configuration]:
        with self._lock:
            yield self._config

    def load(self) -> Configuration:
        """Replace the in-memory configuration with the persisted document.

        A missing document yields the defaults.
        """
        with self._lock:
            if not self._path.exists():
                logger.info("No configuration found at %s, using defaults.", self._path)
                self._config = Configuration()
                return self._config
            try:
                raw = load_json(self._path)
            except DataLoadError as exc:
                raise ConfigLoadError(str(exc)) from exc
            self._config = self.deserialize(raw)
            logger.debug("Loaded %d drop chance(s) from %s", len(self._config.drop_chances), self._path)
            return self._config

    def save(self) -> None:
        """Write the current configuration to disk as a whole document.

        A snapshot older than one already on disk is dropped rather than
        written over it.
        """
        with self._lock:
            payload = self.serialize(self._config)
            self._snapshot_generation += 1
            generation = self._snapshot_generation
        with self._write_lock:
            if generation < self._written_generation:
                return
            try:
                dump_json(self._path, payload)
            except (OSError, TypeError, ValueError) as exc:
                raise ConfigSaveError(f"Unable to write configuration to {self._path}: {exc}") from exc
            self._written_generation = generation
            logger.debug("Saved configuration to %s", self._path)

    def serialize(self, config: Configuration) -> ConfigPayload:
        payload: ConfigPayload = {
            "config_version": self.CONFIG_VERSION,
            "drop_chances": {entity_type: chance for entity_type, chance in config.entries()},
        }
        for key in _FLAG_KEYS:
            payload[key] = getattr(config, key)
        return payload

    def deserialize(self, payload: object) -> Configuration:
        if not isinstance(payload, Mapping):
            raise ConfigLoadError("Configuration must be a JSON object.")
        version = payload.get("config_version", self.CONFIG_VERSION)
        if not isinstance(version, int) or isinstance(version, bool) or version > self.CONFIG_VERSION:
            raise ConfigLoadError(f"Unsupported config_version: {version!r}")
        config = Configuration()
        raw_chances = payload.get("drop_chances", {})
        if not isinstance(raw_chances, Mapping):
            raise ConfigLoadError("drop_chances must be an object.")
        for entity_type, chance in raw_chances.items():
            config.set_drop_chance(entity_type, self._require_chance(chance, f"drop_chances.{entity_type}"))
        for key in _FLAG_KEYS:
            if key in payload:
                setattr(config, key, self._require_bool(payload[key], key))
        return config

    @staticmethod
    def _require_chance(value: Any, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigLoadError(f"{context} must be a number.")
        try:
            chance = float(value)
        except OverflowError as exc:
            raise ConfigLoadError(f"{context} must be finite.") from exc
        if not math.isfinite(chance):
            raise ConfigLoadError(f"{context} must be finite.")
        return chance

    @staticmethod
    def _require_bool(value: Any, context: str) -> bool:
        if not isinstance(value, bool):
            raise ConfigLoadError(f"{context} must be true or false.")
        return value
