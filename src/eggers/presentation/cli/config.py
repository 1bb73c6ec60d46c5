"""CLI helpers for locating the configuration document."""
from __future__ import annotations

import os
from pathlib import Path

_CONFIG_ENV = "EGGERS_CONFIG"
_DEBUG_ENV = "EGGERS_DEBUG"
_CONFIG_FILENAME = "eggers.json"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Eggers"
        return Path.home() / "Eggers"
    return Path.home() / ".config" / "eggers"


def get_default_config_path() -> Path:
    """Return the config path, honoring the EGGERS_CONFIG override."""
    override = os.environ.get(_CONFIG_ENV)
    if override:
        return Path(override)
    return get_user_data_dir() / _CONFIG_FILENAME


def debug_enabled() -> bool:
    return os.environ.get(_DEBUG_ENV, "").strip().lower() in {"1", "true", "yes", "on"}
