"""Low-level JSON helpers for repositories and the config document."""
from __future__ import annotations

import json
import os
from pathlib import Path

from .errors import DataLoadError


def load_json(path: Path) -> object:
    """Load JSON from disk and raise DataLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"File not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read file: {path}") from exc
    except UnicodeDecodeError as exc:
        raise DataLoadError(f"File is not valid UTF-8: {path}") from exc

    try:
        return json.loads(text)
    except ValueError as exc:
        raise DataLoadError(f"Invalid JSON in {path}: {exc}") from exc
    except RecursionError as exc:
        raise DataLoadError(f"JSON nested too deeply in {path}") from exc


def dump_json(path: Path, payload: object) -> None:
    """Write payload as indented JSON, replacing the file only once fully written."""
    text = json.dumps(payload, indent=2, sort_keys=True) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f"{path.name}.tmp")
    try:
        tmp_path.write_text(text, encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
