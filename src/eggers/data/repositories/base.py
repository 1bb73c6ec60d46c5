"""Lazily loaded, read-only JSON definition catalogs."""
from __future__ import annotations

import threading
from pathlib import Path
from typing import Dict, Generic, List, TypeVar

from eggers.data import paths
from eggers.data.errors import DataValidationError
from eggers.data.json_loader import load_json

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Loads one definitions file on first use and caches the typed result.

    Lookups may arrive from the command thread and the event thread at the
    same time, so the first load is guarded.
    """

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None
        self._load_lock = threading.Lock()

    @property
    def file_path(self) -> Path:
        return paths.get_definitions_path(self._base_path) / self._filename

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert the top-level JSON object into typed definitions."""
        raise NotImplementedError

    def _loaded(self) -> Dict[str, T]:
        definitions = self._definitions
        if definitions is None:
            with self._load_lock:
                if self._definitions is None:
                    raw = load_json(self.file_path)
                    if not isinstance(raw, dict):
                        raise DataValidationError(f"Expected top-level object in {self.file_path}")
                    self._definitions = self._build(raw)
                definitions = self._definitions
        return definitions

    def all(self) -> List[T]:
        """Return all definitions sorted deterministically by id."""
        definitions = self._loaded()
        return [definitions[key] for key in sorted(definitions)]

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object.")
        return value

    @staticmethod
    def _require_type(value: object, expected_type: type, context: str) -> object:
        if not isinstance(value, expected_type):
            raise DataValidationError(f"{context} must be of type {expected_type.__name__}.")
        return value
