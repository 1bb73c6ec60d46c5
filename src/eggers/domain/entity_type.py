"""Entity type definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class EntityTypeDef:
    """A kind of entity known to the host."""

    id: str
    name: str
    has_spawn_egg: bool
    aliases: Tuple[str, ...] = ()
