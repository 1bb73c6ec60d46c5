"""Drop chance configuration held in memory for the process lifetime."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from eggers.core.types import EntityTypeId


@dataclass(slots=True)
class Configuration:
    """Per-entity-type spawn egg drop chances plus the operator policy flags.

    Chances are percentages with no range enforced here; values at or below
    zero never drop and values above 100 may drop more than one egg. Range
    policy lives in the validator and the command layer.
    """

    drop_chances: Dict[EntityTypeId, float] = field(default_factory=dict)
    warn_on_zero_or_below: bool = True
    warn_on_above_hundred: bool = False
    warn_on_no_egg: bool = True
    check_if_applicable_on_command: bool = True

    def get_drop_chance(self, entity_type: EntityTypeId | None) -> float | None:
        """Return the configured chance, or None when nothing is set."""
        if entity_type is None:
            return None
        return self.drop_chances.get(entity_type)

    def set_drop_chance(self, entity_type: EntityTypeId, chance: float) -> None:
        self.drop_chances[entity_type] = float(chance)

    def remove_drop_chance(self, entity_type: EntityTypeId) -> None:
        self.drop_chances.pop(entity_type, None)

    def entries(self) -> List[Tuple[EntityTypeId, float]]:
        """Return a snapshot of (entity_type, chance) pairs sorted by id."""
        return sorted(self.drop_chances.items())

    def copy(self) -> "Configuration":
        return Configuration(
            drop_chances=dict(self.drop_chances),
            warn_on_zero_or_below=self.warn_on_zero_or_below,
            warn_on_above_hundred=self.warn_on_above_hundred,
            warn_on_no_egg=self.warn_on_no_egg,
            check_if_applicable_on_command=self.check_if_applicable_on_command,
        )
