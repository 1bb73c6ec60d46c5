"""Advisory checks of configured drop chances against the policy flags."""
from __future__ import annotations

from typing import List

from eggers.domain.configuration import Configuration


def find_errors(config: Configuration) -> List[str]:
    """Return one warning per out-of-range chance, computed from current state.

    The zero-or-below check compares with a strict ``< 0``, so a chance of
    exactly zero is not reported.
    """
    if not (config.warn_on_zero_or_below or config.warn_on_above_hundred):
        return []
    errors: List[str] = []
    for entity_type, chance in config.drop_chances.items():
        if config.warn_on_zero_or_below and chance < 0:
            errors.append(
                f"{entity_type}'s drop chance is 0 or below, which means it will never drop an egg."
            )
        elif config.warn_on_above_hundred and chance > 100:
            errors.append(
                f"{entity_type}'s drop chance is set to higher than 100, "
                "which means more than one egg could drop."
            )
    return errors
