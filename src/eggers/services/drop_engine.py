"""Multi-trial decomposition of a drop chance into a number of drops.

A chance is consumed 100 points at a time. Each pass rolls once against the
remaining chance modulo 101, so 100 always succeeds while 150 rolls against 49
and then 50.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Protocol

TRIAL_MODULUS = 101
TRIAL_WIDTH = 100


class UniformSource(Protocol):
    def uniform(self, low: float, high: float) -> float: ...


@dataclass(frozen=True, slots=True)
class DropSignal:
    """Marker for one item to grant; the caller attaches identity and placement."""

    trial: int


def trial_chances(chance: float) -> List[float]:
    """Return the trial probability used by each pass, in order."""
    if not math.isfinite(chance):
        return []
    chances: List[float] = []
    remaining = chance
    while remaining > 0:
        chances.append(remaining % TRIAL_MODULUS)
        remaining -= TRIAL_WIDTH
    return chances


def iteration_count(chance: float) -> int:
    if not math.isfinite(chance) or chance <= 0:
        return 0
    return math.ceil(chance / TRIAL_WIDTH)


def compute_drops(chance: float, rng: UniformSource) -> List[DropSignal]:
    """Roll every trial for ``chance`` and return one signal per success."""
    drops: List[DropSignal] = []
    for index, trial_chance in enumerate(trial_chances(chance)):
        if rng.uniform(0, TRIAL_WIDTH) < trial_chance:
            drops.append(DropSignal(trial=index))
    return drops


def count_drops(chance: float, rng: UniformSource) -> int:
    return len(compute_drops(chance, rng))
