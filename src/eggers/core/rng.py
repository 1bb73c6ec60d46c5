"""Thread-safe RNG wrapper built on top of random.Random."""
from __future__ import annotations

import threading
from random import Random


class RNG:
    """Wrapper around random.Random that can be shared between threads.

    Passing a seed makes every draw sequence reproducible; omitting it seeds
    from system entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)
        self._lock = threading.Lock()

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        with self._lock:
            return self._random.random()

    def uniform(self, low: float, high: float) -> float:
        """Return a float N such that low <= N < high."""
        if high <= low:
            raise ValueError("Upper bound must be greater than the lower bound.")
        return low + (high - low) * self.random()
