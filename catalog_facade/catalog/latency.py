"""Artificial latency profiles for the in-memory catalog.

Each profile is a fixed, discrete set of delays. A read picks one
delay uniformly from the set, so response times stay bounded and the
distribution is reproducible from a seeded RNG.
"""

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class LatencyProfile:
    """An enumerated set of delays, in milliseconds."""

    name: str
    delays_ms: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.delays_ms:
            raise ValueError(f"Latency profile {self.name!r} has no delays")
        if any(delay < 0 for delay in self.delays_ms):
            raise ValueError(f"Latency profile {self.name!r} has a negative delay")

    @property
    def min_seconds(self) -> float:
        return min(self.delays_ms) / 1000

    @property
    def max_seconds(self) -> float:
        return max(self.delays_ms) / 1000

    def sample(self, rng: random.Random) -> float:
        """Pick one delay from the set.

        Args:
            rng: Random source; seed it for deterministic picks.

        Returns:
            Delay in seconds.
        """
        return rng.choice(self.delays_ms) / 1000


# Normal backend jitter
NORMAL_LATENCY = LatencyProfile(name="normal", delays_ms=(100, 200, 300, 400))

# Degraded backend
DEGRADED_LATENCY = LatencyProfile(name="degraded", delays_ms=(5000, 10000, 15000))
