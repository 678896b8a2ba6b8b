"""Distribution descriptors: bound parameters for a distribution family.

A descriptor holds parameters only. Drawing a variate needs a generator passed
in, so the same descriptor can be shared freely and cached across calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.random import Generator


@dataclass(frozen=True)
class UniformDistribution:
    """Continuous uniform distribution on [low, high)."""

    low: float = 0.0
    high: float = 1.0

    def sample(self, rng: Generator) -> float:
        return float(rng.uniform(self.low, self.high))


@dataclass(frozen=True)
class UniformIntDistribution:
    """Discrete uniform distribution on the inclusive range [low, high].

    Requires ``low <= high``.
    """

    low: int
    high: int

    def sample(self, rng: Generator) -> int:
        return int(rng.integers(self.low, self.high, endpoint=True))


@dataclass(frozen=True)
class NormalDistribution:
    """Normal distribution with the given mean and standard deviation.

    Requires ``std_dev >= 0``. A zero standard deviation yields ``mean``
    exactly.
    """

    mean: float = 0.0
    std_dev: float = 1.0

    def sample(self, rng: Generator) -> float:
        return float(rng.normal(self.mean, self.std_dev))


STANDARD_UNIFORM = UniformDistribution(0.0, 1.0)
STANDARD_NORMAL = NormalDistribution(0.0, 1.0)
