"""Random variate service for Monte Carlo move proposals.

One :class:`RandomVariateService` owns one Mersenne-Twister bit generator and
draws every variate a simulation needs from it: uniform reals on [0, 1],
uniform integers on an inclusive range and normal variates.

A service is single-owner state. It does no locking, and two threads sampling
from the same instance may interleave generator updates. Concurrent callers
must give each worker its own service (see :func:`spawn_services`) or guard a
shared one with their own lock.
"""

from __future__ import annotations

import logging

from numpy.random import MT19937, Generator, SeedSequence

from particlemc.core.distributions import (
    STANDARD_NORMAL,
    STANDARD_UNIFORM,
    NormalDistribution,
    UniformIntDistribution,
)

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> Generator:
    """Create a numpy Generator backed by MT19937.

    ``seed=None`` draws fresh entropy from the operating system; an integer
    seed gives a deterministic stream.
    """
    return Generator(MT19937(seed))


class RandomVariateService:
    """Sampling primitives over a single, privately owned generator.

    Constructing a service without a seed seeds it from operating-system
    entropy, so two unseeded services produce unrelated streams. Pass ``seed``
    (or call :meth:`reseed`) for a reproducible stream: the same seed followed
    by the same sequence of calls with the same arguments returns the same
    values bit-for-bit.

    Preconditions are documented on each method and are not checked on the
    sampling path.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._bit_generator = MT19937(seed)
        self._generator = Generator(self._bit_generator)
        self._uniform = STANDARD_UNIFORM
        self._normal = STANDARD_NORMAL
        if seed is not None:
            logger.debug("RandomVariateService seeded with %d", seed)

    @property
    def generator(self) -> Generator:
        """The underlying numpy Generator, for vectorised draws by the owner."""
        return self._generator

    def sample_uniform_unit(self) -> float:
        """Draw a uniform real on [0, 1]."""
        return self._uniform.sample(self._generator)

    def sample_uniform_int(self, low: int, high: int) -> int:
        """Draw a uniform integer on the inclusive range [low, high].

        Requires ``low <= high``. ``low == high`` always returns ``low``.
        """
        return UniformIntDistribution(low, high).sample(self._generator)

    def sample_normal_standard(self) -> float:
        """Draw from the normal distribution with mean 0 and std dev 1."""
        return self._normal.sample(self._generator)

    def sample_normal(self, mean: float, std_dev: float) -> float:
        """Draw from a normal distribution.

        Requires ``std_dev >= 0``. With ``std_dev == 0`` the draw is exactly
        ``mean``.
        """
        return NormalDistribution(mean, std_dev).sample(self._generator)

    def reseed(self, seed: int) -> None:
        """Reset the generator state as a deterministic function of ``seed``.

        The state is replaced in place; :attr:`generator` keeps its identity.
        """
        self._bit_generator.state = MT19937(seed).state
        logger.debug("RandomVariateService reseeded with %d", seed)

    # Short names kept for callers ported from move-proposal code.

    def __call__(self) -> float:
        return self.sample_uniform_unit()

    def integer(self, low: int, high: int) -> int:
        return self.sample_uniform_int(low, high)

    def normal(self, mean: float | None = None, std_dev: float | None = None) -> float:
        if mean is None and std_dev is None:
            return self.sample_normal_standard()
        return self.sample_normal(
            0.0 if mean is None else mean,
            1.0 if std_dev is None else std_dev,
        )

    def seed(self, value: int) -> None:
        self.reseed(value)


def derive_worker_seeds(master_seed: int, n_workers: int) -> list[int]:
    """Derive one 32-bit seed per worker from a master seed.

    The result depends only on ``master_seed`` and the worker index, so a run
    split across workers stays reproducible.
    """
    words = SeedSequence(master_seed).generate_state(n_workers)
    seeds = [int(w) for w in words]
    logger.debug("Derived %d worker seeds from master seed %d", n_workers, master_seed)
    return seeds


def spawn_services(master_seed: int, n_workers: int) -> list[RandomVariateService]:
    """Create independently seeded services, one per worker."""
    return [RandomVariateService(seed) for seed in derive_worker_seeds(master_seed, n_workers)]
