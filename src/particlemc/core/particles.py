"""Particle positions and simulation box geometry."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from particlemc.utils.exceptions import InvalidGeometryError

SUPPORTED_DIMENSIONS = (2, 3)


def check_dimension(dimension: int) -> int:
    """Return ``dimension`` if it is 2 or 3, otherwise raise."""
    if dimension not in SUPPORTED_DIMENSIONS:
        raise InvalidGeometryError(f"dimension must be 2 or 3, got {dimension}")
    return dimension


@dataclass
class Particle:
    """A single particle; only its position matters for export."""

    position: NDArray[np.float64] = field(default_factory=lambda: np.zeros(3))

    def __post_init__(self) -> None:
        self.position = np.asarray(self.position, dtype=np.float64)


@dataclass(frozen=True)
class Box:
    """Axis-aligned simulation box anchored at the origin."""

    size: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.size) not in SUPPORTED_DIMENSIONS:
            raise InvalidGeometryError(f"box size must have 2 or 3 entries, got {len(self.size)}")
        if any(s <= 0 for s in self.size):
            raise InvalidGeometryError(f"box size entries must be positive, got {self.size}")

    @property
    def dimension(self) -> int:
        return len(self.size)

    @classmethod
    def from_sequence(cls, size: Sequence[float]) -> Box:
        return cls(tuple(float(s) for s in size))

    def wrap(self, positions: NDArray[np.float64]) -> NDArray[np.float64]:
        """Fold positions back into [0, size) along each axis."""
        size = np.asarray(self.size)
        wrapped = np.mod(positions, size)
        # np.mod rounds tiny negative values up to exactly size.
        return np.where(wrapped >= size, 0.0, wrapped)
