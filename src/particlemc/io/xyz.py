"""XYZ trajectory export.

Each frame is the particle count, a blank comment line, then one
``0 x y z`` line per particle with four decimal places. Two-dimensional
systems are written with ``z = 0``.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Sequence
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from particlemc.core.particles import Particle, check_dimension
from particlemc.utils.exceptions import ExportError, InvalidGeometryError

logger = logging.getLogger(__name__)

DEFAULT_TRAJECTORY_PATH = "trajectory.xyz"


def _position_rows(particles: Sequence[Particle] | NDArray[np.float64]) -> list[NDArray[np.float64]]:
    if isinstance(particles, np.ndarray):
        if particles.size == 0:
            return []
        return list(np.atleast_2d(particles))
    return [p.position for p in particles]


def format_xyz_frame(
    particles: Sequence[Particle] | NDArray[np.float64],
    dimension: int,
) -> str:
    """Render one XYZ frame as text.

    Args:
        particles: Particles, or an array of shape (n_particles, dimension).
        dimension: 2 or 3.

    Returns:
        The frame text, ending with a newline.

    Raises:
        InvalidGeometryError: If ``dimension`` is unsupported or a position
            has fewer than ``dimension`` components.
    """
    check_dimension(dimension)
    rows = _position_rows(particles)

    out = io.StringIO()
    out.write(f"{len(rows)}\n\n")
    for i, pos in enumerate(rows):
        if len(pos) < dimension:
            raise InvalidGeometryError(
                f"particle {i} has {len(pos)} coordinates, expected {dimension}"
            )
        z = pos[2] if dimension == 3 else 0.0
        out.write(f"0 {pos[0]:5.4f} {pos[1]:5.4f} {z:5.4f}\n")
    return out.getvalue()


def append_xyz_trajectory(
    particles: Sequence[Particle] | NDArray[np.float64],
    dimension: int,
    clear_file: bool = False,
    path: str | Path = DEFAULT_TRAJECTORY_PATH,
) -> Path:
    """Append one frame to an XYZ trajectory file.

    The file is opened and closed within the call. With ``clear_file`` any
    existing content is discarded before the frame is written.

    Raises:
        ExportError: If the file cannot be opened or written.
    """
    frame = format_xyz_frame(particles, dimension)
    target = Path(path)
    mode = "w" if clear_file else "a"
    try:
        with open(target, mode) as f:
            f.write(frame)
    except OSError as exc:
        raise ExportError(f"cannot write trajectory to {target}: {exc}") from exc

    logger.debug("Wrote XYZ frame to %s (mode=%s)", target, mode)
    return target
