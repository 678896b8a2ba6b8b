"""Random-walk trajectory demo.

Scatters particles uniformly through the box, then gives every coordinate a
Gaussian kick per frame and folds it back through the periodic boundaries.
There is no energy model and no acceptance step; the output exists to check
that sampling and export fit together and to have something to look at in VMD.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from particlemc.config.schema import RunConfig
from particlemc.core.particles import Box
from particlemc.core.rng import RandomVariateService
from particlemc.io.vmd import write_vmd_script
from particlemc.io.xyz import append_xyz_trajectory

logger = logging.getLogger(__name__)


def random_positions(service: RandomVariateService, box: Box, n_particles: int) -> NDArray[np.float64]:
    """Place ``n_particles`` uniformly at random inside ``box``."""
    positions = np.empty((n_particles, box.dimension))
    for i in range(n_particles):
        for axis, side in enumerate(box.size):
            positions[i, axis] = service.sample_uniform_unit() * side
    return positions


def gaussian_step(
    service: RandomVariateService,
    box: Box,
    positions: NDArray[np.float64],
    step_size: float,
) -> NDArray[np.float64]:
    """Displace every coordinate by N(0, step_size) and wrap into the box."""
    moved = positions.copy()
    n_particles, dimension = moved.shape
    for i in range(n_particles):
        for axis in range(dimension):
            moved[i, axis] += service.sample_normal(0.0, step_size)
    return box.wrap(moved)


def run_random_walk(
    config: RunConfig,
    service: RandomVariateService | None = None,
    output_dir: Path | None = None,
) -> NDArray[np.float64]:
    """Run the demo and write the trajectory and VMD script.

    Args:
        config: Run configuration. ``config.sampler.seed`` seeds a new service
            when ``service`` is not given.
        service: Optional pre-built service; it is used as-is, without reseeding.
        output_dir: Directory prefix for relative export paths.

    Returns:
        Final positions, shape (n_particles, dimension).
    """
    if service is None:
        service = RandomVariateService(config.sampler.seed)

    box = config.box.to_box()
    base = output_dir if output_dir is not None else Path(".")
    trajectory_path = base / config.export.trajectory_path
    vmd_path = base / config.export.vmd_path

    demo = config.demo
    logger.info(
        "Random walk: %d particles, %d frames, step %.3g, box %s",
        demo.n_particles,
        demo.n_frames,
        demo.step_size,
        list(box.size),
    )

    positions = random_positions(service, box, demo.n_particles)
    append_xyz_trajectory(positions, box.dimension, config.export.clear_existing, trajectory_path)
    for frame in range(1, demo.n_frames):
        positions = gaussian_step(service, box, positions, demo.step_size)
        append_xyz_trajectory(positions, box.dimension, False, trajectory_path)
        if frame % 10 == 0:
            logger.debug("Frame %d/%d written", frame + 1, demo.n_frames)

    write_vmd_script(box, vmd_path)
    logger.info("Trajectory written to %s, VMD script to %s", trajectory_path, vmd_path)
    return positions
