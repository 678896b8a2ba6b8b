"""CLI entry point for particlemc."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from particlemc.config.defaults import default_run_config
from particlemc.core.rng import RandomVariateService
from particlemc.demo import run_random_walk
from particlemc.io.serialize import load_config_file
from particlemc.utils.exceptions import ParticleMCError
from particlemc.utils.logging_utils import configure_logging


@click.group()
@click.version_option(package_name="particlemc")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """particlemc — random variates and trajectory export for particle Monte Carlo."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@cli.command()
@click.argument("distribution", type=click.Choice(["uniform", "int", "normal"]))
@click.option("--count", "-n", default=1, type=click.IntRange(min=1), help="Number of variates.")
@click.option("--seed", default=None, type=click.IntRange(0, 2**32 - 1), help="Random seed.")
@click.option("--low", default=0, type=int, help="Lower bound for 'int' (inclusive).")
@click.option("--high", default=1, type=int, help="Upper bound for 'int' (inclusive).")
@click.option("--mean", default=0.0, type=float, help="Mean for 'normal'.")
@click.option("--std-dev", default=1.0, type=click.FloatRange(min=0), help="Std dev for 'normal'.")
def sample(
    distribution: str,
    count: int,
    seed: int | None,
    low: int,
    high: int,
    mean: float,
    std_dev: float,
) -> None:
    """Print variates drawn from DISTRIBUTION, one per line."""
    if distribution == "int" and low > high:
        raise click.BadParameter(f"--low ({low}) must not exceed --high ({high})")

    service = RandomVariateService(seed)
    for _ in range(count):
        if distribution == "uniform":
            click.echo(f"{service.sample_uniform_unit():.17g}")
        elif distribution == "int":
            click.echo(str(service.sample_uniform_int(low, high)))
        else:
            click.echo(f"{service.sample_normal(mean, std_dev):.17g}")


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to JSON or YAML run config. Uses defaults if not provided.",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    help="Directory for trajectory.xyz and vmd.tcl.",
)
@click.option("--seed", default=None, type=click.IntRange(0, 2**32 - 1), help="Random seed.")
@click.option("--frames", default=None, type=click.IntRange(min=1), help="Number of frames.")
@click.option("--particles", default=None, type=click.IntRange(min=1), help="Number of particles.")
def demo(
    config_path: Path | None,
    output_dir: Path,
    seed: int | None,
    frames: int | None,
    particles: int | None,
) -> None:
    """Write a random-walk trajectory and matching VMD script."""
    try:
        config = load_config_file(config_path) if config_path is not None else default_run_config()
    except ParticleMCError as exc:
        raise click.ClickException(str(exc)) from exc

    # CLI overrides
    if seed is not None:
        config = config.model_copy(update={"sampler": config.sampler.model_copy(update={"seed": seed})})
    demo_update: dict[str, int] = {}
    if frames is not None:
        demo_update["n_frames"] = frames
    if particles is not None:
        demo_update["n_particles"] = particles
    if demo_update:
        config = config.model_copy(update={"demo": config.demo.model_copy(update=demo_update)})

    click.echo(
        f"Running random walk: {config.demo.n_particles} particles, "
        f"{config.demo.n_frames} frames, seed={config.sampler.seed}"
    )

    output_dir.mkdir(parents=True, exist_ok=True)
    try:
        run_random_walk(config, output_dir=output_dir)
    except ParticleMCError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Trajectory written to {output_dir / config.export.trajectory_path}")
    click.echo(f"VMD script written to {output_dir / config.export.vmd_path}")


if __name__ == "__main__":
    cli()
