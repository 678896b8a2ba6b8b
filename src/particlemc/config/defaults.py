"""Default configuration values for particlemc."""

from __future__ import annotations

from particlemc.config.schema import (
    BoxConfig,
    DemoConfig,
    ExportConfig,
    RunConfig,
    SamplerConfig,
)

DEFAULT_SEED = 42
DEFAULT_BOX_SIZE: list[float] = [10.0, 10.0, 10.0]


def default_sampler_config() -> SamplerConfig:
    """Seeded sampler so default runs are reproducible."""
    return SamplerConfig(seed=DEFAULT_SEED)


def default_box() -> BoxConfig:
    """Cubic box of side 10."""
    return BoxConfig(size=list(DEFAULT_BOX_SIZE))


def default_export_config() -> ExportConfig:
    return ExportConfig()


def default_demo_config() -> DemoConfig:
    return DemoConfig()


def default_run_config() -> RunConfig:
    return RunConfig(
        sampler=default_sampler_config(),
        box=default_box(),
        export=default_export_config(),
        demo=default_demo_config(),
    )


def square_box_run_config() -> RunConfig:
    """Two-dimensional template: a 20 x 20 square."""
    return RunConfig(
        sampler=default_sampler_config(),
        box=BoxConfig(size=[20.0, 20.0]),
        demo=DemoConfig(n_particles=50, n_frames=100, step_size=0.25),
    )
