"""Pydantic v2 configuration models for particlemc."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from particlemc.core.particles import Box


class SamplerConfig(BaseModel):
    """Random variate service settings."""

    model_config = ConfigDict(extra="forbid")

    seed: int | None = Field(
        default=None,
        ge=0,
        le=2**32 - 1,
        description="Unsigned seed; None seeds from operating-system entropy",
    )


class BoxConfig(BaseModel):
    """Simulation box geometry."""

    model_config = ConfigDict(extra="forbid")

    size: list[float] = Field(min_length=2, max_length=3, description="Box side lengths")

    @field_validator("size")
    @classmethod
    def _validate_size(cls, v: list[float]) -> list[float]:
        if any(s <= 0 for s in v):
            raise ValueError(f"box sides must be positive, got {v}")
        return v

    @property
    def dimension(self) -> int:
        return len(self.size)

    def to_box(self) -> Box:
        return Box.from_sequence(self.size)


class ExportConfig(BaseModel):
    """Where trajectory frames and the VMD script are written."""

    model_config = ConfigDict(extra="forbid")

    trajectory_path: str = Field(default="trajectory.xyz")
    vmd_path: str = Field(default="vmd.tcl")
    clear_existing: bool = Field(
        default=True,
        description="Truncate the trajectory file before the first frame",
    )


class DemoConfig(BaseModel):
    """Random-walk demo parameters."""

    model_config = ConfigDict(extra="forbid")

    n_particles: int = Field(default=100, ge=1, le=1_000_000)
    n_frames: int = Field(default=50, ge=1)
    step_size: float = Field(default=0.1, ge=0, description="Std dev of per-axis displacement")


class RunConfig(BaseModel):
    """Bundle of everything a demo run needs."""

    model_config = ConfigDict(extra="forbid")

    sampler: SamplerConfig = Field(default_factory=SamplerConfig)
    box: BoxConfig
    export: ExportConfig = Field(default_factory=ExportConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)
