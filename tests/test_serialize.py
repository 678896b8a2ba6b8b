"""Tests for run-config models and serialization."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from particlemc.config.defaults import default_run_config, square_box_run_config
from particlemc.config.schema import BoxConfig, RunConfig, SamplerConfig
from particlemc.core.particles import Box
from particlemc.io.serialize import (
    compute_config_hash,
    dump_config,
    load_config,
    load_config_file,
)
from particlemc.utils.exceptions import ConfigError


class TestSchema:
    def test_box_dimension(self) -> None:
        assert BoxConfig(size=[1.0, 2.0]).dimension == 2
        assert BoxConfig(size=[1.0, 2.0, 3.0]).to_box() == Box((1.0, 2.0, 3.0))

    def test_box_rejects_bad_length(self) -> None:
        with pytest.raises(ValidationError):
            BoxConfig(size=[1.0])

    def test_box_rejects_non_positive(self) -> None:
        with pytest.raises(ValidationError):
            BoxConfig(size=[1.0, 0.0])

    def test_seed_must_be_unsigned(self) -> None:
        with pytest.raises(ValidationError):
            SamplerConfig(seed=-1)

    def test_seed_defaults_to_entropy(self) -> None:
        assert SamplerConfig().seed is None

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            SamplerConfig(seed=1, stream=2)  # type: ignore[call-arg]

    def test_two_dimensional_template(self) -> None:
        assert square_box_run_config().box.dimension == 2


class TestSerialize:
    def test_round_trip(self) -> None:
        config = default_run_config()
        assert load_config(dump_config(config)) == config

    def test_config_hash_deterministic(self) -> None:
        config = default_run_config()
        h1 = compute_config_hash(config)
        h2 = compute_config_hash(config)
        assert h1 == h2
        assert len(h1) == 64  # SHA-256 hex digest

    def test_config_hash_changes_with_config(self) -> None:
        c1 = default_run_config()
        c2 = c1.model_copy(update={"sampler": SamplerConfig(seed=99)})
        assert compute_config_hash(c1) != compute_config_hash(c2)

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError):
            load_config("{not json")

    def test_invalid_values(self) -> None:
        with pytest.raises(ConfigError):
            load_config('{"box": {"size": [1.0, 2.0, 3.0, 4.0]}}')

    def test_minimal_json(self) -> None:
        config = load_config('{"box": {"size": [5.0, 5.0]}}')
        assert config.box.size == [5.0, 5.0]
        assert config.sampler.seed is None


class TestConfigFile:
    def test_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "run.json"
        path.write_text(dump_config(default_run_config()))
        assert load_config_file(path) == default_run_config()

    @pytest.mark.parametrize("suffix", [".yaml", ".yml"])
    def test_yaml_file(self, tmp_path: Path, suffix: str) -> None:
        path = tmp_path / f"run{suffix}"
        path.write_text(yaml.safe_dump(default_run_config().model_dump()))
        assert load_config_file(path) == default_run_config()

    def test_yaml_hand_written(self, tmp_path: Path) -> None:
        path = tmp_path / "run.yaml"
        path.write_text("sampler:\n  seed: 7\nbox:\n  size: [3.0, 4.0]\ndemo:\n  n_frames: 2\n")
        config = load_config_file(path)
        assert isinstance(config, RunConfig)
        assert config.sampler.seed == 7
        assert config.demo.n_frames == 2

    def test_bad_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "run.yaml"
        path.write_text("box: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config_file(path)

    @pytest.mark.parametrize("suffix", [".yaml", ".json"])
    def test_non_utf8_file(self, tmp_path: Path, suffix: str) -> None:
        path = tmp_path / f"run{suffix}"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(ConfigError) as excinfo:
            load_config_file(path)
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_unreadable_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            load_config_file(tmp_path)
