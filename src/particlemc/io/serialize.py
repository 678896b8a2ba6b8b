"""Serialization for run configs."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from particlemc.config.schema import RunConfig
from particlemc.io.yaml_loader import load_yaml
from particlemc.utils.exceptions import ConfigError

YAML_SUFFIXES = (".yaml", ".yml")


def compute_config_hash(config: RunConfig) -> str:
    """Compute a deterministic SHA-256 hash of a run config.

    Uses canonical JSON (sorted keys, no whitespace) so the same
    logical config always produces the same hash.
    """
    canonical = json.dumps(config.model_dump(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


def dump_config(config: RunConfig) -> str:
    """Serialize a run config to a JSON string."""
    return json.dumps(config.model_dump(), indent=2)


def config_from_dict(data: Any) -> RunConfig:
    """Validate already-parsed config data.

    Raises:
        ConfigError: If the data does not describe a valid run config.
    """
    try:
        return RunConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"invalid run config: {exc}") from exc


def load_config(json_str: str) -> RunConfig:
    """Deserialize a run config from a JSON string."""
    try:
        data: dict[str, Any] = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"config is not valid JSON: {exc}") from exc
    return config_from_dict(data)


def load_config_file(path: Path) -> RunConfig:
    """Load a run config from a ``.json``, ``.yaml`` or ``.yml`` file.

    Raises:
        ConfigError: If the file cannot be read, is not UTF-8 text, does not
            parse, or does not describe a valid run config.
    """
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            try:
                data = load_yaml(path)
            except yaml.YAMLError as exc:
                raise ConfigError(f"{path} is not valid YAML: {exc}") from exc
            return config_from_dict(data)
        return load_config(path.read_text())
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path} is not UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"cannot read config {path}: {exc}") from exc
