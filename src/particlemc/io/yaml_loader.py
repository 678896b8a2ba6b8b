"""YAML run-config loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Args:
        path: Absolute or relative path to the YAML file.

    Returns:
        Parsed YAML content (typically a dict or list).

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path) as f:
        return yaml.safe_load(f)
