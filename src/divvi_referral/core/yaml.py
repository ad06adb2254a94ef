"""YAML configuration loading.

Used by [ReporterConfig.from_yaml()][divvi_referral.reporter.configs.ReporterConfig.from_yaml]
and the CLI ``--config`` flag. Only ``yaml.safe_load`` is used, so tags that
would instantiate Python objects are rejected.

Examples:
    ```python
    from divvi_referral.core.yaml import load_yaml

    config = load_yaml("config/reporter.yaml")
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration as a dictionary. An empty file yields ``{}``.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file contains invalid YAML syntax.
        ConfigurationError: If the document is not a mapping at top level.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}"
        )
    return data
