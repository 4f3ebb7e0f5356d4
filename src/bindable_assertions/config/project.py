"""YAML project configuration loading for bindable_assertions.

Settings are read from ``.bindable-assertions.yaml`` in the working directory, or
from the file named by ``BINDABLE_ASSERTIONS_CONFIG``, and deep-merged over the
built-in defaults.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from bindable_assertions.constants import (
    DEFAULT_MAX_VALUE_REPR,
    DEFAULT_PROJECT_CONFIG,
    EnvVar,
)
from bindable_assertions.errors import ConfigFileError


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge two dictionaries in place and return ``base``.

    Values from ``override`` take precedence. Nested dicts are merged
    recursively; other values are replaced.
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def default_config() -> dict[str, Any]:
    """Return the default configuration structure."""
    return {
        "logging": {},
        "messages": {
            "max_value_repr": DEFAULT_MAX_VALUE_REPR,
        },
    }


def safe_read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping from ``path``.

    Parameters
    ----------
    path : Path
        Path to YAML file

    Returns
    -------
    dict[str, Any]
        Parsed YAML data, empty when the document is empty

    Raises
    ------
    ConfigFileError
        If the file cannot be read, is not valid YAML, or is not a mapping
    """
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise ConfigFileError(msg) from e
    except OSError as e:
        msg = f"Cannot read YAML file {path}: {e}"
        raise ConfigFileError(msg) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Expected a mapping at the top level of {path}, got {type(data).__name__}"
        raise ConfigFileError(msg)
    return data


def get_project_config_path() -> Path:
    """Get the path of the project configuration file."""
    explicit = os.getenv(EnvVar.CONFIG.value)
    if explicit:
        return Path(explicit).expanduser()
    return Path.cwd() / DEFAULT_PROJECT_CONFIG


def load_merged_config(path: Path | None = None) -> dict[str, Any]:
    """Load defaults merged with the project YAML file.

    A missing file yields the defaults. An explicitly configured file that does
    not exist is an error.
    """
    cfg = default_config()
    config_path = path or get_project_config_path()

    if not config_path.exists():
        if path is not None or os.getenv(EnvVar.CONFIG.value):
            msg = f"YAML file does not exist: {config_path}"
            raise ConfigFileError(msg)
        return cfg

    project_cfg = safe_read_yaml(config_path)
    if project_cfg:
        deep_merge(cfg, project_cfg)
    return cfg
