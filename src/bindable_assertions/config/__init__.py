"""Configuration for bindable_assertions.

This package provides:
- runtime: environment-driven configuration (``ConfigManager``)
- project: YAML project configuration loader
"""

from .project import deep_merge, load_merged_config
from .runtime import ConfigManager

__all__ = [
    "ConfigManager",
    "deep_merge",
    "load_merged_config",
]
