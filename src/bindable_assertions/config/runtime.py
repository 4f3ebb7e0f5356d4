"""Environment-driven runtime configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from bindable_assertions.config.project import load_merged_config
from bindable_assertions.constants import (
    DEFAULT_MAX_VALUE_REPR,
    EnvVar,
    LogLevel,
)


class ConfigManager:
    """Process-wide configuration.

    Values resolve in order: environment variables, then the project YAML file,
    then defaults. Instances are shared; pass ``stub=True`` for an isolated
    instance.
    """

    _instance: ConfigManager | None = None

    def __new__(cls, stub: bool = False, config_file: Path | None = None):
        if stub or config_file is not None:
            instance = super().__new__(cls)
            instance._initialized = False
            return instance
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, stub: bool = False, config_file: Path | None = None) -> None:
        if self._initialized:
            return
        self._config_file = config_file
        self._data: dict[str, Any] | None = None
        self._initialized = True

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance so the next access reloads configuration."""
        cls._instance = None

    @property
    def data(self) -> dict[str, Any]:
        """Merged file configuration, loaded on first access."""
        if self._data is None:
            self._data = load_merged_config(self._config_file)
        return self._data

    def get_log_level(self) -> str | None:
        """Get the log level for the package logger.

        Returns
        -------
        str | None
            Upper-case level name, or None when no supported level is
            configured and the logger should keep the host's setting
        """
        raw = os.getenv(EnvVar.LOG_LEVEL.value)
        if raw is None:
            raw = (self.data.get("logging") or {}).get("level")
        if raw is None:
            return None
        try:
            return LogLevel(str(raw).strip().upper()).value
        except ValueError:
            return None

    def get_max_value_repr(self) -> int:
        """Get the maximum length of values rendered into failure messages."""
        raw = os.getenv(EnvVar.MAX_VALUE_REPR.value)
        if raw is None:
            raw = self.data.get("messages", {}).get(
                "max_value_repr",
                DEFAULT_MAX_VALUE_REPR,
            )
        try:
            value = int(raw)
        except (TypeError, ValueError):
            return DEFAULT_MAX_VALUE_REPR
        return value if value > 0 else DEFAULT_MAX_VALUE_REPR
