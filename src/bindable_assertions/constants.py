"""Constants and enums for bindable_assertions."""

from enum import Enum

PACKAGE_LOGGER_NAME = "bindable_assertions"

DEFAULT_PROJECT_CONFIG = ".bindable-assertions.yaml"
DEFAULT_MAX_VALUE_REPR = 80


class LogLevel(str, Enum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnvVar(str, Enum):
    """Environment variables read by the runtime configuration."""

    CONFIG = "BINDABLE_ASSERTIONS_CONFIG"
    LOG_LEVEL = "BINDABLE_ASSERTIONS_LOG_LEVEL"
    MAX_VALUE_REPR = "BINDABLE_ASSERTIONS_MAX_VALUE_REPR"


class EventName(str, Enum):
    """Names of the events exposed by the notification capabilities."""

    PROPERTY_CHANGED = "property_changed"
    ERRORS_CHANGED = "errors_changed"
