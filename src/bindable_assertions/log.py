"""Logger helpers for bindable_assertions.

All package loggers live under the ``bindable_assertions`` namespace and
propagate to the root logger, so pytest's ``caplog`` sees them.
"""

import logging

from bindable_assertions.config import ConfigManager
from bindable_assertions.constants import PACKAGE_LOGGER_NAME

_configured = False


def configure_logger(level: str | None = None) -> logging.Logger:
    """Apply the configured level to the package logger.

    Without an explicit or configured level the logger level is left alone,
    so whatever the host test suite set stays in effect.

    Parameters
    ----------
    level : str, optional
        Level name overriding the configured one

    Returns
    -------
    logging.Logger
        The package logger
    """
    global _configured

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    resolved = level.upper() if level else ConfigManager().get_log_level()
    if resolved is not None:
        logger.setLevel(resolved)
    logger.propagate = True
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    _configured = True
    return logger


def ensure_logging_configured() -> None:
    """Configure the package logger once per process."""
    if not _configured:
        configure_logger()


def reset_logging() -> None:
    """Clear the package logger level and reapply configuration on next use."""
    global _configured
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(logging.NOTSET)
    _configured = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package namespace."""
    if name != PACKAGE_LOGGER_NAME and not name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
