"""Pytest fixtures for tests that use bindable_assertions.

Enable them from a ``conftest.py``::

    pytest_plugins = ["bindable_assertions.pytest_plugin"]
"""

from collections.abc import Callable, Generator
from typing import Any

import pytest

from bindable_assertions.capabilities import Capability
from bindable_assertions.config import ConfigManager
from bindable_assertions.constants import EnvVar
from bindable_assertions.events import EventMonitor
from bindable_assertions.log import reset_logging

__all__ = ["bindable_config", "event_monitor"]


@pytest.fixture
def event_monitor() -> Generator[Callable[[Any, Capability], EventMonitor], None, None]:
    """Open recording scopes that are all released at teardown.

    Returns
    -------
    Callable[[Any, Capability], EventMonitor]
        Factory taking a subject and a capability and returning a started monitor
    """
    monitors: list[EventMonitor] = []

    def _start(subject: Any, capability: Capability) -> EventMonitor:
        event_monitor = EventMonitor(subject, capability)
        event_monitor.start()
        monitors.append(event_monitor)
        return event_monitor

    yield _start

    for event_monitor in reversed(monitors):
        event_monitor.stop()


@pytest.fixture
def bindable_config(monkeypatch: pytest.MonkeyPatch) -> Generator[ConfigManager, None, None]:
    """Provide a freshly loaded configuration, isolated from the environment.

    Environment overrides set with ``monkeypatch`` inside the test apply to the
    returned manager.
    """
    for var in EnvVar:
        monkeypatch.delenv(var.value, raising=False)

    ConfigManager.reset()
    reset_logging()
    yield ConfigManager()
    ConfigManager.reset()
    reset_logging()
