"""Events raised by subjects and the scope that records them."""

from .event import (
    DataErrorsChangedEventArgs,
    Event,
    EventArgs,
    EventHandler,
    PropertyChangedEventArgs,
)
from .monitor import EventMonitor, RecordedEvent, monitor

__all__ = [
    "DataErrorsChangedEventArgs",
    "Event",
    "EventArgs",
    "EventHandler",
    "EventMonitor",
    "PropertyChangedEventArgs",
    "RecordedEvent",
    "monitor",
]
