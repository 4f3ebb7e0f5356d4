"""Recording scope for subject events.

An ``EventMonitor`` subscribes to every event a capability declares, records
each emission as a ``RecordedEvent`` in order, and unsubscribes when stopped.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from bindable_assertions.capabilities import Capability, get_event_names
from bindable_assertions.events.event import Event, EventHandler
from bindable_assertions.log import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RecordedEvent:
    """An event captured by a monitor."""

    event_name: str
    parameters: tuple[Any, ...]

    @property
    def sender(self) -> Any:
        """First handler argument, the object that raised the event."""
        return self.parameters[0] if self.parameters else None

    @property
    def args(self) -> Any:
        """Second handler argument, the event arguments."""
        return self.parameters[1] if len(self.parameters) > 1 else None


class EventMonitor:
    """Records the events a subject raises for one capability.

    Examples
    --------
    >>> with EventMonitor(bindable, NotifyPropertyChanged) as monitor:
    ...     bindable.value = "new"
    >>> [e.event_name for e in monitor.occurred_events]
    ['property_changed']
    """

    def __init__(self, subject: Any, capability: Capability) -> None:
        """Initialize the monitor.

        Parameters
        ----------
        subject : Any
            Object whose events are recorded
        capability : Capability
            Capability protocol declaring which events to record
        """
        self.subject = subject
        self.capability = capability
        self._events: list[RecordedEvent] = []
        self._subscriptions: list[tuple[Event, EventHandler]] = []

    @property
    def is_active(self) -> bool:
        """Whether handlers are currently attached."""
        return bool(self._subscriptions)

    def start(self) -> None:
        """Attach handlers to the capability's events.

        Raises
        ------
        RuntimeError
            If the monitor is already started
        TypeError
            If the subject does not expose one of the events
        """
        if self._subscriptions:
            msg = "Monitor is already recording"
            raise RuntimeError(msg)

        self._events.clear()
        try:
            for name in get_event_names(self.capability):
                event = getattr(self.subject, name, None)
                if not isinstance(event, Event):
                    msg = (
                        f"{type(self.subject).__qualname__} does not expose "
                        f"event '{name}'"
                    )
                    raise TypeError(msg)
                handler = self._make_handler(name)
                event.subscribe(handler)
                self._subscriptions.append((event, handler))
        except Exception:
            self.stop()
            raise

        logger.debug(
            "Monitoring %s on %s",
            ", ".join(get_event_names(self.capability)),
            type(self.subject).__qualname__,
        )

    def stop(self) -> None:
        """Detach all handlers. Safe to call more than once."""
        while self._subscriptions:
            event, handler = self._subscriptions.pop()
            event.unsubscribe(handler)

    def _make_handler(self, event_name: str) -> EventHandler:
        def handler(*parameters: Any) -> None:
            self._events.append(RecordedEvent(event_name, parameters))

        return handler

    @property
    def occurred_events(self) -> list[RecordedEvent]:
        """Recorded events in emission order."""
        return list(self._events)

    def get_events(self, event_name: str) -> list[RecordedEvent]:
        """Get recorded events with the given name."""
        return [e for e in self._events if e.event_name == event_name]

    def clear(self) -> None:
        """Forget recorded events without detaching handlers."""
        self._events.clear()

    def __enter__(self) -> "EventMonitor":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()


@contextmanager
def monitor(subject: Any, capability: Capability) -> Iterator[EventMonitor]:
    """Record ``subject``'s events for the duration of the block."""
    event_monitor = EventMonitor(subject, capability)
    event_monitor.start()
    try:
        yield event_monitor
    finally:
        event_monitor.stop()
