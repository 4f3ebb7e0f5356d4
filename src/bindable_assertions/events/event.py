"""Subscribable events and their argument types.

Subjects expose their notifications as ``Event`` attributes. Handlers are
called with ``(sender, args)`` in subscription order.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

EventHandler = Callable[[Any, Any], None]


@dataclass(frozen=True)
class EventArgs:
    """Base class for event arguments."""


@dataclass(frozen=True)
class PropertyChangedEventArgs(EventArgs):
    """Arguments of a property change notification."""

    property_name: str | None


@dataclass(frozen=True)
class DataErrorsChangedEventArgs(EventArgs):
    """Arguments of an error-state change notification."""

    property_name: str | None


class Event:
    """A multicast event.

    Examples
    --------
    >>> changed = Event()
    >>> changed.subscribe(lambda sender, args: print(args.property_name))
    >>> changed.emit(object(), PropertyChangedEventArgs("value"))
    value
    """

    def __init__(self) -> None:
        self._handlers: list[EventHandler] = []

    def subscribe(self, handler: EventHandler) -> None:
        """Add a handler.

        Raises
        ------
        TypeError
            If ``handler`` is not callable
        """
        if not callable(handler):
            msg = f"Event handler must be callable, got {type(handler).__name__}"
            raise TypeError(msg)
        self._handlers.append(handler)

    def unsubscribe(self, handler: EventHandler) -> None:
        """Remove the most recently added occurrence of ``handler``.

        Unknown handlers are ignored.
        """
        for index in range(len(self._handlers) - 1, -1, -1):
            if self._handlers[index] == handler:
                del self._handlers[index]
                return

    def emit(self, sender: Any, args: Any) -> None:
        """Call every handler with ``(sender, args)``."""
        for handler in list(self._handlers):
            handler(sender, args)

    @property
    def handler_count(self) -> int:
        """Number of subscribed handlers."""
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"<Event handlers={len(self._handlers)}>"
