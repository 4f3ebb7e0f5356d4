"""Capability protocols a subject must implement to be verified."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from bindable_assertions.constants import EventName

if TYPE_CHECKING:
    from bindable_assertions.events.event import Event


@runtime_checkable
class NotifyPropertyChanged(Protocol):
    """Subject that notifies when a property value changes.

    ``property_changed`` is emitted with ``(sender, PropertyChangedEventArgs)``.
    """

    property_changed: Event


@runtime_checkable
class NotifyDataErrorInfo(Protocol):
    """Subject that tracks validation errors per property.

    ``errors_changed`` is emitted with ``(sender, DataErrorsChangedEventArgs)``
    whenever the errors of a property change.
    """

    errors_changed: Event

    @property
    def has_errors(self) -> bool:
        """Whether any property currently has errors."""
        ...

    def get_errors(self, property_name: str | None) -> Iterable[Any]:
        """Get the current errors of a property."""
        ...


Capability = type

_EVENTS_BY_CAPABILITY: dict[type, tuple[str, ...]] = {
    NotifyPropertyChanged: (EventName.PROPERTY_CHANGED.value,),
    NotifyDataErrorInfo: (EventName.ERRORS_CHANGED.value,),
}


def get_event_names(capability: Capability) -> tuple[str, ...]:
    """Get the names of the events a capability declares.

    Raises
    ------
    TypeError
        If ``capability`` is not a known capability protocol
    """
    try:
        return _EVENTS_BY_CAPABILITY[capability]
    except KeyError:
        msg = f"Unknown capability: {capability!r}"
        raise TypeError(msg) from None
