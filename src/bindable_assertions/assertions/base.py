"""Shared pieces of the notification verifiers.

This module provides subject validation, event filtering and failure
reporting used by both the change and the error notification assertions.
"""

import reprlib
from collections.abc import Iterable
from typing import Any, NoReturn

from bindable_assertions.capabilities import Capability, get_event_names
from bindable_assertions.config import ConfigManager
from bindable_assertions.errors import InvalidArgumentError, PropertyAssertionError
from bindable_assertions.events import Event, RecordedEvent


def describe_value(value: Any) -> str:
    """Render a value for a failure message, shortened to the configured length."""
    limit = ConfigManager().get_max_value_repr()
    shortener = reprlib.Repr()
    shortener.maxstring = limit
    shortener.maxother = limit
    return shortener.repr(value)


def values_equal(left: Any, right: Any) -> bool:
    """Compare two property values, treating NaN as equal to itself."""
    if left is right or left == right:
        return True
    return left != left and right != right  # noqa: PLR0124


def require_subject(subject: Any, capability: Capability) -> None:
    """Check that ``subject`` implements ``capability``.

    Raises
    ------
    InvalidArgumentError
        If the subject is None or does not implement the capability
    """
    if subject is None:
        msg = "subject must not be None"
        raise InvalidArgumentError(msg, "subject")
    if not isinstance(subject, capability):
        msg = (
            f"subject of type {type(subject).__qualname__} does not implement "
            f"{capability.__name__}"
        )
        raise InvalidArgumentError(msg, "subject")
    for name in get_event_names(capability):
        if not isinstance(getattr(subject, name, None), Event):
            msg = (
                f"subject of type {type(subject).__qualname__} does not implement "
                f"{capability.__name__}: '{name}' is not an Event"
            )
            raise InvalidArgumentError(msg, "subject")


def fail(
    message: str,
    property_name: str,
    expectation: str,
    context: str | None = None,
) -> NoReturn:
    """Raise a ``PropertyAssertionError``.

    Parameters
    ----------
    message : str
        Description of the violation
    property_name : str
        Property under verification
    expectation : str
        Short name of the violated expectation
    context : str, optional
        Step that was running, prefixed to the message

    Raises
    ------
    PropertyAssertionError
        Always
    """
    if context:
        message = f"[{context}] {message}"
    raise PropertyAssertionError(message, property_name, expectation)


def events_for_property(
    events: Iterable[RecordedEvent],
    event_name: str,
    args_type: type,
    property_name: str,
) -> list[RecordedEvent]:
    """Select recorded events of one kind that target ``property_name``."""
    return [
        e
        for e in events
        if e.event_name == event_name
        and isinstance(e.args, args_type)
        and e.args.property_name == property_name
    ]


def assert_no_event_for_property(
    events: Iterable[RecordedEvent],
    event_name: str,
    args_type: type,
    property_name: str,
    reason: str,
    context: str | None = None,
) -> None:
    """Assert that no recorded event targets ``property_name``."""
    matching = events_for_property(events, event_name, args_type, property_name)
    if matching:
        fail(
            f"{reason} must not trigger any {event_name} notification for "
            f"property '{property_name}', but found {len(matching)}.",
            property_name,
            "must not trigger a notification",
            context,
        )


def assert_single_event_for_property(
    events: Iterable[RecordedEvent],
    event_name: str,
    args_type: type,
    property_name: str,
    subject: Any,
    reason: str,
    context: str | None = None,
) -> RecordedEvent:
    """Assert that exactly one recorded event targets ``property_name``.

    The event's sender must be ``subject`` itself.

    Returns
    -------
    RecordedEvent
        The matching event
    """
    matching = events_for_property(events, event_name, args_type, property_name)
    if len(matching) != 1:
        fail(
            f"{reason} must trigger exactly one {event_name} notification for "
            f"property '{property_name}', but found {len(matching)}.",
            property_name,
            "must trigger exactly one notification",
            context,
        )

    event = matching[0]
    if event.sender is not subject:
        fail(
            f"The sender of the {event_name} notification for property "
            f"'{property_name}' must be the instance the property belongs to, "
            f"but found {describe_value(event.sender)}.",
            property_name,
            "sender must be the instance under test",
            context,
        )
    return event
