"""Assertions for the property change notification contract.

A property of a ``NotifyPropertyChanged`` subject behaves correctly when
setting a different value updates the getter and raises exactly one
``property_changed`` notification sent by the subject, and setting the same
value again raises none.
"""

from typing import Any

from bindable_assertions.accessor import PropertySelector, resolve_property_accessor
from bindable_assertions.assertions.base import (
    assert_no_event_for_property,
    assert_single_event_for_property,
    describe_value,
    fail,
    require_subject,
    values_equal,
)
from bindable_assertions.capabilities import NotifyPropertyChanged
from bindable_assertions.constants import EventName
from bindable_assertions.errors import InvalidArgumentError
from bindable_assertions.events import EventMonitor, PropertyChangedEventArgs
from bindable_assertions.log import ensure_logging_configured, get_logger

logger = get_logger(__name__)

PROPERTY_CHANGED = EventName.PROPERTY_CHANGED.value


class NotifyPropertyChangedAssertions:
    """Assertions on a subject that implements ``NotifyPropertyChanged``."""

    identifier = "NotifyPropertyChanged"

    def __init__(self, subject: Any) -> None:
        """Initialize the assertions.

        Parameters
        ----------
        subject : Any
            Instance under test

        Raises
        ------
        InvalidArgumentError
            If the subject is None or lacks a ``property_changed`` event
        """
        require_subject(subject, NotifyPropertyChanged)
        self.subject = subject

    def verify_change_notification(
        self,
        property_selector: PropertySelector,
        other_value: Any,
    ) -> None:
        """Verify the change notification behavior of one property.

        Parameters
        ----------
        property_selector : str | property | PropertyAccessor
            Property to verify
        other_value : Any
            A value different from the property's current value

        Raises
        ------
        InvalidArgumentError
            If the selector is invalid or ``other_value`` equals the current value
        PropertyAssertionError
            If the property does not follow the change notification contract
        """
        ensure_logging_configured()

        if property_selector is None:
            msg = "property_selector must not be None"
            raise InvalidArgumentError(msg, "property_selector")

        accessor = resolve_property_accessor(type(self.subject), property_selector)
        name = accessor.name
        current = accessor.get(self.subject)

        if values_equal(current, other_value):
            msg = (
                f"other_value must have a value different from the current value "
                f"of property {name}, but both were {describe_value(other_value)}"
            )
            raise InvalidArgumentError(msg, "other_value")

        logger.debug(
            "Verifying %s on %s.%s",
            PROPERTY_CHANGED,
            type(self.subject).__qualname__,
            name,
        )

        with EventMonitor(self.subject, NotifyPropertyChanged) as monitor:
            accessor.set(self.subject, other_value)

            actual = accessor.get(self.subject)
            if not values_equal(actual, other_value):
                fail(
                    f"Property '{name}' must be updated by its setter: after "
                    f"setting {describe_value(other_value)} the getter must return "
                    f"it, but found {describe_value(actual)}.",
                    name,
                    "must be updated",
                )

            assert_single_event_for_property(
                monitor.occurred_events,
                PROPERTY_CHANGED,
                PropertyChangedEventArgs,
                name,
                self.subject,
                "Setting a different value",
            )

            monitor.clear()
            accessor.set(self.subject, other_value)

            assert_no_event_for_property(
                monitor.occurred_events,
                PROPERTY_CHANGED,
                PropertyChangedEventArgs,
                name,
                "Setting the same value",
            )

        logger.debug("%s.%s notifies changes correctly", type(self.subject).__qualname__, name)


def verify_change_notification(
    subject: Any,
    property_selector: PropertySelector,
    other_value: Any,
) -> None:
    """Verify that ``subject`` notifies changes of one property correctly.

    See ``NotifyPropertyChangedAssertions.verify_change_notification``.
    """
    NotifyPropertyChangedAssertions(subject).verify_change_notification(
        property_selector,
        other_value,
    )
