"""Fluent entry point over both notification assertions."""

from typing import Any

from bindable_assertions.accessor import PropertySelector
from bindable_assertions.assertions.data_error_info import (
    NotifyDataErrorInfoAssertions,
    NotifyDataErrorInfoSamples,
)
from bindable_assertions.assertions.property_changed import (
    NotifyPropertyChangedAssertions,
)
from bindable_assertions.capabilities import NotifyDataErrorInfo, NotifyPropertyChanged
from bindable_assertions.errors import InvalidArgumentError


class BindableAssertions:
    """Assertions for whichever notification capabilities a subject implements.

    Examples
    --------
    >>> should(person).verify_change_notification("name", "Ada")
    """

    def __init__(self, subject: Any) -> None:
        if subject is None:
            msg = "subject must not be None"
            raise InvalidArgumentError(msg, "subject")
        self.subject = subject

    @property
    def notifies_property_changes(self) -> bool:
        """Whether the subject implements ``NotifyPropertyChanged``."""
        return isinstance(self.subject, NotifyPropertyChanged)

    @property
    def notifies_data_errors(self) -> bool:
        """Whether the subject implements ``NotifyDataErrorInfo``."""
        return isinstance(self.subject, NotifyDataErrorInfo)

    def verify_change_notification(
        self,
        property_selector: PropertySelector,
        other_value: Any,
    ) -> "BindableAssertions":
        """Verify the change notification contract and return ``self`` for chaining."""
        NotifyPropertyChangedAssertions(self.subject).verify_change_notification(
            property_selector,
            other_value,
        )
        return self

    def verify_error_notification(
        self,
        property_selector: PropertySelector,
        samples: NotifyDataErrorInfoSamples,
    ) -> "BindableAssertions":
        """Verify the error notification contract and return ``self`` for chaining."""
        NotifyDataErrorInfoAssertions(self.subject).verify_error_notification(
            property_selector,
            samples,
        )
        return self


def should(subject: Any) -> BindableAssertions:
    """Start a fluent assertion on ``subject``."""
    return BindableAssertions(subject)
