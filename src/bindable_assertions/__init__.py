"""Test assertions for observable properties.

Verifies that property setters raise change notifications and validation
error notifications the way bindings expect them to.
"""

from bindable_assertions.accessor import PropertyAccessor, resolve_property_accessor
from bindable_assertions.assertions import (
    BindableAssertions,
    InvalidSample,
    NotifyDataErrorInfoAssertions,
    NotifyDataErrorInfoSamples,
    NotifyPropertyChangedAssertions,
    should,
    verify_change_notification,
    verify_error_notification,
)
from bindable_assertions.capabilities import NotifyDataErrorInfo, NotifyPropertyChanged
from bindable_assertions.errors import (
    BindableAssertionsError,
    InvalidArgumentError,
    PropertyAssertionError,
)
from bindable_assertions.events import (
    DataErrorsChangedEventArgs,
    Event,
    EventMonitor,
    PropertyChangedEventArgs,
    RecordedEvent,
    monitor,
)

__version__ = "0.1.0"

__all__ = [
    "BindableAssertions",
    "BindableAssertionsError",
    "DataErrorsChangedEventArgs",
    "Event",
    "EventMonitor",
    "InvalidArgumentError",
    "InvalidSample",
    "NotifyDataErrorInfo",
    "NotifyDataErrorInfoAssertions",
    "NotifyDataErrorInfoSamples",
    "NotifyPropertyChanged",
    "NotifyPropertyChangedAssertions",
    "PropertyAccessor",
    "PropertyAssertionError",
    "PropertyChangedEventArgs",
    "RecordedEvent",
    "monitor",
    "resolve_property_accessor",
    "should",
    "verify_change_notification",
    "verify_error_notification",
]
