"""Assertions for observable property contracts.

The package is organized into focused modules:
- property_changed: change notification contract
- data_error_info: validation error notification contract
- base: event filtering and failure reporting shared by both
- helpers: the fluent ``should`` entry point
"""

from .data_error_info import (
    InvalidSample,
    NotifyDataErrorInfoAssertions,
    NotifyDataErrorInfoSamples,
    verify_error_notification,
)
from .helpers import BindableAssertions, should
from .property_changed import (
    NotifyPropertyChangedAssertions,
    verify_change_notification,
)

__all__ = [
    # Change notification
    "NotifyPropertyChangedAssertions",
    "verify_change_notification",
    # Error notification
    "InvalidSample",
    "NotifyDataErrorInfoAssertions",
    "NotifyDataErrorInfoSamples",
    "verify_error_notification",
    # Fluent entry point
    "BindableAssertions",
    "should",
]
