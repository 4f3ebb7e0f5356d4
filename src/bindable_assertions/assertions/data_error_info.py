"""Assertions for the validation error notification contract.

A property of a ``NotifyDataErrorInfo`` subject behaves correctly when it
walks through the following transitions, each observed in its own recording
scope:

| # | value set        | errors_changed | has_errors | errors                 |
|---|------------------|----------------|------------|------------------------|
| 1 | valid value      | none           | False      | empty                  |
| 2 | invalid sample 1 | exactly one    | True       | non-empty, sample 1    |
| 3 | invalid sample 1 | none           | True       | non-empty, sample 1    |
| 4 | invalid sample 2 | exactly one    | True       | non-empty, sample 2    |
| 5 | valid value      | exactly one    | False      | empty                  |

The getter must reflect every value set, valid or not.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from bindable_assertions.accessor import (
    PropertyAccessor,
    PropertySelector,
    resolve_property_accessor,
)
from bindable_assertions.assertions.base import (
    assert_no_event_for_property,
    assert_single_event_for_property,
    describe_value,
    fail,
    require_subject,
    values_equal,
)
from bindable_assertions.capabilities import NotifyDataErrorInfo
from bindable_assertions.constants import EventName
from bindable_assertions.errors import InvalidArgumentError, PropertyAssertionError
from bindable_assertions.events import DataErrorsChangedEventArgs, EventMonitor
from bindable_assertions.log import ensure_logging_configured, get_logger

logger = get_logger(__name__)

ERRORS_CHANGED = EventName.ERRORS_CHANGED.value

ErrorsCheck = Callable[[list[Any]], Any]


@dataclass
class InvalidSample:
    """A value the property must reject.

    ``assert_on_errors`` receives the property's errors after the value was
    set. It may raise ``AssertionError`` or return ``False`` to fail.
    """

    invalid_value: Any
    assert_on_errors: ErrorsCheck | None = None


@dataclass(frozen=True)
class NotifyDataErrorInfoSamples:
    """One valid value and two distinct invalid samples for a property."""

    valid_value: Any
    invalid_sample1: InvalidSample
    invalid_sample2: InvalidSample


@dataclass(frozen=True)
class _Stage:
    description: str
    value: Any
    notifies: bool
    has_errors: bool
    sample: InvalidSample | None
    reason: str


def _errors_as_list(errors: Iterable[Any] | None) -> list[Any]:
    return [] if errors is None else list(errors)


class NotifyDataErrorInfoAssertions:
    """Assertions on a subject that implements ``NotifyDataErrorInfo``."""

    identifier = "NotifyDataErrorInfo"

    def __init__(self, subject: Any) -> None:
        """Initialize the assertions.

        Parameters
        ----------
        subject : Any
            Instance under test

        Raises
        ------
        InvalidArgumentError
            If the subject is None or does not implement ``NotifyDataErrorInfo``
        """
        require_subject(subject, NotifyDataErrorInfo)
        self.subject = subject

    def verify_error_notification(
        self,
        property_selector: PropertySelector,
        samples: NotifyDataErrorInfoSamples,
    ) -> None:
        """Verify the validation error behavior of one property.

        Parameters
        ----------
        property_selector : str | property | PropertyAccessor
            Property to verify
        samples : NotifyDataErrorInfoSamples
            Valid value and invalid samples driving the transitions

        Raises
        ------
        InvalidArgumentError
            If an argument is missing or malformed, the subject is not valid
            initially, or the valid value equals the current value
        PropertyAssertionError
            At the first transition that breaks the contract
        """
        ensure_logging_configured()

        if property_selector is None:
            msg = "property_selector must not be None"
            raise InvalidArgumentError(msg, "property_selector")

        if samples is None:
            msg = "samples must not be None"
            raise InvalidArgumentError(msg, "samples")

        if not isinstance(samples, NotifyDataErrorInfoSamples):
            msg = f"samples must be NotifyDataErrorInfoSamples, got {type(samples).__name__}"
            raise InvalidArgumentError(msg, "samples")

        accessor = resolve_property_accessor(type(self.subject), property_selector)
        name = accessor.name

        if self.subject.has_errors or _errors_as_list(self.subject.get_errors(name)):
            msg = "the instance under test must be valid initially"
            raise InvalidArgumentError(msg, "subject")

        if values_equal(samples.valid_value, accessor.get(self.subject)):
            msg = (
                f"the valid sample value must not be equal to the current value on "
                f"the instance under test: {describe_value(samples.valid_value)}"
            )
            raise InvalidArgumentError(msg, "samples")

        logger.debug(
            "Verifying %s on %s.%s",
            ERRORS_CHANGED,
            type(self.subject).__qualname__,
            name,
        )

        for stage in self._stages(samples):
            self._assert_stage(accessor, stage)

        logger.debug(
            "%s.%s notifies error changes correctly",
            type(self.subject).__qualname__,
            name,
        )

    @staticmethod
    def _stages(samples: NotifyDataErrorInfoSamples) -> list[_Stage]:
        valid = samples.valid_value
        first = samples.invalid_sample1
        second = samples.invalid_sample2
        return [
            _Stage(
                f"stage 1: setting valid value {describe_value(valid)}",
                valid,
                notifies=False,
                has_errors=False,
                sample=None,
                reason="Setting a valid value while the property was valid before",
            ),
            _Stage(
                f"stage 2: setting invalid value {describe_value(first.invalid_value)}",
                first.invalid_value,
                notifies=True,
                has_errors=True,
                sample=first,
                reason="Setting an invalid value",
            ),
            _Stage(
                f"stage 3: setting invalid value "
                f"{describe_value(first.invalid_value)} again",
                first.invalid_value,
                notifies=False,
                has_errors=True,
                sample=first,
                reason="Setting the same invalid value again",
            ),
            _Stage(
                f"stage 4: setting invalid value {describe_value(second.invalid_value)}",
                second.invalid_value,
                notifies=True,
                has_errors=True,
                sample=second,
                reason="Setting another invalid value",
            ),
            _Stage(
                f"stage 5: setting valid value {describe_value(valid)} again",
                valid,
                notifies=True,
                has_errors=False,
                sample=None,
                reason="Setting a valid value after an invalid one",
            ),
        ]

    def _assert_stage(self, accessor: PropertyAccessor, stage: _Stage) -> None:
        name = accessor.name
        logger.debug("%s.%s: %s", type(self.subject).__qualname__, name, stage.description)

        with EventMonitor(self.subject, NotifyDataErrorInfo) as monitor:
            accessor.set(self.subject, stage.value)

            actual = accessor.get(self.subject)
            if not values_equal(actual, stage.value):
                fail(
                    f"Property '{name}' must be updated regardless of validity, "
                    f"but found {describe_value(actual)}.",
                    name,
                    "must be updated",
                    stage.description,
                )

            if stage.notifies:
                assert_single_event_for_property(
                    monitor.occurred_events,
                    ERRORS_CHANGED,
                    DataErrorsChangedEventArgs,
                    name,
                    self.subject,
                    stage.reason,
                    stage.description,
                )
            else:
                assert_no_event_for_property(
                    monitor.occurred_events,
                    ERRORS_CHANGED,
                    DataErrorsChangedEventArgs,
                    name,
                    stage.reason,
                    stage.description,
                )

            has_errors = bool(self.subject.has_errors)
            if has_errors != stage.has_errors:
                fail(
                    f"has_errors must be {stage.has_errors}, but found {has_errors}.",
                    name,
                    f"has_errors must be {stage.has_errors}",
                    stage.description,
                )

            errors = _errors_as_list(self.subject.get_errors(name))
            if stage.sample is None:
                if errors:
                    fail(
                        f"errors must be empty for a valid property '{name}', "
                        f"but found {describe_value(errors)}.",
                        name,
                        "errors must be empty",
                        stage.description,
                    )
            else:
                if not errors:
                    fail(
                        f"errors must not be empty for an invalid property '{name}'.",
                        name,
                        "errors must not be empty",
                        stage.description,
                    )
                self._check_errors(name, stage, errors)

    @staticmethod
    def _check_errors(name: str, stage: _Stage, errors: list[Any]) -> None:
        check = stage.sample.assert_on_errors if stage.sample else None
        if check is None:
            return

        try:
            result = check(errors)
        except AssertionError as e:
            msg = (
                f"[{stage.description}] errors of property '{name}' failed the "
                f"sample check: {e}"
            )
            raise PropertyAssertionError(msg, name, "errors check") from e

        if result is False:
            fail(
                f"errors of property '{name}' failed the sample check, "
                f"found {describe_value(errors)}.",
                name,
                "errors check",
                stage.description,
            )


def verify_error_notification(
    subject: Any,
    property_selector: PropertySelector,
    samples: NotifyDataErrorInfoSamples,
) -> None:
    """Verify that ``subject`` reports validation errors of one property correctly.

    See ``NotifyDataErrorInfoAssertions.verify_error_notification``.
    """
    NotifyDataErrorInfoAssertions(subject).verify_error_notification(
        property_selector,
        samples,
    )
