"""Tests for events and the recording scope."""

import pytest

from bindable_assertions.capabilities import (
    NotifyDataErrorInfo,
    NotifyPropertyChanged,
    get_event_names,
)
from bindable_assertions.events import (
    DataErrorsChangedEventArgs,
    Event,
    EventMonitor,
    PropertyChangedEventArgs,
    RecordedEvent,
    monitor,
)
from tests._helpers.bindables import Person, TestBindable


class TestEvent:
    """Tests for the multicast Event."""

    def test_emit_calls_handlers_in_order(self) -> None:
        """Test that handlers run in subscription order."""
        event = Event()
        calls = []
        event.subscribe(lambda sender, args: calls.append(("first", sender, args)))
        event.subscribe(lambda sender, args: calls.append(("second", sender, args)))

        event.emit("sender", "args")

        assert calls == [("first", "sender", "args"), ("second", "sender", "args")]

    def test_unsubscribe_removes_handler(self) -> None:
        """Test that an unsubscribed handler is no longer called."""
        event = Event()
        calls = []

        def handler(sender, args):
            calls.append(args)

        event.subscribe(handler)
        event.unsubscribe(handler)
        event.emit(None, "args")

        assert calls == []
        assert event.handler_count == 0

    def test_unsubscribe_unknown_handler_is_ignored(self) -> None:
        """Test that removing an unknown handler does nothing."""
        event = Event()
        event.unsubscribe(lambda sender, args: None)
        assert event.handler_count == 0

    def test_subscribe_requires_callable(self) -> None:
        """Test that non-callables are rejected."""
        with pytest.raises(TypeError, match="callable"):
            Event().subscribe("not callable")

    def test_handler_may_unsubscribe_during_emit(self) -> None:
        """Test that handlers can detach while the event is being raised."""
        event = Event()
        calls = []

        def once(sender, args):
            calls.append(args)
            event.unsubscribe(once)

        event.subscribe(once)
        event.emit(None, 1)
        event.emit(None, 2)

        assert calls == [1]


class TestCapabilities:
    """Tests for capability protocols."""

    def test_property_changed_subject(self, bindable: TestBindable) -> None:
        """Test that a subject with property_changed implements the protocol."""
        assert isinstance(bindable, NotifyPropertyChanged)
        assert not isinstance(bindable, NotifyDataErrorInfo)

    def test_subject_with_both_capabilities(self, person: Person) -> None:
        """Test that one subject can implement both protocols."""
        assert isinstance(person, NotifyPropertyChanged)
        assert isinstance(person, NotifyDataErrorInfo)

    def test_event_names(self) -> None:
        """Test the events declared by each capability."""
        assert get_event_names(NotifyPropertyChanged) == ("property_changed",)
        assert get_event_names(NotifyDataErrorInfo) == ("errors_changed",)

    def test_unknown_capability(self) -> None:
        """Test that unknown capabilities are rejected."""
        with pytest.raises(TypeError, match="Unknown capability"):
            get_event_names(int)


class TestEventMonitor:
    """Tests for EventMonitor."""

    def test_records_events_in_order(self, bindable: TestBindable) -> None:
        """Test that emissions are recorded with their parameters."""
        with EventMonitor(bindable, NotifyPropertyChanged) as event_monitor:
            bindable.correctly_implemented_value = "a"
            bindable.value_that_always_raises = "b"

        assert event_monitor.occurred_events == [
            RecordedEvent(
                "property_changed",
                (bindable, PropertyChangedEventArgs("correctly_implemented_value")),
            ),
            RecordedEvent(
                "property_changed",
                (bindable, PropertyChangedEventArgs("value_that_always_raises")),
            ),
        ]

    def test_recorded_event_accessors(self, bindable: TestBindable) -> None:
        """Test sender and args shortcuts."""
        with EventMonitor(bindable, NotifyPropertyChanged) as event_monitor:
            bindable.correctly_implemented_value = "a"

        recorded = event_monitor.occurred_events[0]
        assert recorded.sender is bindable
        assert recorded.args == PropertyChangedEventArgs("correctly_implemented_value")

    def test_clear_keeps_recording(self, bindable: TestBindable) -> None:
        """Test that clear drops events but keeps handlers attached."""
        with EventMonitor(bindable, NotifyPropertyChanged) as event_monitor:
            bindable.correctly_implemented_value = "a"
            event_monitor.clear()
            assert event_monitor.occurred_events == []

            bindable.correctly_implemented_value = "b"
            assert len(event_monitor.occurred_events) == 1

    def test_stop_detaches_handlers(self, bindable: TestBindable) -> None:
        """Test that no events are recorded after the scope ends."""
        with EventMonitor(bindable, NotifyPropertyChanged) as event_monitor:
            assert bindable.property_changed.handler_count == 1
            assert event_monitor.is_active

        bindable.correctly_implemented_value = "a"

        assert event_monitor.occurred_events == []
        assert bindable.property_changed.handler_count == 0
        assert not event_monitor.is_active

    def test_stop_is_idempotent(self, bindable: TestBindable) -> None:
        """Test that stopping twice is harmless."""
        event_monitor = EventMonitor(bindable, NotifyPropertyChanged)
        event_monitor.start()
        event_monitor.stop()
        event_monitor.stop()

        assert bindable.property_changed.handler_count == 0

    def test_start_twice_raises(self, bindable: TestBindable) -> None:
        """Test that an active monitor cannot be started again."""
        with EventMonitor(bindable, NotifyPropertyChanged) as event_monitor:
            with pytest.raises(RuntimeError, match="already recording"):
                event_monitor.start()

    def test_missing_event_raises(self, bindable: TestBindable) -> None:
        """Test that subjects lacking the capability's event are rejected."""
        with pytest.raises(TypeError, match="errors_changed"):
            EventMonitor(bindable, NotifyDataErrorInfo).start()

        assert bindable.property_changed.handler_count == 0

    def test_get_events_filters_by_name(self, person: Person) -> None:
        """Test filtering recorded events by name."""
        with EventMonitor(person, NotifyPropertyChanged) as changes:
            with EventMonitor(person, NotifyDataErrorInfo) as errors:
                person.name = "R2D2"

        assert len(changes.get_events("property_changed")) == 1
        assert changes.get_events("errors_changed") == []
        assert errors.get_events("errors_changed")[0].args == (
            DataErrorsChangedEventArgs("name")
        )

    def test_monitor_context_releases_on_error(self, bindable: TestBindable) -> None:
        """Test that the monitor() block releases handlers when it raises."""
        with pytest.raises(RuntimeError):
            with monitor(bindable, NotifyPropertyChanged):
                raise RuntimeError("boom")

        assert bindable.property_changed.handler_count == 0


class TestEventMonitorFixture:
    """Tests for the event_monitor fixture."""

    def test_fixture_returns_started_monitor(
        self,
        event_monitor,
        bindable: TestBindable,
    ) -> None:
        """Test that the fixture opens recording scopes."""
        recorder = event_monitor(bindable, NotifyPropertyChanged)
        bindable.correctly_implemented_value = "a"

        assert recorder.is_active
        assert len(recorder.occurred_events) == 1
