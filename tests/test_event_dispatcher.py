"""Tests for EventDispatcher registration, fan-out order and failure policy."""

import pytest

from core.domain import DomainEvent, EventDispatcher, HandlerExecutionException
from tests.helpers import FailingHandler, RecordingHandler


class SampleEvent(DomainEvent):
    pass


class TestRegistration:
    def test_register_creates_list_for_new_event_name(self, event_dispatcher):
        handler = RecordingHandler("h1", [])

        event_dispatcher.register("SampleEvent", handler)

        assert event_dispatcher.get_event_handlers["SampleEvent"] == [handler]

    def test_register_appends_in_registration_order(self, event_dispatcher):
        h1 = RecordingHandler("h1", [])
        h2 = RecordingHandler("h2", [])

        event_dispatcher.register("SampleEvent", h1)
        event_dispatcher.register("SampleEvent", h2)

        assert event_dispatcher.get_event_handlers["SampleEvent"] == [h1, h2]

    def test_same_handler_may_be_registered_twice(self, event_dispatcher, journal):
        handler = RecordingHandler("h1", journal)
        event_dispatcher.register("SampleEvent", handler)
        event_dispatcher.register("SampleEvent", handler)

        event_dispatcher.notify(SampleEvent())

        assert [label for label, _ in journal] == ["h1", "h1"]

    def test_unregister_removes_only_first_occurrence(self, event_dispatcher):
        h1 = RecordingHandler("h1", [])
        h2 = RecordingHandler("h2", [])
        event_dispatcher.register("SampleEvent", h1)
        event_dispatcher.register("SampleEvent", h2)
        event_dispatcher.register("SampleEvent", h1)

        event_dispatcher.unregister("SampleEvent", h1)

        assert event_dispatcher.get_event_handlers["SampleEvent"] == [h2, h1]

    def test_unregister_last_handler_drops_event_name(self, event_dispatcher):
        handler = RecordingHandler("h1", [])
        event_dispatcher.register("SampleEvent", handler)

        event_dispatcher.unregister("SampleEvent", handler)

        assert event_dispatcher.get_event_handlers.get("SampleEvent") is None

    def test_unregister_unknown_event_or_handler_is_noop(self, event_dispatcher):
        registered = RecordingHandler("h1", [])
        stranger = RecordingHandler("h2", [])
        event_dispatcher.register("SampleEvent", registered)

        event_dispatcher.unregister("OtherEvent", registered)
        event_dispatcher.unregister("SampleEvent", stranger)

        assert event_dispatcher.get_event_handlers["SampleEvent"] == [registered]

    def test_unregister_all_clears_registry(self, event_dispatcher, journal):
        event_dispatcher.register("SampleEvent", RecordingHandler("h1", journal))
        event_dispatcher.register("OtherEvent", RecordingHandler("h2", journal))

        event_dispatcher.unregister_all()
        event_dispatcher.notify(SampleEvent())
        event_dispatcher.notify(DomainEvent(name="OtherEvent"))

        assert event_dispatcher.get_event_handlers.get("SampleEvent") is None
        assert event_dispatcher.get_event_handlers.get("ProductCreatedEvent") is None
        assert journal == []

    def test_dispatchers_do_not_share_state(self):
        first = EventDispatcher()
        second = EventDispatcher()

        first.register("SampleEvent", RecordingHandler("h1", []))

        assert second.get_event_handlers == {}


class TestNotify:
    def test_invokes_handlers_in_registration_order_once_each(self, event_dispatcher, journal):
        event_dispatcher.register("SampleEvent", RecordingHandler("h1", journal))
        event_dispatcher.register("SampleEvent", RecordingHandler("h2", journal))
        event = SampleEvent()

        event_dispatcher.notify(event)

        assert journal == [("h1", event), ("h2", event)]

    def test_event_without_handlers_is_noop(self, event_dispatcher, journal):
        event_dispatcher.register("OtherEvent", RecordingHandler("h1", journal))

        event_dispatcher.notify(SampleEvent())

        assert journal == []

    def test_routes_by_event_name_not_type(self, event_dispatcher, journal):
        event_dispatcher.register("custom.name", RecordingHandler("h1", journal))

        event_dispatcher.notify(SampleEvent(name="custom.name"))
        event_dispatcher.notify(SampleEvent())

        assert len(journal) == 1

    def test_handler_error_propagates_and_aborts_remaining(self, event_dispatcher, journal):
        event_dispatcher.register("SampleEvent", RecordingHandler("before", journal))
        event_dispatcher.register("SampleEvent", FailingHandler(ValueError("boom")))
        event_dispatcher.register("SampleEvent", RecordingHandler("after", journal))

        with pytest.raises(ValueError, match="boom"):
            event_dispatcher.notify(SampleEvent())

        assert [label for label, _ in journal] == ["before"]

    def test_handler_unregistering_during_notify_does_not_skip_others(self, event_dispatcher, journal):
        second = RecordingHandler("h2", journal)

        class SelfRemovingHandler(RecordingHandler):
            def handle(self, event):
                super().handle(event)
                event_dispatcher.unregister("SampleEvent", self)

        event_dispatcher.register("SampleEvent", SelfRemovingHandler("h1", journal))
        event_dispatcher.register("SampleEvent", second)

        event_dispatcher.notify(SampleEvent())

        assert [label for label, _ in journal] == ["h1", "h2"]
        assert event_dispatcher.get_event_handlers["SampleEvent"] == [second]


class TestNotifyIsolated:
    def test_all_handlers_run_and_failures_are_reported(self, event_dispatcher, journal):
        first_failure = FailingHandler(ValueError("first"))
        second_failure = FailingHandler(KeyError("second"))
        event_dispatcher.register("SampleEvent", first_failure)
        event_dispatcher.register("SampleEvent", RecordingHandler("ok", journal))
        event_dispatcher.register("SampleEvent", second_failure)

        with pytest.raises(HandlerExecutionException) as exc_info:
            event_dispatcher.notify_isolated(SampleEvent())

        assert [label for label, _ in journal] == ["ok"]
        assert exc_info.value.event_name == "SampleEvent"
        assert [handler for handler, _ in exc_info.value.errors] == [first_failure, second_failure]
        assert isinstance(exc_info.value.errors[1][1], KeyError)

    def test_no_failures_raises_nothing(self, event_dispatcher, journal):
        event_dispatcher.register("SampleEvent", RecordingHandler("ok", journal))

        event_dispatcher.notify_isolated(SampleEvent())

        assert len(journal) == 1

    def test_event_without_handlers_is_noop(self, event_dispatcher):
        event_dispatcher.notify_isolated(SampleEvent())


class TestDomainEvent:
    def test_name_defaults_to_class_name(self):
        assert SampleEvent().name == "SampleEvent"

    def test_event_data_is_a_snapshot(self):
        payload = {"items": [1, 2]}
        event = SampleEvent(payload)

        payload["items"].append(3)

        assert event.event_data == {"items": [1, 2]}
