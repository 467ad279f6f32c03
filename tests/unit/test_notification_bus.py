"""Unit tests for NotificationBus."""

import logging
from datetime import UTC, datetime

from reviewdesk.application.services import NotificationBus, SyncEvent, SyncEventType


def _event(event_type: SyncEventType = SyncEventType.ONLINE) -> SyncEvent:
    return SyncEvent(type=event_type, timestamp=datetime.now(UTC))


def test_publish_in_registration_order() -> None:
    bus = NotificationBus()
    calls: list[str] = []
    bus.subscribe(lambda e: calls.append("first"))
    bus.subscribe(lambda e: calls.append("second"))

    bus.publish(_event())

    assert calls == ["first", "second"]


def test_duplicate_subscription_invoked_twice() -> None:
    bus = NotificationBus()
    received: list[SyncEvent] = []
    bus.subscribe(received.append)
    bus.subscribe(received.append)

    bus.publish(_event())

    assert len(received) == 2


def test_unsubscribe_removes_handler() -> None:
    bus = NotificationBus()
    received: list[SyncEvent] = []

    def handler(event: SyncEvent) -> None:
        received.append(event)

    bus.subscribe(handler)
    bus.unsubscribe(handler)
    bus.publish(_event())

    assert received == []


def test_unsubscribe_unknown_handler_is_noop() -> None:
    bus = NotificationBus()
    bus.unsubscribe(lambda e: None)


def test_failing_handler_does_not_stop_others(caplog) -> None:
    """A raising handler is logged; later handlers still run and publish returns."""
    bus = NotificationBus()
    received: list[SyncEvent] = []

    def broken(event: SyncEvent) -> None:
        raise RuntimeError("boom")

    bus.subscribe(broken)
    bus.subscribe(received.append)

    with caplog.at_level(logging.ERROR):
        bus.publish(_event(SyncEventType.SYNC_START))

    assert len(received) == 1
    assert "boom" in caplog.text


def test_sync_event_type_values() -> None:
    assert {t.value for t in SyncEventType} == {
        "online",
        "offline",
        "sync-start",
        "sync-complete",
        "sync-error",
    }
