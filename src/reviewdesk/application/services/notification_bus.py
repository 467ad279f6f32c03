"""In-process publish/subscribe for connectivity and sync lifecycle events."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

logger = logging.getLogger(__name__)


class SyncEventType(StrEnum):
    """Lifecycle event kinds."""

    ONLINE = "online"
    OFFLINE = "offline"
    SYNC_START = "sync-start"
    SYNC_COMPLETE = "sync-complete"
    SYNC_ERROR = "sync-error"


@dataclass(frozen=True)
class SyncEvent:
    """One connectivity or sync lifecycle notification."""

    type: SyncEventType
    timestamp: datetime
    synced_count: int | None = None
    failed_count: int | None = None
    error: str | None = None


EventHandler = Callable[[SyncEvent], None]


class NotificationBus:
    """Synchronous fan-out of events to handlers in registration order.

    The same handler may be registered more than once and is then called
    once per registration.
    """

    def __init__(self) -> None:
        self._handlers: list[EventHandler] = []

    def subscribe(self, handler: EventHandler) -> None:
        self._handlers.append(handler)

    def unsubscribe(self, handler: EventHandler) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, event: SyncEvent) -> None:
        """Deliver ``event`` to every handler; handler errors are logged, not raised."""
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                logger.exception("Event handler %r failed on %s", handler, event.type)
