"""Application services - record store, workflow-driven sync and events."""

from reviewdesk.application.services.notification_bus import (
    NotificationBus,
    SyncEvent,
    SyncEventType,
)
from reviewdesk.application.services.record_store import RecordStore
from reviewdesk.application.services.sync_coordinator import (
    Availability,
    SyncCoordinator,
    SyncReport,
)

__all__ = [
    "Availability",
    "NotificationBus",
    "RecordStore",
    "SyncCoordinator",
    "SyncEvent",
    "SyncEventType",
    "SyncReport",
]
