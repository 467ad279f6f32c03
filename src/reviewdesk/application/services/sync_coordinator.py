"""Sync coordinator - connectivity tracking and single-flight reconciliation."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime

from reviewdesk.application.ports import ConnectivitySource, RemoteAuthority
from reviewdesk.application.services.notification_bus import (
    NotificationBus,
    SyncEvent,
    SyncEventType,
)
from reviewdesk.application.services.record_store import RecordStore
from reviewdesk.domain.entities import Document
from reviewdesk.domain.exceptions import ReconciliationFailure, StorageFault
from reviewdesk.domain.value_objects import ReviewStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Availability:
    """Connectivity snapshot."""

    is_online: bool
    timestamp: datetime

    @property
    def is_offline(self) -> bool:
        return not self.is_online


@dataclass
class SyncReport:
    """Outcome of one reconciliation pass."""

    synced: list[str] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)
    deferred: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return not self.failed and self.error is None


def needs_sync(document: Document) -> bool:
    """Whether a document has local changes the remote side has not seen.

    A pending document whose flag was never set counts as unsynced.
    """
    if document.sync_needed is None:
        return document.status == ReviewStatus.PENDING
    return document.sync_needed


def _now() -> datetime:
    return datetime.now(UTC)


class SyncCoordinator:
    """Drives reconciliation of pending documents when the device is online.

    At most one pass runs at a time; a call made while a pass is running or
    while offline returns ``None`` immediately.
    """

    def __init__(
        self,
        record_store: RecordStore,
        remote_authority: RemoteAuthority,
        connectivity: ConnectivitySource,
        notification_bus: NotificationBus | None = None,
    ) -> None:
        self._store = record_store
        self._remote = remote_authority
        self._connectivity = connectivity
        self.bus = notification_bus or NotificationBus()
        self._online = connectivity.is_online()
        self._sync_in_progress = False

    @property
    def online(self) -> bool:
        return self._online

    @property
    def sync_in_progress(self) -> bool:
        return self._sync_in_progress

    def start(self) -> None:
        """Seed the online flag and follow the connectivity source."""
        self._online = self._connectivity.is_online()
        self._connectivity.subscribe(self.on_connectivity_change)
        logger.info("Sync coordinator started, online=%s", self._online)

    def stop(self) -> None:
        self._connectivity.unsubscribe(self.on_connectivity_change)

    def check_availability(self) -> Availability:
        return Availability(is_online=self._online, timestamp=_now())

    async def on_connectivity_change(self, to_online: bool) -> None:
        """Record a connectivity transition; sync when coming back online."""
        self._online = to_online
        event_type = SyncEventType.ONLINE if to_online else SyncEventType.OFFLINE
        self.bus.publish(SyncEvent(type=event_type, timestamp=_now()))
        if to_online:
            await self.attempt_sync()

    async def attempt_sync(self) -> SyncReport | None:
        """Run one reconciliation pass unless gated.

        Never raises: failures are logged and reported as ``sync-error``.
        """
        if self._sync_in_progress or not self._online:
            return None
        self._sync_in_progress = True
        try:
            return await self._run_pass()
        except Exception as e:
            logger.exception("Sync pass aborted")
            self.bus.publish(
                SyncEvent(type=SyncEventType.SYNC_ERROR, timestamp=_now(), error=str(e))
            )
            return SyncReport(error=str(e))
        finally:
            self._sync_in_progress = False

    async def _run_pass(self) -> SyncReport:
        self.bus.publish(SyncEvent(type=SyncEventType.SYNC_START, timestamp=_now()))
        report = SyncReport()
        documents = await self._store.get_all()
        pending = [d for d in documents if needs_sync(d)]
        if pending:
            logger.info("Syncing %d documents", len(pending))

        # Sequential on purpose: deterministic commit order.
        for document in pending:
            try:
                synced = await self._reconcile(document)
            except (ReconciliationFailure, StorageFault) as e:
                logger.warning("Sync of document %s failed: %s", document.id, e)
                report.failed[document.id] = str(e)
                continue
            if synced:
                report.synced.append(document.id)
            else:
                report.deferred.append(document.id)

        if report.failed:
            detail = "; ".join(f"{doc_id}: {msg}" for doc_id, msg in report.failed.items())
            self.bus.publish(
                SyncEvent(
                    type=SyncEventType.SYNC_ERROR,
                    timestamp=_now(),
                    synced_count=len(report.synced),
                    failed_count=len(report.failed),
                    error=detail,
                )
            )
        else:
            self.bus.publish(
                SyncEvent(
                    type=SyncEventType.SYNC_COMPLETE,
                    timestamp=_now(),
                    synced_count=len(report.synced),
                )
            )
        logger.info(
            "Sync pass finished: %d synced, %d failed, %d deferred",
            len(report.synced),
            len(report.failed),
            len(report.deferred),
        )
        return report

    async def _reconcile(self, document: Document) -> bool:
        """Reconcile one document and clear its flag.

        Returns False when the document was deleted or modified while the
        remote call was in flight; the flag is then left for the next pass.
        """
        await self._remote.reconcile(document)
        if not await self._store.mark_synced(document.id, document.last_modified, _now()):
            logger.info("Document %s changed or deleted during sync, left pending", document.id)
            return False
        return True
