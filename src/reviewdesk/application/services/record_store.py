"""Record store - atomic persistence of documents and their status history."""

import asyncio
import logging
import secrets
import time
from dataclasses import replace
from datetime import UTC, datetime, timedelta

from reviewdesk.application.ports import UnitOfWorkFactory
from reviewdesk.domain.entities import Document, StatusHistoryEntry
from reviewdesk.domain.exceptions import InvalidTransition, NotFound
from reviewdesk.domain.value_objects import ReviewStatus

logger = logging.getLogger(__name__)

INITIAL_HISTORY_NOTE = "Document uploaded"


def new_document_id() -> str:
    """Generate an opaque document id that sorts roughly by creation time."""
    return f"doc_{time.time_ns() // 1_000_000}_{secrets.token_hex(5)}"


def _next_modified(previous: Document | None, now: datetime) -> datetime:
    """Modification stamp that never goes backwards and always moves on a write."""
    stamp = now
    if previous is not None:
        if previous.upload_date and stamp < previous.upload_date:
            stamp = previous.upload_date
        if previous.last_modified and stamp <= previous.last_modified:
            stamp = previous.last_modified + timedelta(microseconds=1)
    return stamp


class RecordStore:
    """Durable storage for documents and status history.

    Every mutation runs inside a single unit of work and under one lock, so
    the writes of two atomic operations are never interleaved. Reads go
    straight to a fresh unit of work.
    """

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory
        self._write_lock = asyncio.Lock()

    async def put(self, document: Document) -> str:
        """Insert or replace a document, returning its id.

        A first insert also records the initial history entry. On replace,
        the persisted status and upload date are kept.
        """
        async with self._write_lock:
            now = datetime.now(UTC)
            async with self._uow_factory() as uow:
                existing = (
                    await uow.documents.get_by_id(document.id) if document.id else None
                )
                if existing is None:
                    upload_date = document.upload_date or now
                    record = replace(
                        document,
                        id=document.id or new_document_id(),
                        upload_date=upload_date,
                        last_modified=max(now, upload_date),
                    )
                    await uow.documents.create(record)
                    await uow.history.append(
                        record.id, record.status, now, INITIAL_HISTORY_NOTE
                    )
                    logger.info("Created document %s", record.id)
                else:
                    if existing.status != document.status:
                        logger.warning(
                            "Ignoring status %s on put of %s; status changes go through "
                            "record_status_change",
                            document.status,
                            document.id,
                        )
                    record = replace(
                        document,
                        status=existing.status,
                        upload_date=existing.upload_date,
                        last_modified=_next_modified(existing, now),
                    )
                    await uow.documents.update(record)
        return record.id

    async def get_by_id(self, document_id: str) -> Document | None:
        async with self._uow_factory() as uow:
            return await uow.documents.get_by_id(document_id)

    async def get_all(self) -> list[Document]:
        async with self._uow_factory() as uow:
            return await uow.documents.list_all()

    async def list_by_status(self, status: ReviewStatus) -> list[Document]:
        async with self._uow_factory() as uow:
            return await uow.documents.list_by_status(ReviewStatus(status))

    async def record_status_change(
        self,
        document_id: str,
        new_status: ReviewStatus,
        notes: str = "",
        expected_status: ReviewStatus | None = None,
    ) -> StatusHistoryEntry:
        """Set the document status and append a history entry atomically.

        Transition legality is not checked here. When ``expected_status`` is
        given the change only applies if the stored status still equals it.

        Raises:
            NotFound: No document with ``document_id``.
            InvalidTransition: The stored status is no longer ``expected_status``.
        """
        status = ReviewStatus(new_status)
        async with self._write_lock:
            now = datetime.now(UTC)
            async with self._uow_factory() as uow:
                document = await uow.documents.get_by_id(document_id)
                if document is None:
                    raise NotFound(f"Document {document_id} not found")
                if expected_status is not None and document.status != expected_status:
                    raise InvalidTransition(str(document.status), str(status))
                await uow.documents.update(
                    replace(
                        document,
                        status=status,
                        last_modified=_next_modified(document, now),
                        sync_needed=True,
                    )
                )
                entry = await uow.history.append(document_id, status, now, notes)
        logger.info("Document %s moved to %s", document_id, status)
        return entry

    async def update_metadata(self, document_id: str, changes: dict[str, object]) -> Document:
        """Apply metadata ``changes`` to the stored document and bump its version.

        Raises:
            NotFound: No document with ``document_id``.
        """
        async with self._write_lock:
            now = datetime.now(UTC)
            async with self._uow_factory() as uow:
                document = await uow.documents.get_by_id(document_id)
                if document is None:
                    raise NotFound(f"Document {document_id} not found")
                record = replace(
                    document,
                    **changes,
                    version=document.version + 1,
                    last_modified=_next_modified(document, now),
                    sync_needed=True,
                )
                await uow.documents.update(record)
        logger.info("Document %s metadata updated to version %d", document_id, record.version)
        return record

    async def mark_synced(
        self, document_id: str, expected_last_modified: datetime | None, synced_at: datetime
    ) -> bool:
        """Clear the sync flag if the document is unchanged since it was read.

        Returns False when the document is gone or was modified in between.
        """
        async with self._write_lock:
            async with self._uow_factory() as uow:
                document = await uow.documents.get_by_id(document_id)
                if document is None or document.last_modified != expected_last_modified:
                    return False
                await uow.documents.update(
                    replace(
                        document,
                        sync_needed=False,
                        last_synced=synced_at,
                        last_modified=_next_modified(document, synced_at),
                    )
                )
        return True
    async def get_history(self, document_id: str) -> list[StatusHistoryEntry]:
        """History for a document, most recent first."""
        async with self._uow_factory() as uow:
            entries = await uow.history.list_by_document(document_id)
        return sorted(entries, key=lambda e: (e.timestamp, e.id), reverse=True)

    async def delete(self, document_id: str) -> None:
        """Remove a document and all of its history. Unknown ids are ignored."""
        async with self._write_lock:
            async with self._uow_factory() as uow:
                await uow.history.delete_by_document(document_id)
                await uow.documents.delete(document_id)
        logger.info("Deleted document %s", document_id)
