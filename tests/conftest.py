"""Pytest fixtures for ReviewDesk tests."""

from __future__ import annotations

import asyncio
import copy
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import pytest

from reviewdesk.application.ports import ConnectivityListener
from reviewdesk.application.services import NotificationBus, RecordStore, SyncCoordinator
from reviewdesk.domain.entities import Document, StatusHistoryEntry
from reviewdesk.domain.exceptions import ReconciliationFailure, StorageFault
from reviewdesk.domain.value_objects import EncodedContent, FileType, ReviewStatus


# --- In-memory storage ---


class InMemoryDatabase:
    """Committed state shared by every unit of work of one test."""

    def __init__(self) -> None:
        self.documents: dict[str, Document] = {}
        self.history: dict[int, StatusHistoryEntry] = {}
        self.next_history_id = 1
        self.fail_on_commit = False
        self.fail_on_history_append = False


class FakeDocumentRepository:
    """In-memory document repository over a staged copy."""

    def __init__(self, by_id: dict[str, Document]) -> None:
        self._by_id = by_id

    async def get_by_id(self, document_id: str) -> Document | None:
        doc = self._by_id.get(document_id)
        return copy.deepcopy(doc) if doc else None

    async def list_all(self) -> list[Document]:
        return [copy.deepcopy(d) for d in self._by_id.values()]

    async def list_by_status(self, status: ReviewStatus) -> list[Document]:
        return [copy.deepcopy(d) for d in self._by_id.values() if d.status == status]

    async def create(self, document: Document) -> Document:
        self._by_id[document.id] = copy.deepcopy(document)
        return document

    async def update(self, document: Document) -> Document:
        self._by_id[document.id] = copy.deepcopy(document)
        return document

    async def delete(self, document_id: str) -> None:
        self._by_id.pop(document_id, None)


class FakeStatusHistoryRepository:
    """In-memory status history repository over a staged copy."""

    def __init__(self, uow: FakeUnitOfWork) -> None:
        self._uow = uow

    async def append(
        self,
        document_id: str,
        status: ReviewStatus,
        timestamp: datetime,
        notes: str = "",
    ) -> StatusHistoryEntry:
        if self._uow.db.fail_on_history_append:
            raise StorageFault("history append failed")
        entry = StatusHistoryEntry(
            id=self._uow.next_history_id,
            document_id=document_id,
            status=status,
            timestamp=timestamp,
            notes=notes,
        )
        self._uow.next_history_id += 1
        self._uow.staged_history[entry.id] = entry
        return entry

    async def list_by_document(self, document_id: str) -> list[StatusHistoryEntry]:
        return [e for e in self._uow.staged_history.values() if e.document_id == document_id]

    async def delete_by_document(self, document_id: str) -> None:
        stale = [k for k, e in self._uow.staged_history.items() if e.document_id == document_id]
        for key in stale:
            del self._uow.staged_history[key]


def _apply(committed: dict, seen: dict, staged: dict) -> None:
    """Write back only what this unit of work changed."""
    for key in seen.keys() - staged.keys():
        committed.pop(key, None)
    for key, value in staged.items():
        if seen.get(key) is not value:
            committed[key] = value


class FakeUnitOfWork:
    """Stages writes on copies; nothing reaches the database until commit."""

    def __init__(self, db: InMemoryDatabase | None = None) -> None:
        self.db = db or InMemoryDatabase()
        self._seen_documents = dict(self.db.documents)
        self._seen_history = dict(self.db.history)
        self.staged_documents = dict(self._seen_documents)
        self.staged_history = dict(self._seen_history)
        self.next_history_id = self.db.next_history_id
        self.documents = FakeDocumentRepository(self.staged_documents)
        self.history = FakeStatusHistoryRepository(self)

    async def commit(self) -> None:
        if self.db.fail_on_commit:
            raise StorageFault("commit failed")
        _apply(self.db.documents, self._seen_documents, self.staged_documents)
        _apply(self.db.history, self._seen_history, self.staged_history)
        self.db.next_history_id = max(self.db.next_history_id, self.next_history_id)

    async def rollback(self) -> None:
        pass


def make_uow_factory(db: InMemoryDatabase, suspend: bool = False):
    """Factory committing on clean exit, discarding staged writes on error.

    With ``suspend`` every unit of work yields to the event loop before it
    commits, like a real database round trip.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[FakeUnitOfWork]:
        uow = FakeUnitOfWork(db)
        try:
            yield uow
            if suspend:
                await asyncio.sleep(0.001)
            await uow.commit()
        except BaseException:
            await uow.rollback()
            raise

    return factory


# --- Fake collaborators ---


class FakeRemoteAuthority:
    """Records reconciled documents; fails for ids in ``failing_ids``."""

    def __init__(self) -> None:
        self.reconciled: list[str] = []
        self.failing_ids: set[str] = set()
        self.before_reconcile = None

    async def reconcile(self, document: Document) -> None:
        if self.before_reconcile is not None:
            await self.before_reconcile(document)
        if document.id in self.failing_ids:
            raise ReconciliationFailure(f"remote rejected {document.id}")
        self.reconciled.append(document.id)


class FakeConnectivitySource:
    """Connectivity signal driven by the test."""

    def __init__(self, online: bool = True) -> None:
        self._online = online
        self.listeners: list[ConnectivityListener] = []

    def is_online(self) -> bool:
        return self._online

    def subscribe(self, listener: ConnectivityListener) -> None:
        self.listeners.append(listener)

    def unsubscribe(self, listener: ConnectivityListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)

    async def set_online(self, online: bool) -> None:
        self._online = online
        for listener in list(self.listeners):
            await listener(online)


def make_document(**overrides: object) -> Document:
    """Build a pending document with sensible defaults."""
    values: dict[str, object] = {
        "title": "Study A",
        "authors": ["Ada Lovelace", "Alan Turing"],
        "abstract": "An abstract.",
        "file_name": "study-a.pdf",
        "file_type": FileType.PDF,
        "file_size": 11,
        "file_content": EncodedContent.from_bytes(b"%PDF-1.4 hi", "application/pdf"),
        "upload_date": datetime(2026, 1, 1, tzinfo=UTC),
    }
    values.update(overrides)
    return Document(**values)


# --- Fixtures ---


@pytest.fixture
def db() -> InMemoryDatabase:
    return InMemoryDatabase()


@pytest.fixture
def uow_factory(db: InMemoryDatabase):
    return make_uow_factory(db)


@pytest.fixture
def record_store(uow_factory) -> RecordStore:
    return RecordStore(uow_factory)


@pytest.fixture
def suspending_store(db: InMemoryDatabase) -> RecordStore:
    """Record store whose units of work yield to the event loop before committing."""
    return RecordStore(make_uow_factory(db, suspend=True))


@pytest.fixture
def remote() -> FakeRemoteAuthority:
    return FakeRemoteAuthority()


@pytest.fixture
def connectivity() -> FakeConnectivitySource:
    return FakeConnectivitySource(online=True)


@pytest.fixture
def bus() -> NotificationBus:
    return NotificationBus()


@pytest.fixture
def events(bus: NotificationBus) -> list:
    """Every event published on ``bus``, in order."""
    received: list = []
    bus.subscribe(received.append)
    return received


@pytest.fixture
def coordinator(record_store, remote, connectivity, bus) -> SyncCoordinator:
    coordinator = SyncCoordinator(record_store, remote, connectivity, bus)
    coordinator.start()
    return coordinator
