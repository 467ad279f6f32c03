"""Status history repository port."""

from datetime import datetime
from typing import Protocol

from reviewdesk.domain.entities import StatusHistoryEntry
from reviewdesk.domain.value_objects import ReviewStatus


class StatusHistoryRepository(Protocol):
    """Port for append-only status history persistence."""

    async def append(
        self,
        document_id: str,
        status: ReviewStatus,
        timestamp: datetime,
        notes: str = "",
    ) -> StatusHistoryEntry: ...

    async def list_by_document(self, document_id: str) -> list[StatusHistoryEntry]: ...

    async def delete_by_document(self, document_id: str) -> None: ...
