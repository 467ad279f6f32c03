"""Status history entry entity."""

from dataclasses import dataclass
from datetime import datetime

from reviewdesk.domain.value_objects import ReviewStatus


@dataclass(frozen=True)
class StatusHistoryEntry:
    """Append-only record of one status assignment."""

    id: int
    document_id: str
    status: ReviewStatus
    timestamp: datetime
    notes: str = ""
