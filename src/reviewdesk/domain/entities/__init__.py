"""Domain entities."""

from reviewdesk.domain.entities.document import Document
from reviewdesk.domain.entities.status_history_entry import StatusHistoryEntry

__all__ = [
    "Document",
    "StatusHistoryEntry",
]
