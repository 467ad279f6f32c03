"""Repository ports."""

from reviewdesk.application.ports.repositories.document_repository import (
    DocumentRepository,
)
from reviewdesk.application.ports.repositories.status_history_repository import (
    StatusHistoryRepository,
)

__all__ = [
    "DocumentRepository",
    "StatusHistoryRepository",
]
