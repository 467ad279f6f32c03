"""Status DTOs."""

from dataclasses import dataclass
from datetime import datetime

from reviewdesk.domain.entities import StatusHistoryEntry
from reviewdesk.domain.value_objects import ReviewStatus
from reviewdesk.domain.workflow import StatusDisplay


@dataclass
class StatusChangeOutput:
    """Result of a successful status change."""

    document_id: str
    previous_status: ReviewStatus
    new_status: ReviewStatus
    timestamp: datetime


@dataclass
class DocumentStatusOutput:
    """Current status of one document with its full history."""

    document_id: str
    current_status: ReviewStatus
    last_updated: datetime
    history: list[StatusHistoryEntry]
    valid_transitions: list[ReviewStatus]
    display: StatusDisplay


@dataclass
class StatusSummaryOutput:
    """Listing row: a document, its latest history and how much history exists."""

    document_id: str
    title: str
    file_name: str
    current_status: ReviewStatus
    upload_date: datetime
    last_modified: datetime
    recent_history: list[StatusHistoryEntry]
    history_count: int
