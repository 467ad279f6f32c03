"""Document entity."""

from dataclasses import dataclass, field
from datetime import datetime

from reviewdesk.domain.value_objects import EncodedContent, FileType, ReviewStatus


@dataclass
class Document:
    """Submitted artifact with its metadata, payload and current review state.

    ``id``, ``upload_date`` and ``last_modified`` are filled by the record
    store when left empty. ``sync_needed`` is ``None`` until something sets
    it explicitly.
    """

    title: str
    authors: list[str]
    file_name: str
    file_type: FileType
    file_size: int
    file_content: EncodedContent
    abstract: str = ""
    keywords: list[str] = field(default_factory=list)
    status: ReviewStatus = ReviewStatus.PENDING
    id: str | None = None
    upload_date: datetime | None = None
    last_modified: datetime | None = None
    version: int = 1
    sync_needed: bool | None = None
    last_synced: datetime | None = None

    def __post_init__(self) -> None:
        if self.version < 1:
            raise ValueError("Document version must be >= 1")
