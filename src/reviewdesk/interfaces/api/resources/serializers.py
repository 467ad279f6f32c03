"""JSON shapes returned by the API."""

from datetime import datetime

from reviewdesk.application.dto.status_dto import (
    DocumentStatusOutput,
    StatusChangeOutput,
    StatusSummaryOutput,
)
from reviewdesk.domain.entities import Document, StatusHistoryEntry
from reviewdesk.domain.workflow import StatusDisplay


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def document_to_dict(d: Document, include_content: bool = False) -> dict:
    data = {
        "id": d.id,
        "title": d.title,
        "authors": d.authors,
        "abstract": d.abstract,
        "keywords": d.keywords,
        "file_name": d.file_name,
        "file_type": d.file_type.value,
        "file_size": d.file_size,
        "status": d.status.value,
        "upload_date": _iso(d.upload_date),
        "last_modified": _iso(d.last_modified),
        "version": d.version,
        "sync_needed": d.sync_needed,
        "last_synced": _iso(d.last_synced),
    }
    if include_content:
        data["file_content"] = d.file_content.value
    return data


def history_to_dict(e: StatusHistoryEntry) -> dict:
    return {
        "id": e.id,
        "document_id": e.document_id,
        "status": e.status.value,
        "timestamp": _iso(e.timestamp),
        "notes": e.notes,
    }


def display_to_dict(d: StatusDisplay) -> dict:
    return {"label": d.label, "color": d.color, "background": d.background}


def status_to_dict(s: DocumentStatusOutput) -> dict:
    return {
        "document_id": s.document_id,
        "current_status": s.current_status.value,
        "last_updated": _iso(s.last_updated),
        "history": [history_to_dict(e) for e in s.history],
        "valid_transitions": [t.value for t in s.valid_transitions],
        "display": display_to_dict(s.display),
    }


def status_change_to_dict(c: StatusChangeOutput) -> dict:
    return {
        "document_id": c.document_id,
        "previous_status": c.previous_status.value,
        "new_status": c.new_status.value,
        "timestamp": _iso(c.timestamp),
    }


def summary_to_dict(s: StatusSummaryOutput) -> dict:
    return {
        "document_id": s.document_id,
        "title": s.title,
        "file_name": s.file_name,
        "current_status": s.current_status.value,
        "upload_date": _iso(s.upload_date),
        "last_modified": _iso(s.last_modified),
        "recent_history": [history_to_dict(e) for e in s.recent_history],
        "history_count": s.history_count,
    }
