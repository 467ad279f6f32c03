"""List statuses use case."""

from reviewdesk.application.dto.status_dto import StatusSummaryOutput
from reviewdesk.application.services import RecordStore

RECENT_HISTORY_LIMIT = 3


class ListStatusesUseCase:
    """All documents with their latest status changes, newest activity first."""

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    async def execute(self) -> list[StatusSummaryOutput]:
        documents = await self._store.get_all()
        summaries = []
        for document in documents:
            history = await self._store.get_history(document.id)
            summaries.append(
                StatusSummaryOutput(
                    document_id=document.id,
                    title=document.title,
                    file_name=document.file_name,
                    current_status=document.status,
                    upload_date=document.upload_date,
                    last_modified=document.last_modified,
                    recent_history=history[:RECENT_HISTORY_LIMIT],
                    history_count=len(history),
                )
            )
        summaries.sort(key=lambda s: s.last_modified, reverse=True)
        return summaries
