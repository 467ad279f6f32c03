"""Get status use case."""

from reviewdesk.application.dto.status_dto import DocumentStatusOutput
from reviewdesk.application.services import RecordStore
from reviewdesk.domain import workflow
from reviewdesk.domain.exceptions import NotFound


class GetStatusUseCase:
    """Current status, history and next allowed states for a document."""

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    async def execute(self, document_id: str) -> DocumentStatusOutput:
        document = await self._store.get_by_id(document_id)
        if document is None:
            raise NotFound(f"Document {document_id} not found")

        history = await self._store.get_history(document_id)
        return DocumentStatusOutput(
            document_id=document_id,
            current_status=document.status,
            last_updated=document.last_modified,
            history=history,
            valid_transitions=sorted(workflow.valid_transitions(document.status)),
            display=workflow.display_info(document.status),
        )
