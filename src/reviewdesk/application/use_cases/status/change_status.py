"""Change status use case."""

from reviewdesk.application.dto.status_dto import StatusChangeOutput
from reviewdesk.application.services import RecordStore
from reviewdesk.domain import workflow
from reviewdesk.domain.exceptions import NotFound


class ChangeStatusUseCase:
    """Validate a transition against the workflow, then record it."""

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    async def execute(
        self, document_id: str, requested_status: str, notes: str = ""
    ) -> StatusChangeOutput:
        document = await self._store.get_by_id(document_id)
        if document is None:
            raise NotFound(f"Document {document_id} not found")

        new_status = workflow.apply_transition(document.status, requested_status)
        entry = await self._store.record_status_change(
            document_id, new_status, notes, expected_status=document.status
        )
        return StatusChangeOutput(
            document_id=document_id,
            previous_status=document.status,
            new_status=new_status,
            timestamp=entry.timestamp,
        )
