"""Delete document use case."""

from reviewdesk.application.services import RecordStore


class DeleteDocumentUseCase:
    """Remove a document together with its status history."""

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    async def execute(self, document_id: str) -> None:
        await self._store.delete(document_id)
