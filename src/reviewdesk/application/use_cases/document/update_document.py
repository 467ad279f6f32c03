"""Update document metadata use case."""

from reviewdesk.application.dto.document_dto import DocumentMetadataUpdate
from reviewdesk.application.services import RecordStore
from reviewdesk.domain.entities import Document
from reviewdesk.domain.exceptions import NotFound, ValidationError
from reviewdesk.domain.metadata import metadata_errors


class UpdateDocumentUseCase:
    """Edit title, authors, abstract or keywords; bumps the version."""

    def __init__(self, record_store: RecordStore) -> None:
        self._store = record_store

    async def execute(self, document_id: str, update: DocumentMetadataUpdate) -> Document:
        document = await self._store.get_by_id(document_id)
        if document is None:
            raise NotFound(f"Document {document_id} not found")

        changes = {
            name: value
            for name, value in (
                ("title", update.title),
                ("authors", update.authors),
                ("abstract", update.abstract),
                ("keywords", update.keywords),
            )
            if value is not None
        }
        if isinstance(changes.get("title"), str):
            changes["title"] = changes["title"].strip()
        errors = metadata_errors(
            changes.get("title", document.title), changes.get("authors", document.authors)
        )
        if errors:
            raise ValidationError(". ".join(errors))
        return await self._store.update_metadata(document_id, changes)
