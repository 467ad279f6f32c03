"""Upload document use case."""

from pathlib import PurePath

from reviewdesk.application.dto.document_dto import DocumentUploadInput
from reviewdesk.application.ports import FileValidator
from reviewdesk.application.services import RecordStore
from reviewdesk.domain.entities import Document
from reviewdesk.domain.exceptions import ValidationError
from reviewdesk.domain.metadata import metadata_errors
from reviewdesk.domain.value_objects import EncodedContent
from reviewdesk.domain.workflow import INITIAL_STATUS

DEFAULT_AUTHOR = "Unknown author"


class UploadDocumentUseCase:
    """Validate a file, encode it and store it as a new pending document."""

    def __init__(self, record_store: RecordStore, file_validator: FileValidator) -> None:
        self._store = record_store
        self._validator = file_validator

    async def execute(self, input_data: DocumentUploadInput) -> Document:
        validation = self._validator.validate(
            input_data.file_name, input_data.mime_type, len(input_data.content)
        )
        title = (input_data.title or "").strip() or PurePath(input_data.file_name).stem
        authors = list(input_data.authors) or [DEFAULT_AUTHOR]
        errors = list(validation.errors) + metadata_errors(title, authors)
        if errors or not validation.valid:
            raise ValidationError(". ".join(errors))

        document = Document(
            title=title,
            authors=authors,
            abstract=input_data.abstract,
            keywords=list(input_data.keywords),
            file_name=validation.file_name,
            file_type=validation.file_type,
            file_size=validation.file_size,
            file_content=EncodedContent.from_bytes(input_data.content, input_data.mime_type),
            status=INITIAL_STATUS,
            version=1,
        )
        document_id = await self._store.put(document)
        stored = await self._store.get_by_id(document_id)
        return stored or document
