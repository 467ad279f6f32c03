"""Document repository port."""

from typing import Protocol

from reviewdesk.domain.entities import Document
from reviewdesk.domain.value_objects import ReviewStatus


class DocumentRepository(Protocol):
    """Port for document persistence."""

    async def get_by_id(self, document_id: str) -> Document | None: ...

    async def list_all(self) -> list[Document]: ...

    async def list_by_status(self, status: ReviewStatus) -> list[Document]: ...

    async def create(self, document: Document) -> Document: ...

    async def update(self, document: Document) -> Document: ...

    async def delete(self, document_id: str) -> None: ...
