"""PostgreSQL document repository implementation."""

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from reviewdesk.domain.entities import Document
from reviewdesk.domain.value_objects import EncodedContent, FileType, ReviewStatus

_COLUMNS = (
    "id, title, authors, abstract, keywords, file_name, file_type, file_size, "
    "file_content, status, upload_date, last_modified, version, sync_needed, last_synced"
)


def _row_to_document(r: tuple) -> Document:
    return Document(
        id=r[0],
        title=r[1],
        authors=list(r[2] or []),
        abstract=r[3],
        keywords=list(r[4] or []),
        file_name=r[5],
        file_type=FileType(r[6]),
        file_size=r[7],
        file_content=EncodedContent(r[8]),
        status=ReviewStatus(r[9]),
        upload_date=r[10],
        last_modified=r[11],
        version=r[12],
        sync_needed=r[13],
        last_synced=r[14],
    )


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, document_id: str) -> Document | None:
        """Get document by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE id = %s", (document_id,)
        )
        r = await cur.fetchone()
        return _row_to_document(r) if r else None

    async def list_all(self) -> list[Document]:
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM document")
        return [_row_to_document(r) for r in await cur.fetchall()]

    async def list_by_status(self, status: ReviewStatus) -> list[Document]:
        """List documents in one status (uses ix_document_status)."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE status = %s", (status.value,)
        )
        return [_row_to_document(r) for r in await cur.fetchall()]

    async def create(self, document: Document) -> Document:
        """Create document."""
        await self._conn.execute(
            f"INSERT INTO document ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                document.id,
                document.title,
                Jsonb(document.authors),
                document.abstract,
                Jsonb(document.keywords),
                document.file_name,
                document.file_type.value,
                document.file_size,
                document.file_content.value,
                document.status.value,
                document.upload_date,
                document.last_modified,
                document.version,
                document.sync_needed,
                document.last_synced,
            ),
        )
        return document

    async def update(self, document: Document) -> Document:
        """Replace every mutable column; upload_date is never rewritten."""
        await self._conn.execute(
            "UPDATE document SET title=%s, authors=%s, abstract=%s, keywords=%s, "
            "file_name=%s, file_type=%s, file_size=%s, file_content=%s, status=%s, "
            "last_modified=%s, version=%s, sync_needed=%s, last_synced=%s WHERE id=%s",
            (
                document.title,
                Jsonb(document.authors),
                document.abstract,
                Jsonb(document.keywords),
                document.file_name,
                document.file_type.value,
                document.file_size,
                document.file_content.value,
                document.status.value,
                document.last_modified,
                document.version,
                document.sync_needed,
                document.last_synced,
                document.id,
            ),
        )
        return document

    async def delete(self, document_id: str) -> None:
        await self._conn.execute("DELETE FROM document WHERE id = %s", (document_id,))
