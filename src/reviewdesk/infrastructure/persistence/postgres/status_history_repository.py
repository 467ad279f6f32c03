"""PostgreSQL status history repository implementation."""

from datetime import datetime

from psycopg import AsyncConnection

from reviewdesk.domain.entities import StatusHistoryEntry
from reviewdesk.domain.value_objects import ReviewStatus


class PostgresStatusHistoryRepository:
    """Append-only status history backed by the status_history table."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def append(
        self,
        document_id: str,
        status: ReviewStatus,
        timestamp: datetime,
        notes: str = "",
    ) -> StatusHistoryEntry:
        cur = await self._conn.execute(
            "INSERT INTO status_history (document_id, status, timestamp, notes) "
            "VALUES (%s, %s, %s, %s) RETURNING id",
            (document_id, status.value, timestamp, notes),
        )
        r = await cur.fetchone()
        return StatusHistoryEntry(
            id=r[0],
            document_id=document_id,
            status=status,
            timestamp=timestamp,
            notes=notes,
        )

    async def list_by_document(self, document_id: str) -> list[StatusHistoryEntry]:
        cur = await self._conn.execute(
            "SELECT id, document_id, status, timestamp, notes FROM status_history "
            "WHERE document_id = %s ORDER BY timestamp DESC, id DESC",
            (document_id,),
        )
        rows = await cur.fetchall()
        return [
            StatusHistoryEntry(
                id=r[0],
                document_id=r[1],
                status=ReviewStatus(r[2]),
                timestamp=r[3],
                notes=r[4] or "",
            )
            for r in rows
        ]

    async def delete_by_document(self, document_id: str) -> None:
        await self._conn.execute(
            "DELETE FROM status_history WHERE document_id = %s", (document_id,)
        )
