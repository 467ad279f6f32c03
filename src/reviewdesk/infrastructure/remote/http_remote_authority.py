"""HTTP remote authority - reconciles documents with the review server."""

import logging

import httpx

from reviewdesk.domain.entities import Document
from reviewdesk.domain.exceptions import ReconciliationFailure

logger = logging.getLogger(__name__)


def document_payload(document: Document) -> dict:
    """Wire representation sent to the remote side."""
    return {
        "id": document.id,
        "title": document.title,
        "authors": document.authors,
        "abstract": document.abstract,
        "keywords": document.keywords,
        "file_name": document.file_name,
        "file_type": document.file_type.value,
        "file_size": document.file_size,
        "file_content": document.file_content.value,
        "status": document.status.value,
        "upload_date": document.upload_date.isoformat() if document.upload_date else None,
        "last_modified": document.last_modified.isoformat() if document.last_modified else None,
        "version": document.version,
    }


class HttpRemoteAuthority:
    """Idempotent PUT of the full document to ``{base_url}/documents/{id}``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"), timeout=timeout
        )

    async def reconcile(self, document: Document) -> None:
        try:
            r = await self._client.put(
                f"/documents/{document.id}", json=document_payload(document)
            )
            r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ReconciliationFailure(
                f"Remote rejected document {document.id}: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise ReconciliationFailure(
                f"Remote unreachable for document {document.id}: {e}"
            ) from e
        logger.debug("Reconciled document %s (version %d)", document.id, document.version)

    async def aclose(self) -> None:
        await self._client.aclose()
