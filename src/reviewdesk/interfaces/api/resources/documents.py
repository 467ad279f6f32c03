"""Document API resources."""

import base64
import binascii

import falcon.asgi

from reviewdesk.application.dto.document_dto import (
    DocumentMetadataUpdate,
    DocumentUploadInput,
)
from reviewdesk.application.services import RecordStore
from reviewdesk.application.use_cases.document.delete_document import DeleteDocumentUseCase
from reviewdesk.application.use_cases.document.update_document import UpdateDocumentUseCase
from reviewdesk.application.use_cases.document.upload_document import UploadDocumentUseCase
from reviewdesk.domain.exceptions import NotFound, ValidationError
from reviewdesk.domain.value_objects import ReviewStatus
from reviewdesk.interfaces.api.resources.serializers import document_to_dict


def _split_list(raw: str) -> list[str]:
    """Split a comma-separated form field, dropping blanks."""
    return [item.strip() for item in raw.split(",") if item.strip()]


def _str_list(value: object, field: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{field} must be a list of strings")
    return value


def _opt_str(value: object, field: str) -> str | None:
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value


class DocumentsResource:
    """GET /v1/documents - list; POST /v1/documents - upload (JSON or multipart)."""

    def __init__(self, upload_document: UploadDocumentUseCase, record_store: RecordStore) -> None:
        self._upload_document = upload_document
        self._store = record_store

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List documents, optionally filtered by ?status=."""
        status = req.get_param("status")
        if status:
            try:
                documents = await self._store.list_by_status(ReviewStatus(status))
            except ValueError:
                resp.status = falcon.HTTP_400
                resp.media = {"error": f"Unknown status: {status}"}
                return
        else:
            documents = await self._store.get_all()
        documents.sort(key=lambda d: d.upload_date, reverse=True)
        resp.media = {"documents": [document_to_dict(d) for d in documents]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        content_type = req.content_type or ""
        try:
            if "multipart/form-data" in content_type:
                input_data = await self._read_multipart(req)
            else:
                input_data = await self._read_json(req)
        except (KeyError, TypeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            document = await self._upload_document.execute(input_data)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = document_to_dict(document)
        resp.status = falcon.HTTP_201

    async def _read_json(self, req: falcon.asgi.Request) -> DocumentUploadInput:
        """JSON body: file_name, mime_type, base64 content, optional metadata."""
        body = await req.get_media()
        try:
            content = base64.b64decode(body["content"], validate=True)
        except binascii.Error as e:
            raise ValueError(f"content is not valid base64: {e}") from e
        return DocumentUploadInput(
            file_name=_opt_str(body["file_name"], "file_name") or "",
            content=content,
            mime_type=_opt_str(body.get("mime_type"), "mime_type") or "",
            title=_opt_str(body.get("title"), "title"),
            authors=_str_list(body.get("authors", []), "authors"),
            abstract=_opt_str(body.get("abstract"), "abstract") or "",
            keywords=_str_list(body.get("keywords", []), "keywords"),
        )

    async def _read_multipart(self, req: falcon.asgi.Request) -> DocumentUploadInput:
        """Multipart form: one ``file`` part plus title/authors/abstract/keywords fields."""
        form = await req.get_media()
        fields: dict[str, str] = {}
        file_part: tuple[bytes, str, str] | None = None
        async for part in form:
            name = (part.name or "").strip()
            if name == "file":
                data = await part.get_data()
                file_part = (bytes(data), part.filename or "", part.content_type or "")
            elif name in ("title", "authors", "abstract", "keywords"):
                fields[name] = await part.get_text()
        if file_part is None:
            raise ValueError("file required")
        data, file_name, mime_type = file_part
        return DocumentUploadInput(
            file_name=file_name,
            content=data,
            mime_type=mime_type,
            title=fields.get("title"),
            authors=_split_list(fields.get("authors", "")),
            abstract=fields.get("abstract", ""),
            keywords=_split_list(fields.get("keywords", "")),
        )


class DocumentResource:
    """GET/PATCH/DELETE /v1/documents/{document_id}."""

    def __init__(
        self,
        record_store: RecordStore,
        update_document: UpdateDocumentUseCase,
        delete_document: DeleteDocumentUseCase,
    ) -> None:
        self._store = record_store
        self._update_document = update_document
        self._delete_document = delete_document

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        document = await self._store.get_by_id(document_id)
        if document is None:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        resp.media = document_to_dict(document, include_content=True)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Edit metadata; the status field is not accepted here."""
        try:
            body = await req.get_media()
            update = DocumentMetadataUpdate(
                title=_opt_str(body.get("title"), "title"),
                authors=_str_list(body["authors"], "authors") if "authors" in body else None,
                abstract=_opt_str(body.get("abstract"), "abstract"),
                keywords=_str_list(body["keywords"], "keywords") if "keywords" in body else None,
            )
        except (AttributeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            document = await self._update_document.execute(document_id, update)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = document_to_dict(document)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        await self._delete_document.execute(document_id)
        resp.status = falcon.HTTP_204
