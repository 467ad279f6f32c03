"""Status API resources."""

import falcon.asgi

from reviewdesk.application.use_cases.status.change_status import ChangeStatusUseCase
from reviewdesk.application.use_cases.status.get_status import GetStatusUseCase
from reviewdesk.application.use_cases.status.list_statuses import ListStatusesUseCase
from reviewdesk.domain.exceptions import InvalidTransition, NotFound
from reviewdesk.interfaces.api.resources.serializers import (
    status_change_to_dict,
    status_to_dict,
    summary_to_dict,
)


class DocumentStatusResource:
    """GET/POST /v1/documents/{document_id}/status."""

    def __init__(self, get_status: GetStatusUseCase, change_status: ChangeStatusUseCase) -> None:
        self._get_status = get_status
        self._change_status = change_status

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        try:
            result = await self._get_status.execute(document_id)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        resp.media = status_to_dict(result)
        resp.status = falcon.HTTP_200

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Move the document to ``status``; body may carry ``notes``."""
        try:
            body = await req.get_media()
            requested = body["status"]
            notes = body.get("notes", "") or ""
        except (AttributeError, KeyError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing field: {e}"}
            return

        try:
            result = await self._change_status.execute(document_id, requested, notes)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found"}
            return
        except InvalidTransition as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e)}
            return
        resp.media = status_change_to_dict(result)
        resp.status = falcon.HTTP_200


class StatusesResource:
    """GET /v1/statuses - every document with its recent status history."""

    def __init__(self, list_statuses: ListStatusesUseCase) -> None:
        self._list_statuses = list_statuses

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        summaries = await self._list_statuses.execute()
        resp.media = {"statuses": [summary_to_dict(s) for s in summaries]}
        resp.status = falcon.HTTP_200
