"""Health check endpoints."""

import falcon.asgi

from reviewdesk.application.services import SyncCoordinator


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, coordinator: SyncCoordinator | None = None) -> None:
        self._coordinator = coordinator

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness, with the current connectivity."""
        media = {"status": "ready"}
        if self._coordinator is not None:
            media["online"] = self._coordinator.online
        resp.media = media
        resp.status = falcon.HTTP_200
