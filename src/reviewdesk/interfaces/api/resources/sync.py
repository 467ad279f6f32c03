"""Sync API resource."""

import falcon.asgi

from reviewdesk.application.services import SyncCoordinator


class SyncResource:
    """GET /v1/sync - connectivity; POST /v1/sync - run a reconciliation pass."""

    def __init__(self, coordinator: SyncCoordinator) -> None:
        self._coordinator = coordinator

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        availability = self._coordinator.check_availability()
        resp.media = {
            "is_online": availability.is_online,
            "is_offline": availability.is_offline,
            "timestamp": availability.timestamp.isoformat(),
            "sync_in_progress": self._coordinator.sync_in_progress,
        }
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        report = await self._coordinator.attempt_sync()
        if report is None:
            reason = "in_progress" if self._coordinator.sync_in_progress else "offline"
            resp.media = {"status": "skipped", "reason": reason}
            resp.status = falcon.HTTP_202
            return
        resp.media = {
            "status": "ok" if report.ok else "error",
            "synced": report.synced,
            "failed": report.failed,
            "deferred": report.deferred,
            "error": report.error,
        }
        resp.status = falcon.HTTP_200
