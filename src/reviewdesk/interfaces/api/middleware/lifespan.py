"""Lifespan middleware - storage pool and background sync on startup/shutdown."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from reviewdesk.application.services import SyncCoordinator
from reviewdesk.infrastructure.connectivity.http_probe import HttpConnectivityProbe
from reviewdesk.infrastructure.remote.http_remote_authority import HttpRemoteAuthority

logger = logging.getLogger(__name__)


class LifespanMiddleware:
    """Opens the pool and starts sync on startup; tears down in reverse on shutdown."""

    def __init__(
        self,
        pool: AsyncConnectionPool,
        coordinator: SyncCoordinator,
        probe: HttpConnectivityProbe,
        remote: HttpRemoteAuthority,
    ) -> None:
        self._pool = pool
        self._coordinator = coordinator
        self._probe = probe
        self._remote = remote

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._pool.open()
        self._coordinator.start()
        self._probe.start()
        logger.info("Startup complete")

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        await self._probe.stop()
        self._coordinator.stop()
        await self._remote.aclose()
        await self._pool.close()
