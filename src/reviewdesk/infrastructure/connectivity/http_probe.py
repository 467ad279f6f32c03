"""Connectivity source that polls a health URL."""

import asyncio
import logging

import httpx

from reviewdesk.application.ports import ConnectivityListener

logger = logging.getLogger(__name__)


class HttpConnectivityProbe:
    """Treats the device as online while ``url`` answers with a 2xx status.

    Each transition is delivered to the listeners, in subscription order, from
    its own task so a slow listener never stalls polling.
    """

    def __init__(
        self,
        url: str,
        interval: float = 15.0,
        timeout: float = 5.0,
        client: httpx.AsyncClient | None = None,
        initially_online: bool = False,
    ) -> None:
        self._url = url
        self._interval = interval
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._online = initially_online
        self._listeners: list[ConnectivityListener] = []
        self._task: asyncio.Task | None = None
        self._deliveries: set[asyncio.Task] = set()

    def is_online(self) -> bool:
        return self._online

    def subscribe(self, listener: ConnectivityListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ConnectivityListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    async def check(self) -> bool:
        """Probe once and notify listeners if the state flipped."""
        try:
            r = await self._client.get(self._url)
            reachable = r.is_success
        except httpx.HTTPError as e:
            logger.debug("Connectivity probe failed: %s", e)
            reachable = False

        if reachable != self._online:
            self._online = reachable
            logger.info("Connectivity changed: %s", "online" if reachable else "offline")
            task = asyncio.create_task(self._notify(reachable))
            self._deliveries.add(task)
            task.add_done_callback(self._deliveries.discard)
        return reachable

    async def _notify(self, online: bool) -> None:
        for listener in list(self._listeners):
            try:
                await listener(online)
            except Exception:
                logger.exception("Connectivity listener failed")

    async def drain(self) -> None:
        """Wait until every transition seen so far has been delivered."""
        if self._deliveries:
            await asyncio.wait(set(self._deliveries))

    async def run(self) -> None:
        while True:
            await self.check()
            await asyncio.sleep(self._interval)

    def start(self) -> None:
        if self._task is None:
            self._task = asyncio.create_task(self.run())

    async def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        await self.drain()
        await self._client.aclose()
