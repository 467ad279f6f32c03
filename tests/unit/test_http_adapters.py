"""Unit tests for the httpx-based remote authority and connectivity probe."""

import asyncio
import json

import httpx
import pytest

from reviewdesk.domain.exceptions import ReconciliationFailure
from reviewdesk.infrastructure.connectivity.http_probe import HttpConnectivityProbe
from reviewdesk.infrastructure.remote.http_remote_authority import HttpRemoteAuthority

from tests.conftest import make_document


def _client(handler, base_url: str = "http://remote.test/v1") -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=base_url)


@pytest.mark.asyncio
async def test_reconcile_puts_document() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    remote = HttpRemoteAuthority("http://remote.test/v1", client=_client(handler))
    document = make_document(id="doc_1")

    await remote.reconcile(document)

    assert seen[0].method == "PUT"
    assert seen[0].url.path == "/v1/documents/doc_1"
    body = json.loads(seen[0].content)
    assert body["id"] == "doc_1"
    assert body["status"] == "pending"
    assert body["version"] == 1
    await remote.aclose()


@pytest.mark.asyncio
async def test_reconcile_http_error_raises_failure() -> None:
    remote = HttpRemoteAuthority(
        "http://remote.test/v1", client=_client(lambda r: httpx.Response(409))
    )
    with pytest.raises(ReconciliationFailure, match="HTTP 409"):
        await remote.reconcile(make_document(id="doc_1"))


@pytest.mark.asyncio
async def test_reconcile_unreachable_raises_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    remote = HttpRemoteAuthority("http://remote.test/v1", client=_client(handler))
    with pytest.raises(ReconciliationFailure, match="unreachable"):
        await remote.reconcile(make_document(id="doc_1"))


@pytest.mark.asyncio
async def test_probe_notifies_on_transitions_only() -> None:
    """Listeners hear each flip once; repeated identical probes are silent."""
    responses = iter([200, 200, 503, 200])
    heard: list[bool] = []

    async def listener(online: bool) -> None:
        heard.append(online)

    probe = HttpConnectivityProbe(
        "http://remote.test/v1/health",
        client=_client(lambda r: httpx.Response(next(responses))),
    )
    probe.subscribe(listener)

    results = [await probe.check() for _ in range(4)]
    await probe.drain()

    assert results == [True, True, False, True]
    assert heard == [True, False, True]
    assert probe.is_online() is True


@pytest.mark.asyncio
async def test_probe_treats_transport_errors_as_offline() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timeout", request=request)

    heard: list[bool] = []

    async def listener(online: bool) -> None:
        heard.append(online)

    probe = HttpConnectivityProbe(
        "http://remote.test/v1/health", client=_client(handler), initially_online=True
    )
    probe.subscribe(listener)
    probe.unsubscribe(listener)
    probe.subscribe(listener)

    assert await probe.check() is False
    await probe.drain()
    assert heard == [False]


@pytest.mark.asyncio
async def test_slow_listener_does_not_stall_polling() -> None:
    """A listener busy with the online transition does not hide the next flip."""
    responses = iter([200, 503])
    release = asyncio.Event()
    heard: list[bool] = []

    async def listener(online: bool) -> None:
        heard.append(online)
        if online:
            await release.wait()

    probe = HttpConnectivityProbe(
        "http://remote.test/v1/health",
        client=_client(lambda r: httpx.Response(next(responses))),
    )
    probe.subscribe(listener)

    assert await probe.check() is True
    await asyncio.sleep(0)
    assert await asyncio.wait_for(probe.check(), timeout=1) is False
    await asyncio.sleep(0)

    assert probe.is_online() is False
    assert heard == [True, False]

    release.set()
    await probe.drain()


@pytest.mark.asyncio
async def test_failing_listener_does_not_block_others() -> None:
    heard: list[bool] = []

    async def broken(online: bool) -> None:
        raise RuntimeError("listener crashed")

    async def listener(online: bool) -> None:
        heard.append(online)

    probe = HttpConnectivityProbe(
        "http://remote.test/v1/health",
        client=_client(lambda r: httpx.Response(200)),
    )
    probe.subscribe(broken)
    probe.subscribe(listener)

    await probe.check()
    await probe.drain()

    assert heard == [True]
