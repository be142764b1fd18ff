from __future__ import annotations

import logging
from typing import Any

import aiohttp
import pytest

from handlers import async_comm
from handlers.async_comm import AsyncCommError, AsyncCommTimeoutError, AsyncHttp, HttpResponse


class DummyResponse:
    def __init__(self, status: int, body: bytes, reason: str = "OK") -> None:
        self.status = status
        self.reason = reason
        self.headers = {"Content-Type": "application/json"}
        self._body = body

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> DummyResponse:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        _ = exc_type, exc, tb


class DummySession:
    instances: list[DummySession] = []
    next_response: DummyResponse | None = None
    next_error: BaseException | None = None

    def __init__(self, *args, **kwargs) -> None:
        _ = args, kwargs
        self.closed = False
        self.requests: list[dict[str, Any]] = []
        DummySession.instances.append(self)

    def request(self, **kwargs) -> DummyResponse:
        self.requests.append(kwargs)
        if DummySession.next_error is not None:
            raise DummySession.next_error
        assert DummySession.next_response is not None
        return DummySession.next_response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def patch_session(monkeypatch: pytest.MonkeyPatch) -> None:
    DummySession.instances = []
    DummySession.next_response = DummyResponse(200, b'{"ok": true}')
    DummySession.next_error = None
    monkeypatch.setattr(async_comm, "ClientSession", DummySession)


def test_http_response_helpers() -> None:
    resp = HttpResponse(status=201, body='{"text": "héllo"}'.encode())

    assert resp.ok
    assert resp.json() == {"text": "héllo"}
    assert "héllo" in resp.text()
    assert not HttpResponse(status=404).ok


def test_http_response_json_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        HttpResponse(status=200, body=b"<html>").json()


def test_construction_does_not_open_session() -> None:
    http = AsyncHttp()

    assert http.closed
    assert DummySession.instances == []
    with pytest.raises(RuntimeError):
        _ = http.session


@pytest.mark.asyncio
async def test_request_returns_status_and_body() -> None:
    http = AsyncHttp(total_timeout=5.0, proxy="http://proxy:3128")

    resp: HttpResponse = await http.request("POST", "https://example.test/api", data={"q": "x"})

    assert resp.status == 200
    assert resp.json() == {"ok": True}
    sent: dict[str, Any] = DummySession.instances[0].requests[0]
    assert sent["method"] == "POST"
    assert sent["data"] == {"q": "x"}
    assert sent["proxy"] == "http://proxy:3128"
    assert sent["timeout"].total == 5.0
    assert sent["timeout"].connect == async_comm.CONNECT_TIMEOUT


@pytest.mark.asyncio
async def test_non_2xx_is_returned_not_raised() -> None:
    DummySession.next_response = DummyResponse(503, b"busy", reason="Service Unavailable")
    http = AsyncHttp()

    resp: HttpResponse = await http.get(url="https://example.test/")

    assert resp.status == 503
    assert resp.reason == "Service Unavailable"
    assert not resp.ok


@pytest.mark.asyncio
async def test_timeout_is_converted() -> None:
    DummySession.next_error = TimeoutError()
    http = AsyncHttp()

    with pytest.raises(AsyncCommTimeoutError):
        await http.post(url="https://example.test/", json={"a": 1})


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [ConnectionResetError(), aiohttp.ClientPayloadError("broken")])
async def test_connection_failures_are_converted(error: BaseException) -> None:
    DummySession.next_error = error
    http = AsyncHttp()

    with pytest.raises(AsyncCommError):
        await http.request("GET", "https://example.test/")


def test_short_total_timeout_has_no_connect_timeout() -> None:
    timeout: aiohttp.ClientTimeout = AsyncHttp(total_timeout=0.5)._build_timeout()

    assert timeout.total == 0.5
    assert timeout.connect is None


def test_non_positive_timeout_disables_limit() -> None:
    assert AsyncHttp(total_timeout=0)._build_timeout().total is None


@pytest.mark.asyncio
async def test_context_manager_closes_and_reopens_session(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="FusionTranslator")
    http = AsyncHttp()

    async with http:
        assert not http.closed
    assert http.closed
    assert DummySession.instances[0].closed

    caplog.clear()
    async with http:
        pass

    assert len(DummySession.instances) == 2
    assert any("AsyncHttp session initialized" in rec.message for rec in caplog.records)
