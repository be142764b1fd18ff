"""Unit tests for the TransInterface base class."""

from __future__ import annotations

import asyncio
from typing import ClassVar

import pytest

from core.trans.exceptions import (
    ApiError,
    NoLanguageError,
    NoResponseError,
    RequestFailedError,
    RequestTooLongError,
    TransportFailureError,
)
from core.trans.interface import EngineAttributes, TransInterface
from core.trans.languages import Language
from handlers.async_comm import AsyncCommError, AsyncHttp
from models.translation_models import BatchTranslationOutput, TranslationOutput, TranslatorType
from tests.stub_http import StubHttp


class DummyEngine(TransInterface):
    """Engine without a name: usable directly, never registered."""

    RATE_LIMIT_CODES: ClassVar[frozenset[str]] = frozenset({"slow-down"})

    def __init__(self, *, http=None, requires_source: bool = False, delays: dict[str, float] | None = None) -> None:
        super().__init__(http=http)
        self._attributes = EngineAttributes(
            name="dummy", max_query_bytes=10, requires_source_language=requires_source
        )
        self.delays: dict[str, float] = delays or {}
        self.started: list[str] = []
        self.cancelled: list[str] = []

    @staticmethod
    def fetch_engine_name() -> str:
        return ""

    @property
    def engine_attributes(self) -> EngineAttributes:
        return self._attributes

    @property
    def translator_type(self) -> TranslatorType:
        return TranslatorType.BAIDU

    async def translate(self, query: str, source: Language | None, target: Language) -> TranslationOutput:
        self._resolve_source(source)
        self._check_length(query)
        self.started.append(query)
        try:
            await asyncio.sleep(self.delays.get(query, 0))
        except asyncio.CancelledError:
            self.cancelled.append(query)
            raise
        if query == "fail":
            raise NoResponseError("nothing", provider=self.engine_name)
        return TranslationOutput(text=query.upper(), lang=target)

    async def translate_batch(self, queries, source, target) -> BatchTranslationOutput:
        return await self._fan_out(queries, source, target)


def test_builtin_engines_are_registered() -> None:
    import core.trans.engines  # noqa: F401, PLC0415

    assert {"baidu", "youdao", "caiyun", "alibaba", "mymemory"} <= set(TransInterface.registered)


def test_unnamed_engine_is_not_registered() -> None:
    assert DummyEngine not in TransInterface.registered.values()


def test_duplicate_engine_name_raises() -> None:
    import core.trans.engines  # noqa: F401, PLC0415

    with pytest.raises(ValueError, match="already registered"):

        class _Clash(DummyEngine):
            @staticmethod
            def fetch_engine_name() -> str:
                return "baidu"


def test_engine_name_and_local_flag() -> None:
    engine = DummyEngine(http=StubHttp())

    assert engine.engine_name == "dummy"
    assert engine.is_local is False


def test_is_rate_limit_error() -> None:
    engine = DummyEngine(http=StubHttp())

    assert engine.is_rate_limit_error(RequestFailedError(429))
    assert not engine.is_rate_limit_error(RequestFailedError(500))
    assert engine.is_rate_limit_error(ApiError("dummy", "slow-down", "wait"))
    assert not engine.is_rate_limit_error(ApiError("dummy", "other", "no"))
    assert not engine.is_rate_limit_error(ValueError("unrelated"))


@pytest.mark.asyncio
async def test_missing_source_raises_when_required() -> None:
    engine = DummyEngine(http=StubHttp(), requires_source=True)

    with pytest.raises(NoLanguageError):
        await engine.translate("hi", None, Language.ENGLISH)
    with pytest.raises(NoLanguageError):
        await engine.translate("hi", Language.AUTO, Language.ENGLISH)


@pytest.mark.asyncio
async def test_fan_out_keeps_input_order() -> None:
    engine = DummyEngine(http=StubHttp(), delays={"a": 0.03, "b": 0.0, "c": 0.01})

    result = await engine.translate_batch(["a", "b", "c"], None, Language.ENGLISH)

    assert result.texts == ("A", "B", "C")
    assert result.lang is Language.ENGLISH


@pytest.mark.asyncio
async def test_fan_out_failure_cancels_pending_requests() -> None:
    engine = DummyEngine(http=StubHttp(), delays={"slow": 1.0})

    with pytest.raises(NoResponseError):
        await engine.translate_batch(["slow", "fail"], None, Language.ENGLISH)
    await asyncio.sleep(0.01)

    assert engine.cancelled == ["slow"]


@pytest.mark.asyncio
async def test_fan_out_length_check_happens_first() -> None:
    engine = DummyEngine(http=StubHttp())

    with pytest.raises(RequestTooLongError):
        await engine.translate_batch(["ok", "x" * 11], None, Language.ENGLISH)

    assert engine.started == []


@pytest.mark.asyncio
async def test_send_maps_transport_errors() -> None:
    engine = DummyEngine(http=StubHttp(error=AsyncCommError("refused")))

    with pytest.raises(TransportFailureError) as excinfo:
        await engine._send("GET", "https://example.invalid")

    assert excinfo.value.provider == "dummy"


@pytest.mark.asyncio
async def test_close_shuts_down_owned_client(monkeypatch: pytest.MonkeyPatch) -> None:
    closed: list[bool] = []

    async def fake_close(self: AsyncHttp) -> None:
        closed.append(True)

    monkeypatch.setattr(AsyncHttp, "close", fake_close)
    engine = DummyEngine()

    await engine.close()

    assert closed == [True]


@pytest.mark.asyncio
async def test_close_keeps_injected_client_unless_owned() -> None:
    http = StubHttp()
    engine = DummyEngine(http=http)

    await engine.close()
    assert http.closed is False

    engine.own_http()
    await engine.close()
    assert http.closed is True


def test_pack_segments_keeps_order_within_limit() -> None:
    engine = DummyEngine(http=StubHttp())

    groups: list[list[str]] = engine._pack_segments(["abcd", "efgh", "ij", "klmnopqrst", "u"])

    assert groups == [["abcd", "efgh"], ["ij"], ["klmnopqrst"], ["u"]]
    assert all(len("\n".join(group).encode()) <= 10 for group in groups)


def test_pack_segments_rejects_single_oversized_query() -> None:
    engine = DummyEngine(http=StubHttp())

    with pytest.raises(RequestTooLongError) as excinfo:
        engine._pack_segments(["ok", "x" * 11])

    assert excinfo.value.actual == 11


def test_pack_segments_empty_batch() -> None:
    assert DummyEngine(http=StubHttp())._pack_segments([]) == []
