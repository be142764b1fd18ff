"""Unit tests for the Baidu translation engine."""

from __future__ import annotations

import hashlib
from typing import Any

import pytest

from core.trans.engines.trans_baidu import BaiduTranslation, baidu_sign, explain_error_code
from core.trans.exceptions import (
    ApiError,
    CouldNotMapLanguageError,
    NoResponseError,
    RequestFailedError,
    RequestTooLongError,
    TransportFailureError,
)
from core.trans.languages import Language
from handlers.async_comm import AsyncCommTimeoutError, HttpResponse
from tests.stub_http import StubHttp, json_response


def _engine(http: StubHttp) -> BaiduTranslation:
    return BaiduTranslation(app_id="2015063000000001", key="12345678", http=http, salt_factory=lambda: "1435660288")


def _success(*dst: str, to: str = "zh") -> HttpResponse:
    return json_response({"from": "en", "to": to, "trans_result": [{"src": "x", "dst": d} for d in dst]})


def test_baidu_sign_matches_documented_example() -> None:
    assert baidu_sign("2015063000000001", "apple", "1435660288", "12345678") == "f89f9594663708c1605f3d736d01d2d4"


def test_baidu_sign_hashes_utf8() -> None:
    expected: str = hashlib.md5("id你好1key".encode()).hexdigest()  # noqa: S324

    assert baidu_sign("id", "你好", "1", "key") == expected


def test_build_form_contains_signed_fields() -> None:
    engine: BaiduTranslation = _engine(StubHttp())

    form: dict[str, str] = engine.build_form("apple", "en", "zh", "1435660288")

    assert form == {
        "q": "apple",
        "from": "en",
        "to": "zh",
        "appid": "2015063000000001",
        "salt": "1435660288",
        "sign": "f89f9594663708c1605f3d736d01d2d4",
    }


def test_explain_error_code_falls_back_for_unknown_code() -> None:
    assert "Signature" in explain_error_code("54001")
    assert explain_error_code("99999") == "Unknown error"


@pytest.mark.asyncio
async def test_translate_returns_text_and_reported_language() -> None:
    http = StubHttp(_success("你好，世界"))
    engine: BaiduTranslation = _engine(http)

    result = await engine.translate("Hello World", None, Language.CHINESE_SIMPLIFIED)

    assert result.text == "你好，世界"
    assert result.lang is Language.CHINESE_SIMPLIFIED
    assert len(http.calls) == 1
    call: dict[str, Any] = http.calls[0]
    assert call["method"] == "POST"
    assert call["data"]["from"] == "auto"
    assert call["data"]["to"] == "zh"
    assert call["data"]["q"] == "Hello World"


@pytest.mark.asyncio
async def test_translate_joins_multiline_results() -> None:
    engine: BaiduTranslation = _engine(StubHttp(_success("第一行", "第二行")))

    result = await engine.translate("line one\nline two", Language.ENGLISH, Language.CHINESE_SIMPLIFIED)

    assert result.text == "第一行\n第二行"


@pytest.mark.asyncio
async def test_translate_maps_explicit_source_language() -> None:
    http = StubHttp(_success("Hello", to="en"))
    engine: BaiduTranslation = _engine(http)

    result = await engine.translate("こんにちは", Language.JAPANESE, Language.ENGLISH)

    assert http.calls[0]["data"]["from"] == "jp"
    assert result.lang is Language.ENGLISH


@pytest.mark.asyncio
async def test_signature_error_body_is_api_error() -> None:
    http = StubHttp(json_response({"error_code": "54001", "error_msg": "Invalid Sign"}))
    engine: BaiduTranslation = _engine(http)

    with pytest.raises(ApiError) as excinfo:
        await engine.translate("Hello", None, Language.CHINESE_SIMPLIFIED)

    assert excinfo.value.code == "54001"
    assert excinfo.value.provider == "baidu"
    assert not isinstance(excinfo.value, TransportFailureError)


@pytest.mark.asyncio
async def test_frequency_limit_is_rate_limit_error() -> None:
    engine: BaiduTranslation = _engine(StubHttp(json_response({"error_code": 54003, "error_msg": "limit"})))

    with pytest.raises(ApiError) as excinfo:
        await engine.translate("Hello", None, Language.CHINESE_SIMPLIFIED)

    assert engine.is_rate_limit_error(excinfo.value)
    assert not engine.is_rate_limit_error(ApiError("baidu", "54001", "sign"))


@pytest.mark.asyncio
async def test_success_code_is_not_an_error() -> None:
    payload: dict[str, Any] = {"error_code": "52000", "to": "zh", "trans_result": [{"src": "a", "dst": "甲"}]}
    engine: BaiduTranslation = _engine(StubHttp(json_response(payload)))

    result = await engine.translate("a", None, Language.CHINESE_SIMPLIFIED)

    assert result.text == "甲"


@pytest.mark.asyncio
async def test_too_long_query_fails_before_sending() -> None:
    http = StubHttp()
    engine: BaiduTranslation = _engine(http)

    with pytest.raises(RequestTooLongError) as excinfo:
        await engine.translate("你" * 2001, None, Language.ENGLISH)

    assert excinfo.value.actual == 6003
    assert excinfo.value.limit == 6000
    assert http.calls == []


@pytest.mark.asyncio
async def test_query_at_limit_is_sent() -> None:
    http = StubHttp(_success("ok"))
    engine: BaiduTranslation = _engine(http)

    await engine.translate("a" * 6000, None, Language.CHINESE_SIMPLIFIED)

    assert len(http.calls) == 1


@pytest.mark.asyncio
async def test_auto_target_cannot_be_mapped() -> None:
    http = StubHttp()
    engine: BaiduTranslation = _engine(http)

    with pytest.raises(CouldNotMapLanguageError):
        await engine.translate("Hello", None, Language.AUTO)

    assert http.calls == []


@pytest.mark.asyncio
async def test_non_2xx_status_is_request_failed() -> None:
    engine: BaiduTranslation = _engine(StubHttp(HttpResponse(status=429, body=b"")))

    with pytest.raises(RequestFailedError) as excinfo:
        await engine.translate("Hello", None, Language.CHINESE_SIMPLIFIED)

    assert excinfo.value.status_code == 429
    assert engine.is_rate_limit_error(excinfo.value)


@pytest.mark.asyncio
async def test_timeout_is_transport_failure() -> None:
    engine: BaiduTranslation = _engine(StubHttp(error=AsyncCommTimeoutError("timed out")))

    with pytest.raises(TransportFailureError):
        await engine.translate("Hello", None, Language.CHINESE_SIMPLIFIED)


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"", b"<html>busy</html>", b'{"to": "zh"}', b"[]"])
async def test_unusable_body_is_no_response(body: bytes) -> None:
    engine: BaiduTranslation = _engine(StubHttp(HttpResponse(status=200, body=body)))

    with pytest.raises(NoResponseError):
        await engine.translate("Hello", None, Language.CHINESE_SIMPLIFIED)


@pytest.mark.asyncio
async def test_batch_is_sent_as_one_request() -> None:
    http = StubHttp(_success("苹果", "香蕉", "樱桃"))
    engine: BaiduTranslation = _engine(http)

    result = await engine.translate_batch(["apple", "banana", "cherry"], Language.ENGLISH, Language.CHINESE_SIMPLIFIED)

    assert result.texts == ("苹果", "香蕉", "樱桃")
    assert result.lang is Language.CHINESE_SIMPLIFIED
    assert len(http.calls) == 1
    assert http.calls[0]["data"]["q"] == "apple\nbanana\ncherry"


@pytest.mark.asyncio
async def test_batch_segment_mismatch_is_no_response() -> None:
    engine: BaiduTranslation = _engine(StubHttp(_success("苹果")))

    with pytest.raises(NoResponseError):
        await engine.translate_batch(["apple", "banana"], None, Language.CHINESE_SIMPLIFIED)


@pytest.mark.asyncio
async def test_batch_with_multiline_query_fans_out() -> None:
    replies: dict[str, HttpResponse] = {
        "a\nb": _success("甲", "乙"),
        "c": _success("丙"),
    }
    http = StubHttp(handler=lambda call: replies[call["data"]["q"]])
    engine: BaiduTranslation = _engine(http)

    result = await engine.translate_batch(["a\nb", "c"], None, Language.CHINESE_SIMPLIFIED)

    assert result.texts == ("甲\n乙", "丙")
    assert len(http.calls) == 2


@pytest.mark.asyncio
async def test_empty_batch_sends_nothing() -> None:
    http = StubHttp()
    engine: BaiduTranslation = _engine(http)

    result = await engine.translate_batch([], None, Language.CHINESE_SIMPLIFIED)

    assert len(result) == 0
    assert http.calls == []


@pytest.mark.asyncio
async def test_close_leaves_injected_client_open() -> None:
    http = StubHttp()
    engine: BaiduTranslation = _engine(http)

    await engine.close()

    assert http.closed is False


@pytest.mark.asyncio
async def test_oversized_batch_is_split_into_requests_within_limit() -> None:
    queries: list[str] = [f"{i}" * 700 for i in range(10)]
    http = StubHttp(handler=lambda call: _success(*(q[:1] for q in call["data"]["q"].split("\n"))))
    engine: BaiduTranslation = _engine(http)

    result = await engine.translate_batch(queries, Language.ENGLISH, Language.CHINESE_SIMPLIFIED)

    assert result.texts == tuple(f"{i}" for i in range(10))
    assert result.lang is Language.CHINESE_SIMPLIFIED
    assert len(http.calls) == 2
    assert [len(call["data"]["q"].split("\n")) for call in http.calls] == [8, 2]
    assert all(len(call["data"]["q"].encode()) <= 6000 for call in http.calls)


@pytest.mark.asyncio
async def test_split_batch_fails_as_a_whole() -> None:
    queries: list[str] = ["a" * 3500, "b" * 3500]
    responses: list[HttpResponse] = [_success("甲"), json_response({"error_code": "54005", "error_msg": "long"})]
    http = StubHttp(*responses)
    engine: BaiduTranslation = _engine(http)

    with pytest.raises(ApiError) as excinfo:
        await engine.translate_batch(queries, None, Language.CHINESE_SIMPLIFIED)

    assert excinfo.value.code == "54005"
    assert len(http.calls) == 2


@pytest.mark.asyncio
async def test_batch_with_one_oversized_query_reports_its_length() -> None:
    http = StubHttp()
    engine: BaiduTranslation = _engine(http)

    with pytest.raises(RequestTooLongError) as excinfo:
        await engine.translate_batch(["short", "x" * 6001], None, Language.CHINESE_SIMPLIFIED)

    assert excinfo.value.actual == 6001
    assert http.calls == []
