"""Baidu general translation API engine.

Requests are form-encoded POSTs signed with ``md5(appid + q + salt + key)``. The API reports failures
inside an HTTP 200 body carrying ``error_code`` / ``error_msg``; those are raised as ApiError with the
documented explanation of the code.
"""

from __future__ import annotations

import hashlib
import random
from typing import TYPE_CHECKING, Any, ClassVar, Final

from core.trans.exceptions import ApiError, NoResponseError, RequestFailedError
from core.trans.interface import CredentialField, EngineAttributes, TransInterface
from models.translation_models import BatchTranslationOutput, TranslationOutput, TranslatorType
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable, Sequence

    from core.trans.languages import Language
    from handlers.async_comm import HttpClient, HttpResponse

__all__: list[str] = ["BaiduTranslation", "baidu_sign", "explain_error_code"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

BAIDU_API_URL: Final[str] = "https://fanyi-api.baidu.com/api/trans/vip/translate"
BAIDU_MAX_QUERY_BYTES: Final[int] = 6000
BAIDU_SUCCESS_CODE: Final[str] = "52000"

# https://fanyi-api.baidu.com/doc/21
BAIDU_ERROR_CODES: Final[dict[str, str]] = {
    "52001": "Request timed out. Retry the request.",
    "52002": "System error. Retry the request.",
    "52003": "Unauthorized user. Check that the appid is correct and the service is enabled.",
    "54000": "A required parameter is empty. Check that all parameters are sent.",
    "54001": "Signature error. Check the signature generation method.",
    "54003": "Access frequency limited. Lower the call frequency or upgrade the account.",
    "54004": "Insufficient account balance. Top up in the management console.",
    "54005": "Long queries are sent too frequently. Slow down and retry after 3 seconds.",
    "58000": "Client IP is not allowed. Check the IP address registered for the account.",
    "58001": "Target language direction is not supported.",
    "58002": "The service is currently offline. Enable it in the management console.",
    "58003": "This IP has used several APPIDs today and is blocked until tomorrow.",
    "90107": "Authentication has not passed or has expired.",
    "20003": "The request text was rejected by content review.",
}


def baidu_sign(app_id: str, query: str, salt: str, key: str) -> str:
    """Compute the request signature: lowercase hex MD5 of appid + q + salt + key (UTF-8)."""
    return hashlib.md5(f"{app_id}{query}{salt}{key}".encode()).hexdigest()  # noqa: S324


def explain_error_code(code: str) -> str:
    return BAIDU_ERROR_CODES.get(code, "Unknown error")


def _random_salt() -> str:
    return str(random.randint(32768, 65536))  # noqa: S311


class BaiduTranslation(TransInterface):
    CREDENTIAL_FIELDS: ClassVar[tuple[CredentialField, ...]] = (
        CredentialField(name="app_id", env_var="BAIDU_APP_ID"),
        CredentialField(name="key", env_var="BAIDU_KEY"),
    )
    RATE_LIMIT_CODES: ClassVar[frozenset[str]] = frozenset({"54003", "54005"})

    _ATTRIBUTES: ClassVar[EngineAttributes] = EngineAttributes(
        name="baidu",
        max_query_bytes=BAIDU_MAX_QUERY_BYTES,
        batch_strategy="multi_segment",
    )

    def __init__(
        self,
        *,
        app_id: str,
        key: str,
        http: HttpClient | None = None,
        salt_factory: Callable[[], str] = _random_salt,
        url: str = BAIDU_API_URL,
    ) -> None:
        super().__init__(http=http)
        self._app_id: str = app_id
        self._key: str = key
        self._salt_factory: Callable[[], str] = salt_factory
        self.url: str = url

    @staticmethod
    def fetch_engine_name() -> str:
        return "baidu"

    @property
    def engine_attributes(self) -> EngineAttributes:
        return self._ATTRIBUTES

    @property
    def translator_type(self) -> TranslatorType:
        return TranslatorType.BAIDU

    def build_form(self, query: str, src_code: str, tgt_code: str, salt: str) -> dict[str, str]:
        """Build the signed form fields for one request."""
        return {
            "q": query,
            "from": src_code,
            "to": tgt_code,
            "appid": self._app_id,
            "salt": salt,
            "sign": baidu_sign(self._app_id, query, salt, self._key),
        }

    async def translate(self, query: str, source: Language | None, target: Language) -> TranslationOutput:
        """Translate one text. Multi-line input yields the translated lines joined with newlines."""
        segments, lang = await self._request(query, source, target)
        return TranslationOutput(text="\n".join(segments), lang=lang)

    async def translate_batch(
        self, queries: Sequence[str], source: Language | None, target: Language
    ) -> BatchTranslationOutput:
        """Translate several texts as newline-joined requests.

        Baidu returns one ``trans_result`` entry per input line, so queries that themselves contain
        newlines cannot be told apart in the response; such batches are fanned out instead.
        Batches larger than the 6000-byte limit are split into consecutive groups that each fit,
        sent one after another; if any group fails the whole batch fails.
        """
        if not queries:
            return BatchTranslationOutput(texts=(), lang=target)
        if any("\n" in query for query in queries):
            logger.debug("Multi-line query in batch; sending one request per query")
            return await self._fan_out(queries, source, target)

        groups: list[list[str]] = self._pack_segments(queries)
        if len(groups) > 1:
            logger.debug("Batch of %d queries split into %d requests", len(queries), len(groups))

        texts: list[str] = []
        lang: Language = target
        for group in groups:
            segments, lang = await self._request("\n".join(group), source, target)
            texts.extend(self._expect_segments(segments, len(group)))
        return BatchTranslationOutput(texts=tuple(texts), lang=lang)

    async def _request(self, query: str, source: Language | None, target: Language) -> tuple[list[str], Language]:
        src_code: str = self._resolve_source(source)
        tgt_code: str = self._resolve_target(target)
        self._check_length(query)

        form: dict[str, str] = self.build_form(query, src_code, tgt_code, self._salt_factory())
        logger.debug("'from': '%s', 'to': '%s', 'length': %d", src_code, tgt_code, len(query))
        resp: HttpResponse = await self._send("POST", self.url, data=form)
        segments, lang = self._parse_response(resp)
        logger.info("translation completed (%s > %s)", src_code, tgt_code)
        return segments, lang

    def _parse_response(self, resp: HttpResponse) -> tuple[list[str], Language]:
        if not resp.ok:
            raise RequestFailedError(resp.status, provider=self.engine_name)

        payload: Any = self._decode_json(resp)
        if not isinstance(payload, dict):
            msg = "Unexpected Baidu response format"
            raise NoResponseError(msg, provider=self.engine_name)

        code: Any = payload.get("error_code")
        if code is not None and str(code) != BAIDU_SUCCESS_CODE:
            code = str(code)
            logger.debug("Baidu error '%s': %s", code, payload.get("error_msg"))
            raise ApiError(self.engine_name, code, explain_error_code(code))

        results: Any = payload.get("trans_result")
        to_code: Any = payload.get("to")
        if not isinstance(results, list) or not results or not isinstance(to_code, str):
            msg = "Baidu returned no translation result"
            raise NoResponseError(msg, provider=self.engine_name)

        try:
            segments: list[str] = [str(item["dst"]) for item in results]
        except (KeyError, TypeError) as err:
            msg = "Baidu translation result is missing 'dst'"
            raise NoResponseError(msg, provider=self.engine_name) from err

        return segments, self._to_language(to_code)
