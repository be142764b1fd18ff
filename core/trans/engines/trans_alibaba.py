"""Alibaba web translation engine.

Uses the public endpoint behind translate.alibaba.com, which needs no credentials. Queries longer
than 500 bytes are rejected before any request is sent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Final

from core.trans.exceptions import ApiError, NoResponseError, RequestFailedError
from core.trans.interface import EngineAttributes, TransInterface
from models.translation_models import BatchTranslationOutput, TranslationOutput, TranslatorType
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from core.trans.languages import Language
    from handlers.async_comm import HttpClient, HttpResponse

__all__: list[str] = ["AlibabaTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

ALIBABA_API_URL: Final[str] = "https://translate.alibaba.com/api/translate/text"
ALIBABA_MAX_QUERY_BYTES: Final[int] = 500


class AlibabaTranslation(TransInterface):
    _ATTRIBUTES: ClassVar[EngineAttributes] = EngineAttributes(
        name="alibaba",
        max_query_bytes=ALIBABA_MAX_QUERY_BYTES,
        batch_strategy="fan_out",
    )

    def __init__(self, *, http: HttpClient | None = None, url: str = ALIBABA_API_URL) -> None:
        super().__init__(http=http)
        self.url: str = url

    @staticmethod
    def fetch_engine_name() -> str:
        return "alibaba"

    @property
    def engine_attributes(self) -> EngineAttributes:
        return self._ATTRIBUTES

    @property
    def translator_type(self) -> TranslatorType:
        return TranslatorType.ALIBABA

    async def translate(self, query: str, source: Language | None, target: Language) -> TranslationOutput:
        src_code: str = self._resolve_source(source)
        tgt_code: str = self._resolve_target(target)
        self._check_length(query)

        params: dict[str, str] = {
            "domain": "general",
            "query": query,
            "srcLang": src_code,
            "tgtLang": tgt_code,
        }
        logger.debug("'srcLang': '%s', 'tgtLang': '%s', 'length': %d", src_code, tgt_code, len(query))
        resp: HttpResponse = await self._send("GET", self.url, params=params)
        text: str = self._parse_response(resp)
        logger.info("translation completed (%s > %s)", src_code, tgt_code)
        return TranslationOutput(text=text, lang=target)

    async def translate_batch(
        self, queries: Sequence[str], source: Language | None, target: Language
    ) -> BatchTranslationOutput:
        return await self._fan_out(queries, source, target)

    def _parse_response(self, resp: HttpResponse) -> str:
        if not resp.ok:
            raise RequestFailedError(resp.status, provider=self.engine_name)

        payload: Any = self._decode_json(resp)
        if not isinstance(payload, dict):
            msg = "Unexpected Alibaba response format"
            raise NoResponseError(msg, provider=self.engine_name)

        if payload.get("success") is False and (payload.get("code") or payload.get("message")):
            raise ApiError(
                self.engine_name,
                str(payload.get("code") or "error"),
                str(payload.get("message") or "Alibaba rejected the request"),
            )

        data: Any = payload.get("data")
        text: Any = data.get("translateText") if isinstance(data, dict) else None
        if text is None:
            msg = "Alibaba returned no translation"
            raise NoResponseError(msg, provider=self.engine_name)
        return str(text)
