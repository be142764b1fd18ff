"""MyMemory translation memory engine.

Anonymous use is allowed; an optional contact email (sent as ``de``) raises the daily quota.
MyMemory reports errors with an HTTP 200 and a ``responseStatus`` that may be an int or a string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Final

from core.trans.exceptions import ApiError, NoResponseError, RequestFailedError
from core.trans.interface import CredentialField, EngineAttributes, TransInterface
from models.translation_models import BatchTranslationOutput, TranslationOutput, TranslatorType
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from core.trans.languages import Language
    from handlers.async_comm import HttpClient, HttpResponse

__all__: list[str] = ["MyMemoryTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

MYMEMORY_API_URL: Final[str] = "https://api.mymemory.translated.net/get"
MYMEMORY_REFERER: Final[str] = "https://mymemory.translated.net"
MYMEMORY_MAX_QUERY_BYTES: Final[int] = 500


class MyMemoryTranslation(TransInterface):
    CREDENTIAL_FIELDS: ClassVar[tuple[CredentialField, ...]] = (
        CredentialField(name="email", env_var="MYMEMORY_EMAIL", required=False),
    )
    RATE_LIMIT_CODES: ClassVar[frozenset[str]] = frozenset({"429"})

    _ATTRIBUTES: ClassVar[EngineAttributes] = EngineAttributes(
        name="mymemory",
        max_query_bytes=MYMEMORY_MAX_QUERY_BYTES,
        batch_strategy="fan_out",
    )

    def __init__(self, *, email: str = "", http: HttpClient | None = None, url: str = MYMEMORY_API_URL) -> None:
        super().__init__(http=http)
        self.email: str = email.strip()
        self.url: str = url

    @staticmethod
    def fetch_engine_name() -> str:
        return "mymemory"

    @property
    def engine_attributes(self) -> EngineAttributes:
        return self._ATTRIBUTES

    @property
    def translator_type(self) -> TranslatorType:
        return TranslatorType.MYMEMORY

    def build_params(self, query: str, src_code: str, tgt_code: str) -> dict[str, str]:
        params: dict[str, str] = {"q": query, "langpair": f"{src_code}|{tgt_code}"}
        if self.email:
            params["de"] = self.email
        return params

    async def translate(self, query: str, source: Language | None, target: Language) -> TranslationOutput:
        src_code: str = self._resolve_source(source)
        tgt_code: str = self._resolve_target(target)
        self._check_length(query)

        params: dict[str, str] = self.build_params(query, src_code, tgt_code)
        logger.debug("'langpair': '%s', 'length': %d", params["langpair"], len(query))
        resp: HttpResponse = await self._send("GET", self.url, params=params, headers={"Referer": MYMEMORY_REFERER})
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
            msg = "Unexpected MyMemory response format"
            raise NoResponseError(msg, provider=self.engine_name)

        status: Any = payload.get("responseStatus", 200)
        if str(status) != "200":
            details: Any = payload.get("responseDetails")
            raise ApiError(self.engine_name, str(status), str(details or "MyMemory rejected the request"))

        data: Any = payload.get("responseData")
        text: Any = data.get("translatedText") if isinstance(data, dict) else None
        if text is None:
            msg = "MyMemory returned no translation"
            raise NoResponseError(msg, provider=self.engine_name)
        return str(text)
