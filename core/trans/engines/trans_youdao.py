"""Youdao text translation API engine (signType v3).

The signature is ``sha256(appKey + truncate(q) + salt + curtime + appSecret)``, where ``truncate``
keeps short queries intact and abbreviates long ones to their first ten characters, their length
and their last ten characters. Errors are reported through ``errorCode`` in an HTTP 200 body.
"""

from __future__ import annotations

import hashlib
import time
import uuid
from typing import TYPE_CHECKING, Any, ClassVar, Final

from core.trans.exceptions import ApiError, NoResponseError, RequestFailedError, UnknownLanguageError
from core.trans.interface import CredentialField, EngineAttributes, TransInterface
from models.translation_models import BatchTranslationOutput, TranslationOutput, TranslatorType
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable, Sequence

    from core.trans.languages import Language
    from handlers.async_comm import HttpClient, HttpResponse

__all__: list[str] = ["YoudaoTranslation", "youdao_sign", "youdao_truncate"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

YOUDAO_API_URL: Final[str] = "https://openapi.youdao.com/api"
YOUDAO_SUCCESS_CODE: Final[str] = "0"
_TRUNCATE_THRESHOLD: Final[int] = 20


def youdao_truncate(query: str) -> str:
    """Abbreviate the query the way the v3 signature expects.

    Examples:
        >>> youdao_truncate("hello world")
        'hello world'
        >>> youdao_truncate("this is a long text with many characters")
        'this is a 40characters'
    """
    size: int = len(query)
    if size <= _TRUNCATE_THRESHOLD:
        return query
    return f"{query[:10]}{size}{query[-10:]}"


def youdao_sign(app_key: str, query: str, salt: str, curtime: str, app_secret: str) -> str:
    """Compute the v3 request signature as lowercase hex SHA-256."""
    sign_str: str = f"{app_key}{youdao_truncate(query)}{salt}{curtime}{app_secret}"
    return hashlib.sha256(sign_str.encode("utf-8")).hexdigest()


def _uuid_salt() -> str:
    return str(uuid.uuid4())


def _unix_seconds() -> str:
    return str(int(time.time()))


class YoudaoTranslation(TransInterface):
    CREDENTIAL_FIELDS: ClassVar[tuple[CredentialField, ...]] = (
        CredentialField(name="app_key", env_var="YOUDAO_APP_KEY"),
        CredentialField(name="app_secret", env_var="YOUDAO_APP_SECRET"),
    )
    RATE_LIMIT_CODES: ClassVar[frozenset[str]] = frozenset({"411", "412"})

    _ATTRIBUTES: ClassVar[EngineAttributes] = EngineAttributes(name="youdao", batch_strategy="multi_segment")

    def __init__(
        self,
        *,
        app_key: str,
        app_secret: str,
        http: HttpClient | None = None,
        salt_factory: Callable[[], str] = _uuid_salt,
        clock: Callable[[], str] = _unix_seconds,
        url: str = YOUDAO_API_URL,
    ) -> None:
        super().__init__(http=http)
        self._app_key: str = app_key
        self._app_secret: str = app_secret
        self._salt_factory: Callable[[], str] = salt_factory
        self._clock: Callable[[], str] = clock
        self.url: str = url

    @staticmethod
    def fetch_engine_name() -> str:
        return "youdao"

    @property
    def engine_attributes(self) -> EngineAttributes:
        return self._ATTRIBUTES

    @property
    def translator_type(self) -> TranslatorType:
        return TranslatorType.YOUDAO

    def build_form(self, query: str, src_code: str, tgt_code: str, salt: str, curtime: str) -> dict[str, str]:
        """Build the signed form fields for one request."""
        return {
            "from": src_code,
            "to": tgt_code,
            "signType": "v3",
            "curtime": curtime,
            "appKey": self._app_key,
            "q": query,
            "salt": salt,
            "sign": youdao_sign(self._app_key, query, salt, curtime, self._app_secret),
        }

    async def translate(self, query: str, source: Language | None, target: Language) -> TranslationOutput:
        texts, lang = await self._request(query, source, target)
        return TranslationOutput(text="\n".join(texts), lang=lang)

    async def translate_batch(
        self, queries: Sequence[str], source: Language | None, target: Language
    ) -> BatchTranslationOutput:
        """Translate several texts as one newline-joined query, splitting the result per line."""
        if not queries:
            return BatchTranslationOutput(texts=(), lang=target)
        if any("\n" in query for query in queries):
            logger.debug("Multi-line query in batch; sending one request per query")
            return await self._fan_out(queries, source, target)

        texts, lang = await self._request("\n".join(queries), source, target)
        segments: list[str] = "\n".join(texts).split("\n")
        return BatchTranslationOutput(texts=self._expect_segments(segments, len(queries)), lang=lang)

    async def _request(self, query: str, source: Language | None, target: Language) -> tuple[list[str], Language]:
        src_code: str = self._resolve_source(source)
        tgt_code: str = self._resolve_target(target)

        form: dict[str, str] = self.build_form(query, src_code, tgt_code, self._salt_factory(), self._clock())
        logger.debug("'from': '%s', 'to': '%s', 'length': %d", src_code, tgt_code, len(query))
        resp: HttpResponse = await self._send(
            "POST",
            self.url,
            data=form,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        texts, lang = self._parse_response(resp, target)
        logger.info("translation completed (%s > %s)", src_code, tgt_code)
        return texts, lang

    def _parse_response(self, resp: HttpResponse, target: Language) -> tuple[list[str], Language]:
        if not resp.ok:
            raise RequestFailedError(resp.status, provider=self.engine_name)

        payload: Any = self._decode_json(resp)
        if not isinstance(payload, dict):
            msg = "Unexpected Youdao response format"
            raise NoResponseError(msg, provider=self.engine_name)

        code: str = str(payload.get("errorCode", YOUDAO_SUCCESS_CODE))
        if code != YOUDAO_SUCCESS_CODE:
            raise ApiError(self.engine_name, code, str(payload.get("msg") or "Youdao rejected the request"))

        translation: Any = payload.get("translation")
        if not isinstance(translation, list) or not translation:
            msg = "Youdao returned no translation"
            raise NoResponseError(msg, provider=self.engine_name)

        return [str(text) for text in translation], self._language_from_direction(payload.get("l"), target)

    def _language_from_direction(self, direction: Any, target: Language) -> Language:
        """Read the target language from the ``l`` field ("en2zh-CHS"), falling back to the request."""
        if not isinstance(direction, str) or "2" not in direction:
            return target
        _, _, tgt_code = direction.partition("2")
        try:
            return self._to_language(tgt_code)
        except UnknownLanguageError:
            logger.debug("Unrecognised Youdao direction '%s'", direction)
            raise
