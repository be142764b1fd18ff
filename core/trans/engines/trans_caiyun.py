"""Caiyun (LingoCloud) translator API engine.

Authentication is a bare token in the ``x-authorization`` header. The API accepts a list of source
texts natively, so a batch is always a single request. A 200 body without translations is ambiguous:
it is an error when the body carries ``rc``/``message`` information and an empty response otherwise.
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

__all__: list[str] = ["CaiyunTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

CAIYUN_API_URL: Final[str] = "https://api.interpreter.caiyunai.com/v1/translator"
CAIYUN_DEFAULT_REQUEST_ID: Final[str] = "demo"


class CaiyunTranslation(TransInterface):
    CREDENTIAL_FIELDS: ClassVar[tuple[CredentialField, ...]] = (
        CredentialField(name="token", env_var="CAIYUN_TOKEN"),
        CredentialField(
            name="request_id",
            env_var="CAIYUN_REQUEST_ID",
            required=False,
            default=CAIYUN_DEFAULT_REQUEST_ID,
        ),
    )

    _ATTRIBUTES: ClassVar[EngineAttributes] = EngineAttributes(name="caiyun", batch_strategy="multi_segment")

    def __init__(
        self,
        *,
        token: str,
        request_id: str = CAIYUN_DEFAULT_REQUEST_ID,
        http: HttpClient | None = None,
        url: str = CAIYUN_API_URL,
    ) -> None:
        super().__init__(http=http)
        self._token: str = token
        self.request_id: str = request_id
        self.url: str = url

    @staticmethod
    def fetch_engine_name() -> str:
        return "caiyun"

    @property
    def engine_attributes(self) -> EngineAttributes:
        return self._ATTRIBUTES

    @property
    def translator_type(self) -> TranslatorType:
        return TranslatorType.CAIYUN

    def build_body(self, queries: Sequence[str], src_code: str, tgt_code: str, *, detect: bool) -> dict[str, Any]:
        body: dict[str, Any] = {
            "source": list(queries),
            "trans_type": f"{src_code}2{tgt_code}",
            "request_id": self.request_id,
        }
        if detect:
            body["detect"] = True
        return body

    def build_headers(self) -> dict[str, str]:
        return {
            "content-type": "application/json",
            "x-authorization": f"token {self._token}",
        }

    async def translate(self, query: str, source: Language | None, target: Language) -> TranslationOutput:
        batch: BatchTranslationOutput = await self.translate_batch([query], source, target)
        return TranslationOutput(text=batch.texts[0], lang=batch.lang)

    async def translate_batch(
        self, queries: Sequence[str], source: Language | None, target: Language
    ) -> BatchTranslationOutput:
        src_code: str = self._resolve_source(source)
        tgt_code: str = self._resolve_target(target)
        if not queries:
            return BatchTranslationOutput(texts=(), lang=target)

        body: dict[str, Any] = self.build_body(queries, src_code, tgt_code, detect=source is None or source.is_auto)
        logger.debug("'trans_type': '%s', 'count': %d", body["trans_type"], len(queries))
        resp: HttpResponse = await self._send("POST", self.url, json=body, headers=self.build_headers())
        targets: list[str] = self._parse_response(resp)
        logger.info("translation completed (%s)", body["trans_type"])
        return BatchTranslationOutput(texts=self._expect_segments(targets, len(queries)), lang=target)

    def _parse_response(self, resp: HttpResponse) -> list[str]:
        if not resp.ok:
            payload: Any = None
            if resp.body.strip():
                try:
                    payload = resp.json()
                except (ValueError, UnicodeDecodeError):
                    payload = None
            if isinstance(payload, dict) and payload.get("message"):
                raise ApiError(self.engine_name, str(resp.status), str(payload["message"]))
            raise RequestFailedError(resp.status, provider=self.engine_name)

        payload = self._decode_json(resp)
        if not isinstance(payload, dict):
            msg = "Unexpected Caiyun response format"
            raise NoResponseError(msg, provider=self.engine_name)

        targets: Any = payload.get("target")
        if isinstance(targets, list) and targets:
            return [str(text) for text in targets]

        rc: Any = payload.get("rc")
        message: Any = payload.get("message")
        if message or (rc is not None and str(rc) != "0"):
            code: str = str(rc) if rc is not None else "error"
            raise ApiError(self.engine_name, code, str(message or "Caiyun rejected the request"))

        msg = "Caiyun returned no translation"
        raise NoResponseError(msg, provider=self.engine_name)
