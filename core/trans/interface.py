"""This module defines the abstract base class every translation engine implements.

It includes EngineAttributes describing per-engine behaviour, the CredentialField declarations used
by the factory to validate credentials, and the shared request helpers (language resolution,
length checks, transport error mapping and ordered batch fan-out).
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Literal, TypeAlias

from core.trans.exceptions import (
    ApiError,
    NoLanguageError,
    NoResponseError,
    RequestFailedError,
    RequestTooLongError,
    TransportFailureError,
)
from core.trans.languages import AUTO_CODES, LANGUAGE_TABLES, Language
from handlers.async_comm import AsyncCommError, AsyncCommTimeoutError, AsyncHttp
from models.translation_models import BatchTranslationOutput, TranslationOutput
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping, Sequence

    from handlers.async_comm import HTTPMethod, HttpClient, HttpResponse
    from models.translation_models import TranslatorType

__all__: list[str] = [
    "CredentialField",
    "EngineAttributes",
    "TransInterface",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

BatchStrategy: TypeAlias = Literal["multi_segment", "fan_out"]


@dataclass(frozen=True)
class EngineAttributes:
    """Engine-specific capabilities and behaviour flags.

    Attributes:
        name (str): Distinguished name of the engine.
        max_query_bytes (int | None): Longest accepted query in UTF-8 bytes. None if unlimited.
        batch_strategy (BatchStrategy): "multi_segment" sends a batch as one request,
            "fan_out" sends one request per query.
        requires_source_language (bool): Whether auto-detection is unavailable.
        is_local (bool): Whether translation runs without a remote API.
    """

    name: str
    max_query_bytes: int | None = None
    batch_strategy: BatchStrategy = "fan_out"
    requires_source_language: bool = False
    is_local: bool = False


@dataclass(frozen=True)
class CredentialField:
    """One credential an engine accepts.

    Attributes:
        name (str): Keyword argument of the engine constructor.
        env_var (str): Environment variable the value is read from.
        required (bool): Whether a non-blank value must be supplied.
        default (str): Value used when an optional field is absent.
    """

    name: str
    env_var: str
    required: bool = True
    default: str = ""


class TransInterface(ABC):
    """Abstract base class for translation engines.

    Subclasses register themselves under ``fetch_engine_name()`` when they are defined, declare the
    credentials they need in ``CREDENTIAL_FIELDS``, and implement ``translate`` and
    ``translate_batch``. Instances hold their credentials and an HTTP client handle only, so a
    single instance can serve any number of concurrent calls.

    Attributes:
        registered (ClassVar[dict[str, type[TransInterface]]]): Engine classes keyed by name.
        CREDENTIAL_FIELDS (ClassVar[tuple[CredentialField, ...]]): Credentials accepted by the engine.
        RATE_LIMIT_CODES (ClassVar[frozenset[str]]): Provider error codes that indicate throttling.
    """

    registered: ClassVar[dict[str, type[TransInterface]]] = {}
    CREDENTIAL_FIELDS: ClassVar[tuple[CredentialField, ...]] = ()
    RATE_LIMIT_CODES: ClassVar[frozenset[str]] = frozenset()

    def __init_subclass__(cls, **kwargs) -> None:
        """Register the subclass under its distinguished name.

        Raises:
            ValueError: If another engine is already registered under the same name.
        """
        super().__init_subclass__(**kwargs)
        name: str = cls.fetch_engine_name()
        if not isinstance(name, str) or name == "":
            return  # Engines without a name are usable but not selectable through the factory.

        if name in cls.registered:
            msg: str = f"A translation engine with the name '{name}' is already registered."
            raise ValueError(msg)

        cls.registered[name] = cls

    def __init__(self, *, http: HttpClient | None = None) -> None:
        """Initialize the engine.

        Args:
            http (HttpClient | None): HTTP client to send requests through. When omitted, the engine
                creates and owns an AsyncHttp instance, which ``close()`` shuts down.
        """
        self._owns_http: bool = http is None
        self._http: HttpClient = http if http is not None else AsyncHttp()

    @staticmethod
    @abstractmethod
    def fetch_engine_name() -> str:
        """Fetch the distinguished name of the engine.

        Called during class registration, so it must work before any instance exists.
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def engine_attributes(self) -> EngineAttributes:
        raise NotImplementedError

    @property
    @abstractmethod
    def translator_type(self) -> TranslatorType:
        raise NotImplementedError

    @property
    def engine_name(self) -> str:
        return self.engine_attributes.name

    @property
    def is_local(self) -> bool:
        return self.engine_attributes.is_local

    @abstractmethod
    async def translate(self, query: str, source: Language | None, target: Language) -> TranslationOutput:
        """Translate one text.

        Args:
            query (str): Text to translate.
            source (Language | None): Source language. None or Language.AUTO means auto-detect.
            target (Language): Target language.

        Returns:
            TranslationOutput: Translated text and its language.

        Raises:
            TranslateExceptionError: One of the taxonomy errors on any failure.
        """
        raise NotImplementedError

    @abstractmethod
    async def translate_batch(
        self, queries: Sequence[str], source: Language | None, target: Language
    ) -> BatchTranslationOutput:
        """Translate several texts, returning one result per input in input order.

        Either every query is translated or the whole call raises; results are never truncated.

        Raises:
            TranslateExceptionError: One of the taxonomy errors on any failure.
        """
        raise NotImplementedError

    def is_rate_limit_error(self, err: Exception) -> bool:
        """Check whether an error raised by this engine indicates throttling."""
        if isinstance(err, RequestFailedError):
            return err.status_code == 429
        if isinstance(err, ApiError):
            return err.code in self.RATE_LIMIT_CODES
        return False

    def own_http(self) -> None:
        """Take ownership of an injected HTTP client, so ``close()`` shuts it down."""
        self._owns_http = True

    async def close(self) -> None:
        """Release the HTTP client if the engine created it."""
        if self._owns_http:
            await self._http.close()
        logger.debug("'%s' process termination", self.__class__.__name__)

    def _resolve_source(self, source: Language | None) -> str:
        """Map the source language to a wire code, using the provider's auto-detect convention."""
        if source is None or source.is_auto:
            if self.engine_attributes.requires_source_language:
                msg: str = f"{self.engine_name} requires a source language"
                raise NoLanguageError(msg, provider=self.engine_name)
            return AUTO_CODES[self.translator_type]
        return LANGUAGE_TABLES[self.translator_type].to_code(source)

    def _resolve_target(self, target: Language) -> str:
        # AUTO is never in a table, so it is rejected here as unmappable.
        return LANGUAGE_TABLES[self.translator_type].to_code(target)

    def _to_language(self, code: str) -> Language:
        return LANGUAGE_TABLES[self.translator_type].from_code(code)

    def _check_length(self, query: str) -> None:
        """Fail fast when the query exceeds the provider limit.

        Raises:
            RequestTooLongError: If the UTF-8 length of the query exceeds ``max_query_bytes``.
        """
        limit: int | None = self.engine_attributes.max_query_bytes
        if limit is None:
            return
        actual: int = len(query.encode("utf-8"))
        if actual > limit:
            raise RequestTooLongError(actual, limit, provider=self.engine_name)

    async def _send(
        self,
        method: HTTPMethod,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        data: Mapping[str, str] | None = None,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """Send a request, converting transport failures into TransportFailureError."""
        try:
            return await self._http.request(method, url, params=params, data=data, json=json, headers=headers)
        except AsyncCommTimeoutError as err:
            msg: str = f"Request to {self.engine_name} timed out"
            raise TransportFailureError(msg, provider=self.engine_name) from err
        except AsyncCommError as err:
            msg = f"Failed to reach {self.engine_name}: {err}"
            raise TransportFailureError(msg, provider=self.engine_name) from err

    def _decode_json(self, resp: HttpResponse) -> Any:
        """Decode a response body, treating empty or malformed bodies as NoResponseError."""
        if not resp.body.strip():
            msg = f"{self.engine_name} returned an empty body"
            raise NoResponseError(msg, provider=self.engine_name)
        try:
            return resp.json()
        except (ValueError, UnicodeDecodeError) as err:
            msg = f"{self.engine_name} returned a body that is not JSON"
            raise NoResponseError(msg, provider=self.engine_name) from err

    def _expect_segments(self, texts: Sequence[str], expected: int) -> tuple[str, ...]:
        """Ensure a multi-segment response carries exactly one text per query."""
        if len(texts) != expected:
            msg: str = f"{self.engine_name} returned {len(texts)} segments for {expected} queries"
            raise NoResponseError(msg, provider=self.engine_name)
        return tuple(texts)

    def _pack_segments(self, queries: Sequence[str], separator: str = "\n") -> list[list[str]]:
        """Split queries into consecutive groups whose joined size stays within ``max_query_bytes``.

        Every query is length-checked on its own first, so a single oversized query raises before any
        request goes out. Without a limit the whole batch is one group.

        Raises:
            RequestTooLongError: If one query alone exceeds the provider limit.
        """
        for query in queries:
            self._check_length(query)
        limit: int | None = self.engine_attributes.max_query_bytes
        if limit is None:
            return [list(queries)] if queries else []

        sep_size: int = len(separator.encode("utf-8"))
        groups: list[list[str]] = []
        current: list[str] = []
        current_size: int = 0
        for query in queries:
            size: int = len(query.encode("utf-8"))
            if current and current_size + sep_size + size > limit:
                groups.append(current)
                current, current_size = [], 0
            current_size += size + (sep_size if current else 0)
            current.append(query)
        if current:
            groups.append(current)
        return groups

    async def _fan_out(
        self, queries: Sequence[str], source: Language | None, target: Language
    ) -> BatchTranslationOutput:
        """Translate each query with its own request, concurrently, keeping input order.

        All queries are length-checked before the first request goes out. If any request fails, the
        remaining ones are cancelled and the first error is raised.
        """
        for query in queries:
            self._check_length(query)
        if not queries:
            return BatchTranslationOutput(texts=(), lang=target)

        tasks: list[asyncio.Task[TranslationOutput]] = [
            asyncio.ensure_future(self.translate(query, source, target)) for query in queries
        ]
        try:
            results: list[TranslationOutput] = await asyncio.gather(*tasks)
        except Exception:
            for task in tasks:
                task.cancel()
            raise

        return BatchTranslationOutput(
            texts=tuple(result.text for result in results),
            lang=results[0].lang if results else target,
        )
