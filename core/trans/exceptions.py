"""Error taxonomy shared by all translation engines.

Every runtime failure of an engine surfaces as exactly one subclass of ``TranslateExceptionError``.
Problems detected while building an engine (missing credentials, unknown provider names) derive from
``TranslatorConfigError`` instead, so callers can tell setup problems from service failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.trans.languages import Language

__all__: list[str] = [
    "ApiError",
    "CouldNotMapLanguageError",
    "MissingCredentialError",
    "NoLanguageError",
    "NoResponseError",
    "RequestFailedError",
    "RequestTooLongError",
    "TranslateExceptionError",
    "TranslatorConfigError",
    "TransportFailureError",
    "UnknownLanguageError",
    "UnknownTranslatorError",
]


class TranslateExceptionError(Exception):
    """An error occurred during the translation process."""

    def __init__(self, message: str, *, provider: str | None = None) -> None:
        super().__init__(message)
        self.provider: str | None = provider


class TransportFailureError(TranslateExceptionError):
    """The HTTP call could not complete (network, DNS, TLS or timeout)."""


class ApiError(TranslateExceptionError):
    """The provider answered with a well-formed error payload.

    Attributes:
        code (str): Provider-specific error code.
        message (str): Provider message or its explanation.
    """

    def __init__(self, provider: str, code: str, message: str) -> None:
        super().__init__(f"{provider} API error [{code}]: {message}", provider=provider)
        self.code: str = code
        self.message: str = message


class UnknownLanguageError(TranslateExceptionError):
    """The provider returned a language code that is not in its table."""

    def __init__(self, code: str | None, provider: str) -> None:
        super().__init__(f"Unknown language code '{code}' returned by {provider}", provider=provider)
        self.code: str | None = code


class CouldNotMapLanguageError(TranslateExceptionError):
    """The requested language has no code for this provider."""

    def __init__(self, language: Language, provider: str) -> None:
        super().__init__(f"Language '{language.name}' is not supported by {provider}", provider=provider)
        self.language: Language = language


class NoResponseError(TranslateExceptionError):
    """The provider returned an empty or unparseable success body."""


class RequestTooLongError(TranslateExceptionError):
    """The query exceeds the provider's length limit.

    Attributes:
        actual (int): Query length in UTF-8 bytes.
        limit (int): Provider limit in UTF-8 bytes.
    """

    def __init__(self, actual: int, limit: int, *, provider: str | None = None) -> None:
        super().__init__(f"Request was too long ({actual} > {limit} bytes)", provider=provider)
        self.actual: int = actual
        self.limit: int = limit


class RequestFailedError(TranslateExceptionError):
    """The provider answered with a non-2xx status and no structured error body."""

    def __init__(self, status_code: int, *, provider: str | None = None) -> None:
        super().__init__(f"Request failed with status code {status_code}", provider=provider)
        self.status_code: int = status_code


class NoLanguageError(TranslateExceptionError):
    """The provider requires a source language but none was given."""


class TranslatorConfigError(Exception):
    """A translation engine could not be built from the supplied configuration."""


class UnknownTranslatorError(TranslatorConfigError):
    """The requested provider name is not recognised."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown translator type: '{name}'")
        self.name: str = name


class MissingCredentialError(TranslatorConfigError):
    """A required credential is absent or blank."""

    def __init__(self, provider: str, field_name: str, env_var: str) -> None:
        super().__init__(f"{provider}: credential '{field_name}' is missing (environment variable {env_var})")
        self.provider: str = provider
        self.field_name: str = field_name
        self.env_var: str = env_var
