"""Translation engines, language tables and the engine factory.

This package provides a unified asynchronous interface over several machine-translation
HTTP APIs, with per-provider language code mapping and a single error taxonomy.
"""

from core.trans.exceptions import (
    ApiError,
    CouldNotMapLanguageError,
    MissingCredentialError,
    NoLanguageError,
    NoResponseError,
    RequestFailedError,
    RequestTooLongError,
    TranslateExceptionError,
    TranslatorConfigError,
    TransportFailureError,
    UnknownLanguageError,
    UnknownTranslatorError,
)
from core.trans.factory import TranslatorFactory
from core.trans.interface import CredentialField, EngineAttributes, TransInterface
from core.trans.languages import Language, from_provider_code, supported_languages, to_provider_code

__all__: list[str] = [
    "ApiError",
    "CouldNotMapLanguageError",
    "CredentialField",
    "EngineAttributes",
    "Language",
    "MissingCredentialError",
    "NoLanguageError",
    "NoResponseError",
    "RequestFailedError",
    "RequestTooLongError",
    "TransInterface",
    "TranslateExceptionError",
    "TranslatorConfigError",
    "TranslatorFactory",
    "TransportFailureError",
    "UnknownLanguageError",
    "UnknownTranslatorError",
    "from_provider_code",
    "supported_languages",
    "to_provider_code",
]
