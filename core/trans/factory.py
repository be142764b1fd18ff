"""Builds translation engines from credentials, the environment or a loaded configuration.

The factory is the only place credentials are validated. Each engine declares what it accepts in
``CREDENTIAL_FIELDS``; required fields must be present and non-blank, optional ones fall back to their
defaults. No network I/O happens here, since the HTTP session is created on the first request.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import core.trans.engines  # noqa: F401  # registers the engines
from core.trans.exceptions import MissingCredentialError, UnknownTranslatorError
from core.trans.interface import TransInterface
from handlers.async_comm import AsyncHttp
from models.translation_models import TranslatorType
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping

    from handlers.async_comm import HttpClient
    from models.config_models import Config

__all__: list[str] = ["TranslatorFactory"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class TranslatorFactory:
    """Creates TransInterface instances for a given TranslatorType."""

    @staticmethod
    def resolve_type(translator_type: TranslatorType | str) -> TranslatorType:
        """Normalize a provider selector.

        Raises:
            UnknownTranslatorError: If a string does not name a known provider.
        """
        if isinstance(translator_type, TranslatorType):
            return translator_type
        if isinstance(translator_type, str):
            resolved: TranslatorType | None = TranslatorType.parse(translator_type)
            if resolved is not None:
                return resolved
        raise UnknownTranslatorError(str(translator_type))

    @staticmethod
    def engine_class(translator_type: TranslatorType | str) -> type[TransInterface]:
        resolved: TranslatorType = TranslatorFactory.resolve_type(translator_type)
        try:
            return TransInterface.registered[resolved.as_str()]
        except KeyError:
            raise UnknownTranslatorError(resolved.as_str()) from None

    @classmethod
    def create_from_credentials(
        cls,
        translator_type: TranslatorType | str,
        credentials: Mapping[str, str],
        *,
        http: HttpClient | None = None,
    ) -> TransInterface:
        """Create an engine from an explicit credential mapping.

        Args:
            translator_type (TranslatorType | str): Provider to build.
            credentials (Mapping[str, str]): Values keyed by credential field name (e.g. "app_id").
            http (HttpClient | None): Shared HTTP client. When omitted, the engine owns its own.

        Returns:
            TransInterface: Ready-to-use engine.

        Raises:
            UnknownTranslatorError: If the provider is not known.
            MissingCredentialError: If a required credential is absent or blank.
        """
        engine_cls: type[TransInterface] = cls.engine_class(translator_type)
        kwargs: dict[str, str] = {}
        for cred in engine_cls.CREDENTIAL_FIELDS:
            value: str | None = credentials.get(cred.name)
            if value is None or not value.strip():
                if cred.required:
                    raise MissingCredentialError(engine_cls.fetch_engine_name(), cred.name, cred.env_var)
                value = cred.default
            kwargs[cred.name] = value

        logger.debug("Creating '%s' engine", engine_cls.fetch_engine_name())
        return engine_cls(http=http, **kwargs)

    @classmethod
    def create_from_environment(
        cls,
        translator_type: TranslatorType | str,
        *,
        environ: Mapping[str, str] | None = None,
        http: HttpClient | None = None,
    ) -> TransInterface:
        """Create an engine reading each credential from its environment variable.

        Args:
            environ (Mapping[str, str] | None): Environment to read. Defaults to ``os.environ``.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        engine_cls: type[TransInterface] = cls.engine_class(translator_type)
        credentials: dict[str, str] = {
            cred.name: env[cred.env_var] for cred in engine_cls.CREDENTIAL_FIELDS if cred.env_var in env
        }
        return cls.create_from_credentials(translator_type, credentials, http=http)

    @classmethod
    def create_from_config(
        cls,
        config: Config,
        *,
        environ: Mapping[str, str] | None = None,
        http: HttpClient | None = None,
    ) -> TransInterface:
        """Create the engine named in ``config.TRANSLATION.ENGINE``.

        Unless an HTTP client is given, one is built from the ``[HTTP]`` timeout and proxy settings and
        handed to the engine, which then owns it.
        """
        if http is not None:
            return cls.create_from_environment(config.TRANSLATION.ENGINE, environ=environ, http=http)

        engine: TransInterface = cls.create_from_environment(
            config.TRANSLATION.ENGINE,
            environ=environ,
            http=AsyncHttp(total_timeout=config.HTTP.TIMEOUT, proxy=config.HTTP.PROXY or None),
        )
        engine.own_http()
        return engine
