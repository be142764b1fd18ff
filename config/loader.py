"""Configuration file loader and validator.

Handles reading, formatting, and validating settings from the INI configuration file.
Raises exceptions for any issues encountered during loading.
"""

from __future__ import annotations

import configparser
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

from core.trans.languages import Language
from models.config_models import Config
from models.translation_models import TranslatorType
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable
    from dataclasses import Field as DataclassField
else:
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration file."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration file contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration file contains an invalid type."""


class ConfigLoader:
    """Handles loading and validation of configuration settings.

    This class reads the configuration file, applies formatting rules, applies command-line overrides
    and validates the result. Credentials are never part of the file.

    Args:
        config_filename (str | None): INI file name to load. None uses the built-in defaults.
        script_name (str): Executing script name, used in error messaging.
        engine (str | None): Optional override for TRANSLATION.ENGINE.
        source (str | None): Optional override for TRANSLATION.SOURCE_LANGUAGE.
        target (str | None): Optional override for TRANSLATION.TARGET_LANGUAGE.
        debug (bool): Force GENERAL.DEBUG on.

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(
        self,
        *,
        config_filename: str | None,
        script_name: str,
        **args,
    ) -> None:
        self.config = Config()
        self.config.GENERAL.SCRIPT_NAME = script_name

        if config_filename is not None:
            parser: ConfigParser = self._read(config_filename, script_name)
            self._convert_settings(parser)

        # Apply command-line argument overrides
        if args.get("engine") is not None:
            self.config.TRANSLATION.ENGINE = args["engine"]
        if args.get("source") is not None:
            self.config.TRANSLATION.SOURCE_LANGUAGE = args["source"]
        if args.get("target") is not None:
            self.config.TRANSLATION.TARGET_LANGUAGE = args["target"]
        if args.get("debug", False):
            self.config.GENERAL.DEBUG = True
        self._validate_settings()

    @staticmethod
    def _read(config_filename: str, script_name: str) -> ConfigParser:
        config_path = Path(config_filename)
        msg: str
        if not config_path.exists():
            msg = (
                f"Configuration file '{config_filename}' not found. "
                f"Please create '{config_filename}' in the same directory as '{script_name}'."
            )
            raise ConfigFileNotFoundError(msg)

        parser: ConfigParser = ConfigParser()

        try:
            parser.read(config_filename, encoding="utf-8")
        except configparser.Error as err:
            msg = f"Failed to parse configuration file '{config_filename}': {err}"
            raise ConfigFormatError(msg) from None
        return parser

    def _convert_settings(self, parser: ConfigParser) -> None:
        """Convert configuration settings from the parser to the Config object.

        Args:
            parser (ConfigParser): Parsed INI data.

        Raises:
            ConfigFormatError: If a value cannot be parsed or coerced to the expected type.
        """
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue
            self._convert_section_field(parser, formatter, section)

    def _convert_section_field(
        self, parser: ConfigParser, formatter: _ConfigFormatter, section: DataclassField[Any]
    ) -> None:
        for key in fields(getattr(self.config, section.name)):
            if key.name == "SCRIPT_NAME":
                continue
            if not parser.has_option(section.name, key.name):
                logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                continue

            formatted_value = formatter.apply_format(section, key)
            setattr(getattr(self.config, section.name), key.name, formatted_value)

    def _validate_settings(self) -> None:
        """Validate the translation engine, languages and HTTP settings.

        Raises:
            ConfigValueError: If validation fails for any setting.
        """
        self._validate_engine()
        self._validate_languages()
        if self.config.HTTP.TIMEOUT <= 0:
            msg: str = f"'HTTP.TIMEOUT' must be positive: {self.config.HTTP.TIMEOUT}"
            raise ConfigValueError(msg)

    def _validate_engine(self) -> None:
        value: str = self.config.TRANSLATION.ENGINE
        translator_type: TranslatorType | None = TranslatorType.parse(value)
        if translator_type is None:
            allowed: str = ", ".join(t.as_str() for t in TranslatorType)
            msg: str = f"Unknown value '{value}' is set for 'TRANSLATION.ENGINE' (allowed: {allowed})"
            raise ConfigValueError(msg)
        if translator_type.as_str() != value:
            logger.info("'TRANSLATION.ENGINE' is set to '%s', which means '%s'.", value, translator_type.as_str())
        self.config.TRANSLATION.ENGINE = translator_type.as_str()

    def _validate_languages(self) -> None:
        source: str = self.config.TRANSLATION.SOURCE_LANGUAGE
        if source.strip() and Language.parse(source) is None:
            msg: str = f"Unknown language '{source}' is set for 'TRANSLATION.SOURCE_LANGUAGE'"
            raise ConfigValueError(msg)

        target: str = self.config.TRANSLATION.TARGET_LANGUAGE
        target_lang: Language | None = Language.parse(target)
        if target_lang is None:
            msg = f"Unknown language '{target}' is set for 'TRANSLATION.TARGET_LANGUAGE'"
            raise ConfigValueError(msg)
        if target_lang.is_auto:
            msg = "'TRANSLATION.TARGET_LANGUAGE' cannot be auto-detect"
            raise ConfigValueError(msg)

    @property
    def source_language(self) -> Language | None:
        """Configured source language, or None for auto-detect."""
        lang: Language | None = Language.parse(self.config.TRANSLATION.SOURCE_LANGUAGE)
        return None if lang is None or lang.is_auto else lang

    @property
    def target_language(self) -> Language:
        lang: Language | None = Language.parse(self.config.TRANSLATION.TARGET_LANGUAGE)
        if lang is None:
            msg: str = f"Unknown target language '{self.config.TRANSLATION.TARGET_LANGUAGE}'"
            raise ConfigValueError(msg)
        return lang


class _ConfigFormatter:
    """Converts INI string values to the bool, float or str type of each Config field."""

    def __init__(self, config: Config, parser: ConfigParser) -> None:
        self.config: Config = config
        self.parser: ConfigParser = parser

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> bool | float | str:
        """Convert INI value to the expected Python type based on the Config field type.

        Args:
            section (DataclassField[Any]): Configuration section field containing the key.
            key (DataclassField[Any]): Target field within the section.

        Returns:
            bool | float | str: Parsed value coerced to the type declared in the config dataclass.

        Raises:
            ConfigValueError: If a value cannot be coerced to the expected type.
            ConfigTypeError: If the field has a type the INI file cannot express.
        """
        formatters: dict[
            type[bool | float | str],
            Callable[[DataclassField[Any], DataclassField[Any]], bool | float | str],
        ] = {
            bool: self.parse_as_boolean,
            float: self.parse_as_float,
            str: self.parse_as_string,
        }

        field_type: type = type(getattr(getattr(self.config, section.name), key.name))
        formatter: Callable[[DataclassField[Any], DataclassField[Any]], bool | float | str] | None = (
            formatters.get(field_type)
        )
        if formatter is None:
            msg: str = f"Unsupported type '{field_type.__name__}' for {section.name}.{key.name}"
            raise ConfigTypeError(msg)
        try:
            return formatter(section, key)
        except ValueError as err:
            msg = f"Invalid value for {section.name}.{key.name}: {err}"
            raise ConfigValueError(msg) from err

    def parse_as_float(self, section: DataclassField[Any], key: DataclassField[Any]) -> float:
        """Convert INI string to float."""
        value: str = self.parser.get(section.name, key.name)
        for char in ("'", '"', "%"):
            value = value.removeprefix(char).removesuffix(char)
        return float(value)

    def parse_as_boolean(self, section: DataclassField[Any], key: DataclassField[Any]) -> bool:
        """Convert INI string to boolean."""
        return self.parser.getboolean(section.name, key.name)

    def parse_as_string(self, section: DataclassField[Any], key: DataclassField[Any]) -> str:
        """Return the INI string, dropping one pair of surrounding quotes if present."""
        value: str = self.parser.get(section.name, key.name).strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            return value[1:-1]
        return value
