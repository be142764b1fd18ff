from __future__ import annotations

from configparser import ConfigParser
from dataclasses import Field, fields
from textwrap import dedent
from typing import TYPE_CHECKING, Any

import pytest

from config.loader import (
    ConfigFileNotFoundError,
    ConfigFormatError,
    ConfigLoader,
    ConfigTypeError,
    ConfigValueError,
    _ConfigFormatter,
)
from core.trans.languages import Language
from models.config_models import Config

if TYPE_CHECKING:
    from pathlib import Path


def _write_ini(tmp_path: Path, content: str) -> Path:
    ini_path: Path = tmp_path / "fusion_translate.ini"
    ini_path.write_text(dedent(content), encoding="utf-8")
    return ini_path


def test_config_loader_raises_for_missing_file(tmp_path: Path) -> None:
    ini_path: Path = tmp_path / "missing.ini"
    with pytest.raises(ConfigFileNotFoundError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_defaults_without_file() -> None:
    loader = ConfigLoader(config_filename=None, script_name="test")

    assert loader.config.TRANSLATION.ENGINE == "mymemory"
    assert loader.source_language is None
    assert loader.target_language is Language.CHINESE_SIMPLIFIED
    assert loader.config.HTTP.TIMEOUT == 10.0


def test_values_are_coerced(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [GENERAL]
        DEBUG = yes
        LOG_FILE = "fusion.log"

        [HTTP]
        TIMEOUT = 2.5
        PROXY = http://127.0.0.1:8080

        [TRANSLATION]
        ENGINE = 彩云
        SOURCE_LANGUAGE = en
        TARGET_LANGUAGE = 'JAPANESE'
        """,
    )

    loader = ConfigLoader(config_filename=str(ini_path), script_name="test")

    assert loader.config.GENERAL.DEBUG is True
    assert loader.config.GENERAL.LOG_FILE == "fusion.log"
    assert loader.config.HTTP.TIMEOUT == 2.5
    assert loader.config.HTTP.PROXY == "http://127.0.0.1:8080"
    assert loader.config.TRANSLATION.ENGINE == "caiyun"
    assert loader.source_language is Language.ENGLISH
    assert loader.target_language is Language.JAPANESE


def test_command_line_overrides_win(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(
        tmp_path,
        """
        [TRANSLATION]
        ENGINE = baidu
        TARGET_LANGUAGE = ENGLISH
        """,
    )

    loader = ConfigLoader(
        config_filename=str(ini_path),
        script_name="test",
        engine="youdao",
        source="FRENCH",
        target="GERMAN",
        debug=True,
    )

    assert loader.config.TRANSLATION.ENGINE == "youdao"
    assert loader.source_language is Language.FRENCH
    assert loader.target_language is Language.GERMAN
    assert loader.config.GENERAL.DEBUG is True


@pytest.mark.parametrize(
    ("section", "content"),
    [
        ("engine", "[TRANSLATION]\nENGINE = google\n"),
        ("source", "[TRANSLATION]\nSOURCE_LANGUAGE = elvish\n"),
        ("target", "[TRANSLATION]\nTARGET_LANGUAGE = elvish\n"),
        ("auto target", "[TRANSLATION]\nTARGET_LANGUAGE = AUTO\n"),
        ("timeout", "[HTTP]\nTIMEOUT = 0\n"),
        ("not a number", "[HTTP]\nTIMEOUT = soon\n"),
    ],
)
def test_invalid_values_raise(tmp_path: Path, section: str, content: str) -> None:
    _ = section
    ini_path: Path = _write_ini(tmp_path, content)

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_invalid_override_raises() -> None:
    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=None, script_name="test", target="auto")


def test_malformed_file_raises_format_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(tmp_path, "ENGINE = baidu\n")

    with pytest.raises(ConfigFormatError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_invalid_boolean_is_value_error(tmp_path: Path) -> None:
    ini_path: Path = _write_ini(tmp_path, "[GENERAL]\nDEBUG = maybe\n")

    with pytest.raises(ConfigValueError):
        ConfigLoader(config_filename=str(ini_path), script_name="test")


def test_config_errors_share_a_base() -> None:
    assert issubclass(ConfigValueError, ConfigFormatError)
    assert issubclass(ConfigTypeError, ConfigFormatError)


def test_formatter_rejects_unsupported_field_type() -> None:
    config = Config()
    config.HTTP.TIMEOUT = 3  # type: ignore[assignment]
    parser = ConfigParser()
    parser.read_string("[HTTP]\nTIMEOUT = 3\n")
    section: Field[Any] = next(f for f in fields(config) if f.name == "HTTP")
    key: Field[Any] = next(f for f in fields(config.HTTP) if f.name == "TIMEOUT")

    with pytest.raises(ConfigTypeError, match="Unsupported type 'int'"):
        _ConfigFormatter(config, parser).apply_format(section, key)
