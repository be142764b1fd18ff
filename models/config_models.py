"""Configuration data models for FusionTranslator.

Each dataclass mirrors one section of the INI file. Field defaults double as type hints for the
loader, which coerces the raw INI strings to the type of the default value.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = [
    "Config",
    "General",
    "Http",
    "Translation",
]


@dataclass
class General:
    DEBUG: bool = False
    LOG_FILE: str = ""
    SCRIPT_NAME: str = ""


@dataclass
class Http:
    TIMEOUT: float = 10.0
    PROXY: str = ""


@dataclass
class Translation:
    ENGINE: str = "mymemory"
    SOURCE_LANGUAGE: str = ""  # empty means auto-detect
    TARGET_LANGUAGE: str = "CHINESE_SIMPLIFIED"


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    HTTP: Http = field(default_factory=Http)
    TRANSLATION: Translation = field(default_factory=Translation)
