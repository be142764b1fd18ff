"""Data models for FusionTranslator.

This package contains dataclass definitions for configuration and for translation
requests and results.
"""

from __future__ import annotations

from models.config_models import Config
from models.translation_models import BatchTranslationOutput, TranslationOutput, TranslationRequest, TranslatorType

__all__: list[str] = [
    "BatchTranslationOutput",
    "Config",
    "TranslationOutput",
    "TranslationRequest",
    "TranslatorType",
]
