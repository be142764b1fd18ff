"""Core components for FusionTranslator.

This package contains the translation engines, the language tables and the engine factory.
"""

from core.version import VERSION

__all__: list[str] = ["VERSION"]
