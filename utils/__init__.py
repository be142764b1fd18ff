"""Utility modules for FusionTranslator.

This package provides the logging helpers shared by every module.
"""

from utils.logger_utils import LoggerUtils

__all__: list[str] = ["LoggerUtils"]
