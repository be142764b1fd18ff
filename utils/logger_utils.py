"""Logging helpers shared by every FusionTranslator module.

Modules obtain their logger through ``LoggerUtils.get_logger(__name__)`` so that all records
land under a single namespace. The front end configures handlers once per process by
instantiating ``LoggerUtils``; library users who never do so get no output at all.
"""

from __future__ import annotations

import logging
import sys
from logging import Formatter, NullHandler, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, ClassVar, Final, Literal, NamedTuple, Self, TextIO, TypeAlias

if TYPE_CHECKING:
    from pathlib import Path

__all__: list[str] = ["LogLevel", "LoggerUtils"]

LevelType: TypeAlias = Literal[
    "NOTSET",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
]

_LOG_FILE_SIZE: Final[int] = 2 * 1024 * 1024  # 2MB
_LOG_BACKUP_COUNT: Final[int] = 2

DEFAULT_LOG_LEVEL: Final[int] = logging.INFO
DEFAULT_NAMESPACE: Final[str] = "FusionTranslator"

logging.getLogger(DEFAULT_NAMESPACE).addHandler(NullHandler())


class LogLevel(NamedTuple):
    """Logging level as both name and numeric value."""

    name: str
    value: int


class LoggerUtils:
    """Process-wide logging configuration.

    The first instantiation attaches a console handler (WARNING and above, message only) and,
    when a file name is given, a rotating file handler that records everything from DEBUG up.
    Later instantiations return the same object and leave the handlers untouched.

    Attributes:
        _LOGGER_NAMESPACE (str): Prefix applied to every logger returned by ``get_logger``.
        _configured (bool): Whether handlers have already been attached.
        _instance (LoggerUtils | None): The singleton instance.
    """

    _LOGGER_NAMESPACE: ClassVar[str] = DEFAULT_NAMESPACE
    _configured: ClassVar[bool] = False
    _instance: ClassVar[Self | None] = None

    def __new__(cls, *args, **kwargs) -> Self:
        _ = args, kwargs
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, filename: str | Path = "", *, use_null_console: bool = False) -> None:
        """Attach handlers to the namespace root logger.

        Args:
            filename (str | Path): Log file path. If empty, no file is written.
            use_null_console (bool): Replace the console handler with a NullHandler.
        """
        if LoggerUtils._configured:
            return

        self.root_logger: logging.Logger = logging.getLogger(self._LOGGER_NAMESPACE)
        self._use_null_console: bool = bool(use_null_console) or sys.stderr is None
        self.root_logger.setLevel(DEFAULT_LOG_LEVEL)

        self._console_logging()
        filename = str(filename)
        if filename.strip():
            self._file_logging(filename)

        LoggerUtils._configured = True

    @classmethod
    def reset(cls) -> None:
        """Detach all handlers and forget the singleton so logging can be configured again."""
        root_logger: logging.Logger = logging.getLogger(cls._LOGGER_NAMESPACE)
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()
        root_logger.addHandler(NullHandler())
        root_logger.setLevel(logging.NOTSET)
        cls._configured = False
        cls._instance = None

    def _console_logging(self) -> None:
        if self._use_null_console:
            if not self._has_handler(NullHandler):
                self.root_logger.addHandler(NullHandler())
            return

        if self._has_handler(StreamHandler):
            self.root_logger.warning("Console logging is already configured.")
            return

        console_handler: StreamHandler[TextIO] = StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(Formatter("%(message)s"))
        self.root_logger.addHandler(console_handler)

    def _file_logging(self, filename: str) -> None:
        """Configure a UTF-8 rotating log file.

        Args:
            filename (str): Path to the log file.
        """
        if self._has_handler(RotatingFileHandler):
            self.root_logger.warning("File logging is already configured.")
            return

        try:
            file_handler = RotatingFileHandler(
                filename=filename,
                maxBytes=_LOG_FILE_SIZE,
                backupCount=_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except (FileNotFoundError, PermissionError):
            self.root_logger.error("Incorrect log file name: %s\nLogging to the file is not performed.", filename)
            return

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            Formatter("%(asctime)s %(levelname)-8s %(lineno)4d %(name)-48s\t%(funcName)s\t%(message)s")
        )
        self.root_logger.addHandler(file_handler)

    def _has_handler(self, handler_type: type) -> bool:
        # RotatingFileHandler is a StreamHandler subclass, so match the exact type.
        return any(type(h) is handler_type for h in self.root_logger.handlers)

    def set_level(self, level: LevelType) -> None:
        """Set the namespace logging level; unknown names fall back to INFO with a warning."""
        level_map: dict[str, int] = logging.getLevelNamesMapping()
        try:
            self.root_logger.setLevel(level_map[level.upper()])
        except KeyError:
            self.root_logger.setLevel(DEFAULT_LOG_LEVEL)
            self.root_logger.warning("Unknown logging level '%s' specified.\nLogging level set to 'INFO'.", level)

    def get_level(self) -> LogLevel:
        level_value: int = self.root_logger.getEffectiveLevel()
        return LogLevel(name=logging.getLevelName(level_value), value=level_value)

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        """Get a logger under the FusionTranslator namespace.

        Args:
            name (str | None): Logger name, usually ``__name__``. If None, the namespace root is returned.

        Returns:
            logging.Logger: The logger instance.
        """
        if name:
            return logging.getLogger(f"{LoggerUtils._LOGGER_NAMESPACE}.{name}")
        return logging.getLogger(LoggerUtils._LOGGER_NAMESPACE)
