"""Command-line front end for FusionTranslator.

Translates the given texts with the engine selected in fusion_translate.ini (or on the command line)
and prints one translated line per input. Credentials are read from environment variables.

Exit codes:
    0: All texts were translated.
    1: The translation service reported an error.
    2: Invalid arguments, configuration or credentials.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, NoReturn

from config.loader import ConfigLoader, ConfigLoaderError
from core.trans.exceptions import TranslateExceptionError, TranslatorConfigError
from core.trans.factory import TranslatorFactory
from core.version import VERSION
from models.translation_models import TranslationRequest
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping, Sequence

    from core.trans.interface import TransInterface
    from models.config_models import Config

CFG_FILE: Final[str] = "fusion_translate.ini"

EXIT_OK: Final[int] = 0
EXIT_TRANSLATION_ERROR: Final[int] = 1
EXIT_USAGE_ERROR: Final[int] = 2

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        print(f"\n{message}\n", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(EXIT_USAGE_ERROR)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = _ArgumentParser(
        description="Translate text with Baidu, Youdao, Caiyun, Alibaba or MyMemory",
        epilog='Example: python fusion_translate.py --engine baidu --to ENGLISH "你好，世界"',
    )
    parser.add_argument("--config", dest="config", metavar="FILE", help=f"Configuration file (default: {CFG_FILE})")
    parser.add_argument("--engine", dest="engine", metavar="NAME", help="Override translation engine")
    parser.add_argument("--from", dest="source", metavar="LANG", help="Override source language (default: auto)")
    parser.add_argument("--to", dest="target", metavar="LANG", help="Override target language")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("texts", nargs="+", metavar="TEXT", help="Text to translate")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> ConfigLoader:
    """Load the configuration file, if any, and apply CLI overrides.

    An explicitly named file must exist; the default file is optional and the built-in defaults are
    used when it is absent.

    Raises:
        ConfigLoaderError: If configuration file cannot be loaded.
    """
    script_name: str = Path(sys.argv[0]).name
    config_filename: str | None = args.config
    if config_filename is None and Path(CFG_FILE).exists():
        config_filename = CFG_FILE
    overrides: dict[str, str | bool | None] = {
        "engine": args.engine,
        "source": args.source,
        "target": args.target,
        "debug": args.debug,
    }
    return ConfigLoader(config_filename=config_filename, script_name=script_name, **overrides)


def setup_logging(config: Config) -> None:
    logger_utils = LoggerUtils(config.GENERAL.LOG_FILE)
    if config.GENERAL.DEBUG:
        logger_utils.set_level("DEBUG")
    logger.debug("Logging level: %s", logger_utils.get_level().name)


async def translate_texts(translator: TransInterface, requests: Sequence[TranslationRequest]) -> list[str]:
    """Translate one request with ``translate`` or several with ``translate_batch``.

    Every request in ``requests`` shares the language pair of the first one.
    """
    first: TranslationRequest = requests[0]
    if len(requests) == 1:
        return [(await translator.translate(first.query, first.source, first.target)).text]
    queries: list[str] = [request.query for request in requests]
    return list(await translator.translate_batch(queries, first.source, first.target))


async def run(argv: Sequence[str] | None = None, *, environ: Mapping[str, str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    args: argparse.Namespace = parse_arguments(argv)
    try:
        loader: ConfigLoader = load_config(args)
    except ConfigLoaderError as err:
        print("\nError: Failed to load configuration file.", file=sys.stderr)
        print(f"Details: {err}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    config: Config = loader.config
    setup_logging(config)
    requests: list[TranslationRequest] = [
        TranslationRequest(query=text, source=loader.source_language, target=loader.target_language)
        for text in args.texts
    ]

    try:
        translator: TransInterface = TranslatorFactory.create_from_config(config, environ=environ)
    except TranslatorConfigError as err:
        print(f"\nError: {err}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        results: list[str] = await translate_texts(translator, requests)
    except TranslateExceptionError as err:
        logger.debug("Translation failed", exc_info=True)
        print(f"\nError: {err}", file=sys.stderr)
        return EXIT_TRANSLATION_ERROR
    finally:
        await translator.close()

    for line in results:
        print(line)
    return EXIT_OK


def main() -> NoReturn:
    try:
        code: int = asyncio.run(run())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        code = 130
    raise SystemExit(code)


if __name__ == "__main__":
    main()
