"""Models for translation requests and results.

Defines the provider selector, the per-call request shape and the immutable output objects
returned by every translation engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.trans.languages import Language

__all__: list[str] = [
    "BatchTranslationOutput",
    "TranslationOutput",
    "TranslationRequest",
    "TranslatorType",
]


class TranslatorType(Enum):
    """Supported translation providers."""

    BAIDU = "baidu"
    YOUDAO = "youdao"
    ALIBABA = "alibaba"
    CAIYUN = "caiyun"
    MYMEMORY = "mymemory"

    @classmethod
    def parse(cls, name: str) -> TranslatorType | None:
        """Resolve a provider name, accepting the common aliases.

        Args:
            name (str): Provider name such as "baidu", "Ali" or "my memory". Case-insensitive.

        Returns:
            TranslatorType | None: The matching provider, or None if the name is unknown.
        """
        return _TRANSLATOR_ALIASES.get(name.strip().lower())

    def as_str(self) -> str:
        return self.value


_TRANSLATOR_ALIASES: dict[str, TranslatorType] = {
    "baidu": TranslatorType.BAIDU,
    "youdao": TranslatorType.YOUDAO,
    "alibaba": TranslatorType.ALIBABA,
    "ali": TranslatorType.ALIBABA,
    "caiyun": TranslatorType.CAIYUN,
    "彩云": TranslatorType.CAIYUN,
    "mymemory": TranslatorType.MYMEMORY,
    "my-memory": TranslatorType.MYMEMORY,
    "my memory": TranslatorType.MYMEMORY,
}


@dataclass(frozen=True)
class TranslationRequest:
    """A single translation request.

    Attributes:
        query (str): Text to translate.
        source (Language | None): Source language. None (or Language.AUTO) means auto-detect.
        target (Language): Target language. Never Language.AUTO.
    """

    query: str
    source: Language | None
    target: Language

    def __post_init__(self) -> None:
        if self.target.is_auto:
            msg = "The auto-detect sentinel cannot be used as a target language"
            raise ValueError(msg)
        if self.source is not None and self.source.is_auto:
            object.__setattr__(self, "source", None)


@dataclass(frozen=True)
class TranslationOutput:
    """Result of a single translation.

    Attributes:
        text (str): Translated text.
        lang (Language | None): Language of the translated text as reported or requested.
    """

    text: str
    lang: Language | None = None

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class BatchTranslationOutput:
    """Result of a batch translation; one entry per input, in input order.

    Attributes:
        texts (tuple[str, ...]): Translated texts.
        lang (Language | None): Language of the translated texts.
    """

    texts: tuple[str, ...] = field(default_factory=tuple)
    lang: Language | None = None

    def __len__(self) -> int:
        return len(self.texts)

    def __iter__(self):
        return iter(self.texts)
