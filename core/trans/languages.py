"""Canonical languages and the per-provider language code tables.

Each provider speaks its own language vocabulary: Baidu uses home-grown three-letter codes
("jp", "kor", "fra"), Youdao distinguishes "zh-CHS"/"zh-CHT", MyMemory wants full locales
("en-GB"), and so on. Tables are therefore kept per provider rather than derived from one
shared list. Forward tables are injective, so every mapped language survives a round trip.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from core.trans.exceptions import CouldNotMapLanguageError, UnknownLanguageError
from models.translation_models import TranslatorType

__all__: list[str] = [
    "AUTO_CODES",
    "LANGUAGE_TABLES",
    "Language",
    "LanguageTable",
    "from_provider_code",
    "supported_languages",
    "to_provider_code",
]


class Language(Enum):
    """Canonical languages, valued by their BCP-47 tag.

    ``AUTO`` is the auto-detect sentinel and may only be used as a source language.
    """

    AUTO = "auto"
    CHINESE_SIMPLIFIED = "zh-Hans"
    CHINESE_TRADITIONAL = "zh-Hant"
    CANTONESE = "yue"
    CLASSICAL_CHINESE = "lzh"
    ENGLISH = "en"
    JAPANESE = "ja"
    KOREAN = "ko"
    FRENCH = "fr"
    GERMAN = "de"
    RUSSIAN = "ru"
    SPANISH = "es"
    PORTUGUESE = "pt"
    ITALIAN = "it"
    ARABIC = "ar"
    THAI = "th"
    VIETNAMESE = "vi"
    DUTCH = "nl"
    POLISH = "pl"
    GREEK = "el"
    TURKISH = "tr"
    INDONESIAN = "id"
    MALAY = "ms"
    HINDI = "hi"
    UKRAINIAN = "uk"
    SWEDISH = "sv"
    DANISH = "da"
    FINNISH = "fi"
    CZECH = "cs"
    HUNGARIAN = "hu"
    ROMANIAN = "ro"
    BULGARIAN = "bg"
    ESTONIAN = "et"
    SLOVENIAN = "sl"
    HEBREW = "he"
    ACEHNESE = "ace"
    AFRIKAANS = "af"
    AKAN = "ak"
    ALBANIAN = "sq"
    ALGERIAN_ARABIC = "arq"
    AMHARIC = "am"
    ANCIENT_GREEK = "grc"
    ARAGONESE = "an"
    ARMENIAN = "hy"
    ASSAMESE = "as"
    ASTURIAN = "ast"
    AYMARA = "ay"
    AZERBAIJANI = "az"
    BALUCHI = "bal"
    BASHKIR = "ba"
    BASQUE = "eu"
    BELARUSIAN = "be"
    BEMBA = "bem"
    BENGALI = "bn"
    BERBER = "ber"
    BHOJPURI = "bho"
    BILIN = "byn"
    BISLAMA = "bi"
    BOSNIAN = "bs"
    BRAZILIAN_PORTUGUESE = "pt-BR"
    BRETON = "br"
    BURMESE = "my"
    CANADIAN_FRENCH = "fr-CA"
    CATALAN = "ca"
    CEBUANO = "ceb"
    CHEROKEE = "chr"
    CHICHEWA = "ny"
    CHUVASH = "cv"
    CORNISH = "kw"
    CORSICAN = "co"
    CREE = "cr"
    CRIMEAN_TATAR = "crh"
    CROATIAN = "hr"
    DHIVEHI = "dv"
    ESPERANTO = "eo"
    FAROESE = "fo"
    FIJIAN = "fj"
    FILIPINO = "fil"
    FRIULIAN = "fur"
    FULA = "ff"
    GALICIAN = "gl"
    GANDA = "lg"
    GEORGIAN = "ka"
    GREENLANDIC = "kl"
    GUARANI = "gn"
    GUJARATI = "gu"
    HAITIAN_CREOLE = "ht"
    HAKHA_CHIN = "cnh"
    HAUSA = "ha"
    HAWAIIAN = "haw"
    HILIGAYNON = "hil"
    HMONG = "hmn"
    HMONG_DAW = "mww"
    HUPA = "hup"
    ICELANDIC = "is"
    IDO = "io"
    IGBO = "ig"
    INGUSH = "inh"
    INTERLINGUA = "ia"
    INUKTITUT = "iu"
    IRISH = "ga"
    JAVANESE = "jv"
    KABYLE = "kab"
    KANNADA = "kn"
    KANURI = "kr"
    KAPAMPANGAN = "pam"
    KASHMIRI = "ks"
    KASHUBIAN = "csb"
    KAZAKH = "kk"
    KHMER = "km"
    KINYARWANDA = "rw"
    KLINGON = "tlh"
    KONGO = "kg"
    KONKANI = "kok"
    KURDISH = "ku"
    KYRGYZ = "ky"
    LAO = "lo"
    LATGALIAN = "ltg"
    LATIN = "la"
    LATVIAN = "lv"
    LIMBURGISH = "li"
    LINGALA = "ln"
    LITHUANIAN = "lt"
    LOJBAN = "jbo"
    LOW_GERMAN = "nds"
    LOWER_SORBIAN = "dsb"
    LUXEMBOURGISH = "lb"
    MACEDONIAN = "mk"
    MAITHILI = "mai"
    MALAGASY = "mg"
    MALAYALAM = "ml"
    MALTESE = "mt"
    MANX = "gv"
    MAORI = "mi"
    MARATHI = "mr"
    MARSHALLESE = "mh"
    MAURITIAN_CREOLE = "mfe"
    MIDDLE_FRENCH = "frm"
    MONGOLIAN = "mn"
    MONTENEGRIN = "cnr"
    NEAPOLITAN = "nap"
    NEPALI = "ne"
    NKO = "nqo"
    NORTHERN_SAMI = "se"
    NORTHERN_SOTHO = "nso"
    NORWEGIAN = "no"
    NORWEGIAN_BOKMAL = "nb"
    NORWEGIAN_NYNORSK = "nn"
    OCCITAN = "oc"
    ODIA = "or"
    OJIBWE = "oj"
    OLD_ENGLISH = "ang"
    OROMO = "om"
    OSSETIAN = "os"
    PAPIAMENTO = "pap"
    PASHTO = "ps"
    PERSIAN = "fa"
    PUNJABI = "pa"
    QUECHUA = "qu"
    QUERETARO_OTOMI = "otq"
    ROMANI = "rom"
    ROMANSH = "rm"
    RUSYN = "rue"
    SAMOAN = "sm"
    SANSKRIT = "sa"
    SARDINIAN = "sc"
    SCOTS = "sco"
    SCOTTISH_GAELIC = "gd"
    SERBIAN = "sr"
    SERBIAN_CYRILLIC = "sr-Cyrl"
    SERBIAN_LATIN = "sr-Latn"
    SERBO_CROATIAN = "sh"
    SHAN = "shn"
    SHONA = "sn"
    SILESIAN = "szl"
    SINDHI = "sd"
    SINHALA = "si"
    SLOVAK = "sk"
    SOMALI = "so"
    SONGHAI = "son"
    SOUTHERN_NDEBELE = "nr"
    SOUTHERN_SOTHO = "st"
    SUNDANESE = "su"
    SWAHILI = "sw"
    SYRIAC = "syr"
    TAGALOG = "tl"
    TAHITIAN = "ty"
    TAJIK = "tg"
    TAMIL = "ta"
    TATAR = "tt"
    TELUGU = "te"
    TETUM = "tet"
    TIGRINYA = "ti"
    TONGAN = "to"
    TSONGA = "ts"
    TUNISIAN_ARABIC = "aeb"
    TURKMEN = "tk"
    TWI = "tw"
    UPPER_SORBIAN = "hsb"
    URDU = "ur"
    UZBEK = "uz"
    VENDA = "ve"
    WALLOON = "wa"
    WELSH = "cy"
    WESTERN_FRISIAN = "fy"
    WOLOF = "wo"
    XHOSA = "xh"
    YIDDISH = "yi"
    YORUBA = "yo"
    YUCATEC_MAYA = "yua"
    ZAZA = "zza"
    ZULU = "zu"

    @property
    def is_auto(self) -> bool:
        return self is Language.AUTO

    @classmethod
    def parse(cls, text: str) -> Language | None:
        """Look up a language by enum name ("ENGLISH") or tag ("en"), case-insensitively.

        Returns:
            Language | None: The language, or None if nothing matches.
        """
        key: str = text.strip()
        if not key:
            return None
        upper: str = key.upper().replace("-", "_").replace(" ", "_")
        if upper in cls.__members__:
            return cls.__members__[upper]
        for lang in cls:
            if lang.value.lower() == key.lower():
                return lang
        return None


@dataclass(frozen=True)
class LanguageTable:
    """Bidirectional code table for one provider.

    Attributes:
        provider (TranslatorType): Owner of the vocabulary.
        codes (dict[Language, str]): Forward mapping; must be injective.
        aliases (dict[str, Language]): Extra codes accepted only when reading provider output.
    """

    provider: TranslatorType
    codes: dict[Language, str]
    aliases: dict[str, Language] = field(default_factory=dict)
    _reverse: dict[str, Language] = field(init=False, repr=False, compare=False)
    _reverse_folded: dict[str, Language] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        reverse: dict[str, Language] = {code: lang for lang, code in self.codes.items()}
        if len(reverse) != len(self.codes):
            msg: str = f"Language table for '{self.provider.value}' maps two languages to one code"
            raise ValueError(msg)
        if Language.AUTO in self.codes:
            msg = "The auto-detect sentinel is not a table entry"
            raise ValueError(msg)
        folded: dict[str, Language] = {code.casefold(): lang for code, lang in self.aliases.items()}
        folded.update({code.casefold(): lang for code, lang in reverse.items()})
        object.__setattr__(self, "_reverse", reverse)
        object.__setattr__(self, "_reverse_folded", folded)

    def to_code(self, language: Language) -> str:
        try:
            return self.codes[language]
        except KeyError:
            raise CouldNotMapLanguageError(language, self.provider.value) from None

    def from_code(self, code: str) -> Language:
        lang: Language | None = self._reverse.get(code) or self.aliases.get(code)
        if lang is None:
            lang = self._reverse_folded.get(code.casefold())
        if lang is None:
            raise UnknownLanguageError(code, self.provider.value)
        return lang


_L = Language

LANGUAGE_TABLES: Final[dict[TranslatorType, LanguageTable]] = {
    TranslatorType.BAIDU: LanguageTable(
        provider=TranslatorType.BAIDU,
        codes={
            _L.CHINESE_SIMPLIFIED: "zh",
            _L.CHINESE_TRADITIONAL: "cht",
            _L.CANTONESE: "yue",
            _L.CLASSICAL_CHINESE: "wyw",
            _L.ENGLISH: "en",
            _L.JAPANESE: "jp",
            _L.KOREAN: "kor",
            _L.FRENCH: "fra",
            _L.GERMAN: "de",
            _L.RUSSIAN: "ru",
            _L.SPANISH: "spa",
            _L.PORTUGUESE: "pt",
            _L.ITALIAN: "it",
            _L.ARABIC: "ara",
            _L.THAI: "th",
            _L.VIETNAMESE: "vie",
            _L.DUTCH: "nl",
            _L.POLISH: "pl",
            _L.GREEK: "el",
            _L.TURKISH: "tr",
            _L.INDONESIAN: "id",
            _L.MALAY: "may",
            _L.HINDI: "hi",
            _L.UKRAINIAN: "ukr",
            _L.SWEDISH: "swe",
            _L.DANISH: "dan",
            _L.FINNISH: "fin",
            _L.CZECH: "cs",
            _L.HUNGARIAN: "hu",
            _L.ROMANIAN: "rom",
            _L.BULGARIAN: "bul",
            _L.ESTONIAN: "est",
            _L.SLOVENIAN: "slo",
            _L.HEBREW: "heb",
            _L.ACEHNESE: "ach",
            _L.AFRIKAANS: "afr",
            _L.AKAN: "aka",
            _L.ALBANIAN: "alb",
            _L.ALGERIAN_ARABIC: "arq",
            _L.AMHARIC: "amh",
            _L.ANCIENT_GREEK: "gra",
            _L.ARAGONESE: "arg",
            _L.ARMENIAN: "arm",
            _L.ASSAMESE: "asm",
            _L.ASTURIAN: "ast",
            _L.AYMARA: "aym",
            _L.AZERBAIJANI: "aze",
            _L.BALUCHI: "bal",
            _L.BASHKIR: "bak",
            _L.BASQUE: "baq",
            _L.BELARUSIAN: "bel",
            _L.BEMBA: "bem",
            _L.BENGALI: "ben",
            _L.BERBER: "ber",
            _L.BHOJPURI: "bho",
            _L.BILIN: "bli",
            _L.BISLAMA: "bis",
            _L.BOSNIAN: "bos",
            _L.BRAZILIAN_PORTUGUESE: "pot",
            _L.BRETON: "bre",
            _L.BURMESE: "bur",
            _L.CANADIAN_FRENCH: "frn",
            _L.CATALAN: "cat",
            _L.CEBUANO: "ceb",
            _L.CHEROKEE: "chr",
            _L.CHICHEWA: "nya",
            _L.CHUVASH: "chv",
            _L.CORNISH: "cor",
            _L.CORSICAN: "cos",
            _L.CREE: "cre",
            _L.CRIMEAN_TATAR: "cri",
            _L.CROATIAN: "hrv",
            _L.DHIVEHI: "div",
            _L.ESPERANTO: "epo",
            _L.FAROESE: "fao",
            _L.FILIPINO: "fil",
            _L.FRIULIAN: "fri",
            _L.FULA: "ful",
            _L.GALICIAN: "glg",
            _L.GANDA: "lug",
            _L.GEORGIAN: "geo",
            _L.GREENLANDIC: "kal",
            _L.GUARANI: "grn",
            _L.GUJARATI: "guj",
            _L.HAITIAN_CREOLE: "ht",
            _L.HAKHA_CHIN: "hak",
            _L.HAUSA: "hau",
            _L.HAWAIIAN: "haw",
            _L.HILIGAYNON: "hil",
            _L.HMONG: "hmn",
            _L.HUPA: "hup",
            _L.ICELANDIC: "ice",
            _L.IDO: "ido",
            _L.IGBO: "ibo",
            _L.INGUSH: "ing",
            _L.INTERLINGUA: "ina",
            _L.INUKTITUT: "iku",
            _L.IRISH: "gle",
            _L.JAVANESE: "jav",
            _L.KABYLE: "kab",
            _L.KANNADA: "kan",
            _L.KANURI: "kau",
            _L.KAPAMPANGAN: "pam",
            _L.KASHMIRI: "kas",
            _L.KASHUBIAN: "kah",
            _L.KHMER: "hkm",
            _L.KINYARWANDA: "kin",
            _L.KLINGON: "kli",
            _L.KONGO: "kon",
            _L.KONKANI: "kok",
            _L.KURDISH: "kur",
            _L.KYRGYZ: "kir",
            _L.LAO: "lao",
            _L.LATGALIAN: "lag",
            _L.LATIN: "lat",
            _L.LATVIAN: "lav",
            _L.LIMBURGISH: "lim",
            _L.LINGALA: "lin",
            _L.LITHUANIAN: "lit",
            _L.LOJBAN: "loj",
            _L.LOW_GERMAN: "log",
            _L.LOWER_SORBIAN: "los",
            _L.LUXEMBOURGISH: "ltz",
            _L.MACEDONIAN: "mac",
            _L.MAITHILI: "mai",
            _L.MALAGASY: "mg",
            _L.MALAYALAM: "mal",
            _L.MALTESE: "mlt",
            _L.MANX: "glv",
            _L.MAORI: "mao",
            _L.MARATHI: "mar",
            _L.MARSHALLESE: "mah",
            _L.MAURITIAN_CREOLE: "mau",
            _L.MIDDLE_FRENCH: "frm",
            _L.MONTENEGRIN: "mot",
            _L.NEAPOLITAN: "nea",
            _L.NEPALI: "nep",
            _L.NKO: "nqo",
            _L.NORTHERN_SAMI: "sme",
            _L.NORTHERN_SOTHO: "ped",
            _L.NORWEGIAN: "nor",
            _L.NORWEGIAN_BOKMAL: "nob",
            _L.NORWEGIAN_NYNORSK: "nno",
            _L.OCCITAN: "oci",
            _L.ODIA: "ori",
            _L.OJIBWE: "oji",
            _L.OLD_ENGLISH: "eno",
            _L.OROMO: "orm",
            _L.OSSETIAN: "oss",
            _L.PAPIAMENTO: "pap",
            _L.PASHTO: "pus",
            _L.PERSIAN: "per",
            _L.PUNJABI: "pan",
            _L.QUECHUA: "que",
            _L.ROMANI: "ro",
            _L.ROMANSH: "roh",
            _L.RUSYN: "ruy",
            _L.SAMOAN: "sm",
            _L.SANSKRIT: "san",
            _L.SARDINIAN: "srd",
            _L.SCOTS: "sco",
            _L.SCOTTISH_GAELIC: "gla",
            _L.SERBIAN: "srp",
            _L.SERBIAN_CYRILLIC: "src",
            _L.SERBO_CROATIAN: "sec",
            _L.SHAN: "sha",
            _L.SHONA: "sna",
            _L.SILESIAN: "sil",
            _L.SINDHI: "snd",
            _L.SINHALA: "sin",
            _L.SLOVAK: "sk",
            _L.SOMALI: "som",
            _L.SONGHAI: "sol",
            _L.SOUTHERN_NDEBELE: "nbl",
            _L.SOUTHERN_SOTHO: "sot",
            _L.SUNDANESE: "sun",
            _L.SWAHILI: "swa",
            _L.SYRIAC: "syr",
            _L.TAGALOG: "tgl",
            _L.TAJIK: "tgk",
            _L.TAMIL: "tam",
            _L.TATAR: "tat",
            _L.TELUGU: "tel",
            _L.TETUM: "tet",
            _L.TIGRINYA: "tir",
            _L.TSONGA: "tso",
            _L.TUNISIAN_ARABIC: "tua",
            _L.TURKMEN: "tuk",
            _L.TWI: "twi",
            _L.UPPER_SORBIAN: "ups",
            _L.URDU: "urd",
            _L.VENDA: "ven",
            _L.WALLOON: "wln",
            _L.WELSH: "wel",
            _L.WESTERN_FRISIAN: "fry",
            _L.WOLOF: "wol",
            _L.XHOSA: "xho",
            _L.YIDDISH: "yid",
            _L.YORUBA: "yor",
            _L.ZAZA: "zaz",
            _L.ZULU: "zul",
        },
    ),
    TranslatorType.YOUDAO: LanguageTable(
        provider=TranslatorType.YOUDAO,
        codes={
            _L.CHINESE_SIMPLIFIED: "zh-CHS",
            _L.CHINESE_TRADITIONAL: "zh-CHT",
            _L.CANTONESE: "yue",
            _L.ENGLISH: "en",
            _L.JAPANESE: "ja",
            _L.KOREAN: "ko",
            _L.FRENCH: "fr",
            _L.GERMAN: "de",
            _L.RUSSIAN: "ru",
            _L.SPANISH: "es",
            _L.PORTUGUESE: "pt",
            _L.ITALIAN: "it",
            _L.ARABIC: "ar",
            _L.THAI: "th",
            _L.VIETNAMESE: "vi",
            _L.DUTCH: "nl",
            _L.POLISH: "pl",
            _L.GREEK: "el",
            _L.TURKISH: "tr",
            _L.INDONESIAN: "id",
            _L.MALAY: "ms",
            _L.HINDI: "hi",
            _L.UKRAINIAN: "uk",
            _L.SWEDISH: "sv",
            _L.DANISH: "da",
            _L.FINNISH: "fi",
            _L.CZECH: "cs",
            _L.HUNGARIAN: "hu",
            _L.ROMANIAN: "ro",
            _L.BULGARIAN: "bg",
            _L.ESTONIAN: "et",
            _L.SLOVENIAN: "sl",
            _L.HEBREW: "he",
            _L.AFRIKAANS: "af",
            _L.ALBANIAN: "sq",
            _L.AMHARIC: "am",
            _L.ARMENIAN: "hy",
            _L.AZERBAIJANI: "az",
            _L.BASQUE: "eu",
            _L.BELARUSIAN: "be",
            _L.BENGALI: "bn",
            _L.BOSNIAN: "bs",
            _L.BURMESE: "my",
            _L.CATALAN: "ca",
            _L.CEBUANO: "ceb",
            _L.CHICHEWA: "ny",
            _L.CORSICAN: "co",
            _L.CROATIAN: "hr",
            _L.ESPERANTO: "eo",
            _L.FIJIAN: "fj",
            _L.GALICIAN: "gl",
            _L.GEORGIAN: "ka",
            _L.GUJARATI: "gu",
            _L.HAITIAN_CREOLE: "ht",
            _L.HAUSA: "ha",
            _L.HAWAIIAN: "haw",
            _L.HMONG_DAW: "mww",
            _L.ICELANDIC: "is",
            _L.IGBO: "ig",
            _L.IRISH: "ga",
            _L.JAVANESE: "jw",
            _L.KANNADA: "kn",
            _L.KAZAKH: "kk",
            _L.KHMER: "km",
            _L.KLINGON: "tlh",
            _L.KURDISH: "ku",
            _L.KYRGYZ: "ky",
            _L.LAO: "lo",
            _L.LATIN: "la",
            _L.LATVIAN: "lv",
            _L.LITHUANIAN: "lt",
            _L.LUXEMBOURGISH: "lb",
            _L.MACEDONIAN: "mk",
            _L.MALAGASY: "mg",
            _L.MALAYALAM: "ml",
            _L.MALTESE: "mt",
            _L.MAORI: "mi",
            _L.MARATHI: "mr",
            _L.MONGOLIAN: "mn",
            _L.NEPALI: "ne",
            _L.NORWEGIAN: "no",
            _L.PASHTO: "ps",
            _L.PERSIAN: "fa",
            _L.PUNJABI: "pa",
            _L.QUERETARO_OTOMI: "otq",
            _L.SAMOAN: "sm",
            _L.SCOTTISH_GAELIC: "gd",
            _L.SERBIAN_CYRILLIC: "sr-Cyrl",
            _L.SERBIAN_LATIN: "sr-Latn",
            _L.SHONA: "sn",
            _L.SINDHI: "sd",
            _L.SINHALA: "si",
            _L.SLOVAK: "sk",
            _L.SOMALI: "so",
            _L.SOUTHERN_SOTHO: "st",
            _L.SUNDANESE: "su",
            _L.SWAHILI: "sw",
            _L.TAGALOG: "tl",
            _L.TAHITIAN: "ty",
            _L.TAJIK: "tg",
            _L.TAMIL: "ta",
            _L.TELUGU: "te",
            _L.TONGAN: "to",
            _L.URDU: "ur",
            _L.UZBEK: "uz",
            _L.WELSH: "cy",
            _L.WESTERN_FRISIAN: "fy",
            _L.XHOSA: "xh",
            _L.YIDDISH: "yi",
            _L.YORUBA: "yo",
            _L.YUCATEC_MAYA: "yua",
            _L.ZULU: "zu",
        },
    ),
    TranslatorType.CAIYUN: LanguageTable(
        provider=TranslatorType.CAIYUN,
        codes={
            _L.CHINESE_SIMPLIFIED: "zh",
            _L.CHINESE_TRADITIONAL: "zh-Hant",
            _L.ENGLISH: "en",
            _L.JAPANESE: "ja",
            _L.KOREAN: "ko",
            _L.FRENCH: "fr",
            _L.GERMAN: "de",
            _L.RUSSIAN: "ru",
            _L.SPANISH: "es",
            _L.PORTUGUESE: "pt",
            _L.ITALIAN: "it",
            _L.VIETNAMESE: "vi",
            _L.TURKISH: "tr",
        },
    ),
    TranslatorType.ALIBABA: LanguageTable(
        provider=TranslatorType.ALIBABA,
        codes={
            _L.CHINESE_SIMPLIFIED: "zh",
            _L.CHINESE_TRADITIONAL: "zh-tw",
            _L.CANTONESE: "yue",
            _L.ENGLISH: "en",
            _L.JAPANESE: "ja",
            _L.KOREAN: "ko",
            _L.FRENCH: "fr",
            _L.GERMAN: "de",
            _L.RUSSIAN: "ru",
            _L.SPANISH: "es",
            _L.PORTUGUESE: "pt",
            _L.ITALIAN: "it",
            _L.ARABIC: "ar",
            _L.THAI: "th",
            _L.VIETNAMESE: "vi",
            _L.DUTCH: "nl",
            _L.POLISH: "pl",
            _L.GREEK: "el",
            _L.TURKISH: "tr",
            _L.INDONESIAN: "id",
            _L.MALAY: "ms",
            _L.HINDI: "hi",
            _L.UKRAINIAN: "uk",
            _L.SWEDISH: "sv",
            _L.DANISH: "da",
            _L.FINNISH: "fi",
            _L.CZECH: "cs",
            _L.HUNGARIAN: "hu",
            _L.ROMANIAN: "ro",
            _L.BULGARIAN: "bg",
            _L.ESTONIAN: "et",
            _L.SLOVENIAN: "sl",
            _L.HEBREW: "he",
        },
        aliases={"zh-cn": _L.CHINESE_SIMPLIFIED, "iw": _L.HEBREW},
    ),
    TranslatorType.MYMEMORY: LanguageTable(
        provider=TranslatorType.MYMEMORY,
        codes={
            _L.CHINESE_SIMPLIFIED: "zh-CN",
            _L.CHINESE_TRADITIONAL: "zh-TW",
            _L.CANTONESE: "yue-HK",
            _L.ENGLISH: "en-GB",
            _L.JAPANESE: "ja-JP",
            _L.KOREAN: "ko-KR",
            _L.FRENCH: "fr-FR",
            _L.GERMAN: "de-DE",
            _L.RUSSIAN: "ru-RU",
            _L.SPANISH: "es-ES",
            _L.PORTUGUESE: "pt-PT",
            _L.ITALIAN: "it-IT",
            _L.ARABIC: "ar-SA",
            _L.THAI: "th-TH",
            _L.VIETNAMESE: "vi-VN",
            _L.DUTCH: "nl-NL",
            _L.POLISH: "pl-PL",
            _L.GREEK: "el-GR",
            _L.TURKISH: "tr-TR",
            _L.INDONESIAN: "id-ID",
            _L.MALAY: "ms-MY",
            _L.HINDI: "hi-IN",
            _L.UKRAINIAN: "uk-UA",
            _L.SWEDISH: "sv-SE",
            _L.DANISH: "da-DK",
            _L.FINNISH: "fi-FI",
            _L.CZECH: "cs-CZ",
            _L.HUNGARIAN: "hu-HU",
            _L.ROMANIAN: "ro-RO",
            _L.BULGARIAN: "bg-BG",
            _L.ESTONIAN: "et-EE",
            _L.SLOVENIAN: "sl-SI",
            _L.HEBREW: "he-IL",
        },
        # MyMemory reports detected languages as bare ISO 639-1 codes or regional variants.
        aliases={
            "zh": _L.CHINESE_SIMPLIFIED,
            "en": _L.ENGLISH,
            "en-US": _L.ENGLISH,
            "ja": _L.JAPANESE,
            "ko": _L.KOREAN,
            "fr": _L.FRENCH,
            "de": _L.GERMAN,
            "ru": _L.RUSSIAN,
            "es": _L.SPANISH,
            "pt": _L.PORTUGUESE,
            "pt-BR": _L.PORTUGUESE,
            "it": _L.ITALIAN,
            "ar": _L.ARABIC,
        },
    ),
}

AUTO_CODES: Final[dict[TranslatorType, str]] = {
    TranslatorType.BAIDU: "auto",
    TranslatorType.YOUDAO: "auto",
    TranslatorType.CAIYUN: "auto",
    TranslatorType.ALIBABA: "auto",
    TranslatorType.MYMEMORY: "Autodetect",
}


def to_provider_code(language: Language, provider: TranslatorType) -> str:
    """Convert a canonical language to the provider's wire code.

    Raises:
        CouldNotMapLanguageError: If the provider has no code for the language.
    """
    return LANGUAGE_TABLES[provider].to_code(language)


def from_provider_code(code: str, provider: TranslatorType) -> Language:
    """Convert a provider wire code back to a canonical language.

    Raises:
        UnknownLanguageError: If the code is not in the provider's table.
    """
    return LANGUAGE_TABLES[provider].from_code(code)


def supported_languages(provider: TranslatorType) -> frozenset[Language]:
    return frozenset(LANGUAGE_TABLES[provider].codes)
