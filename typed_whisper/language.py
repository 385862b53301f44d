"""Supported transcription languages and their canonical names."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from typed_whisper.errors import InvalidLanguageString


class Language(str, Enum):
    """Closed set of languages whisper can transcribe.

    The value of each member is its canonical lowercase name, which is also the
    form passed to whisper as a language hint.
    """

    ENGLISH = "english"
    CHINESE = "chinese"
    GERMAN = "german"
    SPANISH = "spanish"
    RUSSIAN = "russian"
    KOREAN = "korean"
    FRENCH = "french"
    JAPANESE = "japanese"
    PORTUGUESE = "portuguese"
    TURKISH = "turkish"
    POLISH = "polish"
    CATALAN = "catalan"
    DUTCH = "dutch"
    ARABIC = "arabic"
    SWEDISH = "swedish"
    ITALIAN = "italian"
    INDONESIAN = "indonesian"
    HINDI = "hindi"
    FINNISH = "finnish"
    VIETNAMESE = "vietnamese"
    HEBREW = "hebrew"
    UKRAINIAN = "ukrainian"
    GREEK = "greek"
    MALAY = "malay"
    CZECH = "czech"
    ROMANIAN = "romanian"
    DANISH = "danish"
    HUNGARIAN = "hungarian"
    TAMIL = "tamil"
    NORWEGIAN = "norwegian"
    THAI = "thai"
    URDU = "urdu"
    CROATIAN = "croatian"
    BULGARIAN = "bulgarian"
    LITHUANIAN = "lithuanian"
    LATIN = "latin"
    MAORI = "maori"
    MALAYALAM = "malayalam"
    WELSH = "welsh"
    SLOVAK = "slovak"
    TELUGU = "telugu"
    PERSIAN = "persian"
    LATVIAN = "latvian"
    BENGALI = "bengali"
    SERBIAN = "serbian"
    AZERBAIJANI = "azerbaijani"
    SLOVENIAN = "slovenian"
    KANNADA = "kannada"
    ESTONIAN = "estonian"
    MACEDONIAN = "macedonian"
    BRETON = "breton"
    BASQUE = "basque"
    ICELANDIC = "icelandic"
    ARMENIAN = "armenian"
    NEPALI = "nepali"
    MONGOLIAN = "mongolian"
    BOSNIAN = "bosnian"
    KAZAKH = "kazakh"
    ALBANIAN = "albanian"
    SWAHILI = "swahili"
    GALICIAN = "galician"
    MARATHI = "marathi"
    PUNJABI = "punjabi"
    SINHALA = "sinhala"
    KHMER = "khmer"
    SHONA = "shona"
    YORUBA = "yoruba"
    SOMALI = "somali"
    AFRIKAANS = "afrikaans"
    OCCITAN = "occitan"
    GEORGIAN = "georgian"
    BELARUSIAN = "belarusian"
    TAJIK = "tajik"
    SINDHI = "sindhi"
    GUJARATI = "gujarati"
    AMHARIC = "amharic"
    YIDDISH = "yiddish"
    LAO = "lao"
    UZBEK = "uzbek"
    FAROESE = "faroese"
    HAITIAN_CREOLE = "haitian creole"
    PASHTO = "pashto"
    TURKMEN = "turkmen"
    NYNORSK = "nynorsk"
    MALTESE = "maltese"
    SANSKRIT = "sanskrit"
    LUXEMBOURGISH = "luxembourgish"
    MYANMAR = "myanmar"
    TIBETAN = "tibetan"
    TAGALOG = "tagalog"
    MALAGASY = "malagasy"
    ASSAMESE = "assamese"
    TATAR = "tatar"
    HAWAIIAN = "hawaiian"
    LINGALA = "lingala"
    HAUSA = "hausa"
    BASHKIR = "bashkir"
    JAVANESE = "javanese"
    SUNDANESE = "sundanese"

    def __str__(self) -> str:
        return self.value

    def to_string(self) -> str:
        """Return the canonical lowercase name."""
        return self.value

    @property
    def code(self) -> str:
        """Language code whisper reports for auto-detected audio."""
        return LANGUAGE_CODES[self]

    @classmethod
    def from_string(cls, value: str) -> "Language":
        """Parse a canonical name; the match is exact and case-sensitive."""
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidLanguageString(value) from exc

    @classmethod
    def from_code(cls, code: str) -> "Language":
        """Parse a whisper language code such as ``"en"`` or ``"haw"``."""
        language = _BY_CODE.get(code)
        if language is None:
            raise InvalidLanguageString(code)
        return language

    @classmethod
    def from_whisper(cls, value: str) -> "Language":
        """Parse the language field of a whisper result.

        whisper echoes the requested name when a hint was given and a language
        code when it detected the language itself, so both forms are accepted.
        """
        if value in _BY_CODE:
            return _BY_CODE[value]
        return cls.from_string(value)


LANGUAGE_CODES: Dict[Language, str] = {
    Language.ENGLISH: "en",
    Language.CHINESE: "zh",
    Language.GERMAN: "de",
    Language.SPANISH: "es",
    Language.RUSSIAN: "ru",
    Language.KOREAN: "ko",
    Language.FRENCH: "fr",
    Language.JAPANESE: "ja",
    Language.PORTUGUESE: "pt",
    Language.TURKISH: "tr",
    Language.POLISH: "pl",
    Language.CATALAN: "ca",
    Language.DUTCH: "nl",
    Language.ARABIC: "ar",
    Language.SWEDISH: "sv",
    Language.ITALIAN: "it",
    Language.INDONESIAN: "id",
    Language.HINDI: "hi",
    Language.FINNISH: "fi",
    Language.VIETNAMESE: "vi",
    Language.HEBREW: "he",
    Language.UKRAINIAN: "uk",
    Language.GREEK: "el",
    Language.MALAY: "ms",
    Language.CZECH: "cs",
    Language.ROMANIAN: "ro",
    Language.DANISH: "da",
    Language.HUNGARIAN: "hu",
    Language.TAMIL: "ta",
    Language.NORWEGIAN: "no",
    Language.THAI: "th",
    Language.URDU: "ur",
    Language.CROATIAN: "hr",
    Language.BULGARIAN: "bg",
    Language.LITHUANIAN: "lt",
    Language.LATIN: "la",
    Language.MAORI: "mi",
    Language.MALAYALAM: "ml",
    Language.WELSH: "cy",
    Language.SLOVAK: "sk",
    Language.TELUGU: "te",
    Language.PERSIAN: "fa",
    Language.LATVIAN: "lv",
    Language.BENGALI: "bn",
    Language.SERBIAN: "sr",
    Language.AZERBAIJANI: "az",
    Language.SLOVENIAN: "sl",
    Language.KANNADA: "kn",
    Language.ESTONIAN: "et",
    Language.MACEDONIAN: "mk",
    Language.BRETON: "br",
    Language.BASQUE: "eu",
    Language.ICELANDIC: "is",
    Language.ARMENIAN: "hy",
    Language.NEPALI: "ne",
    Language.MONGOLIAN: "mn",
    Language.BOSNIAN: "bs",
    Language.KAZAKH: "kk",
    Language.ALBANIAN: "sq",
    Language.SWAHILI: "sw",
    Language.GALICIAN: "gl",
    Language.MARATHI: "mr",
    Language.PUNJABI: "pa",
    Language.SINHALA: "si",
    Language.KHMER: "km",
    Language.SHONA: "sn",
    Language.YORUBA: "yo",
    Language.SOMALI: "so",
    Language.AFRIKAANS: "af",
    Language.OCCITAN: "oc",
    Language.GEORGIAN: "ka",
    Language.BELARUSIAN: "be",
    Language.TAJIK: "tg",
    Language.SINDHI: "sd",
    Language.GUJARATI: "gu",
    Language.AMHARIC: "am",
    Language.YIDDISH: "yi",
    Language.LAO: "lo",
    Language.UZBEK: "uz",
    Language.FAROESE: "fo",
    Language.HAITIAN_CREOLE: "ht",
    Language.PASHTO: "ps",
    Language.TURKMEN: "tk",
    Language.NYNORSK: "nn",
    Language.MALTESE: "mt",
    Language.SANSKRIT: "sa",
    Language.LUXEMBOURGISH: "lb",
    Language.MYANMAR: "my",
    Language.TIBETAN: "bo",
    Language.TAGALOG: "tl",
    Language.MALAGASY: "mg",
    Language.ASSAMESE: "as",
    Language.TATAR: "tt",
    Language.HAWAIIAN: "haw",
    Language.LINGALA: "ln",
    Language.HAUSA: "ha",
    Language.BASHKIR: "ba",
    Language.JAVANESE: "jw",
    Language.SUNDANESE: "su",
}

_BY_CODE: Dict[str, Language] = {code: lang for lang, code in LANGUAGE_CODES.items()}


__all__ = ["Language", "LANGUAGE_CODES"]
