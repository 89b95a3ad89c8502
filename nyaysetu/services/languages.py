from __future__ import annotations
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Tuple
from nyaysetu.core.config import settings
from nyaysetu.core.errors import LanguageNotFound


class Region(str, Enum):
    DOMESTIC = "domestic"
    INTERNATIONAL = "international"


class BackingModel(str, Enum):
    SPECIALIZED_REGIONAL = "specialized_regional"
    GENERAL_MULTILINGUAL = "general_multilingual"
    GENERATIVE = "generative"


@dataclass(frozen=True)
class Language:
    code: str
    display_name: str
    script: str
    region: Region
    backing_model: BackingModel

    @property
    def is_domestic(self) -> bool:
        return self.region is Region.DOMESTIC

    def to_dict(self) -> Dict[str, str]:
        """Wire form used in response metadata."""
        return {
            "code": self.code,
            "name": self.display_name,
            "script": self.script,
            "region": self.region.value,
        }


def _domestic(code: str, name: str, script: str) -> Language:
    return Language(code, name, script, Region.DOMESTIC, BackingModel.SPECIALIZED_REGIONAL)


def _international(code: str, name: str, script: str, model: BackingModel = BackingModel.GENERAL_MULTILINGUAL) -> Language:
    return Language(code, name, script, Region.INTERNATIONAL, model)


# Registration order matters: the detector breaks score ties by it.
LANGUAGES: Tuple[Language, ...] = (
    # Indian regional languages
    _domestic("hi", "Hindi", "Devanagari"),
    _domestic("ta", "Tamil", "Tamil"),
    _domestic("te", "Telugu", "Telugu"),
    _domestic("bn", "Bengali", "Bengali"),
    _domestic("mr", "Marathi", "Devanagari"),
    _domestic("gu", "Gujarati", "Gujarati"),
    _domestic("kn", "Kannada", "Kannada"),
    _domestic("ml", "Malayalam", "Malayalam"),
    _domestic("pa", "Punjabi", "Gurmukhi"),
    _domestic("or", "Odia", "Odia"),
    _domestic("as", "Assamese", "Assamese"),
    _domestic("ne", "Nepali", "Devanagari"),
    # International languages
    _international("en", "English", "Latin", BackingModel.GENERATIVE),
    _international("es", "Spanish", "Latin"),
    _international("fr", "French", "Latin"),
    _international("de", "German", "Latin"),
    _international("it", "Italian", "Latin"),
    _international("pt", "Portuguese", "Latin"),
    _international("ru", "Russian", "Cyrillic"),
    _international("zh", "Chinese", "Han"),
    _international("ja", "Japanese", "Hiragana/Katakana"),
    _international("ko", "Korean", "Hangul"),
    _international("ar", "Arabic", "Arabic"),
)

_BY_CODE: Dict[str, Language] = {lang.code: lang for lang in LANGUAGES}
_BY_NAME: Dict[str, Language] = {lang.display_name.lower(): lang for lang in LANGUAGES}

assert len(_BY_CODE) == len(LANGUAGES), "language codes must be unique"


def list_all() -> Tuple[Language, ...]:
    return LANGUAGES


def find_by_code(code: str | None) -> Language:
    lang = _BY_CODE.get((code or "").strip().lower())
    if lang is None:
        raise LanguageNotFound(code)
    return lang


def resolve(code_or_name: str | None) -> Language:
    """Accept either a registry code ('hi') or a display name ('Hindi')."""
    key = (code_or_name or "").strip().lower()
    lang = _BY_CODE.get(key) or _BY_NAME.get(key)
    if lang is None:
        raise LanguageNotFound(code_or_name)
    return lang


def default_language() -> Language:
    return find_by_code(settings.default_language)


def is_default(lang: Language) -> bool:
    return lang.code == default_language().code


def describe(lang: Language) -> Dict[str, str]:
    """Full registry entry, including the backing model, for the listing endpoint."""
    out = asdict(lang)
    out["region"] = lang.region.value
    out["backing_model"] = lang.backing_model.value
    return out
