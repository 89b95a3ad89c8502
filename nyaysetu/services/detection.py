from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple
from nyaysetu.services.languages import Language, list_all, default_language

# Per-language legal vocabulary used for keyword scoring. Languages without a
# list never win detection.
LEGAL_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "hi": ("न्यायालय", "निर्णय", "याचिका", "वाद", "अधिकार", "कानून", "न्याय", "साक्ष्य"),
    "ta": ("நீதிமன்றம்", "தீர்ப்பு", "மனு", "வழக்கு", "உரிமை", "சட்டம்", "நீதி", "சாட்சி"),
    "te": ("న్యాయస్థానం", "తీర్పు", "అర్జీ", "వ్యాజ్యం", "హక్కు", "చట్టం", "న్యాయం", "సాక్ష్యం"),
    "bn": ("আদালত", "রায়", "আবেদন", "মামলা", "অধিকার", "আইন", "ন্যায়", "সাক্ষ্য"),
    "en": ("court", "judgment", "petition", "case", "right", "law", "justice", "evidence"),
}

NO_SIGNAL_CONFIDENCE = 0.5


@dataclass(frozen=True)
class DetectionResult:
    language: Language
    confidence: float


def _score(text_lower: str, keywords: Tuple[str, ...]) -> int:
    # Each keyword counts once, however often it occurs.
    return sum(1 for kw in keywords if kw.lower() in text_lower)


def confidence(text: str | None, language: Language) -> float:
    """Share of the language's keywords present in the text."""
    keywords = LEGAL_KEYWORDS.get(language.code) or ()
    if not keywords:
        return NO_SIGNAL_CONFIDENCE
    matches = _score((text or "").lower(), keywords)
    if matches == 0:
        return NO_SIGNAL_CONFIDENCE
    return min(matches / len(keywords), 1.0)


def detect(text: str | None) -> DetectionResult:
    """Pick the registered language whose legal keywords best match the text.

    Ties go to the earlier-registered language. No match at all yields the
    default language at confidence 0.5. Never raises.
    """
    text_lower = (text or "").lower()
    best = default_language()
    best_score = 0
    for lang in list_all():
        keywords = LEGAL_KEYWORDS.get(lang.code)
        if not keywords:
            continue
        score = _score(text_lower, keywords)
        if score > best_score:
            best, best_score = lang, score
    if best_score == 0:
        return DetectionResult(best, NO_SIGNAL_CONFIDENCE)
    return DetectionResult(best, min(best_score / len(LEGAL_KEYWORDS[best.code]), 1.0))
