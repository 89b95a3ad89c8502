from __future__ import annotations
from typing import List, Tuple

# Closed multilingual legal vocabulary. Scanned in full regardless of the
# detected language so mixed-language documents still surface their terms.

# Latin-derived and procedural terms common in Indian practice
PROCEDURAL_TERMS: Tuple[str, ...] = (
    "bail", "warrant", "subpoena", "affidavit", "injunction", "contempt",
    "habeas corpus", "mandamus", "certiorari", "prohibition", "quo warranto",
    "locus standi", "res judicata", "stare decisis", "obiter dicta",
    "ratio decidendi", "amicus curiae", "ex parte", "in camera",
    "prima facie", "bona fide", "mala fide", "ultra vires",
    "intra vires", "de facto", "de jure", "ipso facto",
    "ab initio", "ex post facto", "ad hoc", "pro tem",
    "sine qua non", "ceteris paribus", "mutatis mutandis",
    "inter alia", "et al", "viz", "i.e.", "e.g.", "etc.",
)

HINDI_TERMS: Tuple[str, ...] = (
    "जमानत", "वारंट", "सबपोना", "शपथपत्र", "निषेधाज्ञा", "अवमान",
    "बंदी प्रत्यक्षीकरण", "परमादेश", "प्रमाणपत्र", "निषेध", "क्वो वारंटो",
    "स्थानीय खड़े होने का अधिकार", "निर्णीत विषय", "पूर्व निर्णय का पालन",
    "गौण टिप्पणी", "निर्णय का अनुपात", "मित्र न्यायालय", "एक पक्षीय",
    "न्यायालय के समक्ष", "प्रथम दृष्टया", "सद्भावना से", "दुर्भावना से",
)

TAMIL_TERMS: Tuple[str, ...] = (
    "ஜாமீன்", "ஆணை", "சபோனா", "உறுதிமொழி", "தடை உத்தரவு", "நீதிமன்ற அவமதிப்பு",
    "கைதி மீட்பு", "கட்டளை", "சான்றிதழ்", "தடை", "அதிகார விசாரணை",
    "நிலைப்பாட்டு உரிமை", "தீர்ப்பு வழக்கு", "முந்தைய தீர்ப்பு பின்பற்றல்",
    "பக்கக் குறிப்பு", "தீர்ப்பு விகிதம்", "நட்பு நீதிமன்றம்", "ஒரு பக்க",
    "நீதிமன்றத்தில்", "முதல் பார்வையில்", "நல்லெண்ணத்துடன்", "தீயெண்ணத்துடன்",
)

INTERNATIONAL_TERMS: Tuple[str, ...] = (
    "constitution", "statute", "regulation", "ordinance", "amendment",
    "clause", "section", "article", "paragraph", "subsection",
    "plaintiff", "defendant", "appellant", "respondent", "petitioner",
    "prosecutor", "defense", "counsel", "attorney", "barrister",
    "solicitor", "advocate", "judge", "magistrate", "justice",
    "jury", "witness", "expert witness", "deposition", "testimony",
    "hearsay", "circumstantial evidence", "direct evidence", "burden of proof",
    "standard of proof", "reasonable doubt", "preponderance of evidence",
    "clear and convincing evidence", "beyond reasonable doubt",
)

VOCABULARY: Tuple[str, ...] = PROCEDURAL_TERMS + HINDI_TERMS + TAMIL_TERMS + INTERNATIONAL_TERMS


def extract(text: str | None) -> List[str]:
    """Return vocabulary terms present in the text, in vocabulary order, without duplicates."""
    text_lower = (text or "").lower()
    if not text_lower:
        return []
    found = [term for term in VOCABULARY if term.lower() in text_lower]
    return list(dict.fromkeys(found))
