from __future__ import annotations
from typing import List
import re

# Boundary markers tried when a window would otherwise cut mid-sentence
_BOUNDARIES = ("\n\n", ". ", "\n")

TRUNCATION_MARKER = "\n\n[...document continues...]\n\n"


def chunk(text: str, max_length: int, min_boundary: int = 200) -> List[str]:
    """Split text into ordered segments of at most max_length characters.

    A window that does not reach the end of the text is cut just after the
    last paragraph/sentence/line boundary inside it, provided that boundary
    sits past min_boundary characters; otherwise it is cut at the hard limit.
    Joining the returned chunks gives back the input exactly.
    """
    if max_length <= 0:
        raise ValueError("max_length must be positive")
    if not text:
        return []
    parts: List[str] = []
    start = 0
    n = len(text)
    while start < n:
        end = min(start + max_length, n)
        if end < n:
            window = text[start:end]
            last_break = max(window.rfind(b) for b in _BOUNDARIES)
            if last_break > min_boundary:
                end = start + last_break + 1
        parts.append(text[start:end])
        start = end
    return parts


def bound_text(text: str, max_chars: int, min_boundary: int = 200) -> str:
    """Keep the head and tail of an over-long document for the summarizer.

    Texts within max_chars are returned unchanged. Otherwise the first and
    last max_chars/2 characters are kept around a continuation marker, the
    head ending at a sentence boundary when one is available.
    """
    if not text or len(text) <= max_chars:
        return text
    half = max(max_chars // 2, 1)
    head = chunk(text, half, min_boundary=min_boundary)[0]
    tail = text[-half:]
    return head.rstrip() + TRUNCATION_MARKER + tail.lstrip()


def normalize_extracted_text(text: str) -> str:
    """Normalize whitespace in text pulled out of PDF/DOCX uploads.

    - Joins words hyphenated across a line wrap ("consti-\\ntution")
    - Collapses runs of spaces/tabs
    - Collapses 3+ newlines into a single blank line
    """
    t = text or ""
    t = t.replace("\r\n", "\n").replace("\r", "\n")
    t = re.sub(r"(\w)-\n\s*(\w)", r"\1\2", t)
    t = re.sub(r"[ \t\f\v]+", " ", t)
    t = re.sub(r" *\n *", "\n", t)
    t = re.sub(r"\n{3,}", "\n\n", t)
    return t.strip()
