"""Translation backends used by the orchestrator.

Every backend takes one piece of text and returns its translation, raising
TranslationDegraded (or a backend error from the LLM client) when it cannot.
"""
from __future__ import annotations

import html
import logging
from abc import ABC, abstractmethod

import requests

from nyaysetu.core.config import settings
from nyaysetu.core.errors import TranslationDegraded
from nyaysetu.services.languages import Language
from nyaysetu.services.prompts import (
    GENERAL_MULTILINGUAL_FRAMING,
    SPECIALIZED_REGIONAL_FRAMING,
    build_enforcement_messages,
    build_translation_messages,
)
from nyaysetu.utils.text_splitter import chunk

logger = logging.getLogger(__name__)


class BaseTranslator(ABC):
    """Abstract base for a single-text translation backend."""

    name = "base"

    @abstractmethod
    def translate(self, text: str, source: Language | None, target: Language) -> str:
        """Translate text into target; source may be unknown."""


class GenerativeTranslator(BaseTranslator):
    """Translation through the generative backend, parameterized by framing text.

    The specialized-regional and general-multilingual backends are the same
    call with different framing; a dedicated engine can replace either by
    implementing BaseTranslator.
    """

    def __init__(self, llm, framing: str, name: str):
        self.llm = llm
        self.framing = framing
        self.name = name

    def translate(self, text: str, source: Language | None, target: Language) -> str:
        msgs = build_translation_messages(text, source, target, self.framing)
        out = (self.llm.generate(msgs, temperature=0.0, top_p=1.0) or "").strip()
        if not out:
            raise TranslationDegraded(f"{self.name} returned no text")
        return out


def specialized_regional(llm) -> GenerativeTranslator:
    return GenerativeTranslator(llm, SPECIALIZED_REGIONAL_FRAMING, "specialized-regional")


def general_multilingual(llm) -> GenerativeTranslator:
    return GenerativeTranslator(llm, GENERAL_MULTILINGUAL_FRAMING, "general-multilingual")


class EnforcementTranslator(BaseTranslator):
    """Target-only rewrite through the generative backend."""

    name = "generative-enforcement"

    def __init__(self, llm):
        self.llm = llm

    def translate(self, text: str, source: Language | None, target: Language) -> str:
        out = (self.llm.generate(build_enforcement_messages(text, target), temperature=0.0, top_p=1.0) or "").strip()
        if not out:
            raise TranslationDegraded("enforcement returned no text")
        return out


class GoogleCloudTranslator(BaseTranslator):
    """Google Cloud Translation v2 (REST, API key)."""

    name = "google-translate"

    def __init__(self, api_key: str, session: requests.Session | None = None, url: str | None = None):
        self.api_key = api_key
        self.session = session or requests.Session()
        self.url = url or settings.google_translate_url

    def translate(self, text: str, source: Language | None, target: Language) -> str:
        body = {"q": text, "target": target.code, "format": "text", "model": "nmt"}
        if source is not None:
            body["source"] = source.code
        try:
            resp = self.session.post(
                self.url,
                params={"key": self.api_key},
                json=body,
                timeout=settings.request_timeout_seconds,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            raise TranslationDegraded(f"Google Translate failed: {e}") from e
        if not isinstance(data, dict):
            raise TranslationDegraded("Google Translate returned an unexpected body")
        payload = data.get("data")
        translations = payload.get("translations") if isinstance(payload, dict) else None
        first = translations[0] if isinstance(translations, list) and translations else None
        translated = first.get("translatedText") if isinstance(first, dict) else None
        if not isinstance(translated, str) or not translated:
            # An empty answer keeps the chunk as it was
            return text
        return html.unescape(translated)


class MyMemoryTranslator(BaseTranslator):
    """MyMemory public API - free, no key required."""

    name = "mymemory"
    # Free tier rejects longer queries
    MAX_QUERY_CHARS = 500

    def __init__(self, session: requests.Session | None = None, url: str | None = None):
        self.session = session or requests.Session()
        self.url = url or settings.mymemory_url

    def _translate_piece(self, text: str, langpair: str) -> str:
        try:
            resp = self.session.get(
                self.url,
                params={"q": text, "langpair": langpair},
                timeout=settings.request_timeout_seconds,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            raise TranslationDegraded(f"MyMemory failed: {e}") from e
        if not isinstance(data, dict):
            raise TranslationDegraded("MyMemory returned an unexpected body")
        status = data.get("responseStatus")
        if status not in (200, "200"):
            raise TranslationDegraded(f"MyMemory error: {data.get('responseDetails', 'Unknown error')}")
        result = data.get("responseData")
        translated = result.get("translatedText") if isinstance(result, dict) else None
        if not isinstance(translated, str) or not translated.strip():
            raise TranslationDegraded("MyMemory returned no text")
        return translated

    def translate(self, text: str, source: Language | None, target: Language) -> str:
        langpair = f"{source.code if source else 'Autodetect'}|{target.code}"
        out = []
        for piece in chunk(text, self.MAX_QUERY_CHARS, min_boundary=settings.chunk_boundary_min):
            # The API trims its answer; keep the separator the piece started with
            lead = piece[: len(piece) - len(piece.lstrip())]
            out.append(lead + self._translate_piece(piece, langpair).strip())
        return "".join(out)
