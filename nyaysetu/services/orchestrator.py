from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple, TypeVar
from nyaysetu.core.config import settings
from nyaysetu.core.errors import NyaySetuError
from nyaysetu.services.languages import Language, is_default
from nyaysetu.services.translators import (
    BaseTranslator,
    EnforcementTranslator,
    GoogleCloudTranslator,
    MyMemoryTranslator,
    general_multilingual,
    specialized_regional,
)
from nyaysetu.utils.text_splitter import chunk

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

# A layer maps (text, source, target) to its best rendering of text
Layer = Callable[[str, "Language | None", Language], str]

CHUNK_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class EnforcementResult:
    text: str
    degraded_layers: Tuple[str, ...] = ()


class TranslationOrchestrator:
    """Sequences translation across the generative, Google and MyMemory backends.

    Enforcement runs three layers strictly in order; a layer that fails leaves
    the text exactly as the previous layer produced it.
    """

    def __init__(
        self,
        llm,
        google_translator: BaseTranslator | None = None,
        fallback_translator: BaseTranslator | None = None,
        workers: int | None = None,
    ):
        self.llm = llm
        if google_translator is None and settings.google_translate_api_key:
            google_translator = GoogleCloudTranslator(settings.google_translate_api_key)
        self.google_translator = google_translator
        self.fallback_translator = fallback_translator or MyMemoryTranslator()
        self.enforcer = EnforcementTranslator(llm)
        self.workers = workers if workers is not None else settings.translation_workers

    # -- helpers -----------------------------------------------------------

    def _map(self, fn: Callable[[T], R], items: Sequence[T]) -> List[R]:
        """Apply fn to every item, keeping input order even when run in parallel."""
        if self.workers <= 1 or len(items) <= 1:
            return [fn(item) for item in items]
        with ThreadPoolExecutor(max_workers=min(self.workers, len(items))) as ex:
            return list(ex.map(fn, items))

    def translator_for(self, source: Language | None, target: Language) -> BaseTranslator:
        if target.is_domestic or (source is not None and source.is_domestic):
            return specialized_regional(self.llm)
        return general_multilingual(self.llm)

    # -- plain translation -------------------------------------------------

    def translate(self, text: str, source: Language | None, target: Language) -> str:
        """Translate text chunk by chunk; any backend failure propagates."""
        translator = self.translator_for(source, target)
        logger.info(
            "Translating %s -> %s using %s",
            source.display_name if source else "auto",
            target.display_name,
            translator.name,
        )
        pieces = chunk(text, settings.google_translate_chunk_size, min_boundary=settings.chunk_boundary_min)
        return CHUNK_SEPARATOR.join(self._map(lambda p: translator.translate(p, source, target), pieces))

    # -- enforcement layers ------------------------------------------------

    def _google_translate_pass(self, text: str, source: Language | None, target: Language) -> str:
        if self.google_translator is None:
            logger.debug("Google Translate not configured; skipping")
            return text
        pieces = chunk(text, settings.google_translate_chunk_size, min_boundary=settings.chunk_boundary_min)
        out = self._map(lambda p: self.google_translator.translate(p, None, target), pieces)
        logger.info("Google Translate applied for %s", target.code)
        return CHUNK_SEPARATOR.join(out)

    def _enforce_chunk(self, piece: str, target: Language) -> str:
        try:
            return self.enforcer.translate(piece, None, target)
        except NyaySetuError as e:
            logger.warning("Chunk enforcement failed, trying public fallback: %s", e)
        try:
            return self.fallback_translator.translate(piece, None, target)
        except NyaySetuError as e:
            logger.warning("Public fallback failed, keeping chunk untranslated: %s", e)
        return piece

    def _chunked_enforcement_pass(self, text: str, source: Language | None, target: Language) -> str:
        pieces = chunk(text, settings.enforcement_chunk_size, min_boundary=settings.chunk_boundary_min)
        return CHUNK_SEPARATOR.join(self._map(lambda p: self._enforce_chunk(p, target), pieces))

    def _final_enforcement_pass(self, text: str, source: Language | None, target: Language) -> str:
        return self.enforcer.translate(text, None, target)

    def layers(self) -> List[Tuple[str, Layer]]:
        return [
            ("google-translate", self._google_translate_pass),
            ("chunked-enforcement", self._chunked_enforcement_pass),
            ("final-enforcement", self._final_enforcement_pass),
        ]

    @staticmethod
    def _attempt(name: str, layer: Layer, text: str, source: Language | None, target: Language) -> Tuple[str, bool]:
        try:
            out = layer(text, source, target)
        except NyaySetuError as e:
            logger.warning("Translation layer %s failed, keeping previous text: %s", name, e)
            return text, False
        if not out or not out.strip():
            logger.warning("Translation layer %s returned nothing, keeping previous text", name)
            return text, False
        return out, True

    def enforce(self, summary: str, target: Language, source: Language | None = None) -> EnforcementResult:
        """Make sure summary is entirely in target; a no-op for the default language."""
        if is_default(target) or not summary:
            return EnforcementResult(summary)
        text = summary
        degraded: List[str] = []
        for name, layer in self.layers():
            text, ok = self._attempt(name, layer, text, source, target)
            if not ok:
                degraded.append(name)
        return EnforcementResult(text, tuple(degraded))
