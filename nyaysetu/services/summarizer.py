from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from nyaysetu.core.config import settings
from nyaysetu.core.errors import BackendUnavailable, InputError, NyaySetuError
from nyaysetu.services import detection, legal_terms
from nyaysetu.services.languages import Language, is_default, resolve
from nyaysetu.services.llm_client import LLMClient
from nyaysetu.services.orchestrator import TranslationOrchestrator
from nyaysetu.services.prompts import Jurisdiction, SummaryMode, build_system_prompt, build_user_prompt
from nyaysetu.utils.text_splitter import bound_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SummarizationRequest:
    source_text: str
    summary_mode: SummaryMode | str = SummaryMode.SHORT
    target_language_code: str = "en"
    source_language_code: Optional[str] = None
    preserve_legal_terms: bool = True
    include_translation: bool = False
    jurisdiction: Jurisdiction = Jurisdiction.DOMESTIC


@dataclass(frozen=True)
class SummarizationResponse:
    summary_text: str
    source_language: Language
    target_language: Language
    legal_terms: Tuple[str, ...]
    detection_confidence: float
    processing_time_ms: int
    jurisdiction: Jurisdiction
    preserve_legal_terms: bool
    include_translation: bool
    translation_text: Optional[str] = None
    degraded_layers: Tuple[str, ...] = field(default=(), compare=False)

    def to_payload(self) -> Dict:
        return {
            "summary": self.summary_text,
            "metadata": {
                "sourceLanguage": self.source_language.to_dict(),
                "targetLanguage": self.target_language.to_dict(),
                "legalTerms": list(self.legal_terms),
                "translation": self.translation_text,
                "jurisdiction": self.jurisdiction.value,
                "preserveLegalTerms": self.preserve_legal_terms,
                "includeTranslation": self.include_translation,
                "confidence": self.detection_confidence,
                "processingTimeMs": self.processing_time_ms,
            },
        }


class LegalSummarizer:
    """Runs one summarization request through the multilingual pipeline.

    The LLM client is created on first use so that input validation never
    depends on backend configuration.
    """

    def __init__(self, llm=None, orchestrator: TranslationOrchestrator | None = None):
        self._llm = llm
        self._orchestrator = orchestrator

    @property
    def llm(self):
        if self._llm is None:
            self._llm = LLMClient()
        return self._llm

    @property
    def orchestrator(self) -> TranslationOrchestrator:
        if self._orchestrator is None:
            self._orchestrator = TranslationOrchestrator(self.llm)
        return self._orchestrator

    def _resolve_source(self, req: SummarizationRequest) -> Tuple[Language, float]:
        if req.source_language_code:
            lang = resolve(req.source_language_code)
            return lang, detection.confidence(req.source_text, lang)
        result = detection.detect(req.source_text)
        return result.language, result.confidence

    def _translate_first(self, text: str, source: Language, target: Language) -> Optional[str]:
        """Translate the raw document before summarizing; None when it fails."""
        try:
            return self.orchestrator.translate(text, source, target)
        except NyaySetuError as e:
            logger.warning("Pre-summary translation failed, summarizing the original text: %s", e)
            return None

    def summarize(self, req: SummarizationRequest) -> SummarizationResponse:
        start = time.monotonic()
        if not req.source_text or not req.source_text.strip():
            raise InputError("No text provided")
        target = resolve(req.target_language_code)
        source, confidence = self._resolve_source(req)
        logger.info("Detected source language: %s (%s)", source.display_name, source.code)
        logger.info("Target language: %s (%s)", target.display_name, target.code)

        terms: List[str] = legal_terms.extract(req.source_text)
        if terms:
            logger.info("Found legal terms: %s", ", ".join(terms))

        text_to_process = req.source_text
        translation: Optional[str] = None
        if req.include_translation and source.code != target.code:
            translation = self._translate_first(req.source_text, source, target)
            if translation:
                text_to_process = translation

        bounded = bound_text(text_to_process, settings.summary_input_max_chars, min_boundary=settings.chunk_boundary_min)
        messages = [
            {
                "role": "system",
                "content": build_system_prompt(
                    target,
                    req.summary_mode,
                    req.preserve_legal_terms,
                    terms,
                    jurisdiction=req.jurisdiction,
                ),
            },
            {"role": "user", "content": build_user_prompt(bounded, target, req.summary_mode, terms)},
        ]
        logger.info("Summarizing document with mode: %s", getattr(req.summary_mode, "value", req.summary_mode))
        summary = (self.llm.generate(messages) or "").strip()
        if not summary:
            raise BackendUnavailable("No summary generated")

        degraded: Tuple[str, ...] = ()
        if not is_default(target):
            result = self.orchestrator.enforce(summary, target, source=source)
            summary, degraded = result.text, result.degraded_layers
            if degraded:
                logger.warning("Summary delivered with degraded translation layers: %s", ", ".join(degraded))

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.info("Summary generated successfully in %d ms", elapsed_ms)
        return SummarizationResponse(
            summary_text=summary,
            source_language=source,
            target_language=target,
            legal_terms=tuple(terms),
            detection_confidence=confidence,
            processing_time_ms=elapsed_ms,
            jurisdiction=req.jurisdiction,
            preserve_legal_terms=req.preserve_legal_terms,
            include_translation=req.include_translation,
            translation_text=translation,
            degraded_layers=degraded,
        )

    def translate_text(self, text: str | None, target_code: str | None) -> str:
        """Full-document translation for the translate endpoint; failures propagate."""
        if not text or not text.strip() or not target_code or not str(target_code).strip():
            raise InputError("text and targetLanguage are required")
        target = resolve(target_code)
        return self.orchestrator.translate(text, None, target)
