from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Sequence
from nyaysetu.core.config import settings
from nyaysetu.core.errors import BackendUnavailable, InputError
from nyaysetu.services.languages import resolve
from nyaysetu.services.prompts import build_chat_messages
from nyaysetu.utils.text_splitter import bound_text

logger = logging.getLogger(__name__)


def _prepare(document: str | None, question: str | None, language: str | None, history: Sequence[Dict] | None) -> List[Dict]:
    if not document or not document.strip():
        raise InputError("No text provided")
    if not question or not question.strip():
        raise InputError("No question provided")
    target = resolve(language or settings.default_language)
    bounded = bound_text(document, settings.summary_input_max_chars, min_boundary=settings.chunk_boundary_min)
    return build_chat_messages(bounded, question.strip(), target, history or ())


def answer(llm, document: str | None, question: str | None, language: str | None = None, history: Sequence[Dict] | None = None) -> str:
    msgs = _prepare(document, question, language, history)
    text = (llm.generate(msgs, temperature=0.2, top_p=0.8) or "").strip()
    if not text:
        raise BackendUnavailable("No answer generated")
    return text


def stream_answer(llm, document: str | None, question: str | None, language: str | None = None, history: Sequence[Dict] | None = None) -> Iterable[str]:
    """Validate eagerly, then return the token iterator."""
    msgs = _prepare(document, question, language, history)
    return llm.stream_generate(msgs, temperature=0.2, top_p=0.8)
