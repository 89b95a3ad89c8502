from __future__ import annotations
from nyaysetu.services.llm_client import LLMClient
from nyaysetu.services.summarizer import LegalSummarizer


def get_summarizer() -> LegalSummarizer:
    """Request-scoped pipeline; the backend client is built lazily on first call."""
    return LegalSummarizer()


def get_llm() -> LLMClient:
    return LLMClient()
