"""Error taxonomy shared by the pipeline and the HTTP layer.

Every error that can reach a caller derives from NyaySetuError and carries the
HTTP status it should be rendered with. TranslationDegraded never leaves the
translation orchestrator.
"""
from __future__ import annotations


class NyaySetuError(Exception):
    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InputError(NyaySetuError):
    status_code = 400
    default_message = "Invalid request"


class LanguageNotFound(InputError):
    default_message = "Language not found"

    def __init__(self, code: str | None):
        self.code = code
        super().__init__(f"Language not found: {code!r}")


class ConfigurationError(NyaySetuError):
    status_code = 500
    default_message = "AI service not configured"


class BackendRateLimited(NyaySetuError):
    status_code = 429
    default_message = "Rate limit exceeded. Please try again in a moment."


class BackendQuotaExhausted(NyaySetuError):
    status_code = 402
    default_message = "AI credits depleted. Please add credits to continue."


class BackendUnavailable(NyaySetuError):
    status_code = 500
    default_message = "AI service unavailable"


class BackendTimeout(BackendUnavailable):
    status_code = 504
    default_message = "AI service timed out"


class TranslationDegraded(NyaySetuError):
    """An optional translation layer failed; callers keep their previous text."""

    default_message = "Translation layer degraded"
