from typing import Iterable, List, Dict
import logging
from nyaysetu.core.config import settings
from nyaysetu.core.errors import (
    BackendQuotaExhausted,
    BackendRateLimited,
    BackendTimeout,
    BackendUnavailable,
    ConfigurationError,
    NyaySetuError,
)

# OpenAI (also used for OpenAI-compatible gateways via base_url)
import openai
from openai import OpenAI

# Google Gemini
import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

logger = logging.getLogger(__name__)

RoleMsg = Dict[str, str]  # {"role": "system|user|assistant", "content": "..."}


def map_openai_error(e: Exception) -> NyaySetuError:
    """Translate an OpenAI SDK exception into the service error taxonomy."""
    if isinstance(e, openai.APITimeoutError):
        return BackendTimeout()
    if isinstance(e, openai.APIConnectionError):
        return BackendUnavailable(f"AI service unreachable: {e}")
    if isinstance(e, openai.APIStatusError):
        status = e.status_code
        code = getattr(e, "code", None)
        if status == 402 or code == "insufficient_quota":
            return BackendQuotaExhausted()
        if status == 429:
            return BackendRateLimited()
        if status in (401, 403):
            return ConfigurationError("AI service credentials rejected")
        return BackendUnavailable(f"AI API error: {status}")
    return BackendUnavailable(str(e) or "AI API error")


def map_google_error(e: Exception) -> NyaySetuError:
    if isinstance(e, google_exceptions.ResourceExhausted):
        return BackendRateLimited()
    if isinstance(e, google_exceptions.DeadlineExceeded):
        return BackendTimeout()
    if isinstance(e, (google_exceptions.PermissionDenied, google_exceptions.Unauthenticated)):
        return ConfigurationError("AI service credentials rejected")
    return BackendUnavailable(str(e) or "AI API error")


class LLMClient:
    """Chat-completion backend: system+user messages in, text content out."""

    def __init__(self):
        desired = (settings.llm_provider or "").lower().strip()
        self.model = settings.llm_model or "google/gemini-2.5-flash"

        # Preferred provider first; the other one is used when only its key is set
        def _init_openai():
            if not settings.openai_api_key:
                return False
            self.provider = "openai"
            self._openai = OpenAI(
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url or None,
                timeout=settings.request_timeout_seconds,
                # Retries are owned by the translation layers, never by the client
                max_retries=0,
            )
            return True

        def _init_google():
            if not settings.google_api_key:
                return False
            self.provider = "google"
            genai.configure(api_key=settings.google_api_key)
            return True

        if desired == "google":
            ok = _init_google() or _init_openai()
        else:
            ok = _init_openai() or _init_google()

        if not ok:
            logger.error("No usable LLM provider configured (missing API keys for both OpenAI and Google)")
            raise ConfigurationError()

    def _google_candidates(self) -> List[str]:
        """Gemini model ids to try, configured model first, prefixed and unprefixed."""
        configured = self.model.split("/", 1)[1] if self.model.startswith("google/") else self.model
        cands: List[str] = []
        for m in [configured, "gemini-2.5-flash", "gemini-2.0-flash"]:
            mid = (m or "").strip()
            if not mid:
                continue
            if not mid.startswith("models/"):
                cands.append(f"models/{mid}")
            cands.append(mid)
        # first occurrence wins
        return list(dict.fromkeys(cands))

    @staticmethod
    def _gemini_model(model_id: str, system_text: str):
        if system_text:
            return genai.GenerativeModel(model_id, system_instruction=system_text)
        return genai.GenerativeModel(model_id)

    def _gemini_payload(self, messages: List[RoleMsg], temperature: float, top_p: float | None, max_tokens: int | None):
        # system turns become system_instruction; assistant turns are "model" for Gemini
        sys_text = "\n\n".join([m["content"] for m in messages if m.get("role") == "system"]).strip()
        chat_msgs = [m for m in messages if m.get("role") != "system"]
        contents = [
            {"role": "model" if m["role"] == "assistant" else "user", "parts": [m["content"]]}
            for m in chat_msgs
        ]
        gen_cfg = {"temperature": temperature}
        if top_p is not None:
            gen_cfg["top_p"] = top_p
        if max_tokens is not None:
            gen_cfg["max_output_tokens"] = max_tokens
        return sys_text, contents, gen_cfg

    def generate(self, messages: List[RoleMsg], temperature: float = 0.2, top_p: float | None = None, max_tokens: int | None = None) -> str:
        max_tokens = max_tokens or settings.llm_max_output_tokens
        if self.provider == "openai":
            try:
                resp = self._openai.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=temperature,
                    top_p=top_p if top_p is not None else openai.NOT_GIVEN,
                    max_tokens=max_tokens,
                    stream=False,
                )
            except openai.OpenAIError as e:
                logger.error("AI API error: %s", e)
                raise map_openai_error(e) from e
            if not resp.choices:
                return ""
            return resp.choices[0].message.content or ""

        sys_text, contents, gen_cfg = self._gemini_payload(messages, temperature, top_p, max_tokens)
        last_err: Exception | None = None
        for candidate in self._google_candidates():
            try:
                model = self._gemini_model(candidate, sys_text)
                resp = model.generate_content(
                    contents,
                    generation_config=gen_cfg,
                    request_options={"timeout": settings.request_timeout_seconds},
                )
            except google_exceptions.NotFound as e:
                # Unknown model id; try the next candidate
                last_err = e
                continue
            except google_exceptions.GoogleAPIError as e:
                logger.error("Gemini API error: %s", e)
                raise map_google_error(e) from e
            except Exception as e:
                # transport, auth and gRPC failures outside the api_core hierarchy
                logger.error("Gemini transport error: %s", e)
                raise BackendUnavailable(f"AI service unreachable: {e}") from e
            # remember the id that resolved
            self.model = candidate
            try:
                return resp.text or ""
            except ValueError:
                # Blocked or empty candidate: no text parts
                return ""
        raise map_google_error(last_err) if last_err else BackendUnavailable()

    def stream_generate(self, messages: List[RoleMsg], temperature: float = 0.2, top_p: float | None = None, max_tokens: int | None = None) -> Iterable[str]:
        max_tokens = max_tokens or settings.llm_max_output_tokens
        if self.provider == "openai":
            try:
                stream = self._openai.chat.completions.create(
                    model=self.model,
                    messages=messages,
                    temperature=temperature,
                    top_p=top_p if top_p is not None else openai.NOT_GIVEN,
                    max_tokens=max_tokens,
                    stream=True,
                )
                for chunk in stream:
                    if not chunk.choices:
                        continue
                    delta = chunk.choices[0].delta
                    if delta and delta.content:
                        yield delta.content
            except openai.OpenAIError as e:
                logger.error("AI streaming error: %s", e)
                raise map_openai_error(e) from e
            return

        sys_text, contents, gen_cfg = self._gemini_payload(messages, temperature, top_p, max_tokens)
        last_err: Exception | None = None
        for candidate in self._google_candidates():
            try:
                model = self._gemini_model(candidate, sys_text)
                events = model.generate_content(
                    contents,
                    generation_config=gen_cfg,
                    stream=True,
                    request_options={"timeout": settings.request_timeout_seconds},
                )
                for ev in events:
                    if getattr(ev, "text", None):
                        yield ev.text
                self.model = candidate
                return
            except google_exceptions.NotFound as e:
                last_err = e
                continue
            except google_exceptions.GoogleAPIError as e:
                logger.error("Gemini streaming error: %s", e)
                raise map_google_error(e) from e
            except Exception as e:
                logger.error("Gemini streaming transport error: %s", e)
                raise BackendUnavailable(f"AI service unreachable: {e}") from e
        raise map_google_error(last_err) if last_err else BackendUnavailable()
