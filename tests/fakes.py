"""In-process stand-ins for the generative backend and the REST translators."""
from __future__ import annotations

from typing import Dict, List, Tuple

from nyaysetu.services.translators import BaseTranslator


def message_kind(messages: List[Dict[str, str]]) -> str:
    system = messages[0]["content"] if messages and messages[0].get("role") == "system" else ""
    if "precise legal translator" in system:
        return "enforce"
    if "legal document translator" in system:
        return "translate"
    if "legal assistant answering" in system:
        return "chat"
    return "summarize"


class FakeLLM:
    """Answers by request kind; a reply may be a string, an exception, or a callable."""

    def __init__(self, tokens=None, **replies):
        self.replies = {
            "summarize": "The court granted bail to the petitioner.",
            "enforce": "अदालत ने याचिकाकर्ता को जमानत दी।",
            "translate": "अनुवादित पाठ",
            "chat": "The petition was dismissed.",
        }
        self.replies.update(replies)
        self.tokens = tokens if tokens is not None else ["The ", "petition ", "was dismissed."]
        self.calls: List[Tuple[str, List[Dict[str, str]]]] = []

    def kinds(self) -> List[str]:
        return [kind for kind, _ in self.calls]

    def generate(self, messages, temperature=0.2, top_p=None, max_tokens=None):
        kind = message_kind(messages)
        self.calls.append((kind, messages))
        reply = self.replies[kind]
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(messages)
        return reply

    def stream_generate(self, messages, temperature=0.2, top_p=None, max_tokens=None):
        self.calls.append((message_kind(messages), messages))
        for tok in self.tokens:
            if isinstance(tok, Exception):
                raise tok
            yield tok


class FakeTranslator(BaseTranslator):
    name = "fake"

    def __init__(self, reply="अनुवाद", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls: List[str] = []

    def translate(self, text, source, target):
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        if callable(self.reply):
            return self.reply(text)
        return self.reply


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error: Exception | None = None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def raise_for_status(self):
        import requests

        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeSession:
    """Records requests.Session calls and replays queued responses in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: List[Dict] = []

    def _next(self, method, url, kwargs):
        self.requests.append({"method": method, "url": url, **kwargs})
        resp = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(resp, Exception):
            raise resp
        if callable(resp):
            return resp(kwargs)
        return resp

    def get(self, url, **kwargs):
        return self._next("GET", url, kwargs)

    def post(self, url, **kwargs):
        return self._next("POST", url, kwargs)
