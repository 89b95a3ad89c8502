from __future__ import annotations
import logging
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sse_starlette.sse import EventSourceResponse
from typing import Dict, List, Optional
from nyaysetu.api.deps import get_llm
from nyaysetu.core.errors import NyaySetuError
from nyaysetu.services import chat as chat_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


class ChatBody(BaseModel):
    text: Optional[str] = None
    question: Optional[str] = None
    language: str = "en"
    history: List[Dict[str, str]] = Field(default_factory=list)


@router.post("/ask")
def ask_chat(body: ChatBody, llm=Depends(get_llm)):
    text = chat_service.answer(llm, body.text, body.question, body.language, body.history)
    return {"answer": text}


@router.post("/stream")
def stream_chat(body: ChatBody, llm=Depends(get_llm)):
    """Stream the answer as SSE `token` events followed by a single `end`."""
    tokens = chat_service.stream_answer(llm, body.text, body.question, body.language, body.history)

    def event_gen():
        try:
            for tok in tokens:
                if tok:
                    yield {"event": "token", "data": tok}
        except NyaySetuError as e:
            # Headers are already sent; report in-band
            logger.error("Chat stream failed: %s", e)
            yield {"event": "error", "data": e.message}
        yield {"event": "end", "data": "[DONE]"}

    return EventSourceResponse(event_gen())
