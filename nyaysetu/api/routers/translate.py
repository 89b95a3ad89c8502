from __future__ import annotations
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from typing import Optional
from nyaysetu.api.deps import get_summarizer
from nyaysetu.services.summarizer import LegalSummarizer

router = APIRouter(tags=["translate"])


class TranslateBody(BaseModel):
    text: Optional[str] = None
    targetLanguage: Optional[str] = None


@router.post("/translate-text")
def translate_text(body: TranslateBody, summarizer: LegalSummarizer = Depends(get_summarizer)):
    return {"translated": summarizer.translate_text(body.text, body.targetLanguage)}
