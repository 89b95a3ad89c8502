from __future__ import annotations
from fastapi import APIRouter, Depends, File, Form, UploadFile
from starlette.concurrency import run_in_threadpool
from pydantic import BaseModel
from typing import Optional
from nyaysetu.core.config import settings
from nyaysetu.core.errors import InputError
from nyaysetu.api.deps import get_summarizer
from nyaysetu.services.doc_ingestion import extract_text
from nyaysetu.services.languages import describe, list_all
from nyaysetu.services.prompts import Jurisdiction
from nyaysetu.services.summarizer import LegalSummarizer, SummarizationRequest

router = APIRouter(tags=["summarize"])

class SummarizeBody(BaseModel):
    # None is rejected by the pipeline as a 400
    text: Optional[str] = None
    mode: str = "short"
    language: str = "en"
    sourceLanguage: Optional[str] = None
    preserveLegalTerms: bool = True
    includeTranslation: bool = False
    jurisdiction: str = "domestic"

def _to_request(body: SummarizeBody) -> SummarizationRequest:
    return SummarizationRequest(
        source_text=body.text or "",
        summary_mode=body.mode,
        target_language_code=body.language or settings.default_language,
        source_language_code=body.sourceLanguage or None,
        preserve_legal_terms=body.preserveLegalTerms,
        include_translation=body.includeTranslation,
        jurisdiction=Jurisdiction.parse(body.jurisdiction),
    )

@router.post("/summarize-document")
def summarize_document(body: SummarizeBody, summarizer: LegalSummarizer = Depends(get_summarizer)):
    result = summarizer.summarize(_to_request(body))
    return result.to_payload()

@router.post("/summarize-document/upload")
async def summarize_upload(
    file: UploadFile = File(...),
    mode: str = Form("short"),
    language: str = Form("en"),
    sourceLanguage: Optional[str] = Form(None),
    preserveLegalTerms: bool = Form(True),
    includeTranslation: bool = Form(False),
    jurisdiction: str = Form("domestic"),
    summarizer: LegalSummarizer = Depends(get_summarizer),
):
    limit = settings.max_upload_size_mb * 1024 * 1024
    if file.size is not None and file.size > limit:
        raise InputError(f"File exceeds {settings.max_upload_size_mb} MB")
    # one byte past the limit is enough to reject
    content = await file.read(limit + 1)
    if len(content) > limit:
        raise InputError(f"File exceeds {settings.max_upload_size_mb} MB")
    text = await run_in_threadpool(extract_text, file.filename or "", content)
    body = SummarizeBody(
        text=text,
        mode=mode,
        language=language,
        sourceLanguage=sourceLanguage,
        preserveLegalTerms=preserveLegalTerms,
        includeTranslation=includeTranslation,
        jurisdiction=jurisdiction,
    )
    result = await run_in_threadpool(summarizer.summarize, _to_request(body))
    return result.to_payload()

@router.get("/languages")
def languages():
    return {"items": [describe(lang) for lang in list_all()]}
