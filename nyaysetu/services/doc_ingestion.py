from __future__ import annotations
import io
import os
from typing import List
import fitz  # PyMuPDF
from docx2python import docx2python
from nyaysetu.core.errors import InputError
from nyaysetu.utils.text_splitter import normalize_extracted_text

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".txt", ".md")


def _read_pdf(content: bytes) -> str:
    with fitz.open(stream=content, filetype="pdf") as doc:
        texts: List[str] = []
        for page in doc:
            texts.append(page.get_text())
    return "\n".join(texts)


def _read_docx(content: bytes) -> str:
    # body nests tables > rows > cells > paragraphs
    with docx2python(io.BytesIO(content)) as doc:
        parts: List[str] = []
        for table in doc.body:
            for row in table:
                for cell in row:
                    parts.extend(p for p in cell if p.strip())
        return "\n".join(parts)


def _read_txt(content: bytes) -> str:
    return content.decode("utf-8", errors="ignore")


def extract_text(filename: str, content: bytes) -> str:
    """Pull plain text out of an uploaded legal document (PDF, DOCX, TXT/MD)."""
    ext = os.path.splitext(filename or "")[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise InputError(f"Unsupported file type: {ext or filename!r}. Supported: {', '.join(SUPPORTED_EXTENSIONS)}")
    try:
        if ext == ".pdf":
            raw = _read_pdf(content)
        elif ext == ".docx":
            raw = _read_docx(content)
        else:
            raw = _read_txt(content)
    except Exception as e:
        raise InputError(f"Failed to parse {filename}: {e}") from e
    text = normalize_extracted_text(raw)
    if not text:
        raise InputError(f"No text found in {filename}")
    return text
