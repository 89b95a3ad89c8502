from __future__ import annotations
from enum import Enum
from typing import Dict, List, Sequence
from nyaysetu.services.languages import Language, is_default

RoleMsg = Dict[str, str]  # {"role": "system|user|assistant", "content": "..."}


class SummaryMode(str, Enum):
    SHORT = "short"
    DETAILED = "detailed"
    PLAIN = "plain"


class Jurisdiction(str, Enum):
    DOMESTIC = "domestic"
    INTERNATIONAL = "international"

    @classmethod
    def parse(cls, value: str | None) -> "Jurisdiction":
        v = (value or "").strip().lower()
        # 'indian' is what older clients send for the domestic system
        if v in ("", "domestic", "indian"):
            return cls.DOMESTIC
        return cls.INTERNATIONAL


DOMESTIC_FRAMING = (
    "You have deep knowledge of Indian legal systems, including Supreme Court, High Court, "
    "and District Court procedures. You understand the nuances of Indian constitutional law, "
    "civil procedure, criminal law, and various state-specific legal frameworks. "
)
INTERNATIONAL_FRAMING = "You have expertise in international legal systems and cross-border legal matters. "

SPECIALIZED_REGIONAL_FRAMING = (
    "You are a legal document translator specializing in Indian regional languages and scripts. "
    "Use the native script of the target language and the terminology of Indian courts."
)
GENERAL_MULTILINGUAL_FRAMING = (
    "You are a legal document translator working across international languages. "
    "Use the standard legal register of the target language."
)


def _mode_value(mode: SummaryMode | str | None) -> str:
    if isinstance(mode, SummaryMode):
        return mode.value
    return (mode or "").strip().lower()


def build_system_prompt(
    target: Language,
    mode: SummaryMode | str | None,
    preserve_terms: bool,
    terms: Sequence[str] = (),
    jurisdiction: Jurisdiction = Jurisdiction.DOMESTIC,
) -> str:
    prompt = f"You are an expert legal document summarizer specializing in {target.display_name} legal documents. "
    prompt += DOMESTIC_FRAMING if jurisdiction is Jurisdiction.DOMESTIC else INTERNATIONAL_FRAMING
    prompt += (
        "Your task is to analyze legal and judicial documents and provide accurate, well-structured "
        "summaries that preserve legal accuracy while making content accessible."
    )
    if preserve_terms and terms:
        prompt += (
            " Always preserve legal terminology and provide context when necessary. "
            f"Keep these legal terms exactly as written: {', '.join(terms)}."
        )
    if not is_default(target):
        prompt += (
            f" Respond ONLY in {target.display_name}, written in {target.script} script. "
            "Do not include English text, source-language words or transliterations."
        )
    return prompt


def build_user_prompt(text: str, target: Language, mode: SummaryMode | str | None, terms: Sequence[str] = ()) -> str:
    name = target.display_name
    default_target = is_default(target)
    m = _mode_value(mode)
    if m == SummaryMode.SHORT.value:
        prompt = (
            "Provide a SHORT, concise summary of the following legal document. Focus only on the key "
            "decisions and essential facts. Keep it brief (2-3 paragraphs maximum)."
        )
    elif m == SummaryMode.DETAILED.value:
        prompt = (
            "Provide a DETAILED, comprehensive summary of the following legal document. Include all "
            "important arguments, legal reasoning, decisions, and relevant context."
        )
    elif m == SummaryMode.PLAIN.value:
        if default_target:
            prompt = (
                f"Provide a summary of the following legal document in PLAIN {name.upper()}. Simplify "
                "complex legal terminology for non-lawyers while preserving the essential meaning."
            )
        else:
            prompt = (
                f"Provide a summary of the following legal document in plain, simple {name}. Do not use "
                "English words or transliterations. Simplify complex legal terminology for non-lawyers "
                "while preserving the essential meaning."
            )
    else:
        prompt = "Summarize the following legal document accurately and concisely."

    if not default_target:
        prompt += (
            f"\n\nIMPORTANT: Reply ONLY in {name}. Do NOT include English or transliterations. "
            f"If a legal term has no clear equivalent, give the closest {name} rendering and keep the meaning precise."
        )
    if terms:
        prompt += f"\n\nImportant legal terms: {', '.join(terms)}"
    prompt += f"\n\nDocument:\n{text}"
    return prompt


def build_translation_messages(text: str, source: Language | None, target: Language, framing: str) -> List[RoleMsg]:
    source_name = source.display_name if source else "the source language"
    system = {
        "role": "system",
        "content": (
            f"{framing} Translate from {source_name} to {target.display_name}. "
            "Preserve legal terminology, section/article numbers and the formal legal tone. "
            "Do not summarize or omit any legal nuance. "
            "Output only the translation, no explanations."
        ),
    }
    user = {"role": "user", "content": text}
    return [system, user]


def build_enforcement_messages(text: str, target: Language) -> List[RoleMsg]:
    """Target-only rewrite used by the enforcement passes."""
    system = {
        "role": "system",
        "content": (
            f"You are a precise legal translator. Output ONLY in {target.display_name} ({target.script} script). "
            "Never include English words, source-language words or transliterations. Keep the legal meaning exact."
        ),
    }
    user = {
        "role": "user",
        "content": f"Translate into {target.display_name}. Output only the translated text.\n\n{text}",
    }
    return [system, user]


def build_chat_messages(
    document: str,
    question: str,
    target: Language,
    history: Sequence[RoleMsg] = (),
) -> List[RoleMsg]:
    header = (
        "You are a legal assistant answering questions about the document below. "
        "Use only the document; if it does not contain the answer, say so briefly. "
        "Be concise and factual. Not legal advice; suggest consulting an advocate for case-specific matters."
    )
    if not is_default(target):
        header += f" Respond ONLY in {target.display_name}. Do not include English text or transliterations."
    msgs: List[RoleMsg] = [
        {"role": "system", "content": f"{header}\n\n<document>\n{document}\n</document>"},
    ]
    for turn in history:
        if turn.get("role") in ("user", "assistant") and turn.get("content"):
            msgs.append({"role": turn["role"], "content": turn["content"]})
    msgs.append({"role": "user", "content": question})
    return msgs
