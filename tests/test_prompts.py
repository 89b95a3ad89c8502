from nyaysetu.services.languages import find_by_code
from nyaysetu.services.prompts import (
    DOMESTIC_FRAMING,
    INTERNATIONAL_FRAMING,
    Jurisdiction,
    SummaryMode,
    build_chat_messages,
    build_enforcement_messages,
    build_system_prompt,
    build_translation_messages,
    build_user_prompt,
)

EN = find_by_code("en")
HI = find_by_code("hi")


class TestUserPrompt:
    """Mode- and language-specific summarization instructions."""

    def test_short_mode(self):
        prompt = build_user_prompt("DOC", EN, SummaryMode.SHORT)
        assert "2-3 paragraphs maximum" in prompt
        assert prompt.endswith("Document:\nDOC")

    def test_detailed_mode_from_string(self):
        prompt = build_user_prompt("DOC", EN, "detailed")
        assert "DETAILED" in prompt

    def test_plain_mode_default_language(self):
        assert "PLAIN ENGLISH" in build_user_prompt("DOC", EN, "plain")

    def test_plain_mode_other_language(self):
        prompt = build_user_prompt("DOC", HI, "plain")
        assert "plain, simple Hindi" in prompt
        assert "Reply ONLY in Hindi" in prompt

    def test_unknown_mode_falls_back(self):
        prompt = build_user_prompt("DOC", EN, "haiku")
        assert prompt.startswith("Summarize the following legal document accurately and concisely.")

    def test_default_language_has_no_reply_only_note(self):
        assert "Reply ONLY" not in build_user_prompt("DOC", EN, "short")

    def test_terms_are_listed(self):
        prompt = build_user_prompt("DOC", EN, "short", ["bail", "warrant"])
        assert "Important legal terms: bail, warrant" in prompt


class TestSystemPrompt:
    """Jurisdiction framing and term preservation."""

    def test_domestic_framing(self):
        prompt = build_system_prompt(EN, "short", False)
        assert DOMESTIC_FRAMING in prompt
        assert INTERNATIONAL_FRAMING not in prompt

    def test_international_framing(self):
        prompt = build_system_prompt(EN, "short", False, jurisdiction=Jurisdiction.INTERNATIONAL)
        assert INTERNATIONAL_FRAMING in prompt
        assert DOMESTIC_FRAMING not in prompt

    def test_preserved_terms(self):
        prompt = build_system_prompt(EN, "short", True, ["res judicata"])
        assert "res judicata" in prompt
        assert "res judicata" not in build_system_prompt(EN, "short", False, ["res judicata"])

    def test_target_script_instruction(self):
        prompt = build_system_prompt(HI, "short", False)
        assert "Respond ONLY in Hindi, written in Devanagari script" in prompt


class TestJurisdiction:
    def test_parse(self):
        assert Jurisdiction.parse("indian") is Jurisdiction.DOMESTIC
        assert Jurisdiction.parse(None) is Jurisdiction.DOMESTIC
        assert Jurisdiction.parse("Domestic") is Jurisdiction.DOMESTIC
        assert Jurisdiction.parse("international") is Jurisdiction.INTERNATIONAL
        assert Jurisdiction.parse("eu") is Jurisdiction.INTERNATIONAL


class TestMessageBuilders:
    """Translation, enforcement and chat message lists."""

    def test_translation_messages(self):
        msgs = build_translation_messages("text", EN, HI, "FRAMING.")
        assert msgs[0]["role"] == "system"
        assert msgs[0]["content"].startswith("FRAMING.")
        assert "from English to Hindi" in msgs[0]["content"]
        assert msgs[1] == {"role": "user", "content": "text"}

    def test_translation_messages_unknown_source(self):
        msgs = build_translation_messages("text", None, HI, "F")
        assert "from the source language to Hindi" in msgs[0]["content"]

    def test_enforcement_messages_name_target_only(self):
        msgs = build_enforcement_messages("text", HI)
        assert "Hindi (Devanagari script)" in msgs[0]["content"]
        assert msgs[1]["content"].endswith("\n\ntext")

    def test_chat_messages(self):
        history = [
            {"role": "user", "content": "Who filed?"},
            {"role": "assistant", "content": "The appellant."},
            {"role": "system", "content": "ignored"},
            {"role": "user", "content": ""},
        ]
        msgs = build_chat_messages("DOC", "What was decided?", HI, history)
        assert [m["role"] for m in msgs] == ["system", "user", "assistant", "user"]
        assert "<document>\nDOC\n</document>" in msgs[0]["content"]
        assert "Respond ONLY in Hindi" in msgs[0]["content"]
        assert msgs[-1]["content"] == "What was decided?"
