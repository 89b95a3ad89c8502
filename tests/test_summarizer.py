import pytest

from fakes import FakeLLM, FakeTranslator
from nyaysetu.core.errors import BackendRateLimited, BackendUnavailable, InputError, LanguageNotFound
from nyaysetu.services.orchestrator import TranslationOrchestrator
from nyaysetu.services.prompts import Jurisdiction, SummaryMode
from nyaysetu.services.summarizer import LegalSummarizer, SummarizationRequest
from nyaysetu.utils.text_splitter import TRUNCATION_MARKER

JUDGMENT = (
    "The High Court heard the petition filed by the appellant. The court found the evidence "
    "insufficient and granted bail, holding the arrest prima facie unlawful."
)


def _summarizer(llm, fallback=None):
    orch = TranslationOrchestrator(llm, fallback_translator=fallback or FakeTranslator())
    return LegalSummarizer(llm=llm, orchestrator=orch)


def _user_prompt(llm):
    for kind, msgs in llm.calls:
        if kind == "summarize":
            return msgs[1]["content"]
    raise AssertionError("no summarization call")


class TestSummarize:
    """End-to-end pipeline with in-process backends."""

    def test_english_summary_makes_one_call(self):
        llm = FakeLLM()
        resp = _summarizer(llm).summarize(SummarizationRequest(source_text=JUDGMENT))
        assert llm.kinds() == ["summarize"]
        assert resp.summary_text == "The court granted bail to the petitioner."
        assert resp.source_language.code == "en"
        assert resp.target_language.code == "en"
        assert resp.translation_text is None
        assert "bail" in resp.legal_terms and "prima facie" in resp.legal_terms
        assert resp.processing_time_ms >= 0
        assert resp.degraded_layers == ()

    def test_regional_target_runs_enforcement(self):
        llm = FakeLLM()
        resp = _summarizer(llm).summarize(
            SummarizationRequest(source_text=JUDGMENT, summary_mode=SummaryMode.PLAIN, target_language_code="hi")
        )
        assert llm.kinds() == ["summarize", "enforce", "enforce"]
        assert resp.summary_text == "अदालत ने याचिकाकर्ता को जमानत दी।"
        assert "plain, simple Hindi" in _user_prompt(llm)

    def test_translate_then_summarize(self):
        llm = FakeLLM()
        resp = _summarizer(llm).summarize(
            SummarizationRequest(source_text=JUDGMENT, target_language_code="hi", include_translation=True)
        )
        assert llm.kinds()[:2] == ["translate", "summarize"]
        assert resp.translation_text == "अनुवादित पाठ"
        assert "Document:\nअनुवादित पाठ" in _user_prompt(llm)

    def test_failed_pre_translation_summarizes_original(self):
        llm = FakeLLM(translate=BackendUnavailable())
        resp = _summarizer(llm).summarize(
            SummarizationRequest(source_text=JUDGMENT, target_language_code="hi", include_translation=True)
        )
        assert resp.translation_text is None
        assert JUDGMENT in _user_prompt(llm)

    def test_no_pre_translation_for_same_language(self):
        llm = FakeLLM()
        resp = _summarizer(llm).summarize(SummarizationRequest(source_text=JUDGMENT, include_translation=True))
        assert llm.kinds() == ["summarize"]
        assert resp.translation_text is None

    def test_explicit_source_language(self):
        llm = FakeLLM()
        resp = _summarizer(llm).summarize(SummarizationRequest(source_text=JUDGMENT, source_language_code="Hindi"))
        assert resp.source_language.code == "hi"
        assert resp.detection_confidence == 0.5

    def test_international_jurisdiction(self):
        llm = FakeLLM()
        resp = _summarizer(llm).summarize(
            SummarizationRequest(source_text=JUDGMENT, jurisdiction=Jurisdiction.INTERNATIONAL)
        )
        assert "international legal systems" in llm.calls[0][1][0]["content"]
        assert resp.to_payload()["metadata"]["jurisdiction"] == "international"

    def test_long_document_is_bounded(self):
        llm = FakeLLM()
        _summarizer(llm).summarize(SummarizationRequest(source_text=JUDGMENT * 60))
        assert TRUNCATION_MARKER in _user_prompt(llm)

    def test_payload_shape(self):
        resp = _summarizer(FakeLLM()).summarize(SummarizationRequest(source_text=JUDGMENT))
        payload = resp.to_payload()
        assert set(payload) == {"summary", "metadata"}
        assert set(payload["metadata"]) == {
            "sourceLanguage",
            "targetLanguage",
            "legalTerms",
            "translation",
            "jurisdiction",
            "preserveLegalTerms",
            "includeTranslation",
            "confidence",
            "processingTimeMs",
        }
        assert payload["metadata"]["targetLanguage"] == {
            "code": "en",
            "name": "English",
            "script": "Latin",
            "region": "international",
        }


class TestSummarizeFailures:
    """Input validation and mandatory-call failures."""

    def test_empty_text_checked_before_backend(self):
        # no llm injected: validation must not build a backend client
        with pytest.raises(InputError, match="No text provided"):
            LegalSummarizer().summarize(SummarizationRequest(source_text="   "))

    def test_unknown_target(self):
        llm = FakeLLM()
        with pytest.raises(LanguageNotFound):
            _summarizer(llm).summarize(SummarizationRequest(source_text=JUDGMENT, target_language_code="xx"))
        assert llm.calls == []

    def test_rate_limit_propagates(self):
        with pytest.raises(BackendRateLimited):
            _summarizer(FakeLLM(summarize=BackendRateLimited())).summarize(SummarizationRequest(source_text=JUDGMENT))

    def test_empty_summary(self):
        with pytest.raises(BackendUnavailable, match="No summary generated"):
            _summarizer(FakeLLM(summarize="  ")).summarize(SummarizationRequest(source_text=JUDGMENT))

    def test_degraded_enforcement_still_returns(self):
        llm = FakeLLM(enforce=BackendUnavailable())
        resp = _summarizer(llm, FakeTranslator(error=BackendUnavailable())).summarize(
            SummarizationRequest(source_text=JUDGMENT, target_language_code="hi")
        )
        assert resp.summary_text == "The court granted bail to the petitioner."
        assert "final-enforcement" in resp.degraded_layers


class TestTranslateText:
    def test_requires_text_and_target(self):
        with pytest.raises(InputError, match="text and targetLanguage are required"):
            LegalSummarizer().translate_text("", "hi")
        with pytest.raises(InputError, match="text and targetLanguage are required"):
            LegalSummarizer().translate_text("text", None)

    def test_translates(self):
        llm = FakeLLM()
        assert _summarizer(llm).translate_text("The court granted bail.", "hi") == "अनुवादित पाठ"
        assert llm.kinds() == ["translate"]
