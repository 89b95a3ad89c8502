import pytest

from nyaysetu.core.config import settings


@pytest.fixture(autouse=True)
def offline_settings(monkeypatch):
    """Keep every test off the network and on the stock pipeline bounds."""
    monkeypatch.setattr(settings, "google_translate_api_key", None)
    monkeypatch.setattr(settings, "default_language", "en")
    monkeypatch.setattr(settings, "translation_workers", 1)
    monkeypatch.setattr(settings, "summary_input_max_chars", 4000)
    monkeypatch.setattr(settings, "google_translate_chunk_size", 3500)
    monkeypatch.setattr(settings, "enforcement_chunk_size", 1500)
    monkeypatch.setattr(settings, "chunk_boundary_min", 200)
    yield
