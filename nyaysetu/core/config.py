from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List

class Settings(BaseSettings):
    # API
    api_prefix: str = "/api"
    cors_origins: List[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # LLM provider
    llm_provider: str = Field("openai", description="openai|google")
    # The OpenAI-compatible gateway routes provider-prefixed ids; Gemini direct strips the prefix
    llm_model: str = Field("google/gemini-2.5-flash")
    llm_max_output_tokens: int = Field(4096, description="Maximum tokens to generate in responses")
    openai_api_key: str | None = None
    openai_base_url: str | None = Field(None, description="OpenAI-compatible chat-completions gateway")
    google_api_key: str | None = None
    request_timeout_seconds: float = Field(60.0, description="Per-call timeout for every backend request")

    # Translation backends
    google_translate_api_key: str | None = None
    google_translate_url: str = "https://translation.googleapis.com/language/translate/v2"
    mymemory_url: str = "https://api.mymemory.translated.net/get"

    # Pipeline bounds
    default_language: str = "en"
    summary_input_max_chars: int = 4000
    google_translate_chunk_size: int = 3500
    enforcement_chunk_size: int = 1500
    chunk_boundary_min: int = 200
    translation_workers: int = Field(1, description="Parallel chunk calls inside one translation layer")

    # Uploads
    max_upload_size_mb: int = 10

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
