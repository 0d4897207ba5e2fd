"""Article summarizer configuration — loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # --- LLM provider --------------------------------------------------
    llm_provider: str = "groq"  # "groq" | "openai" | "azure" | "local"

    # Groq (OpenAI-compatible endpoint)
    groq_api_key: str = ""
    groq_base_url: str = "https://api.groq.com/openai/v1"
    groq_model: str = "llama-3.3-70b-versatile"

    # OpenAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"

    # Azure OpenAI
    azure_openai_endpoint: str = ""
    azure_openai_api_key: str = ""
    azure_openai_deployment: str = ""

    # Local / Ollama
    local_llm_base_url: str = "http://localhost:11434/v1"
    local_llm_model: str = "llama3"

    # --- Summaries ------------------------------------------------------
    summary_temperature: float = 0.7
    summary_max_tokens: int = 1000

    # --- Article fetch --------------------------------------------------
    fetch_timeout: float | None = None  # None → wait indefinitely
    fetch_user_agent: str = "article-summarizer/0.1"

    # --- Saved summaries ------------------------------------------------
    history_path: str = "saved_summaries.json"
    api_base_url: str = "http://localhost:8000"

    # --- Server ---------------------------------------------------------
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"
    allowed_origins: str = "*"  # comma-separated origins, e.g. "http://localhost:3000,https://app.example.com"


settings = Settings()
