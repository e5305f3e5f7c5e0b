from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Which hosted model performs extraction, grounded verification and summary
    # "gemini" = Google Search grounding, "openai" = Responses API web search
    llm_provider: Literal["gemini", "openai"] = "gemini"

    # Google Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-pro"

    # OpenAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"

    # Trust score policy
    # weighted = verified 100 / doubtful+unverifiable 20 / hallucination 0, averaged
    # ratio    = share of verified claims
    scoring_policy: Literal["weighted", "ratio"] = "weighted"

    # Keep the "doubtful" tier (single-source corroboration)
    # When disabled, doubtful responses are reported as unverifiable
    enable_doubtful_status: bool = True

    # Verification fan-out
    # Upper bound on in-flight grounded verification calls (respects provider rate limits)
    max_concurrent_verifications: int = 8

    # Wall-clock limit for any single remote call
    remote_call_timeout_seconds: float = 60.0

    # Server
    frontend_origins: list[str] = ["http://localhost:8501"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
