"""
Analysis Backends: the remote LLM capability behind one interface.

USAGE:
    from verisynth.services.llm import get_backend

    backend = get_backend()          # provider from LLM_PROVIDER
    raw_claims = await backend.extract_claims(text)

TOGGLE:
    LLM_PROVIDER=gemini (default) or LLM_PROVIDER=openai
"""

from verisynth.config import get_settings
from verisynth.services.llm.base import AnalysisBackend, GroundedAnswer, parse_raw_claims


def get_backend(provider: str | None = None) -> AnalysisBackend:
    """Build the configured analysis backend. SDK imports happen lazily."""
    provider = provider or get_settings().llm_provider

    if provider == "openai":
        from verisynth.services.llm.openai_backend import OpenAIBackend
        return OpenAIBackend()
    if provider == "gemini":
        from verisynth.services.llm.gemini_backend import GeminiBackend
        return GeminiBackend()
    raise ValueError(f"Unknown LLM provider: {provider!r}")


__all__ = [
    "AnalysisBackend",
    "GroundedAnswer",
    "get_backend",
    "parse_raw_claims",
]
