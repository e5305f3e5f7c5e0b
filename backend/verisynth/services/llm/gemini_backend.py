"""
Gemini Analysis Backend.

WHAT THIS DOES:
Runs extraction, grounded verification and summary on Google Gemini.

HOW GROUNDING WORKS:
The verification call enables the Google Search tool. Gemini searches the
live web, answers in free text, and attaches a grounding_metadata block:

    candidates[0].grounding_metadata.grounding_chunks = [
        {"web": {"uri": "https://...", "title": "..."}},
        ...
    ]

The URIs there are the authoritative source list. URLs mentioned in the
free text are ignored.

USAGE:
    backend = GeminiBackend()
    raw_claims = await backend.extract_claims(text)
    answer = await backend.verify_claim(raw_claims[0].claim)
"""

import logging

from google import genai
from google.genai import types

from verisynth.config import get_settings
from verisynth.models.schemas import ClaimStatus, RawClaim
from verisynth.services.llm.base import AnalysisBackend, GroundedAnswer, parse_raw_claims
from verisynth.services.llm.prompts import (
    VERIFICATION_SYSTEM_PROMPT,
    build_extraction_prompt,
    build_summary_prompt,
    build_verification_prompt,
)

logger = logging.getLogger(__name__)

# Structured output schema for extraction: both fields required per record
EXTRACTION_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "originalText": types.Schema(type=types.Type.STRING),
            "claim": types.Schema(type=types.Type.STRING),
        },
        required=["originalText", "claim"],
    ),
)


def _grounding_uris(response: types.GenerateContentResponse) -> list[str]:
    """Collect web URIs from the first candidate's grounding metadata."""
    candidates = response.candidates or []
    if not candidates:
        return []

    metadata = candidates[0].grounding_metadata
    if metadata is None:
        return []

    uris = []
    for chunk in metadata.grounding_chunks or []:
        if chunk.web is not None and chunk.web.uri:
            uris.append(chunk.web.uri)
    return uris


class GeminiBackend(AnalysisBackend):
    """Analysis backend on the google-genai SDK (async client)."""

    def __init__(self, api_key: str | None = None, model: str | None = None):
        settings = get_settings()
        self.client = genai.Client(api_key=api_key or settings.gemini_api_key or None)
        self.model = model or settings.gemini_model

    @property
    def provider_name(self) -> str:
        return "gemini"

    async def extract_claims(self, text: str) -> list[RawClaim]:
        logger.info(f"Gemini extraction ({len(text)} chars, model={self.model})")

        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=build_extraction_prompt(text),
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=EXTRACTION_SCHEMA,
                temperature=0.1,
            ),
        )
        return parse_raw_claims(response.text)

    async def verify_claim(self, claim_text: str) -> GroundedAnswer:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=build_verification_prompt(claim_text),
            config=types.GenerateContentConfig(
                system_instruction=VERIFICATION_SYSTEM_PROMPT,
                tools=[types.Tool(google_search=types.GoogleSearch())],
            ),
        )
        return GroundedAnswer(text=response.text or "", sources=_grounding_uris(response))

    async def summarize(self, pairs: list[tuple[str, ClaimStatus]]) -> str:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=build_summary_prompt(pairs),
        )
        return response.text or ""
