"""
OpenAI Analysis Backend.

WHAT THIS DOES:
Runs extraction, grounded verification and summary on OpenAI models.

GROUNDING:
Verification goes through the Responses API with the web search tool.
Citations come back as url_citation annotations on the output message,
which play the role of grounding metadata here.

JSON MODE:
Chat Completions JSON mode only returns objects, so extraction asks for
{"claims": [...]} and parse_raw_claims unwraps it.
"""

import logging

from openai import AsyncOpenAI

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

JSON_OBJECT_INSTRUCTION = (
    'Respond with a JSON object of the form {"claims": [{"originalText": "...", "claim": "..."}]}.'
)


def _citation_urls(response) -> list[str]:
    """Collect url_citation annotations from the Responses API output."""
    urls = []
    for item in response.output or []:
        if item.type != "message":
            continue
        for part in item.content or []:
            for annotation in getattr(part, "annotations", None) or []:
                if annotation.type == "url_citation" and annotation.url:
                    urls.append(annotation.url)
    return urls


class OpenAIBackend(AnalysisBackend):
    """Analysis backend on the OpenAI async client."""

    def __init__(self, api_key: str | None = None, model: str | None = None):
        settings = get_settings()
        self.client = AsyncOpenAI(api_key=api_key or settings.openai_api_key or None)
        self.model = model or settings.openai_model

    @property
    def provider_name(self) -> str:
        return "openai"

    async def extract_claims(self, text: str) -> list[RawClaim]:
        logger.info(f"OpenAI extraction ({len(text)} chars, model={self.model})")

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": JSON_OBJECT_INSTRUCTION},
                {"role": "user", "content": build_extraction_prompt(text)},
            ],
            response_format={"type": "json_object"},
            temperature=0.1,  # Low temperature for consistent extraction
        )
        return parse_raw_claims(response.choices[0].message.content)

    async def verify_claim(self, claim_text: str) -> GroundedAnswer:
        response = await self.client.responses.create(
            model=self.model,
            instructions=VERIFICATION_SYSTEM_PROMPT,
            input=build_verification_prompt(claim_text),
            tools=[{"type": "web_search_preview"}],
        )
        return GroundedAnswer(text=response.output_text or "", sources=_citation_urls(response))

    async def summarize(self, pairs: list[tuple[str, ClaimStatus]]) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": build_summary_prompt(pairs)}],
            temperature=0.3,
        )
        return response.choices[0].message.content or ""
