"""
Analysis Backend: abstract interface to the hosted model.

WHAT THIS IS:
The boundary between VeriSynth and the remote LLM service. Everything that
is "hard" (finding claims, judging them against the live web, writing the
summary) happens behind this interface.

WHY AN ABSTRACT CLASS:
- Swap providers (Gemini, OpenAI) without touching the pipeline
- Substitute a deterministic fake in tests
- Keep prompt wording and SDK details out of the trust services

CONTRACT:
- extract_claims(text)   → ordered RawClaim list (schema-validated)
- verify_claim(claim)    → free text + grounding source URIs
- summarize(pairs)       → free-text reliability summary

Implementations raise on any remote fault. Deciding which faults are
recoverable is the caller's job (see ClaimVerifier and AnalysisPipeline).
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from verisynth.models.schemas import ClaimStatus, RawClaim


def parse_raw_claims(payload: str | None) -> list[RawClaim]:
    """
    Parse the extraction payload into RawClaim objects.

    Accepts a bare JSON array or an object wrapping it under "claims"
    (JSON mode providers must return an object).

    Raises:
        json.JSONDecodeError: payload is not JSON
        pydantic.ValidationError: a record misses originalText or claim
        ValueError: payload is JSON but not a claim list
    """
    data = json.loads(payload or "[]")
    if isinstance(data, dict):
        data = data.get("claims", [])
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of claims, got {type(data).__name__}")
    return [RawClaim.model_validate(item) for item in data]


@dataclass
class GroundedAnswer:
    """Response of a grounded verification call."""

    text: str
    """Free-text body. Carries the status keyword and the evidence."""

    sources: list[str] = field(default_factory=list)
    """URIs from the structured grounding metadata (may contain duplicates)."""


class AnalysisBackend(ABC):
    """
    Abstract base class for remote analysis providers.

    The default providers live in gemini_backend.py and openai_backend.py.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Short provider identifier used in logs."""
        pass

    @abstractmethod
    async def extract_claims(self, text: str) -> list[RawClaim]:
        """
        Identify atomic, verifiable factual assertions in the text.

        Args:
            text: The raw user text

        Returns:
            RawClaim list in the order the model reported them

        Raises:
            Any exception on network failure or malformed output
        """
        pass

    @abstractmethod
    async def verify_claim(self, claim_text: str) -> GroundedAnswer:
        """
        Verify one normalized assertion against live web sources.

        Args:
            claim_text: The normalized claim (not the original substring)

        Returns:
            GroundedAnswer with the response body and grounding URIs
        """
        pass

    @abstractmethod
    async def summarize(self, pairs: list[tuple[str, ClaimStatus]]) -> str:
        """
        Write a natural-language reliability summary.

        Args:
            pairs: (claim, status) for every verified claim, in order

        Returns:
            Summary text (may be empty, the pipeline substitutes a fallback)
        """
        pass
