"""
Pydantic schemas for claims, verification results and API request/response.

These define the shape of data that flows through the analysis pipeline
and out of the API. The VerificationResult is the core output of the system.

FLOW OVERVIEW:
==============
1. User sends AnalyzeRequest to /api/analyze
2. Remote extraction returns RawClaim[]
3. ClaimAligner anchors them in the text → Claim[] (status: checking)
4. ClaimVerifier replaces each Claim with its verified version
5. TrustScorer + summary produce the VerificationResult
6. The API wraps it into an AnalysisReport for the UI
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


# =============================================================================
# CLAIM STATUS
# =============================================================================

class ClaimStatus(str, Enum):
    """
    Verification status of a single claim.

    CHECKING is the initial status set by the aligner. Verification moves a
    claim to exactly one of the terminal statuses and never revisits it.
    """
    CHECKING = "checking"
    VERIFIED = "verified"
    HALLUCINATION = "hallucination"
    DOUBTFUL = "doubtful"
    UNVERIFIABLE = "unverifiable"


# =============================================================================
# CLAIM SCHEMAS
# =============================================================================
#
# WHEN USED:
# - RawClaim: Parsed from the remote extraction payload
# - Claim: Created by ClaimAligner, replaced once by ClaimVerifier
#

class RawClaim(BaseModel):
    """
    A claim as returned by the remote extraction capability.

    USED BY: AnalysisBackend.extract_claims
    WHEN: Before alignment, nothing is known about its position yet

    The remote schema uses camelCase (originalText), both names are accepted.
    """
    model_config = ConfigDict(populate_by_name=True)

    original_text: str = Field(
        alias="originalText",
        description="The exact substring of the input that carries the claim",
    )
    claim: str = Field(description="The normalized factual assertion")


class Claim(BaseModel):
    """
    An atomic factual assertion anchored to a character range of the input.

    LIFECYCLE:
    1. ClaimAligner creates the Claim with status=checking and its offsets
    2. ClaimVerifier returns a replacement with the terminal status,
       evidence, sources and (on failure) an explanation

    The range is half-open: text[start_index:end_index] == original_text.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique identifier within a result (e.g., 'claim-0')")
    original_text: str = Field(description="The claim-bearing substring of the input")
    claim: str = Field(description="The normalized factual assertion")
    status: ClaimStatus = ClaimStatus.CHECKING

    evidence: str | None = Field(
        default=None,
        description="Full free-text response of the grounded verification call",
    )
    sources: list[str] = Field(
        default_factory=list,
        description="Source URIs from the grounding metadata, deduplicated, in order",
    )
    explanation: str | None = Field(
        default=None,
        description="Why the claim ended up with its status when verification failed",
    )

    start_index: int = Field(ge=0, description="Start character offset (inclusive)")
    end_index: int = Field(description="End character offset (exclusive)")

    @model_validator(mode="after")
    def _check_range(self) -> "Claim":
        if self.end_index <= self.start_index:
            raise ValueError(
                f"end_index ({self.end_index}) must be greater than "
                f"start_index ({self.start_index})"
            )
        if self.end_index - self.start_index != len(self.original_text):
            raise ValueError("Offset range length does not match original_text")
        return self


# =============================================================================
# RESULT SCHEMAS
# =============================================================================

class VerificationResult(BaseModel):
    """
    The output of one analysis request.

    USED BY: AnalysisPipeline.analyze
    WHEN: After extraction, verification, scoring and summary complete

    Claims keep extraction order (not sorted by offset or status).
    Immutable: a new request always produces a new result.
    """
    model_config = ConfigDict(frozen=True)

    trust_score: int = Field(ge=0, le=100, description="Aggregate reliability (0-100)")
    claims: list[Claim] = Field(default_factory=list)
    summary: str


class StatusBreakdown(BaseModel):
    """
    How many claims ended in each terminal status.

    DISPLAYED: Counter tiles next to the trust score
    """
    verified: int = 0
    hallucination: int = 0
    doubtful: int = 0
    unverifiable: int = 0


class HighlightSegment(BaseModel):
    """
    A slice of the input text for inline rendering.

    Plain text segments carry no claim_id/status.
    Concatenating all segments reproduces the input text exactly.
    """
    text: str
    start_index: int
    end_index: int
    claim_id: str | None = None
    status: ClaimStatus | None = None


# =============================================================================
# API SCHEMAS
# =============================================================================

class AnalyzeRequest(BaseModel):
    """
    Request body for the /api/analyze endpoint.

    Example:
        POST /api/analyze
        {"text": "Elon Musk was the first person to walk on Mars in 2023."}

    Whitespace-only text passes validation on purpose: the pipeline rejects
    it with EmptyInputError so the message is the same for every caller.
    """
    text: str = Field(description="The text to analyze")


class AnalysisReport(BaseModel):
    """
    Response of POST /api/analyze.

    FRONTEND MAPPING:
    - trust_score / trust_level → score gauge
    - summary → analysis summary
    - status_breakdown → counter tiles
    - segments → highlighted transcript
    - claims → claim inspector (evidence, sources)
    """
    text: str
    trust_score: int = Field(ge=0, le=100)
    trust_level: Literal["high", "medium", "low"]
    summary: str
    claims: list[Claim]
    status_breakdown: StatusBreakdown
    segments: list[HighlightSegment]
    scoring_policy: Literal["weighted", "ratio"]
