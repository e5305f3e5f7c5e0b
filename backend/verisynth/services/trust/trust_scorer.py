"""
Trust Scorer Service.

WHAT THIS DOES:
Reduces the statuses of all verified claims to one integer trust score (0-100).

POLICIES (pick one with SCORING_POLICY):

weighted (default)
    Each claim contributes points, the score is the rounded mean.
    - verified:                 100
    - doubtful / unverifiable:   20
    - hallucination:              0

ratio
    Share of verified claims: round(100 * verified / total).
    Doubtful and unverifiable claims count the same as hallucinations.

The two policies disagree on doubtful/unverifiable claims. Weighted is the
default because an unconfirmed claim is not evidence of a fabricated one.

GUARANTEES (both policies):
- Always an integer in [0, 100]
- 100 when there are no claims (nothing to distrust)
- Upgrading one claim to a higher-scoring status never lowers the score

EXAMPLE:
    statuses = [verified, verified, unverifiable, hallucination]
    weighted → (100 + 100 + 20 + 0) / 4 = 55
    ratio    → 100 * 2 / 4             = 50

USAGE:
    score = calculate_trust_score(claims)
    level = trust_level(score)     # "high" / "medium" / "low"
"""

import logging
import math
from typing import Literal

from verisynth.config import get_settings
from verisynth.models.schemas import Claim, ClaimStatus, StatusBreakdown

logger = logging.getLogger(__name__)

ScoringPolicy = Literal["weighted", "ratio"]

# Points per status for the weighted policy
# CHECKING only shows up if a claim escaped verification, it earns nothing
STATUS_POINTS: dict[ClaimStatus, int] = {
    ClaimStatus.VERIFIED: 100,
    ClaimStatus.DOUBTFUL: 20,
    ClaimStatus.UNVERIFIABLE: 20,
    ClaimStatus.HALLUCINATION: 0,
    ClaimStatus.CHECKING: 0,
}

EMPTY_SCORE = 100

# Trust level thresholds (score gauge colors)
HIGH_TRUST_THRESHOLD = 80
MEDIUM_TRUST_THRESHOLD = 50


def _round_half_up(value: float) -> int:
    """Round .5 up (Python's round() would round 0.5 and 2.5 to even)."""
    return math.floor(value + 0.5)


class TrustScorer:
    """
    Computes the aggregate trust score.

    Pipeline position:
    ClaimVerifier → [TrustScorer] → summary → VerificationResult
    """

    def __init__(self, policy: ScoringPolicy | None = None):
        """
        Args:
            policy: "weighted" or "ratio". Defaults to config value.
        """
        self.policy = policy or get_settings().scoring_policy
        if self.policy not in ("weighted", "ratio"):
            raise ValueError(f"Unknown scoring policy: {self.policy!r}")

    def score(self, claims: list[Claim]) -> int:
        """
        Score a set of verified claims.

        Returns:
            Integer trust score between 0 and 100
        """
        if not claims:
            return EMPTY_SCORE

        total = len(claims)

        if self.policy == "ratio":
            verified = sum(1 for c in claims if c.status == ClaimStatus.VERIFIED)
            raw_score = 100 * verified / total
        else:
            points = sum(STATUS_POINTS[c.status] for c in claims)
            raw_score = points / total

        trust_score = max(0, min(100, _round_half_up(raw_score)))

        logger.info(f"Trust score ({self.policy}): {trust_score} over {total} claims")
        return trust_score


def summarize_statuses(claims: list[Claim]) -> StatusBreakdown:
    """Count claims per terminal status."""
    return StatusBreakdown(
        verified=sum(1 for c in claims if c.status == ClaimStatus.VERIFIED),
        hallucination=sum(1 for c in claims if c.status == ClaimStatus.HALLUCINATION),
        doubtful=sum(1 for c in claims if c.status == ClaimStatus.DOUBTFUL),
        unverifiable=sum(1 for c in claims if c.status == ClaimStatus.UNVERIFIABLE),
    )


def trust_level(score: int) -> Literal["high", "medium", "low"]:
    """Bucket a trust score: high >= 80, medium >= 50, low otherwise."""
    if score >= HIGH_TRUST_THRESHOLD:
        return "high"
    if score >= MEDIUM_TRUST_THRESHOLD:
        return "medium"
    return "low"


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def calculate_trust_score(claims: list[Claim], policy: ScoringPolicy | None = None) -> int:
    """
    Convenience function to compute the trust score.
    """
    scorer = TrustScorer(policy)
    return scorer.score(claims)
