"""
Claim Aligner Service.

WHAT THIS DOES:
Anchors each extracted claim to a character range of the original text.
This is the first local step after remote extraction.

WHY THIS MATTERS:
The model returns the claim-bearing substring, not its position. The UI
highlights claims inline, so every claim needs exact offsets. Claims whose
substring cannot be found (the model paraphrased instead of copying) are
dropped rather than kept with a sentinel position.

MATCHING RULES:
- Literal substring search (str.find), no regex, no fuzzy matching
- First occurrence wins
- Overlapping ranges are kept as-is (presentation decides what to do)

KNOWN LIMITATION:
A substring that appears several times in the text always binds to its
first occurrence, even if the model meant a later one.

EXAMPLE:
    text = "Paris is in France. Berlin is in Germany."
    raw  = [RawClaim(original_text="Berlin is in Germany", ...),
            RawClaim(original_text="Rome is in Spain", ...)]

    align_claims(text, raw)
    # → [Claim(id="claim-0", start_index=20, end_index=40, status=checking)]
    #   "claim-1" was not found and is dropped

USAGE:
    claims = align_claims(text, raw_claims)
"""

import logging

from verisynth.models.schemas import Claim, ClaimStatus, RawClaim

logger = logging.getLogger(__name__)


class ClaimAligner:
    """
    Turns RawClaims into positioned Claims.

    Pipeline position:
    Text → remote extraction → [ClaimAligner] → ClaimVerifier → ...
    """

    def align(self, text: str, raw_claims: list[RawClaim]) -> list[Claim]:
        """
        Locate every raw claim in the text.

        IDs use the position in the input list (before filtering), so the
        same input always yields the same IDs even when claims are dropped.

        Args:
            text: The original user text
            raw_claims: Claims from the remote extraction, in order

        Returns:
            Claims with status=checking, in extraction order
        """
        claims = []

        for index, raw_claim in enumerate(raw_claims):
            # An empty substring would produce an empty range
            if not raw_claim.original_text:
                logger.debug(f"Dropping claim-{index}: empty original text")
                continue

            start_index = text.find(raw_claim.original_text)
            if start_index == -1:
                logger.debug(
                    f"Dropping claim-{index}: '{raw_claim.original_text[:50]}' not found in text"
                )
                continue

            claims.append(
                Claim(
                    id=f"claim-{index}",
                    original_text=raw_claim.original_text,
                    claim=raw_claim.claim,
                    status=ClaimStatus.CHECKING,
                    start_index=start_index,
                    end_index=start_index + len(raw_claim.original_text),
                )
            )

        dropped = len(raw_claims) - len(claims)
        if dropped:
            logger.info(f"Aligned {len(claims)} claims ({dropped} not locatable in text)")
        else:
            logger.info(f"Aligned {len(claims)} claims")

        return claims


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def align_claims(text: str, raw_claims: list[RawClaim]) -> list[Claim]:
    """
    Convenience function to align raw claims with the source text.
    """
    aligner = ClaimAligner()
    return aligner.align(text, raw_claims)
