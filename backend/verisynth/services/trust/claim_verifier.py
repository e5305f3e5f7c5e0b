"""
Claim Verifier Service.

WHAT THIS DOES:
Verifies one claim against live web sources through the analysis backend
and returns a new Claim with its terminal status.

HOW IT WORKS:
1. Send the normalized assertion (claim.claim) to the grounded verification call
2. Classify the free-text answer into a status (status_classifier.classify)
3. Take sources from the grounding metadata only, deduplicated in order
4. Keep the full answer as evidence

FAILURE HANDLING:
Any fault of the remote call (network, timeout, rate limit, malformed
response) is absorbed here. The claim comes back as unverifiable with an
explanation and no evidence. Sibling verifications are never affected.
Errors raised by the classifier are not remote faults and propagate.

USAGE:
    verifier = ClaimVerifier(backend)
    verified = await verifier.verify(claim)
"""

import asyncio
import logging
from typing import Callable

from verisynth.config import get_settings
from verisynth.models.schemas import Claim, ClaimStatus
from verisynth.services.llm.base import AnalysisBackend
from verisynth.services.trust.status_classifier import classify

logger = logging.getLogger(__name__)

VERIFICATION_FAILURE_EXPLANATION = (
    "Verification failed: the grounding service timed out or returned an error."
)


def _dedupe_sources(sources: list[str]) -> list[str]:
    """Remove duplicate URIs while preserving order."""
    seen = set()
    unique_sources = []
    for source in sources:
        if source and source not in seen:
            seen.add(source)
            unique_sources.append(source)
    return unique_sources


class ClaimVerifier:
    """
    Verifies single claims with a grounded remote call.

    Pipeline position:
    ClaimAligner → [ClaimVerifier] (once per claim, concurrently) → TrustScorer

    The input claim is never modified; verify() returns a replacement.
    """

    def __init__(
        self,
        backend: AnalysisBackend,
        classifier: Callable[[str], ClaimStatus] = classify,
        allow_doubtful: bool | None = None,
        timeout_seconds: float | None = None,
    ):
        """
        Args:
            backend: Remote analysis provider
            classifier: Maps the answer text to a status (swap for tests or experiments)
            allow_doubtful: Keep the doubtful tier. Defaults to config value.
                When disabled, a doubtful status from any classifier becomes unverifiable.
            timeout_seconds: Wall-clock limit for the remote call. Defaults to config value.
        """
        settings = get_settings()
        self.backend = backend
        self.classifier = classifier
        self.allow_doubtful = (
            allow_doubtful if allow_doubtful is not None else settings.enable_doubtful_status
        )
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.remote_call_timeout_seconds
        )

    async def verify(self, claim: Claim) -> Claim:
        """
        Verify a claim and return its verified replacement.

        Args:
            claim: A claim with status=checking

        Returns:
            New Claim with terminal status, evidence and sources,
            or unverifiable with an explanation if the remote call failed
        """
        try:
            answer = await asyncio.wait_for(
                self.backend.verify_claim(claim.claim),
                timeout=self.timeout_seconds,
            )
        except Exception as e:
            logger.warning(f"Verification of {claim.id} failed: {e!r}")
            return self.failed(claim)

        status = self.classifier(answer.text)
        if status == ClaimStatus.DOUBTFUL and not self.allow_doubtful:
            status = ClaimStatus.UNVERIFIABLE
        sources = _dedupe_sources(answer.sources)

        logger.info(f"Verified {claim.id}: {status.value} ({len(sources)} sources)")

        return claim.model_copy(
            update={
                "status": status,
                "evidence": answer.text,
                "sources": sources,
            }
        )

    def failed(self, claim: Claim, explanation: str = VERIFICATION_FAILURE_EXPLANATION) -> Claim:
        """Replacement for a claim whose verification could not complete."""
        return claim.model_copy(
            update={
                "status": ClaimStatus.UNVERIFIABLE,
                "evidence": None,
                "sources": [],
                "explanation": explanation,
            }
        )


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

async def verify_claim(claim: Claim, backend: AnalysisBackend) -> Claim:
    """
    Convenience function to verify a single claim.

    Example:
        verified = await verify_claim(claim, backend)
        print(verified.status, verified.sources)
    """
    verifier = ClaimVerifier(backend)
    return await verifier.verify(claim)
