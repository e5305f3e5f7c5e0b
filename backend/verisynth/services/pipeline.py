"""
Analysis Pipeline: orchestrates extraction, verification, scoring and summary.

WHAT THIS DOES:
Turns a piece of user text into an immutable VerificationResult.
This is the one place that knows the full flow; API routes stay thin.

PIPELINE STAGES:
1. Input check: empty/whitespace text is rejected before any remote call
2. Extraction: one remote call → RawClaims → ClaimAligner → Claims
3. Verification: one grounded call per claim, all concurrently (bounded)
4. Scoring: TrustScorer reduces statuses to a 0-100 score
5. Summary: one remote call, fallback text if it yields nothing

FAILURE POLICY:
- Empty input          → EmptyInputError (nothing sent)
- Extraction fails     → ExtractionError, no partial result
- One verification fails → that claim is unverifiable, siblings unaffected
- Local error or cancellation in a verification task → unverifiable, local explanation
- Summary fails/empty  → "Summary unavailable."

USAGE:
    pipeline = AnalysisPipeline(backend)
    result = await pipeline.analyze("Elon Musk was the first person to walk on Mars in 2023.")
"""

import asyncio
import logging
import time

from verisynth.config import get_settings
from verisynth.models.schemas import Claim, VerificationResult
from verisynth.services.llm import get_backend
from verisynth.services.llm.base import AnalysisBackend
from verisynth.services.trust.claim_aligner import ClaimAligner
from verisynth.services.trust.claim_verifier import ClaimVerifier
from verisynth.services.trust.trust_scorer import ScoringPolicy, TrustScorer

logger = logging.getLogger(__name__)

SUMMARY_FALLBACK = "Summary unavailable."

LOCAL_FAILURE_EXPLANATION = (
    "Verification failed: the verification response could not be processed."
)


class EmptyInputError(ValueError):
    """Raised when the text to analyze is empty or whitespace only."""

    def __init__(self, message: str = "Please provide some text to analyze."):
        super().__init__(message)


class ExtractionError(RuntimeError):
    """Raised when claim extraction fails; the whole analysis is aborted."""


class AnalysisPipeline:
    """
    Orchestrates one analysis request from text to VerificationResult.

    Holds no per-request state, so one instance can serve many requests.
    """

    def __init__(
        self,
        backend: AnalysisBackend,
        scoring_policy: ScoringPolicy | None = None,
        max_concurrency: int | None = None,
        timeout_seconds: float | None = None,
        allow_doubtful: bool | None = None,
    ):
        """
        Initialize the pipeline.

        Args:
            backend: Remote analysis provider
            scoring_policy: "weighted" or "ratio". Defaults to config value.
            max_concurrency: Max in-flight verifications. Defaults to config value.
            timeout_seconds: Per remote call limit. Defaults to config value.
            allow_doubtful: Keep the doubtful tier. Defaults to config value.
        """
        settings = get_settings()
        self.backend = backend
        self.max_concurrency = max(1, max_concurrency or settings.max_concurrent_verifications)
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.remote_call_timeout_seconds
        )

        self.aligner = ClaimAligner()
        self.verifier = ClaimVerifier(
            backend,
            allow_doubtful=allow_doubtful,
            timeout_seconds=self.timeout_seconds,
        )
        self.scorer = TrustScorer(scoring_policy)

    @property
    def scoring_policy(self) -> ScoringPolicy:
        return self.scorer.policy

    async def analyze(self, text: str) -> VerificationResult:
        """
        Run the full pipeline and return a VerificationResult.

        Args:
            text: The user text to analyze

        Returns:
            VerificationResult with trust score, claims (extraction order) and summary

        Raises:
            EmptyInputError: text is empty or whitespace only
            ExtractionError: the remote extraction call failed
        """
        if not text or not text.strip():
            raise EmptyInputError()

        start_time = time.time()
        logger.info(f"Analysis starting: {len(text)} chars via {self.backend.provider_name}")

        # Stage 1: Extraction + alignment
        claims = await self._stage_extraction(text)

        # Stage 2: Verification fan-out
        verified_claims = await self._stage_verification(claims)

        # Stage 3: Scoring
        trust_score = self.scorer.score(verified_claims)

        # Stage 4: Summary
        summary = await self._stage_summary(verified_claims)

        logger.info(
            f"Analysis complete: trust_score={trust_score}, claims={len(verified_claims)}, "
            f"total time {time.time() - start_time:.2f}s"
        )

        return VerificationResult(
            trust_score=trust_score,
            claims=verified_claims,
            summary=summary,
        )

    # =========================================================================
    # STAGE 1: EXTRACTION
    # =========================================================================

    async def _stage_extraction(self, text: str) -> list[Claim]:
        """Extract claims remotely and anchor them in the text."""
        try:
            raw_claims = await asyncio.wait_for(
                self.backend.extract_claims(text),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Claim extraction timed out after {self.timeout_seconds}s")
            raise ExtractionError(
                f"Claim extraction timed out after {self.timeout_seconds:g} seconds."
            ) from e
        except Exception as e:
            logger.error(f"Claim extraction failed: {e!r}")
            raise ExtractionError(f"Claim extraction failed: {e}") from e

        logger.info(f"Extracted {len(raw_claims)} raw claims")
        return self.aligner.align(text, raw_claims)

    # =========================================================================
    # STAGE 2: VERIFICATION
    # =========================================================================

    async def _stage_verification(self, claims: list[Claim]) -> list[Claim]:
        """
        Verify all claims concurrently.

        Every verification is scheduled at once; the semaphore caps how many
        remote calls are in flight. gather keeps the input order.
        """
        if not claims:
            return []

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def verify_with_limit(claim: Claim) -> Claim:
            async with semaphore:
                return await self.verifier.verify(claim)

        start_time = time.time()
        results = await asyncio.gather(
            *[verify_with_limit(claim) for claim in claims],
            return_exceptions=True,
        )

        verified_claims = []
        for claim, result in zip(claims, results):
            if isinstance(result, BaseException):
                # ClaimVerifier absorbs remote faults; this catches local errors and cancellation
                logger.error(f"Verification task for {claim.id} crashed: {result!r}")
                verified_claims.append(self.verifier.failed(claim, LOCAL_FAILURE_EXPLANATION))
            else:
                verified_claims.append(result)

        logger.info(
            f"Verified {len(verified_claims)} claims in {time.time() - start_time:.2f}s "
            f"(max_concurrency={self.max_concurrency})"
        )
        return verified_claims

    # =========================================================================
    # STAGE 4: SUMMARY
    # =========================================================================

    async def _stage_summary(self, claims: list[Claim]) -> str:
        """Request the reliability summary, falling back on empty or failed responses."""
        pairs = [(claim.claim, claim.status) for claim in claims]

        try:
            summary = await asyncio.wait_for(
                self.backend.summarize(pairs),
                timeout=self.timeout_seconds,
            )
        except Exception as e:
            logger.warning(f"Summary request failed, using fallback: {e!r}")
            return SUMMARY_FALLBACK

        if not summary or not summary.strip():
            logger.warning("Summary response was empty, using fallback")
            return SUMMARY_FALLBACK

        return summary.strip()


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

async def analyze_text(text: str, backend: AnalysisBackend | None = None) -> VerificationResult:
    """
    Convenience function to run the analysis pipeline.

    Example:
        result = await analyze_text("The Eiffel Tower is in Berlin.")
        print(result.trust_score, result.summary)
    """
    pipeline = AnalysisPipeline(backend or get_backend())
    return await pipeline.analyze(text)
