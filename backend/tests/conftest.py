"""
Shared test fixtures.

FakeBackend stands in for the hosted model: deterministic answers per claim,
call recording, optional failures and an in-flight counter for concurrency
checks. No test in this suite touches the network.
"""

import asyncio

import pytest

from verisynth.models.schemas import Claim, ClaimStatus, RawClaim
from verisynth.services.llm.base import AnalysisBackend, GroundedAnswer

DEFAULT_ANSWER = GroundedAnswer(text="No data found for this claim. Status: unverifiable.")


class FakeBackend(AnalysisBackend):
    """Deterministic AnalysisBackend for tests."""

    def __init__(
        self,
        raw_claims: list[RawClaim] | None = None,
        answers: dict[str, GroundedAnswer | BaseException] | None = None,
        summary: str = "The text is mostly reliable.",
        extraction_error: Exception | None = None,
        summary_error: Exception | None = None,
        verify_delay: float = 0.0,
    ):
        self.raw_claims = raw_claims or []
        self.answers = answers or {}
        self.summary = summary
        self.extraction_error = extraction_error
        self.summary_error = summary_error
        self.verify_delay = verify_delay

        self.extract_calls: list[str] = []
        self.verify_calls: list[str] = []
        self.summarize_calls: list[list[tuple[str, ClaimStatus]]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def provider_name(self) -> str:
        return "fake"

    @property
    def total_calls(self) -> int:
        return len(self.extract_calls) + len(self.verify_calls) + len(self.summarize_calls)

    async def extract_claims(self, text: str) -> list[RawClaim]:
        self.extract_calls.append(text)
        if self.extraction_error is not None:
            raise self.extraction_error
        return list(self.raw_claims)

    async def verify_claim(self, claim_text: str) -> GroundedAnswer:
        self.verify_calls.append(claim_text)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.verify_delay)
            answer = self.answers.get(claim_text, DEFAULT_ANSWER)
            if isinstance(answer, BaseException):
                raise answer
            return answer
        finally:
            self.in_flight -= 1

    async def summarize(self, pairs: list[tuple[str, ClaimStatus]]) -> str:
        self.summarize_calls.append(list(pairs))
        if self.summary_error is not None:
            raise self.summary_error
        return self.summary


def make_claim(
    claim_id: str = "claim-0",
    original_text: str = "Water boils at 100 degrees",
    claim: str | None = None,
    status: ClaimStatus = ClaimStatus.CHECKING,
    start_index: int = 0,
) -> Claim:
    return Claim(
        id=claim_id,
        original_text=original_text,
        claim=claim or original_text,
        status=status,
        start_index=start_index,
        end_index=start_index + len(original_text),
    )


@pytest.fixture
def fake_backend_cls():
    """The FakeBackend class, so tests can build one with their own answers."""
    return FakeBackend


@pytest.fixture
def claim_factory():
    """Builds positioned claims for tests that skip the aligner."""
    return make_claim
