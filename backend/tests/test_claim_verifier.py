"""
Tests for the Claim Verifier.

Run with: pytest backend/tests/test_claim_verifier.py -v
"""

import pytest

from verisynth.models.schemas import ClaimStatus
from verisynth.services.llm.base import GroundedAnswer
from verisynth.services.trust.claim_verifier import (
    VERIFICATION_FAILURE_EXPLANATION,
    ClaimVerifier,
)


@pytest.mark.asyncio
async def test_verified_claim_keeps_answer_and_deduplicated_sources(fake_backend_cls, claim_factory):
    """Sources come from grounding metadata, duplicates dropped, order kept."""
    claim = claim_factory(original_text="Water boils at 100 degrees")
    backend = fake_backend_cls(
        answers={
            claim.claim: GroundedAnswer(
                text="Status: verified. Confirmed by two encyclopedias.",
                sources=["https://a.example", "https://b.example", "https://a.example", ""],
            )
        }
    )
    verifier = ClaimVerifier(backend, allow_doubtful=True, timeout_seconds=5)

    result = await verifier.verify(claim)

    assert result.status == ClaimStatus.VERIFIED
    assert result.evidence == "Status: verified. Confirmed by two encyclopedias."
    assert result.sources == ["https://a.example", "https://b.example"]
    assert result.explanation is None


@pytest.mark.asyncio
async def test_verification_sends_normalized_claim(fake_backend_cls, claim_factory):
    """The normalized assertion is verified, not the original substring."""
    claim = claim_factory(original_text="It boils at 100C", claim="Water boils at 100 degrees Celsius")
    backend = fake_backend_cls()
    verifier = ClaimVerifier(backend, allow_doubtful=True, timeout_seconds=5)

    await verifier.verify(claim)

    assert backend.verify_calls == ["Water boils at 100 degrees Celsius"]


@pytest.mark.asyncio
async def test_remote_failure_becomes_unverifiable(fake_backend_cls, claim_factory):
    """A raised error never escapes; the claim gets an explanation instead."""
    claim = claim_factory()
    backend = fake_backend_cls(answers={claim.claim: ConnectionError("rate limited")})
    verifier = ClaimVerifier(backend, allow_doubtful=True, timeout_seconds=5)

    result = await verifier.verify(claim)

    assert result.status == ClaimStatus.UNVERIFIABLE
    assert result.evidence is None
    assert result.sources == []
    assert result.explanation == VERIFICATION_FAILURE_EXPLANATION


@pytest.mark.asyncio
async def test_timeout_becomes_unverifiable(fake_backend_cls, claim_factory):
    """A call past the time limit counts as a failure."""
    claim = claim_factory()
    backend = fake_backend_cls(verify_delay=1.0)
    verifier = ClaimVerifier(backend, allow_doubtful=True, timeout_seconds=0.01)

    result = await verifier.verify(claim)

    assert result.status == ClaimStatus.UNVERIFIABLE
    assert result.explanation == VERIFICATION_FAILURE_EXPLANATION


@pytest.mark.asyncio
async def test_input_claim_is_not_modified(fake_backend_cls, claim_factory):
    claim = claim_factory()
    backend = fake_backend_cls(answers={claim.claim: GroundedAnswer(text="This is fake.")})
    verifier = ClaimVerifier(backend, allow_doubtful=True, timeout_seconds=5)

    result = await verifier.verify(claim)

    assert result.status == ClaimStatus.HALLUCINATION
    assert claim.status == ClaimStatus.CHECKING, "Original claim should stay untouched"
    assert claim.evidence is None
    # Identity and position are carried over
    assert (result.id, result.start_index, result.end_index) == (
        claim.id,
        claim.start_index,
        claim.end_index,
    )


@pytest.mark.asyncio
async def test_doubtful_disabled_folds_into_unverifiable(fake_backend_cls, claim_factory):
    claim = claim_factory()
    backend = fake_backend_cls(
        answers={claim.claim: GroundedAnswer(text="Only one blog says so. Status: doubtful")}
    )

    enabled = await ClaimVerifier(backend, allow_doubtful=True, timeout_seconds=5).verify(claim)
    disabled = await ClaimVerifier(backend, allow_doubtful=False, timeout_seconds=5).verify(claim)

    assert enabled.status == ClaimStatus.DOUBTFUL
    assert disabled.status == ClaimStatus.UNVERIFIABLE


@pytest.mark.asyncio
async def test_single_argument_classifier_can_be_plugged_in(fake_backend_cls, claim_factory):
    """Any text -> status function works as the classifier."""
    claim = claim_factory()
    backend = fake_backend_cls(answers={claim.claim: GroundedAnswer(text="true")})

    def truthy_classifier(text):
        return ClaimStatus.VERIFIED if "true" in text else ClaimStatus.HALLUCINATION

    verifier = ClaimVerifier(
        backend,
        classifier=truthy_classifier,
        allow_doubtful=True,
        timeout_seconds=5,
    )

    result = await verifier.verify(claim)

    assert result.status == ClaimStatus.VERIFIED
    assert result.explanation is None


@pytest.mark.asyncio
async def test_doubtful_folding_applies_to_custom_classifier(fake_backend_cls, claim_factory):
    claim = claim_factory()
    verifier = ClaimVerifier(
        fake_backend_cls(),
        classifier=lambda text: ClaimStatus.DOUBTFUL,
        allow_doubtful=False,
        timeout_seconds=5,
    )

    result = await verifier.verify(claim)

    assert result.status == ClaimStatus.UNVERIFIABLE


@pytest.mark.asyncio
async def test_classifier_error_is_not_reported_as_remote_failure(fake_backend_cls, claim_factory):
    """A bug in the classifier propagates instead of blaming the grounding service."""
    claim = claim_factory()

    def broken_classifier(text):
        raise KeyError("missing table entry")

    verifier = ClaimVerifier(
        fake_backend_cls(),
        classifier=broken_classifier,
        allow_doubtful=True,
        timeout_seconds=5,
    )

    with pytest.raises(KeyError):
        await verifier.verify(claim)
