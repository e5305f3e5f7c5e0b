"""
Tests for the keyword status classifier.
"""

import pytest

from verisynth.models.schemas import ClaimStatus
from verisynth.services.trust.status_classifier import STATUS_KEYWORDS, classify


@pytest.mark.parametrize(
    "response_text, expected",
    [
        ("Status: verified. Two reputable sources confirm it.", ClaimStatus.VERIFIED),
        ("Status: HALLUCINATION. No such event occurred.", ClaimStatus.HALLUCINATION),
        ("This is fake news.", ClaimStatus.HALLUCINATION),
        ("Only one outlet reports this. Status: doubtful", ClaimStatus.DOUBTFUL),
        ("Status: unverifiable", ClaimStatus.UNVERIFIABLE),
        ("I could not find anything.", ClaimStatus.UNVERIFIABLE),
        ("", ClaimStatus.UNVERIFIABLE),
    ],
)
def test_single_keyword(response_text, expected):
    assert classify(response_text) == expected


def test_precedence_verified_beats_unverifiable():
    """A hedge mentioning both keywords resolves by table order."""
    text = "The claim is verified by Reuters; it is not unverifiable."

    assert classify(text) == ClaimStatus.VERIFIED


def test_precedence_hallucination_beats_doubtful():
    assert classify("Doubtful at first, but this is a hallucination.") == ClaimStatus.HALLUCINATION


def test_precedence_doubtful_beats_unverifiable():
    assert classify("Doubtful; largely unverifiable.") == ClaimStatus.DOUBTFUL


def test_doubtful_folds_into_unverifiable_when_disabled():
    assert classify("Status: doubtful", allow_doubtful=False) == ClaimStatus.UNVERIFIABLE


def test_disabling_doubtful_keeps_higher_precedence():
    assert classify("verified, not doubtful", allow_doubtful=False) == ClaimStatus.VERIFIED


def test_table_order():
    """The precedence order decides every tie; guard it."""
    assert [status for status, _ in STATUS_KEYWORDS] == [
        ClaimStatus.VERIFIED,
        ClaimStatus.HALLUCINATION,
        ClaimStatus.DOUBTFUL,
        ClaimStatus.UNVERIFIABLE,
    ]
