"""
Status Classifier.

WHAT THIS DOES:
Maps the free-text answer of a grounded verification call to a ClaimStatus.

HOW IT WORKS:
The verification prompt asks the model to name one status keyword. Answers
often mention more than one ("this is verified, not unverifiable"), so the
keywords are checked in a fixed precedence order and the first hit wins:

    verified > hallucination / fake > doubtful > unverifiable

No hit → unverifiable.

This is a keyword heuristic over unstructured text, not a parser. Matching
is plain substring containment on the lower-cased answer, so "unverified"
counts as "verified". Keep the table order as is: it decides every tie.
"""

from verisynth.models.schemas import ClaimStatus

# Precedence table: (status, keywords), highest precedence first
STATUS_KEYWORDS: tuple[tuple[ClaimStatus, tuple[str, ...]], ...] = (
    (ClaimStatus.VERIFIED, ("verified",)),
    (ClaimStatus.HALLUCINATION, ("hallucination", "fake")),
    (ClaimStatus.DOUBTFUL, ("doubtful",)),
    (ClaimStatus.UNVERIFIABLE, ("unverifiable",)),
)

DEFAULT_STATUS = ClaimStatus.UNVERIFIABLE


def classify(response_text: str, allow_doubtful: bool = True) -> ClaimStatus:
    """
    Classify a verification answer.

    Args:
        response_text: Free-text body of the verification response
        allow_doubtful: When False, a doubtful answer is reported as unverifiable

    Returns:
        The terminal status for the claim

    Example:
        classify("Status: verified. Sources: ...")          # VERIFIED
        classify("Not verified anywhere, likely FAKE")      # VERIFIED (precedence)
        classify("Only one source found. Status: doubtful") # DOUBTFUL
    """
    lowered = (response_text or "").lower()

    for status, keywords in STATUS_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            if status == ClaimStatus.DOUBTFUL and not allow_doubtful:
                return ClaimStatus.UNVERIFIABLE
            return status

    return DEFAULT_STATUS
