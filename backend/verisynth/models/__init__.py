# API schemas and domain models
from verisynth.models.schemas import (
    AnalysisReport,
    AnalyzeRequest,
    Claim,
    ClaimStatus,
    HighlightSegment,
    RawClaim,
    StatusBreakdown,
    VerificationResult,
)

__all__ = [
    "AnalysisReport",
    "AnalyzeRequest",
    "Claim",
    "ClaimStatus",
    "HighlightSegment",
    "RawClaim",
    "StatusBreakdown",
    "VerificationResult",
]
