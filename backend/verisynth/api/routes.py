"""
API Routes.

ENDPOINTS:
- POST /api/analyze → text → AnalysisReport (trust score, claims, summary, highlights)

ERRORS:
- 400: text is empty or whitespace only (no remote call was made)
- 502: claim extraction failed at the remote service (no partial result)
- 503: the analysis backend could not be configured (e.g. missing API key)
The message is passed through verbatim in "detail" so the UI can show it.
"""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from verisynth.models.schemas import AnalysisReport, AnalyzeRequest
from verisynth.services.highlighting import build_highlight_segments
from verisynth.services.llm import get_backend
from verisynth.services.pipeline import AnalysisPipeline, EmptyInputError, ExtractionError
from verisynth.services.trust.trust_scorer import summarize_statuses, trust_level

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


@lru_cache
def _shared_pipeline() -> AnalysisPipeline:
    return AnalysisPipeline(get_backend())


def get_pipeline() -> AnalysisPipeline:
    """Dependency that provides the shared analysis pipeline."""
    try:
        return _shared_pipeline()
    except Exception as e:
        logger.error(f"Analysis backend unavailable: {e!r}")
        raise HTTPException(status_code=503, detail=f"Analysis backend unavailable: {e}") from e


# =============================================================================
# MAIN ANALYSIS ENDPOINT
# =============================================================================

@router.post("/analyze", response_model=AnalysisReport)
async def analyze(
    request: AnalyzeRequest,
    pipeline: AnalysisPipeline = Depends(get_pipeline),
) -> AnalysisReport:
    """
    Analyze a text: extract claims and verify each one against the live web.

    Example:
        POST /api/analyze
        {"text": "Elon Musk was the first person to walk on Mars in 2023."}

        Returns AnalysisReport with trust_score, claims, summary, segments
    """
    try:
        result = await pipeline.analyze(request.text)
    except EmptyInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ExtractionError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return AnalysisReport(
        text=request.text,
        trust_score=result.trust_score,
        trust_level=trust_level(result.trust_score),
        summary=result.summary,
        claims=result.claims,
        status_breakdown=summarize_statuses(result.claims),
        segments=build_highlight_segments(request.text, result.claims),
        scoring_policy=pipeline.scoring_policy,
    )
