"""
HTTP client for the VeriSynth API, used by the Streamlit UI.

USAGE:
    report = analyze("Elon Musk was the first person to walk on Mars in 2023.")
    report["trust_score"]   # 0

Failures raise AnalysisRequestError with the API's "detail" message, or the
transport error text when the API could not be reached.
"""

import os
from typing import Any

import httpx

API_BASE_URL = os.getenv("VERISYNTH_API_URL", "http://localhost:8000")

# Analysis fans out to one grounded search per claim, allow plenty of time
ANALYZE_TIMEOUT = 300.0
HEALTH_TIMEOUT = 5.0


class AnalysisRequestError(Exception):
    """The analysis request did not produce a report."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def _error_detail(response: httpx.Response) -> str:
    """Pull FastAPI's "detail" out of an error response, else the raw body."""
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, str) and detail:
        return detail
    return f"HTTP {response.status_code}: {response.text}"


def analyze(
    text: str,
    base_url: str = API_BASE_URL,
    transport: httpx.BaseTransport | None = None,
) -> dict[str, Any]:
    """
    Send text to POST /api/analyze and return the AnalysisReport JSON.

    Args:
        text: Text to analyze
        base_url: API base URL (defaults to VERISYNTH_API_URL)
        transport: Optional httpx transport (tests use httpx.MockTransport)

    Raises:
        AnalysisRequestError: non-2xx response or transport failure
    """
    try:
        with httpx.Client(base_url=base_url, timeout=ANALYZE_TIMEOUT, transport=transport) as client:
            response = client.post("/api/analyze", json={"text": text})
    except httpx.HTTPError as e:
        raise AnalysisRequestError(f"Could not reach the VeriSynth API: {e}") from e

    if response.is_error:
        raise AnalysisRequestError(_error_detail(response), status_code=response.status_code)

    return response.json()


def health_check(
    base_url: str = API_BASE_URL,
    transport: httpx.BaseTransport | None = None,
) -> bool:
    """True if GET /health answers with 200."""
    try:
        with httpx.Client(base_url=base_url, timeout=HEALTH_TIMEOUT, transport=transport) as client:
            return client.get("/health").status_code == 200
    except httpx.HTTPError:
        return False
