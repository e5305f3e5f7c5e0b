"""
Tests for the UI's HTTP client, against httpx.MockTransport.
"""

import json

import httpx
import pytest

from verisynth.ui import api_client
from verisynth.ui.api_client import AnalysisRequestError

BASE_URL = "http://api.test"


def transport_returning(status_code, **kwargs):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(status_code, **kwargs)

    return httpx.MockTransport(handler), seen


def test_analyze_posts_text_and_returns_report():
    transport, seen = transport_returning(200, json={"trust_score": 87})

    report = api_client.analyze("Some text", base_url=BASE_URL, transport=transport)

    assert report == {"trust_score": 87}
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/api/analyze"
    assert json.loads(seen[0].content) == {"text": "Some text"}


def test_error_detail_is_surfaced():
    transport, _ = transport_returning(502, json={"detail": "Claim extraction failed: quota"})

    with pytest.raises(AnalysisRequestError) as exc_info:
        api_client.analyze("Some text", base_url=BASE_URL, transport=transport)

    assert str(exc_info.value) == "Claim extraction failed: quota"
    assert exc_info.value.status_code == 502


def test_non_json_error_falls_back_to_body():
    transport, _ = transport_returning(500, text="Internal Server Error")

    with pytest.raises(AnalysisRequestError) as exc_info:
        api_client.analyze("Some text", base_url=BASE_URL, transport=transport)

    assert str(exc_info.value) == "HTTP 500: Internal Server Error"


def test_unreachable_api():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AnalysisRequestError) as exc_info:
        api_client.analyze("x", base_url=BASE_URL, transport=httpx.MockTransport(handler))

    assert "Could not reach the VeriSynth API" in str(exc_info.value)
    assert exc_info.value.status_code is None


def test_health_check():
    up, _ = transport_returning(200, json={"status": "healthy"})
    down, _ = transport_returning(503)

    assert api_client.health_check(base_url=BASE_URL, transport=up) is True
    assert api_client.health_check(base_url=BASE_URL, transport=down) is False
