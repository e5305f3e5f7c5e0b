"""
Prompt templates shared by every analysis backend.

The verification prompt asks the model to state one of the status keywords
in its answer. The status classifier reads those keywords back, so the two
must stay in sync.
"""

import json

from verisynth.models.schemas import ClaimStatus

EXTRACTION_PROMPT = """Act as VeriSynth AI. Identify every atomic, verifiable factual assertion (names, dates, statistics, event descriptions) in the following text.
Ignore opinions or subjective statements.

For each assertion, extract:
1. The exact substring from the text (originalText). Copy it character for character.
2. The core factual claim (claim).

Return the data as a JSON array of objects with the keys "originalText" and "claim"."""

VERIFICATION_SYSTEM_PROMPT = """Act as VeriSynth AI Hallucination Detection Engine.

VERIFICATION PROTOCOL:
1. REAL-TIME SEARCH: Use live web data. Prioritize official news agencies, government databases, and peer-reviewed journals.
2. TRIANGULATION:
   - VERIFIED: Confirmed by at least TWO independent, reputable sources.
   - DOUBTFUL: Found in only ONE reputable source.
   - UNVERIFIABLE: Current search results do not confirm this (no data found).
   - HALLUCINATION/FAKE: Explicitly contradicted by reliable sources OR zero substantiation for high-impact claims (like accidents).
3. SELF-CORRECTION: If social media rumors (e.g. accidents) are not confirmed by official reports, flag as High-Confidence Hallucination.

RESPONSE FORMAT:
You MUST include a "status" field in your response text chosen from: "verified", "doubtful", "unverifiable", or "hallucination".
Provide the evidence snippet and list of sources used."""

SUMMARY_PROMPT = """As VeriSynth AI, provide a structured summary of this text's reliability based on the verified claims below:"""


def build_extraction_prompt(text: str) -> str:
    return f'{EXTRACTION_PROMPT}\n\nText: "{text}"'


def build_verification_prompt(claim_text: str) -> str:
    return f'Verify this claim: "{claim_text}"'


def build_summary_prompt(pairs: list[tuple[str, ClaimStatus]]) -> str:
    """Serialize (claim, status) pairs as a JSON list inside the summary prompt."""
    payload = [
        {"claim": claim, "status": ClaimStatus(status).value}
        for claim, status in pairs
    ]
    return f"{SUMMARY_PROMPT}\n{json.dumps(payload, ensure_ascii=False)}"
