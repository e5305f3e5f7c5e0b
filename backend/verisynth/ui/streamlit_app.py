"""VeriSynth - Streamlit UI.

Run with: streamlit run backend/verisynth/ui/streamlit_app.py
(the API must be running, see VERISYNTH_API_URL)
"""

import html

import streamlit as st

from verisynth.ui import api_client
from verisynth.ui.state import (
    AnalysisPhase,
    complete_analysis,
    fail_analysis,
    initial_state,
    reset,
    start_analysis,
)

EXAMPLES = {
    "Example Claim": (
        "The global market for quantum computing is expected to reach "
        "$1.3 trillion by 2030 according to McKinsey."
    ),
    "Example Hallucination": (
        "Elon Musk was the first person to walk on Mars in 2023, using a SpaceX Starship."
    ),
}

STATUS_COLORS = {
    "verified": "#10b981",
    "hallucination": "#ef4444",
    "doubtful": "#f59e0b",
    "unverifiable": "#f59e0b",
    "checking": "#64748b",
}

LEVEL_LABELS = {"high": "🟢 High trust", "medium": "🟡 Medium trust", "low": "🔴 Low trust"}

st.set_page_config(page_title="VeriSynth", page_icon="🔎", layout="wide")

if "analysis" not in st.session_state:
    st.session_state.analysis = initial_state()
if "input_text" not in st.session_state:
    st.session_state.input_text = ""


def run_analysis(text: str) -> None:
    state = start_analysis(st.session_state.analysis, text)
    st.session_state.analysis = state
    with st.spinner("Running factual verification loop... querying live web sources"):
        try:
            report = api_client.analyze(text)
        except api_client.AnalysisRequestError as e:
            st.session_state.analysis = fail_analysis(state, str(e))
        except Exception as e:
            # Unexpected payloads must not leave the UI stuck in "analyzing"
            st.session_state.analysis = fail_analysis(state, str(e))
        else:
            st.session_state.analysis = complete_analysis(state, report)


def render_transcript(report: dict) -> None:
    parts = []
    for segment in report["segments"]:
        text = html.escape(segment["text"])
        status = segment.get("status")
        if status is None:
            parts.append(text)
        else:
            color = STATUS_COLORS.get(status, STATUS_COLORS["checking"])
            parts.append(
                f'<span style="background-color: {color}33; border-bottom: 2px solid {color};" '
                f'title="{html.escape(segment["claim_id"])}: {status}">{text}</span>'
            )
    st.markdown(
        f'<div style="white-space: pre-wrap; line-height: 2;">{"".join(parts)}</div>',
        unsafe_allow_html=True,
    )
    st.caption("🟢 Verified | 🔴 Hallucination | 🟠 Doubtful / Unverifiable")


def render_claim_inspector(report: dict) -> None:
    claims = report["claims"]
    if not claims:
        st.info("No verifiable factual claims were found in this text.")
        return

    labels = {c["id"]: f'{c["status"].upper()}: {c["claim"][:80]}' for c in claims}
    selected_id = st.selectbox("Inspect a claim", list(labels), format_func=labels.get)
    claim = next(c for c in claims if c["id"] == selected_id)

    st.markdown(f'**Status:** `{claim["status"]}`')
    st.markdown(f'> {claim["claim"]}')

    st.markdown("**Evidence**")
    st.write(claim.get("evidence") or claim.get("explanation") or "No evidence snippet available.")

    sources = claim.get("sources") or []
    if sources:
        st.markdown("**Sources**")
        for source in sources[:3]:
            st.markdown(f"- [{source}]({source})")


def render_result(report: dict) -> None:
    if st.button("← Analyze New Text"):
        st.session_state.analysis = reset(st.session_state.analysis)
        st.rerun()

    st.caption(f'Found {len(report["claims"])} claims in {len(report["text"])} characters')

    col1, col2 = st.columns([1, 2])

    with col1:
        st.metric("Trust Score", report["trust_score"])
        st.markdown(LEVEL_LABELS[report["trust_level"]])

        st.subheader("Analysis Summary")
        st.markdown(f'_{report["summary"]}_')

        breakdown = report["status_breakdown"]
        c1, c2, c3 = st.columns(3)
        c1.metric("Verified", breakdown["verified"])
        c2.metric("Fakes", breakdown["hallucination"])
        c3.metric("Doubtful", breakdown["doubtful"] + breakdown["unverifiable"])

        st.divider()
        render_claim_inspector(report)

    with col2:
        st.subheader("Analysis Transcript")
        render_transcript(report)


def render_error(message: str) -> None:
    st.error(f"**Verification Error**\n\n{message}")
    if st.button("Try Again"):
        st.session_state.analysis = reset(st.session_state.analysis)
        st.rerun()


def render_input() -> None:
    st.markdown("**Try an example:**")
    example_cols = st.columns(len(EXAMPLES))
    for col, (label, example) in zip(example_cols, EXAMPLES.items()):
        if col.button(label):
            st.session_state.input_text = example

    text = st.text_area(
        "Paste AI-generated text or claims here for verification:",
        key="input_text",
        height=250,
    )

    if st.button("🔍 Verify Sources", type="primary", disabled=not text.strip()):
        run_analysis(text)
        st.rerun()


# Main content
st.title("🔎 VeriSynth")
st.markdown(
    "Extracts factual claims and validates them against real-time search data "
    "to catch hallucinations and fake citations."
)

with st.sidebar:
    st.header("⚙️ Backend")
    if api_client.health_check():
        st.success(f"API reachable at {api_client.API_BASE_URL}")
    else:
        st.warning(f"API not reachable at {api_client.API_BASE_URL}")

analysis = st.session_state.analysis

if analysis.phase == AnalysisPhase.RESULT:
    render_result(analysis.report)
elif analysis.phase == AnalysisPhase.ERROR:
    render_error(analysis.error)
else:
    render_input()
