"""
UI Analysis State: an immutable value moved by pure reducers.

STATES (no others):
    idle ──start──▶ analyzing ──complete──▶ result
                        │
                        └──fail──▶ error

reset() returns to idle from anywhere. Retrying after an error is a reset
followed by a fresh start; nothing from the failed attempt is kept.

The Streamlit app keeps one AnalysisState in st.session_state and replaces
it on every transition; these functions never touch Streamlit.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred during verification."


class AnalysisPhase(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    RESULT = "result"
    ERROR = "error"


class InvalidTransitionError(RuntimeError):
    """Raised when a reducer is applied in a phase that does not allow it."""


@dataclass(frozen=True)
class AnalysisState:
    phase: AnalysisPhase = AnalysisPhase.IDLE
    input_text: str = ""
    report: Optional[dict[str, Any]] = None
    """AnalysisReport JSON from the API. Only set in the result phase."""
    error: Optional[str] = None
    """Failure message shown verbatim. Only set in the error phase."""


def initial_state() -> AnalysisState:
    return AnalysisState()


def start_analysis(state: AnalysisState, text: str) -> AnalysisState:
    """Begin analyzing text. Any previous result or error is discarded."""
    if state.phase == AnalysisPhase.ANALYZING:
        raise InvalidTransitionError("An analysis is already running")
    return AnalysisState(phase=AnalysisPhase.ANALYZING, input_text=text)


def complete_analysis(state: AnalysisState, report: dict[str, Any]) -> AnalysisState:
    if state.phase != AnalysisPhase.ANALYZING:
        raise InvalidTransitionError(f"Cannot complete from phase '{state.phase.value}'")
    return AnalysisState(phase=AnalysisPhase.RESULT, input_text=state.input_text, report=report)


def fail_analysis(state: AnalysisState, message: str | None) -> AnalysisState:
    if state.phase != AnalysisPhase.ANALYZING:
        raise InvalidTransitionError(f"Cannot fail from phase '{state.phase.value}'")
    return AnalysisState(
        phase=AnalysisPhase.ERROR,
        input_text=state.input_text,
        error=message or DEFAULT_ERROR_MESSAGE,
    )


def reset(state: AnalysisState) -> AnalysisState:
    return initial_state()
