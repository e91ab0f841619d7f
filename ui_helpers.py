"""
ui_helpers.py
=============
Stateless presentation helpers shared by the console (cli.py) and the
Streamlit interface (app.py).

These functions turn engine results into player-facing text but carry no
game state of their own. Keeping them separate means the wording can be
tested without a terminal or a live Streamlit session.

Contains:
  - format_outcome()      : StepOutcome → notification line
  - format_clue_list()    : collected clues → bulleted block
  - format_clue_summary() : (clue, suspect) pairs → bulleted block
  - format_verdict()      : AccusationResult → result line
  - build_css()           : returns the dark-noir CSS string
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from config import CONSOLE_CONFIG
from models import AccusationResult, OutcomeKind, StepOutcome


CONTROLS_HINT = (
    f"Controls: left ({CONSOLE_CONFIG.left_key}), "
    f"right ({CONSOLE_CONFIG.right_key}), "
    f"stop exploring ({CONSOLE_CONFIG.stop_key})"
)

MOVE_PROMPT = (
    f"Where to? ({CONSOLE_CONFIG.left_key}=left, "
    f"{CONSOLE_CONFIG.right_key}=right, {CONSOLE_CONFIG.stop_key}=stop): "
)

NO_CLUES_LINE = "  (no clues collected)"


def format_outcome(outcome: StepOutcome) -> str:
    """
    Return the notification line for one exploration outcome.

    MOVED outcomes render as the "You are in ..." line, which is also what
    the caller prints for the start room.
    """
    kind = outcome.kind
    if kind is OutcomeKind.NEW_CLUE:
        return f'You found a clue: "{outcome.clue}". It has been added to your notebook.'
    if kind is OutcomeKind.DUPLICATE_CLUE:
        return f'You already have the clue from this room: "{outcome.clue}" (not duplicated).'
    if kind is OutcomeKind.NO_CLUE:
        return "No clue found in this room."
    if kind is OutcomeKind.MOVED:
        return f"You are in: {outcome.room}"
    if kind is OutcomeKind.NO_ROOM:
        return f"There is no room to the {outcome.direction}. You stay in {outcome.room}."
    if kind is OutcomeKind.UNKNOWN_COMMAND:
        return (
            f"Unknown command. Use '{CONSOLE_CONFIG.left_key}', "
            f"'{CONSOLE_CONFIG.right_key}' or '{CONSOLE_CONFIG.stop_key}'."
        )
    return "Leaving the exploration..."


def format_clue_list(clues: Iterable[str]) -> str:
    """Bulleted, one-clue-per-line block (or the empty placeholder)."""
    lines = [f"  - {clue}" for clue in clues]
    return "\n".join(lines) if lines else NO_CLUES_LINE


def format_clue_summary(pairs: Iterable[Tuple[str, Optional[str]]]) -> str:
    lines: List[str] = []
    for clue, suspect in pairs:
        lines.append(f"  - {clue} -> {suspect if suspect is not None else '(no suspect)'}")
    return "\n".join(lines) if lines else NO_CLUES_LINE


def format_verdict(result: AccusationResult) -> str:
    """
    One-line verdict for an accusation.

    Example:
        >>> format_verdict(AccusationResult(accused="Mr. Black", score=2, supported=True))
        '2 clue(s) point to Mr. Black. Accusation supported: Mr. Black is the culprit!'
    """
    head = f"{result.score} clue(s) point to {result.accused}."
    if result.supported:
        return f"{head} Accusation supported: {result.accused} is the culprit!"
    return f"{head} Weak accusation: not enough evidence against {result.accused}."


# ---------------------------------------------------------------------------
# Dark-noir CSS
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    Return the CSS string injected into the Streamlit app.

    Returns:
        A raw CSS string (without <style> tags — the caller wraps it).
    """
    return """
    @import url('https://fonts.googleapis.com/css2?family=Special+Elite&family=Courier+Prime:wght@400;700&display=swap');

    /* ── Global dark background ── */
    html, body, .stApp, .main, .block-container {
        background: linear-gradient(180deg, #0a0a0a 0%, #141414 60%, #0d0d0d 100%) !important;
        color: #c0c0c0 !important;
    }

    /* ── Sidebar ── */
    [data-testid="stSidebar"],
    section[data-testid="stSidebar"] > div {
        background: #0d0d0d !important;
        border-right: 1px solid #222 !important;
    }

    /* ── Headers ── */
    .main-header {
        font-family: 'Special Elite', cursive;
        color: #8B0000 !important;
        text-align: center;
        letter-spacing: 3px;
    }
    .sub-header {
        font-family: 'Courier Prime', monospace;
        color: #777 !important;
        text-align: center;
    }
    .sidebar-header {
        font-family: 'Special Elite', cursive;
        color: #8B0000;
        font-size: 16px;
        letter-spacing: 2px;
    }

    /* ── Room card ── */
    .room-card {
        background: #1a1a1a;
        border: 1px solid #333;
        border-left: 4px solid #8B0000;
        border-radius: 6px;
        padding: 14px 18px;
        font-family: 'Courier Prime', monospace;
    }

    /* ── Buttons ── */
    .stButton > button {
        background: #1a1a1a !important;
        color: #c0c0c0 !important;
        border: 1px solid #444 !important;
        font-family: 'Courier Prime', monospace !important;
    }
    .stButton > button:hover {
        border-color: #8B0000 !important;
        color: #fff !important;
    }
    """
