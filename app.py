"""
app.py
======
Streamlit web UI for Mansion Mystery.

Responsibilities:
  - Configure and render the Streamlit page (layout, dark-noir theme).
  - Manage session state initialisation and reset.
  - Render the sidebar (collected clues, progress, new-game button).
  - Render the main panel (current room, navigation buttons, event log,
    accusation form and verdict).

This file contains only UI logic. All game logic lives in game_engine.py,
all narrative data in case_data.py, and all wording in ui_helpers.py.
It serves one local player; nothing is shared between browser sessions.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st
from dotenv import load_dotenv

from config import CONSOLE_CONFIG, log_level_from_env

load_dotenv()

# ---------------------------------------------------------------------------
# Logging configuration
#
# basicConfig is called here — the Streamlit entry point — so it runs once
# per process regardless of how many times Streamlit reruns the script.
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=log_level_from_env(logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("mansion_mystery.app")

from game_engine import MansionMysteryGame
from mansion import describe_exits
from models import OutcomeKind
from ui_helpers import (
    build_css,
    format_clue_summary,
    format_outcome,
    format_verdict,
)


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Mansion Mystery",
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def _fresh_game() -> MansionMysteryGame:
    game = MansionMysteryGame()
    st.session_state.log = [format_outcome(o) for o in game.start()]
    return game


def init_session_state() -> None:
    """Initialise all Streamlit session state variables on first run."""
    if "game" not in st.session_state:
        st.session_state.game              = _fresh_game()
        st.session_state.accusation_result = None


def reset_game() -> None:
    """Start a new investigation from the entrance hall."""
    logger.info("New game requested from the web UI.")
    st.session_state.game              = _fresh_game()
    st.session_state.accusation_result = None


def _send(raw: str) -> None:
    """Feed one command key to the engine and append its notifications."""
    for outcome in st.session_state.game.step(raw):
        if outcome.kind is OutcomeKind.MOVED:
            st.session_state.log.append("---")
        st.session_state.log.append(format_outcome(outcome))


# ============================================================
# SIDEBAR
# ============================================================

def render_sidebar() -> None:
    game  = st.session_state.game
    state = game.state

    st.sidebar.markdown('<div class="sidebar-header">📓 NOTEBOOK</div>', unsafe_allow_html=True)
    clues = game.collected_clues()
    if clues:
        for clue in clues:
            st.sidebar.markdown(f"- {clue}")
    else:
        st.sidebar.markdown("*(no clues collected)*")

    st.sidebar.markdown("---")
    st.sidebar.markdown('<div class="sidebar-header">📊 INVESTIGATION</div>', unsafe_allow_html=True)
    st.sidebar.markdown(f"**Rooms visited:** {len(state.rooms_visited)}")
    st.sidebar.markdown(f"**Commands given:** {state.steps_taken}")

    st.sidebar.markdown("---")
    if st.sidebar.button("🔄 NEW GAME", use_container_width=True):
        reset_game()
        st.rerun()


# ============================================================
# MAIN PANEL
# ============================================================

def render_exploration() -> None:
    """Current room card, navigation buttons and the running event log."""
    game  = st.session_state.game
    room  = game.current_room
    exits = describe_exits(room)

    st.markdown(
        f"<div class='room-card'><b>You are in:</b> {room.name}</div>",
        unsafe_allow_html=True,
    )
    st.markdown("")

    col_left, col_right, col_stop = st.columns(3)
    with col_left:
        if st.button(f"⬅️ Left ({exits['left'] or '—'})", use_container_width=True):
            _send(CONSOLE_CONFIG.left_key)
            st.rerun()
    with col_right:
        if st.button(f"➡️ Right ({exits['right'] or '—'})", use_container_width=True):
            _send(CONSOLE_CONFIG.right_key)
            st.rerun()
    with col_stop:
        if st.button("🛑 Stop exploring", use_container_width=True):
            _send(CONSOLE_CONFIG.stop_key)
            st.rerun()

    with st.expander("Event log", expanded=True):
        for line in reversed(st.session_state.log[-20:]):
            st.markdown(line)


def render_accusation_form() -> None:
    game = st.session_state.game

    st.markdown("### 🔎 Who is the culprit?")
    st.markdown("**Collected clues and who they point to:**")
    st.text(format_clue_summary(game.clue_summary()))

    with st.form("accusation_form"):
        accused = st.text_input(
            "Suspect name",
            help="Known suspects: " + ", ".join(game.suspects()),
        )
        submitted = st.form_submit_button("⚖️ ACCUSE")

    if submitted:
        if not accused.strip():
            st.error("Enter a name to accuse.")
            return
        st.session_state.accusation_result = game.accuse(accused.strip())
        st.rerun()


def render_verdict() -> None:
    result = st.session_state.accusation_result
    if result.supported:
        st.success(format_verdict(result))
    else:
        st.warning(format_verdict(result))
    for clue in result.matching_clues:
        st.markdown(f"- {clue}")


def main() -> None:
    init_session_state()

    st.markdown("<h1 class='main-header'>🔍 MANSION MYSTERY</h1>", unsafe_allow_html=True)
    st.markdown(
        "<h3 class='sub-header'>Explore the rooms, collect clues, name the culprit</h3>",
        unsafe_allow_html=True,
    )

    render_sidebar()

    game = st.session_state.game
    if st.session_state.accusation_result is not None:
        render_verdict()
    elif game.finished:
        render_accusation_form()
    else:
        render_exploration()


if __name__ == "__main__":
    main()
