"""
cli.py
======
Command-line interface for Mansion Mystery.

Provides the text-based game loop. All game logic is delegated to
MansionMysteryGame; this module only handles I/O.

Usage:
    python cli.py

Commands during exploration:
    e — go to the room on the left
    d — go to the room on the right
    s — stop exploring and make an accusation

Only the first non-whitespace character of a line counts, in any case.
"""

from __future__ import annotations

import logging
import sys
from typing import List

from dotenv import load_dotenv

from config import log_level_from_env
from game_engine import MansionMysteryGame
from models import OutcomeKind, StepOutcome
from ui_helpers import (
    CONTROLS_HINT,
    MOVE_PROMPT,
    format_clue_list,
    format_clue_summary,
    format_outcome,
    format_verdict,
)

logger = logging.getLogger("mansion_mystery.cli")


def _print_outcomes(outcomes: List[StepOutcome]) -> None:
    for outcome in outcomes:
        if outcome.kind is OutcomeKind.MOVED:
            print()
        print(format_outcome(outcome))


def run_cli() -> int:
    """
    Main console game loop.

    Explores until the player stops (or input runs out), prints the collected
    clues, then asks for the accused suspect and prints the verdict.

    Returns:
        Process exit status (always 0; a missing accusation is not a failure).
    """
    game = MansionMysteryGame()

    # --- Banner ---
    print("\n" + "=" * 60)
    print("   MANSION MYSTERY")
    print("=" * 60)
    print("Welcome to the mansion! Explore the rooms and collect clues.")
    print(CONTROLS_HINT)
    print("-" * 60)

    print(f"\nYou are in: {game.current_room.name}")
    _print_outcomes(game.start())

    # --- Exploration ---
    while not game.finished:
        try:
            raw = input(MOVE_PROMPT)
        except EOFError:
            print()
            logger.warning("Input closed during exploration; ending with partial results.")
            _print_outcomes(game.end_exploration())
            break
        _print_outcomes(game.step(raw))

    # --- Notebook ---
    print("\nCollected clues (in order):")
    print(format_clue_list(game.collected_clues()))

    summary = game.clue_summary()
    if summary:
        print("\nWho each clue points to:")
        print(format_clue_summary(summary))

    # --- Accusation ---
    print("\nSuspects: " + ", ".join(game.suspects()))
    try:
        accused = input("Who do you accuse? ").strip()
    except EOFError:
        accused = ""

    if not accused:
        logger.warning("No accusation read; exiting without scoring.")
        print("\nError reading the accusation. No accusation was made.")
        return 0

    result = game.accuse(accused)
    print("\n" + format_verdict(result))
    return 0


def main() -> int:
    """Console entry point: load .env, configure logging, play one game."""
    # Configure logging here so all mansion_mystery.* loggers share one
    # handler. WARNING by default keeps the game text readable; set
    # MANSION_LOG_LEVEL=INFO (shell or .env) to follow the engine.
    load_dotenv()
    logging.basicConfig(
        level=log_level_from_env(logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return run_cli()


if __name__ == "__main__":
    sys.exit(main())
