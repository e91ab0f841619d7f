"""
scoring.py
==========
Deterministic, side-effect-free accusation scoring.

Extracted from the game engine so it can be unit-tested independently. The
supported / weak threshold is a game rule read from GameConfig; the raw
count itself never depends on it.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from clue_registry import ClueRegistry
from clue_table import ClueSuspectTable
from config import GAME_CONFIG
from models import AccusationResult

logger = logging.getLogger("mansion_mystery.scoring")


def score_accusation(
    registry: ClueRegistry,
    table: ClueSuspectTable,
    accused_name: str,
) -> int:
    """
    Count collected clues that point at `accused_name`.

    Walks the registry in order and looks each clue up in the table. Names
    are compared exactly (case-sensitive). Clues with no table entry are
    skipped.

    Examples:
        All eight reference clues collected:
        >>> score_accusation(full_registry, reference_table, "Sr. Green")
        2
        >>> score_accusation(full_registry, reference_table, "Nobody")
        0
    """
    return sum(1 for clue in registry.in_order() if table.lookup(clue) == accused_name)


def is_supported(score: int) -> bool:
    """True when `score` reaches the accusation threshold (default: 2)."""
    return score >= GAME_CONFIG.accusation_threshold


def evaluate_accusation(
    registry: ClueRegistry,
    table: ClueSuspectTable,
    accused_name: str,
) -> AccusationResult:
    """
    Score `accused_name` and apply the threshold rule.

    Any name is accepted; one the table has never heard of simply scores 0.
    """
    matching = [clue for clue in registry.in_order() if table.lookup(clue) == accused_name]
    score    = len(matching)
    result   = AccusationResult(
        accused=accused_name,
        score=score,
        supported=is_supported(score),
        matching_clues=matching,
    )

    if accused_name not in table.suspects():
        logger.info("Accused %r is not a known suspect; scoring as 0.", accused_name)
    logger.info(
        "Accusation scored — accused=%r, score=%d, supported=%s",
        accused_name, result.score, result.supported,
    )
    return result


def clue_summary(
    registry: ClueRegistry,
    table: ClueSuspectTable,
) -> List[Tuple[str, Optional[str]]]:
    """Pair every collected clue (ascending) with the suspect it points to."""
    return [(clue, table.lookup(clue)) for clue in registry.in_order()]
