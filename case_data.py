"""
case_data.py
============
All narrative content for the mansion case.

Centralising story data here means you can swap out the whole mystery
(room layout, clue per room, clue → suspect associations) without touching
the data structures, the engine or either UI.

To create a new case:
    1. Replace the constants below with your new story.
    2. Keep MANSION_LAYOUT a tree: every room listed once as a child at most.
    3. Keep the dict shapes identical so nothing else breaks.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Mansion layout
# ---------------------------------------------------------------------------

MANSION_ROOT: str = "Hall"

MANSION_LAYOUT: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    "Hall":         ("Library", "Dining Room"),
    "Library":      ("Study",   "Conservatory"),
    "Study":        ("Basement", None),
    "Basement":     (None, None),
    "Conservatory": (None, None),
    "Dining Room":  ("Kitchen", "Ballroom"),
    "Kitchen":      (None, None),
    "Ballroom":     (None, None),
}
"""
room name → (left child, right child).

Every room that appears as a child must also have its own entry.
"""


# ---------------------------------------------------------------------------
# Clues
# ---------------------------------------------------------------------------

ROOM_CLUES: Dict[str, str] = {
    "Hall":         "pegada de lama na soleira",
    "Library":      "marca de dedo no livro raro",
    "Dining Room":  "taça quebrada com resquicios",
    "Kitchen":      "fio de tecido preso no cortador",
    "Study":        "bilhete rasgado com iniciais",
    "Basement":     "mancha de tinta fresca",
    "Ballroom":     "programa de concerto dobrado",
    "Conservatory": "folha de planta que nao pertence ao jardim",
}
"""Clue found in each room. Rooms missing from this table hold no clue."""


# ---------------------------------------------------------------------------
# Suspects
# ---------------------------------------------------------------------------

SUSPECTS: List[str] = [
    "Sr. Green",
    "Srta. Scarlet",
    "Mrs. Peacock",
    "Mr. Black",
]

CLUE_SUSPECTS: Dict[str, str] = {
    "pegada de lama na soleira":                  "Sr. Green",
    "fio de tecido preso no cortador":            "Sr. Green",
    "marca de dedo no livro raro":                "Srta. Scarlet",
    "programa de concerto dobrado":               "Srta. Scarlet",
    "taça quebrada com resquicios":               "Mrs. Peacock",
    "folha de planta que nao pertence ao jardim": "Mrs. Peacock",
    "bilhete rasgado com iniciais":               "Mr. Black",
    "mancha de tinta fresca":                     "Mr. Black",
}
"""
Which suspect each clue incriminates. Each suspect is named by exactly two
clues, so a full sweep of the mansion supports any single accusation only
when the player has found both of that suspect's clues.
"""
