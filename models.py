"""
models.py
=========
Shared data models for Mansion Mystery.

Contains:
  - Room             : Node of the static mansion tree.
  - ClueNode         : Node of the collected-clue binary search tree.
  - HashEntry        : Chained entry of the clue → suspect hash table.
  - OutcomeKind      : Every kind of feedback an exploration step can produce.
  - StepOutcome      : One notification emitted by the exploration engine.
  - ExplorationState : Mutable per-session progress counters.
  - AccusationResult : Pydantic schema for a scored accusation.

Keeping these in one module gives the engine, the scorer and both UIs a
single source of truth for data shapes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Structure nodes
# ---------------------------------------------------------------------------

@dataclass
class Room:
    """
    A room of the mansion.

    Attributes:
        name:  Display name, unique within one mansion.
        left:  Room reached with the "left" command, if any.
        right: Room reached with the "right" command, if any.
    """

    name:  str
    left:  Optional["Room"] = None
    right: Optional["Room"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


@dataclass
class ClueNode:
    """Binary-search-tree node keyed by clue text."""

    text:  str
    left:  Optional["ClueNode"] = None
    right: Optional["ClueNode"] = None


@dataclass
class HashEntry:
    """One clue → suspect association inside a bucket chain."""

    clue:    str
    suspect: str
    next:    Optional["HashEntry"] = None


# ---------------------------------------------------------------------------
# Exploration feedback
# ---------------------------------------------------------------------------

class OutcomeKind(str, Enum):
    NEW_CLUE        = "new_clue"
    DUPLICATE_CLUE  = "duplicate_clue"
    NO_CLUE         = "no_clue"
    MOVED           = "moved"
    NO_ROOM         = "no_room"
    UNKNOWN_COMMAND = "unknown_command"
    ENDED           = "ended"


@dataclass(frozen=True)
class StepOutcome:
    """
    A single notification produced by the exploration engine.

    Attributes:
        kind:      What happened.
        room:      Name of the room the player is in after the event.
        clue:      The clue involved, for clue outcomes.
        direction: "left" / "right" for movement outcomes.
    """

    kind:      OutcomeKind
    room:      str
    clue:      Optional[str] = None
    direction: Optional[str] = None


# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------

@dataclass
class ExplorationState:
    """
    Mutable snapshot of the player's progress, owned by MansionMysteryGame.

    Attributes:
        current_room:    Name of the room the player stands in.
        steps_taken:     Number of commands processed (valid or not).
        rooms_visited:   Distinct room names entered this session.
        finished:        True once the player ended the exploration.
        accusation_made: True once an accusation has been scored.
    """

    current_room:    str
    steps_taken:     int       = 0
    rooms_visited:   List[str] = field(default_factory=list)
    finished:        bool      = False
    accusation_made: bool      = False

    def record_visit(self, room_name: str) -> None:
        """Mark `room_name` as visited, keeping first-visit order."""
        self.current_room = room_name
        if room_name not in self.rooms_visited:
            self.rooms_visited.append(room_name)


# ---------------------------------------------------------------------------
# Accusation result
# ---------------------------------------------------------------------------

class AccusationResult(BaseModel):
    """
    Validated outcome of an accusation.

    Fields:
        accused:        The name exactly as the player typed it.
        score:          Number of collected clues pointing at `accused`.
        supported:      True when `score` reaches the accusation threshold.
        matching_clues: The corroborating clues, in ascending order.
    """

    accused:        str
    score:          int = Field(ge=0)
    supported:      bool
    matching_clues: List[str] = Field(default_factory=list)
