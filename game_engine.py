"""
game_engine.py
==============
Core game engine for Mansion Mystery.

Contains:
  parse_command()      — turn a raw input line into a navigation Command.
  ExplorationEngine    — the room-by-room state machine that walks the
                         mansion tree and feeds the clue registry.
  MansionMysteryGame   — the orchestrating class that owns the room tree,
                         the clue → suspect table and the clue registry, and
                         exposes a clean API consumed by both the Streamlit UI
                         (app.py) and the console runner (cli.py).

Public API summary:
    game = MansionMysteryGame()
    game.start()              → [StepOutcome]   (examines the start room)
    game.step(raw_input)      → [StepOutcome]
    game.end_exploration()    → [StepOutcome]
    game.collected_clues()    → [clue, ...]     (ascending)
    game.clue_summary()       → [(clue, suspect | None), ...]
    game.accuse(name)         → AccusationResult
    game.reset()              → None

Logging
-------
Every significant event is emitted through the standard ``logging`` module
under the ``mansion_mystery.game_engine`` logger. Configure level and
destination once at the entry point (cli.py / app.py).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Mapping, Optional, Tuple

from case_data import CLUE_SUSPECTS, MANSION_LAYOUT, ROOM_CLUES
from clue_registry import ClueRegistry
from clue_table import ClueSuspectTable
from config import CONSOLE_CONFIG, GAME_CONFIG
from mansion import build_mansion, clue_for_room, find_room
from models import AccusationResult, ExplorationState, OutcomeKind, Room, StepOutcome
from scoring import clue_summary, evaluate_accusation

logger = logging.getLogger("mansion_mystery.game_engine")


class Command(str, Enum):
    LEFT  = "left"
    RIGHT = "right"
    END   = "end"


def parse_command(raw: Optional[str]) -> Optional[Command]:
    """
    Map an input line to a Command.

    Only the first non-whitespace character matters and it is matched
    case-insensitively against the configured keys ("e", "d", "s").

    Returns:
        The Command, or None for empty / unrecognised input.

    Example:
        >>> parse_command("  E\\n")
        <Command.LEFT: 'left'>
    """
    text = (raw or "").strip()
    if not text:
        return None
    key = text[0].lower()
    return {
        CONSOLE_CONFIG.left_key:  Command.LEFT,
        CONSOLE_CONFIG.right_key: Command.RIGHT,
        CONSOLE_CONFIG.stop_key:  Command.END,
    }.get(key)


class ExplorationEngine:
    """
    Depth-first, player-driven walk over the room tree.

    The current room is examined every time the player is "in" it: on
    arrival, and again after a command that leaves them in place. A clue is
    added to the registry the first time it is seen; later examinations
    report it as a duplicate.

    Attributes:
        current:  The room the player stands in.
        registry: Clue registry receiving new clues.
        finished: True once the player has ended the exploration.
    """

    def __init__(
        self,
        start: Room,
        registry: ClueRegistry,
        room_clues: Mapping[str, str] = ROOM_CLUES,
    ) -> None:
        self.current    = start
        self.registry   = registry
        self.room_clues = room_clues
        self.finished   = False

    def visit(self) -> StepOutcome:
        """Examine the current room and collect its clue if it is new."""
        room = self.current.name
        clue = clue_for_room(room, self.room_clues)

        if clue is None:
            return StepOutcome(OutcomeKind.NO_CLUE, room)

        if self.registry.insert_if_absent(clue):
            logger.info("New clue collected in %s: %r", room, clue)
            return StepOutcome(OutcomeKind.NEW_CLUE, room, clue=clue)

        logger.debug("Clue in %s already collected: %r", room, clue)
        return StepOutcome(OutcomeKind.DUPLICATE_CLUE, room, clue=clue)

    def move(self, command: Command) -> StepOutcome:
        """
        Apply a navigation command.

        Moving toward a missing child leaves the player in place and reports
        NO_ROOM; it is not an error.
        """
        if command is Command.END:
            self.finished = True
            logger.info("Exploration ended in %s.", self.current.name)
            return StepOutcome(OutcomeKind.ENDED, self.current.name)

        direction = command.value
        target = self.current.left if command is Command.LEFT else self.current.right
        if target is None:
            logger.debug("No room %s of %s.", direction, self.current.name)
            return StepOutcome(OutcomeKind.NO_ROOM, self.current.name, direction=direction)

        logger.debug("Moved %s: %s -> %s", direction, self.current.name, target.name)
        self.current = target
        return StepOutcome(OutcomeKind.MOVED, target.name, direction=direction)

    def step(self, raw: Optional[str]) -> List[StepOutcome]:
        """
        Process one input line.

        Returns the movement outcome followed, unless exploration just ended,
        by the examination of the room the player is now in. Input received
        after the exploration ended produces no outcomes.
        """
        if self.finished:
            return []

        command = parse_command(raw)
        if command is None:
            logger.debug("Unknown command %r in %s.", raw, self.current.name)
            outcomes = [StepOutcome(OutcomeKind.UNKNOWN_COMMAND, self.current.name)]
        else:
            outcomes = [self.move(command)]
            if self.finished:
                return outcomes

        outcomes.append(self.visit())
        return outcomes

    def collected_clues(self) -> List[str]:
        return list(self.registry.in_order())


class MansionMysteryGame:
    """
    Main game facade.

    Owns the room tree, the clue → suspect table and the clue registry for
    one session. Both UIs interact with this class exclusively.

    Attributes:
        mansion:  Root of the room tree.
        table:    Clue → suspect associations.
        registry: Clues collected this session.
        engine:   The exploration state machine.
        state:    ExplorationState with progress counters.
    """

    def __init__(
        self,
        layout: Mapping[str, Tuple[Optional[str], Optional[str]]] = MANSION_LAYOUT,
        room_clues: Mapping[str, str] = ROOM_CLUES,
        clue_suspects: Mapping[str, str] = CLUE_SUSPECTS,
        start_room: str = GAME_CONFIG.start_room,
    ) -> None:
        self._layout     = layout
        self._room_clues = room_clues
        self._start_room = start_room

        # The entrance doubles as the tree root in the reference layout; any
        # other start room must live somewhere inside the tree.
        self.mansion = build_mansion(layout, _root_of(layout))
        self.table   = ClueSuspectTable.from_mapping(dict(clue_suspects))
        self._new_session()

        logger.info(
            "MansionMysteryGame initialised — rooms=%d, clues=%d, start=%s",
            len(layout), len(self.table), start_room,
        )

    def _new_session(self) -> None:
        start = find_room(self.mansion, self._start_room)
        if start is None:
            raise ValueError(f"Start room {self._start_room!r} is not in the mansion.")
        self.registry = ClueRegistry()
        self.engine   = ExplorationEngine(start, self.registry, self._room_clues)
        self.state    = ExplorationState(current_room=start.name)

    # ------------------------------------------------------------------
    # Exploration
    # ------------------------------------------------------------------

    @property
    def current_room(self) -> Room:
        return self.engine.current

    @property
    def finished(self) -> bool:
        return self.engine.finished

    def start(self) -> List[StepOutcome]:
        """Examine the start room; call once before the first step."""
        self.state.record_visit(self.engine.current.name)
        return [self.engine.visit()]

    def step(self, raw: Optional[str]) -> List[StepOutcome]:
        """Feed one line of player input to the engine."""
        if self.engine.finished:
            return []
        self.state.steps_taken += 1
        outcomes = self.engine.step(raw)
        self.state.record_visit(self.engine.current.name)
        self.state.finished = self.engine.finished
        return outcomes

    def end_exploration(self) -> List[StepOutcome]:
        """Stop exploring, e.g. when the input stream is exhausted."""
        if self.engine.finished:
            return []
        outcome = self.engine.move(Command.END)
        self.state.finished = True
        return [outcome]

    def collected_clues(self) -> List[str]:
        return self.engine.collected_clues()

    def clue_summary(self) -> List[Tuple[str, Optional[str]]]:
        return clue_summary(self.registry, self.table)

    def suspects(self) -> List[str]:
        return self.table.suspects()

    # ------------------------------------------------------------------
    # Accusation
    # ------------------------------------------------------------------

    def accuse(self, accused_name: str) -> AccusationResult:
        """
        Score an accusation against the clues collected so far.

        The registry is only read; accusing does not end or alter the
        exploration.
        """
        result = evaluate_accusation(self.registry, self.table, accused_name)
        self.state.accusation_made = True
        return result

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Discard collected clues and put the player back at the start room."""
        logger.info("Game reset requested — clearing clues and position.")
        self._new_session()


def _root_of(layout: Mapping[str, Tuple[Optional[str], Optional[str]]]) -> str:
    """Return the single room of `layout` that is nobody's child."""
    children = {child for pair in layout.values() for child in pair if child}
    roots = [name for name in layout if name not in children]
    if len(roots) != 1:
        raise ValueError(f"Layout must have exactly one root room, found {roots}.")
    return roots[0]
