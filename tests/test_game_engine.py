import pytest

from clue_registry import ClueRegistry
from game_engine import Command, ExplorationEngine, MansionMysteryGame, parse_command
from mansion import build_mansion, find_room
from models import OutcomeKind


HALL = "pegada de lama na soleira"
LIBRARY = "marca de dedo no livro raro"
STUDY = "bilhete rasgado com iniciais"


@pytest.fixture()
def game():
    g = MansionMysteryGame()
    g.start()
    return g


def kinds(outcomes):
    return [o.kind for o in outcomes]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("e", Command.LEFT),
        ("E", Command.LEFT),
        ("  d\n", Command.RIGHT),
        ("\tS", Command.END),
        ("esquerda", Command.LEFT),
        ("x", None),
        ("", None),
        ("   \n", None),
        (None, None),
    ],
)
def test_parse_command(raw, expected):
    assert parse_command(raw) is expected


def test_start_collects_hall_clue(game):
    assert game.collected_clues() == [HALL]
    assert game.current_room.name == "Hall"


def test_left_left_stop_collects_three_clues(game):
    game.step("e")
    game.step("e")
    outcomes = game.step("s")
    assert kinds(outcomes) == [OutcomeKind.ENDED]
    assert game.finished
    assert game.collected_clues() == [STUDY, LIBRARY, HALL]
    assert game.current_room.name == "Study"


def test_move_reports_new_clue(game):
    outcomes = game.step("e")
    assert kinds(outcomes) == [OutcomeKind.MOVED, OutcomeKind.NEW_CLUE]
    assert outcomes[0].direction == "left"
    assert outcomes[1].room == "Library"
    assert outcomes[1].clue == LIBRARY


def test_missing_child_keeps_room_and_reports_duplicate(game):
    game.step("e")
    game.step("e")
    before = game.collected_clues()
    outcomes = game.step("d")
    assert kinds(outcomes) == [OutcomeKind.NO_ROOM, OutcomeKind.DUPLICATE_CLUE]
    assert outcomes[0].room == "Study"
    assert outcomes[0].direction == "right"
    assert game.current_room.name == "Study"
    assert game.collected_clues() == before


def test_unknown_command_keeps_state(game):
    outcomes = game.step("z")
    assert kinds(outcomes) == [OutcomeKind.UNKNOWN_COMMAND, OutcomeKind.DUPLICATE_CLUE]
    assert game.current_room.name == "Hall"
    assert game.collected_clues() == [HALL]
    assert not game.finished


def test_leaf_does_not_end_exploration(game):
    game.step("d")
    game.step("d")
    assert game.current_room.name == "Ballroom"
    assert not game.finished
    assert kinds(game.step("e"))[0] is OutcomeKind.NO_ROOM


def test_room_without_clue_reports_no_clue():
    hall = build_mansion()
    engine = ExplorationEngine(hall, ClueRegistry(), room_clues={})
    assert engine.visit().kind is OutcomeKind.NO_CLUE
    assert engine.collected_clues() == []


def test_input_after_end_is_ignored(game):
    game.step("s")
    assert game.step("e") == []
    assert game.end_exploration() == []
    assert game.current_room.name == "Hall"


def test_end_exploration_keeps_partial_results(game):
    game.step("d")
    outcomes = game.end_exploration()
    assert kinds(outcomes) == [OutcomeKind.ENDED]
    assert game.finished
    assert game.collected_clues() == [HALL, "taça quebrada com resquicios"]


def test_state_tracks_progress(game):
    game.step("e")
    game.step("q")
    game.step("d")
    assert game.state.steps_taken == 3
    assert game.state.rooms_visited == ["Hall", "Library", "Conservatory"]
    assert game.state.current_room == "Conservatory"


def test_accuse_reads_registry_without_changing_it(game):
    game.step("d")
    game.step("e")
    game.step("s")
    result = game.accuse("Sr. Green")
    assert result.score == 2
    assert result.supported
    assert game.state.accusation_made
    assert len(game.collected_clues()) == 3


def test_reset_starts_a_clean_session(game):
    game.step("e")
    game.step("s")
    game.reset()
    assert game.collected_clues() == []
    assert game.current_room.name == "Hall"
    assert not game.finished
    game.start()
    assert game.collected_clues() == [HALL]


def test_custom_layout_and_start_room():
    layout = {"Gate": ("Garden", None), "Garden": (None, None)}
    g = MansionMysteryGame(
        layout=layout,
        room_clues={"Garden": "pegada"},
        clue_suspects={"pegada": "Gardener"},
        start_room="Gate",
    )
    assert kinds(g.start()) == [OutcomeKind.NO_CLUE]
    g.step("e")
    assert g.collected_clues() == ["pegada"]
    assert g.accuse("Gardener").score == 1


def test_start_room_must_exist():
    with pytest.raises(ValueError):
        MansionMysteryGame(start_room="Attic")


def test_engine_starting_mid_tree():
    hall = build_mansion()
    engine = ExplorationEngine(find_room(hall, "Dining Room"), ClueRegistry())
    engine.visit()
    engine.step("e")
    assert engine.current.name == "Kitchen"
    assert engine.collected_clues() == [
        "fio de tecido preso no cortador",
        "taça quebrada com resquicios",
    ]
