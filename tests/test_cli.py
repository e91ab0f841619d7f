import pytest

import cli


def feed(monkeypatch, lines):
    """Replace input() with a scripted sequence; EOF once it runs dry."""
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_full_game_supported_accusation(monkeypatch, capsys):
    feed(monkeypatch, ["e", "e", "e", "s", "Mr. Black"])
    assert cli.run_cli() == 0
    out = capsys.readouterr().out
    assert "You are in: Basement" in out
    assert "  - mancha de tinta fresca" in out
    assert "2 clue(s) point to Mr. Black. Accusation supported" in out


def test_exploration_notifications(monkeypatch, capsys):
    feed(monkeypatch, ["e", "e", "d", "x", "s", "Sr. Green"])
    cli.run_cli()
    out = capsys.readouterr().out
    assert 'You found a clue: "bilhete rasgado com iniciais"' in out
    assert "There is no room to the right. You stay in Study." in out
    assert 'You already have the clue from this room: "bilhete rasgado com iniciais"' in out
    assert "Unknown command." in out
    assert "Leaving the exploration..." in out
    assert "1 clue(s) point to Sr. Green. Weak accusation" in out


def test_collected_clues_listed_in_order(monkeypatch, capsys):
    feed(monkeypatch, ["e", "e", "s", "Nobody"])
    cli.run_cli()
    out = capsys.readouterr().out
    block = out.split("Collected clues (in order):")[1]
    assert block.index("bilhete rasgado") < block.index("marca de dedo") < block.index("pegada de lama")
    assert "0 clue(s) point to Nobody. Weak accusation" in out


def test_eof_during_exploration_still_asks_for_accusation(monkeypatch, capsys):
    feed(monkeypatch, ["d"])
    assert cli.run_cli() == 0
    out = capsys.readouterr().out
    assert "taça quebrada com resquicios" in out
    assert "No accusation was made." in out


@pytest.mark.parametrize("accusation", [[], ["   "]])
def test_missing_accusation_exits_cleanly(monkeypatch, capsys, accusation):
    feed(monkeypatch, ["s"] + accusation)
    assert cli.run_cli() == 0
    out = capsys.readouterr().out
    assert "Error reading the accusation" in out
    assert "clue(s) point to" not in out
