import pytest

from case_data import CLUE_SUSPECTS
from clue_table import ClueSuspectTable, hash_clue
from config import HashConfig


@pytest.fixture()
def table():
    return ClueSuspectTable.from_mapping(CLUE_SUSPECTS)


def test_hash_is_djb2_mod_bucket_count():
    # "a" -> 5381 * 33 + 97
    assert hash_clue("a") == (5381 * 33 + 97) % 101
    assert hash_clue("") == 5381 % 101


def test_hash_is_deterministic_and_in_range():
    for clue in CLUE_SUSPECTS:
        idx = hash_clue(clue)
        assert idx == hash_clue(clue)
        assert 0 <= idx < 101


def test_hash_uses_utf8_bytes():
    cfg = HashConfig(bucket_count=2**61 - 1)
    expected = ((5381 * 33 + 0xC3) * 33 + 0xA7) % (2**61 - 1)
    assert hash_clue("ç", cfg) == expected


def test_lookup_reference_data(table):
    assert table.lookup("pegada de lama na soleira") == "Sr. Green"
    assert table.lookup("mancha de tinta fresca") == "Mr. Black"
    assert len(table) == 8


def test_lookup_missing_returns_none(table):
    assert table.lookup("nenhuma pista") is None
    assert table.lookup("") is None
    assert "nenhuma pista" not in table


def test_insert_or_update_overwrites(table):
    clue = "taça quebrada com resquicios"
    table.insert_or_update(clue, "Mr. Black")
    assert table.lookup(clue) == "Mr. Black"
    table.insert_or_update(clue, "Sr. Green")
    assert table.lookup(clue) == "Sr. Green"
    assert len(table) == 8
    assert [c for c, _ in table.items()].count(clue) == 1


def test_chain_is_reverse_insertion_order():
    t = ClueSuspectTable(HashConfig(bucket_count=1))
    t.insert_or_update("first", "A")
    t.insert_or_update("second", "B")
    t.insert_or_update("third", "C")
    assert t.chain(0) == ["third", "second", "first"]
    assert t.lookup("first") == "A"
    assert t.lookup("third") == "C"


def test_update_inside_collision_chain_keeps_single_entry():
    t = ClueSuspectTable(HashConfig(bucket_count=1))
    t.insert_or_update("x", "A")
    t.insert_or_update("y", "B")
    t.insert_or_update("x", "C")
    assert t.chain(0) == ["y", "x"]
    assert t.lookup("x") == "C"
    assert len(t) == 2


def test_suspects_are_distinct_and_sorted(table):
    assert table.suspects() == ["Mr. Black", "Mrs. Peacock", "Sr. Green", "Srta. Scarlet"]


def test_each_reference_suspect_has_two_clues(table):
    counts = {}
    for _, suspect in table.items():
        counts[suspect] = counts.get(suspect, 0) + 1
    assert counts == {
        "Sr. Green": 2,
        "Srta. Scarlet": 2,
        "Mrs. Peacock": 2,
        "Mr. Black": 2,
    }


def test_invalid_bucket_count_rejected():
    with pytest.raises(ValueError):
        ClueSuspectTable(HashConfig(bucket_count=0))
