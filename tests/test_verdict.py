"""
Tests for scoring the final accusation.
"""
import pytest

from Mansion.clues import insert_clue
from Mansion.suspects import build_suspect_table
from Mansion.verdict import REQUIRED_CLUES, count_supporting_clues, evaluate, parse_accusation


def build(texts):
    root = None
    for text in texts:
        root = insert_clue(root, text)
    return root


@pytest.fixture
def table():
    return build_suspect_table()


@pytest.fixture
def black_clues():
    return build(["Carta ameaçadora", "Cofre trancado com arranhões"])


def test_two_matching_clues_sustain_accusation(black_clues, table):
    verdict = evaluate(black_clues, table, "Sr. Black")
    assert verdict.outcome == "sustainable_accusation"
    assert verdict.count == 2
    assert verdict.sustained


def test_no_matching_clue_is_unsupported(black_clues, table):
    verdict = evaluate(black_clues, table, "M.R.")
    assert verdict.outcome == "unsupported_accusation"
    assert verdict.count == 0
    assert not verdict.sustained


def test_single_matching_clue_is_insufficient(table):
    root = build(["Carta ameaçadora", "Lenço com as iniciais M.R."])
    verdict = evaluate(root, table, "M.R.")
    assert verdict.outcome == "insufficient_single_clue"
    assert verdict.count == 1


@pytest.mark.parametrize("accused", ["Sr. Black", "M.R.", "Ninguém"])
def test_no_clues_means_no_evidence(table, accused):
    verdict = evaluate(None, table, accused)
    assert verdict.outcome == "insufficient_no_evidence"
    assert verdict.count == 0


def test_names_must_match_exactly(black_clues, table):
    assert evaluate(black_clues, table, "sr. black").outcome == "unsupported_accusation"
    assert evaluate(black_clues, table, "Sr. Black ").outcome == "unsupported_accusation"


def test_clues_missing_from_table_do_not_count(table):
    root = build(["Carta ameaçadora", "Cofre trancado com arranhões", "Poeira remexida"])
    assert count_supporting_clues(root, table, "Sr. Black") == 2


def test_threshold_is_two():
    assert REQUIRED_CLUES == 2


def test_parse_accusation():
    assert parse_accusation("Sr. Black\n") == "Sr. Black"
    assert parse_accusation("Sr. Black\r\n") == "Sr. Black"
    assert parse_accusation("Coronel Mostarda da Silva") == "Coronel Mostarda da Silva"


@pytest.mark.parametrize("raw", ["", "\n", "\r\n"])
def test_empty_accusation_is_none(raw):
    assert parse_accusation(raw) is None


@pytest.mark.parametrize("raw", ["   ", " \t\r\n"])
def test_whitespace_accusation_is_still_judged(raw, black_clues, table):
    """Only the line terminator is trimmed; spaces are a (bad) suspect name."""
    accused = parse_accusation(raw)
    assert accused is not None
    verdict = evaluate(black_clues, table, accused)
    assert verdict.outcome == "unsupported_accusation"
    assert verdict.count == 0
