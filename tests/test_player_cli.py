"""
Tests for the console session.
"""
import pytest

from Detective.player_cli import run_session
from Mansion.config import GameConfig


def feed(monkeypatch, answers):
    """Replace input() with scripted answers; running out behaves like EOF."""
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def master():
    return GameConfig(mode="master")


def test_sustained_accusation(monkeypatch, capsys, master):
    feed(monkeypatch, ["e", "e", "e", "s", "Sr. Black"])
    verdict = run_session(master)
    assert verdict.outcome == "sustainable_accusation"
    assert verdict.count == 2

    out = capsys.readouterr().out
    assert "Pistas Coletadas" in out
    assert "🔎 Carta ameaçadora" in out
    assert "Ela aponta para: Sr. Black" in out
    assert "Caso encerrado" in out
    assert "Obrigado por jogar" in out


def test_invalid_choice_is_reported(monkeypatch, capsys, master):
    feed(monkeypatch, ["x", "d", "e", "s", "Jardineiro"])
    verdict = run_session(master)
    out = capsys.readouterr().out
    assert out.count("Opção inválida") == 2
    assert verdict.outcome == "insufficient_single_clue"


def test_blank_accusation_skips_verdict(monkeypatch, capsys, master):
    feed(monkeypatch, ["s", ""])
    assert run_session(master) is None
    assert "Nenhuma acusação foi feita." in capsys.readouterr().out


def test_end_of_input_ends_the_game(monkeypatch, capsys, master):
    feed(monkeypatch, ["e"])
    assert run_session(master) is None
    out = capsys.readouterr().out
    assert "Caminho percorrido: Hall de Entrada -> Sala de Estar" in out


def test_novice_mode_only_walks(monkeypatch, capsys):
    feed(monkeypatch, ["d", "d"])
    assert run_session(GameConfig(mode="novice", leaf_ends_exploration=True)) is None
    out = capsys.readouterr().out
    assert "Porão não tem mais saídas." in out
    assert "Pistas Coletadas" not in out
    assert "pista" not in out


def test_adventurer_mode_lists_clues_without_accusation(monkeypatch, capsys):
    feed(monkeypatch, ["e", "d", "s"])
    assert run_session(GameConfig(mode="adventurer")) is None
    out = capsys.readouterr().out
    assert "🔎 Lenço com as iniciais M.R." in out
    assert "aponta para" not in out
    assert "Quem você acusa" not in out


def test_whitespace_accusation_is_scored(monkeypatch, capsys, master):
    feed(monkeypatch, ["e", "e", "e", "s", "   "])
    verdict = run_session(master)
    assert verdict.outcome == "unsupported_accusation"
    assert verdict.accused == "   "
    assert "Acusação sem fundamento" in capsys.readouterr().out


def test_session_prints_investigation_log(monkeypatch, capsys, master):
    feed(monkeypatch, ["d", "s", ""])
    run_session(master)
    out = capsys.readouterr().out
    assert "Diário da Investigação" in out
    assert "[1] Cozinha: \"Marcas de pegadas com lama\" (suspeito: Jardineiro)" in out
