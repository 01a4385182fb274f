import builtins

import pytest

from numberle import cli
from numberle.services.game_session import GameSession


def _scripted(lines):
    iterator = iter(lines)

    def read_line(prompt):
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError
    return read_line


@pytest.fixture
def fixed_session():
    return GameSession(equations=[], random_target=False)


def test_play_until_won(fixed_session, capsys):
    won = cli.play(fixed_session, _scripted(["12=12=1", "3+2+2=7", "1+2+3=6"]))
    out = capsys.readouterr().out

    assert won
    assert "Welcome to Numberle - CLI Version" in out
    assert "No equal '=' sign." in out
    assert "OGGGOG-" in out
    assert "Try again. You have 5 attempts left." in out
    assert "You won!!" in out


def test_play_until_lost(fixed_session, capsys):
    won = cli.play(fixed_session, _scripted(["2+3+1=6"] * 6))
    out = capsys.readouterr().out

    assert not won
    assert "You Lost! The correct equation is: 1+2+3=6" in out


def test_missing_operator_message(fixed_session, capsys):
    cli.play(fixed_session, _scripted(["abcd=fg"]))
    assert "There must be at least one '+-*/'." in capsys.readouterr().out


def test_errors_can_be_hidden(fixed_session, capsys):
    cli.play(fixed_session, _scripted(["1+2+3=7"]), show_errors=False)
    assert "not equal" not in capsys.readouterr().out


def test_show_target(fixed_session, capsys):
    cli.play(fixed_session, _scripted([]), show_target=True)
    out = capsys.readouterr().out

    assert "Target: 1+2+3=6" in out
    assert "Goodbye!" in out


def test_main_reads_from_stdin(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(builtins, "input", _scripted(["1+2+3=6"]))
    exit_code = cli.main(["--fixed", "--equations", str(tmp_path / "missing.txt")])

    assert exit_code == 0
    assert "You won!!" in capsys.readouterr().out


def test_padded_guess_is_not_trimmed(fixed_session, capsys):
    won = cli.play(fixed_session, _scripted([" 1+2+3=6", "1+2+3=6 ", "1+2+3=6\n"]))
    out = capsys.readouterr().out

    assert won
    assert out.count("Invalid Input") == 2
    assert fixed_session.get_remaining_attempts() == 5
