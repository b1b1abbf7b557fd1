import pytest

import play
from reversi import GameState, Piece


def _feed(monkeypatch, lines):
    """Answer input() with ``lines``, then raise EOFError."""
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_prompt_move_reprompts_until_legal(monkeypatch, capsys):
    _feed(monkeypatch, ["zz", "A1", "E3"])
    pos = play.prompt_move(GameState())

    assert pos == (2, 4)
    out = capsys.readouterr().out
    assert "invalid coordinate 'zz'" in out
    assert "Invalid move: A1" in out


def test_prompt_move_returns_none_at_end_of_input(monkeypatch):
    _feed(monkeypatch, [])
    assert play.prompt_move(GameState()) is None


def test_interactive_game_aborts_at_end_of_input(monkeypatch, capsys):
    _feed(monkeypatch, ["e3"])
    play.play_interactive({Piece.X: None, Piece.O: None})

    out = capsys.readouterr().out
    assert "The current piece is: O" in out
    assert out.rstrip().endswith("Game aborted")


@pytest.mark.parametrize("argv, message", [
    (["--depth", "0"], "max_depth must be >= 1"),
    (["--noise", "-5"], "noise must be >= 0"),
    (["--games", "3"], "--games needs two automated players"),
])
def test_bad_arguments_exit_with_usage_error(monkeypatch, capsys, argv, message):
    monkeypatch.setattr("sys.argv", ["play.py"] + argv)
    with pytest.raises(SystemExit) as exc:
        play.main()
    assert exc.value.code == 2
    assert message in capsys.readouterr().err


def test_automated_match(monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.argv",
        ["play.py", "--x", "random", "--o", "random", "--games", "2", "--seed", "0"],
    )
    play.main()
    out = capsys.readouterr().out
    assert "random vs random (2 games" in out
    assert "Draws:" in out
