import io
import sys

from termchess.game import keep_alive, main, play

FOOLS_MATE = "f2 f3 e7 e5 g2 g4 d8 h4\n"
PROMPT = "Game ended. Press 'r' (and Enter) to restart or any other key to quit."


def run(text):
    out = io.StringIO()
    play(io.StringIO(text), out)
    return out.getvalue()


def test_keep_alive_restart_on_r():
    out = io.StringIO()
    assert keep_alive(io.StringIO("r\n"), out) is True
    assert PROMPT in out.getvalue()


def test_keep_alive_quits_on_other_key():
    assert keep_alive(io.StringIO("x\n"), io.StringIO()) is False


def test_keep_alive_uses_first_character():
    assert keep_alive(io.StringIO("  restart\n"), io.StringIO()) is True
    assert keep_alive(io.StringIO("quit\n"), io.StringIO()) is False


def test_keep_alive_quits_at_end_of_input():
    assert keep_alive(io.StringIO(""), io.StringIO()) is False


def test_play_stops_at_end_of_input():
    output = run("")
    assert "Game Started!" in output
    assert "White player's turn" in output


def test_fools_mate_black_wins():
    output = run(FOOLS_MATE + "q\n")
    assert "Black wins!" in output
    assert PROMPT in output
    assert output.count("Game Started!") == 1


def test_restart_plays_a_second_game():
    output = run(FOOLS_MATE + "r\n" + FOOLS_MATE + "q\n")
    assert output.count("Black wins!") == 2
    assert output.count("Game Started!") == 2


def test_illegal_move_is_reported_and_retried():
    output = run("e7 e5 e2 e4\n")
    assert "Invalid move: not your piece" in output
    assert output.index("not your piece") < output.index("Black player's turn")


def test_promotion_asks_until_valid():
    moves = "a2 a4 b7 b5 a4 b5 a7 a6 b5 a6 c8 b7 a6 b7 b8 c6 b7 a8 X Q\n"
    output = run(moves)
    assert "Invalid input : please input either R, B, N or Q" in output
    assert "8 |[Q]|" in output


def test_main_returns_zero(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(FOOLS_MATE + "q\n"))
    assert main([]) == 0
    assert "Black wins!" in capsys.readouterr().out