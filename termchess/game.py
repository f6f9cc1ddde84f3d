"""Interactive two-player chess game on a text terminal."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from .board import PROMOTION_PIECES, Board, IllegalMove, InvalidSquare, Square
from .pieces import Colour

_RESTART_PROMPT = (
    "Game ended. Press 'r' (and Enter) to restart or any other key to quit.\n\n"
)
_START_MESSAGE = (
    "\n\t--- Chess Game ---\n"
    "\n* Input coordinates as 'a1' to play *\n"
    "\n\t   Game Started!\n"
)
_TURN_HEADERS = {
    Colour.WHITE: "\n-White player's turn- []\n",
    Colour.BLACK: "\n-Black player's turn- <>\n",
}


class _Console:
    """Reads whitespace-separated words from a stream and writes text out."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._words = (word for line in stdin for word in line.split())
        self._out = stdout

    def write(self, text: str) -> None:
        self._out.write(text)

    def read(self) -> str:
        self._out.flush()
        try:
            return next(self._words)
        except StopIteration:
            raise EOFError("input exhausted") from None


def _ask_restart(console: _Console) -> bool:
    console.write(_RESTART_PROMPT)
    try:
        answer = console.read()
    except EOFError:
        return False
    return answer[0] == "r"


def keep_alive(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> bool:
    """Ask whether to play again; True when the answer starts with 'r'."""
    return _ask_restart(_Console(stdin or sys.stdin, stdout or sys.stdout))


def _read_square(console: _Console, board: Board) -> Square:
    while True:
        console.write("Coordinate = ")
        text = console.read()
        try:
            return board.parse_square(text)
        except InvalidSquare as err:
            console.write(board.render())
            console.write(f"\nError: {err}\n")


def _choose_promotion(console: _Console) -> str:
    console.write("\nPlease choose a piece to promote the pawn to (R, N, B or Q): ")
    while True:
        choice = console.read()
        if choice in PROMOTION_PIECES:
            console.write("\n")
            return choice
        console.write("\n Invalid input : please input either R, B, N or Q")


def _make_move(console: _Console, board: Board) -> None:
    while True:
        console.write(_TURN_HEADERS[board.turn])
        console.write("\nSelect the piece:\n")
        start = _read_square(console, board)
        console.write("\nSelect a destination:\n")
        end = _read_square(console, board)
        try:
            board.try_move(*start, *end, lambda: _choose_promotion(console))
        except IllegalMove as err:
            console.write(board.render())
            console.write(f"\nInvalid move: {err}\n")
        else:
            return


def _play_game(console: _Console) -> bool:
    """Play one game to its end; return whether another game was asked for."""
    board = Board()
    console.write(_START_MESSAGE)
    board.alternate_turn()
    while True:
        console.write(board.render())
        if board.is_checkmate():
            winner = "Black" if board.turn is Colour.WHITE else "White"
            console.write(f"\n\t.   {winner} wins!\n\n")
            return _ask_restart(console)
        if board.is_stalemate():
            console.write("\n     It's a stalemate! Draw !\n\n")
            return _ask_restart(console)
        _make_move(console, board)
        board.alternate_turn()


def play(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Run games until the players stop or the input runs out."""
    console = _Console(stdin or sys.stdin, stdout or sys.stdout)
    try:
        while _play_game(console):
            pass
    except EOFError:
        pass


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game on the terminal."""
    try:
        play(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())