"""The chess board: position, move legality, check detection and special moves."""

from __future__ import annotations

import string
from typing import Callable, Dict, Iterator, Optional, Tuple

from .pieces import (
    Bishop,
    Colour,
    Grid,
    King,
    Knight,
    MutableGrid,
    Pawn,
    Piece,
    Queen,
    Rook,
)

FILES = "abcdefgh"
RANKS = (8, 7, 6, 5, 4, 3, 2, 1)
PROMOTION_PIECES = {"Q": Queen, "N": Knight, "B": Bishop, "R": Rook}

_BACK_RANK = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)
_DIVIDER = " ---" * 8
_FILE_LABELS = "".join(f"   {name}" for name in FILES)

Square = Tuple[int, int]


class IllegalMove(Exception):
    """Raised when a requested move breaks the rules."""


class InvalidSquare(ValueError):
    """Raised when a coordinate does not name a square on the board."""


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < 8 and 0 <= col < 8


def _occupied(grid: Grid) -> Iterator[Tuple[int, int, Piece]]:
    for row, line in enumerate(grid):
        for col, piece in enumerate(line):
            if piece is not None:
                yield row, col, piece


class Board:
    """An 8x8 board; row 0 is rank 8 and column 0 is file a.

    The side to move starts as Black, so a game begins by calling
    :meth:`alternate_turn` once to hand the first move to White.
    """

    def __init__(self) -> None:
        self.turn = Colour.BLACK
        self.grid: MutableGrid = [[None] * 8 for _ in range(8)]
        for col, kind in enumerate(_BACK_RANK):
            self.grid[0][col] = kind(Colour.BLACK)
            self.grid[1][col] = Pawn(Colour.BLACK)
            self.grid[6][col] = Pawn(Colour.WHITE)
            self.grid[7][col] = kind(Colour.WHITE)
        self.kings: Dict[Colour, Square] = {
            Colour.WHITE: (7, 4),
            Colour.BLACK: (0, 4),
        }

    def render(self) -> str:
        """Draw the board as text: White pieces in [], Black pieces in <>."""
        parts = ["\n\n", " ", _FILE_LABELS, "   \n"]
        for rank, line in zip(RANKS, self.grid):
            parts += ["  ", _DIVIDER, "  \n", f"{rank} "]
            for piece in line:
                if piece is None:
                    parts.append("|   ")
                elif piece.colour is Colour.WHITE:
                    parts.append(f"|[{piece.symbol}]")
                else:
                    parts.append(f"|<{piece.symbol}>")
            parts.append(f"| {rank}\n")
        parts += [" ", _DIVIDER, " \n", " ", _FILE_LABELS, "  \n"]
        return "".join(parts)

    def alternate_turn(self) -> None:
        """Hand the move to the other side."""
        self.turn = self.turn.opponent()

    def parse_square(self, text: str) -> Square:
        """Turn a coordinate such as ``"e4"`` into ``(row, col)``."""
        if len(text) != 2:
            raise InvalidSquare("input must be made of two characters")
        file, rank = text
        if not (file.isalpha() and rank in string.digits):
            raise InvalidSquare("please input a valid position on the board")
        if file not in FILES or int(rank) not in RANKS:
            raise InvalidSquare("there is no square on the board")
        return RANKS.index(int(rank)), FILES.index(file)

    def try_move(
        self,
        irow: int,
        icol: int,
        frow: int,
        fcol: int,
        promote: Optional[Callable[[], str]] = None,
    ) -> None:
        """Play a move for the side to move, or raise :class:`IllegalMove`.

        ``promote`` is asked for the promotion piece letter when a pawn
        reaches the last rank; without it the pawn becomes a queen.
        """
        piece = self.grid[irow][icol]
        if piece is None:
            raise IllegalMove("there is no piece on that square")
        if piece.colour is not self.turn:
            raise IllegalMove("not your piece")
        target = self.grid[frow][fcol]
        if target is not None and target.colour is self.turn:
            raise IllegalMove("cannot move to your own piece")

        if isinstance(piece, King) and not piece.moved and fcol in (2, 6):
            if self.castle(self.turn, fcol):
                piece.mark_moved()
                return

        if not piece.is_move_allowed(self.grid, irow, icol, frow, fcol):
            raise IllegalMove("piece movement not allowed")
        if self.will_king_check(irow, icol, frow, fcol, self.turn):
            raise IllegalMove("King will be in check")

        self.grid[frow][fcol] = piece
        self.grid[irow][icol] = None
        if isinstance(piece, Pawn) and frow in (0, 7):
            choice = promote() if promote is not None else "Q"
            piece = self.promote_pawn(frow, fcol, choice)
        piece.mark_moved()

    def find_kings(self, grid: Grid) -> Dict[Colour, Square]:
        """Record where the kings stand on ``grid`` and return their squares.

        A king missing from ``grid`` keeps the square last recorded for it.
        """
        for row, col, piece in _occupied(grid):
            if isinstance(piece, King):
                self.kings[piece.colour] = (row, col)
        return dict(self.kings)

    def is_king_check(self, grid: Grid, colour: Colour | str) -> bool:
        """Whether any enemy piece on ``grid`` attacks the king of ``colour``."""
        colour = Colour(colour)
        king_row, king_col = self.find_kings(grid)[colour]
        return any(
            piece.colour is not colour
            and piece.is_move_allowed(grid, row, col, king_row, king_col)
            for row, col, piece in _occupied(grid)
        )

    def will_king_check(
        self, irow: int, icol: int, frow: int, fcol: int, colour: Colour | str
    ) -> bool:
        """Whether the king of ``colour`` would be in check after the move."""
        virtual = [list(line) for line in self.grid]
        virtual[frow][fcol] = virtual[irow][icol]
        virtual[irow][icol] = None
        return self.is_king_check(virtual, colour)

    def can_king_move(self, colour: Colour | str) -> bool:
        """Whether the king of ``colour`` has a safe square next to it."""
        colour = Colour(colour)
        king_row, king_col = self.find_kings(self.grid)[colour]
        for drow in (-1, 0, 1):
            for dcol in (-1, 0, 1):
                if drow == dcol == 0:
                    continue
                row, col = king_row + drow, king_col + dcol
                if not _on_board(row, col):
                    continue
                target = self.grid[row][col]
                if target is not None and target.colour is colour:
                    continue
                if not self.will_king_check(king_row, king_col, row, col, colour):
                    return True
        return False

    def can_any_move(self) -> bool:
        """Whether any piece of the side to move, other than the king, can move."""
        movers = [
            (row, col, piece)
            for row, col, piece in _occupied(self.grid)
            if piece.colour is self.turn and not isinstance(piece, King)
        ]
        for row, col, piece in movers:
            for frow in range(8):
                for fcol in range(8):
                    target = self.grid[frow][fcol]
                    if target is not None and target.colour is self.turn:
                        continue
                    if piece.is_move_allowed(
                        self.grid, row, col, frow, fcol
                    ) and not self.will_king_check(row, col, frow, fcol, self.turn):
                        return True
        return False

    def is_checkmate(self) -> bool:
        """Whether the side to move is checkmated."""
        return (
            self.is_king_check(self.grid, self.turn)
            and not self.can_king_move(self.turn)
            and not self.can_any_move()
        )

    def is_stalemate(self) -> bool:
        """Whether the side to move has no legal move while not in check."""
        return (
            not self.is_king_check(self.grid, self.turn)
            and not self.can_king_move(self.turn)
            and not self.can_any_move()
        )

    def promote_pawn(self, row: int, col: int, choice: str) -> Piece:
        """Replace the piece at ``(row, col)`` with a Q, N, B or R and return it."""
        try:
            kind = PROMOTION_PIECES[choice]
        except KeyError:
            raise ValueError(
                f"invalid promotion {choice!r}: please input either R, B, N or Q"
            ) from None
        current = self.grid[row][col]
        colour = current.colour if current is not None else self.turn
        piece = kind(colour)
        self.grid[row][col] = piece
        return piece

    def castle(self, colour: Colour | str, fcol: int) -> bool:
        """Castle the king of ``colour`` towards column ``fcol`` if allowed.

        Column 2 castles on the queen side, any other column on the king
        side. Returns whether the king and rook were moved.
        """
        colour = Colour(colour)
        if self.is_king_check(self.grid, colour):
            return False
        king_row, king_col = self.find_kings(self.grid)[colour]
        line = self.grid[king_row]

        if fcol == 2:
            rook_from, rook_to = 0, fcol + 1
            # squares that must be empty, squares the king must not be attacked on
            steps = [(king_col - (n + 1), king_col - n) for n in range(3)]
        else:
            rook_from, rook_to = 7, fcol - 1
            steps = [(None if n == 0 else king_col + n, king_col + n) for n in range(3)]

        rook = line[rook_from]
        if not isinstance(rook, Rook) or rook.moved:
            return False
        for empty_col, pass_col in steps:
            if not _on_board(king_row, pass_col):
                return False
            if empty_col is not None and (
                not _on_board(king_row, empty_col) or line[empty_col] is not None
            ):
                return False
            if self.will_king_check(king_row, king_col, king_row, pass_col, colour):
                return False

        line[fcol] = line[king_col]
        line[king_col] = None
        line[rook_to] = line[rook_from]
        line[rook_from] = None
        return True