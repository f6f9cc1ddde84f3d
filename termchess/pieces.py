"""Chess pieces and the movement rule of each kind of piece."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar, List, Optional, Sequence

Grid = Sequence[Sequence[Optional["Piece"]]]
MutableGrid = List[List[Optional["Piece"]]]


class Colour(str, Enum):
    """The side a piece belongs to."""

    WHITE = "W"
    BLACK = "B"

    def opponent(self) -> "Colour":
        """Return the other side."""
        return Colour.BLACK if self is Colour.WHITE else Colour.WHITE


class Piece(ABC):
    """A piece on the board, with its colour and whether it has moved."""

    symbol: ClassVar[str] = "?"

    def __init__(self, colour: Colour | str) -> None:
        self.colour = Colour(colour)
        self.moved = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.colour.value!r})"

    def mark_moved(self) -> None:
        """Record that the piece has left its starting square."""
        self.moved = True

    @abstractmethod
    def is_move_allowed(
        self, grid: Grid, irow: int, icol: int, frow: int, fcol: int
    ) -> bool:
        """Whether the piece's movement pattern allows the move on ``grid``.

        Rows run from 0 (rank 8) to 7 (rank 1); columns from 0 (file a)
        to 7 (file h). Whether the destination holds a friendly piece and
        whether the move leaves the king in check is decided by the board.
        """


def _path_is_clear(
    grid: Grid, irow: int, icol: int, row_dir: int, col_dir: int, distance: int
) -> bool:
    return all(
        grid[irow + n * row_dir][icol + n * col_dir] is None
        for n in range(1, distance)
    )


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Pawn(Piece):
    """Moves one square forward, two from its first square, captures diagonally."""

    symbol = "P"

    def is_move_allowed(
        self, grid: Grid, irow: int, icol: int, frow: int, fcol: int
    ) -> bool:
        forward = -1 if self.colour is Colour.WHITE else 1
        enemy = self.colour.opponent()

        if frow == irow + forward:
            if fcol in (icol - 1, icol + 1):
                target = grid[frow][fcol]
                return target is not None and target.colour is enemy
            if fcol == icol:
                return grid[frow][fcol] is None
            return False

        if frow == irow + 2 * forward and not self.moved:
            return (
                fcol == icol
                and grid[irow + forward][icol] is None
                and grid[irow + 2 * forward][icol] is None
            )
        return False


class King(Piece):
    """Moves one square in any direction."""

    symbol = "K"

    def is_move_allowed(
        self, grid: Grid, irow: int, icol: int, frow: int, fcol: int
    ) -> bool:
        return (
            abs(frow - irow) <= 1
            and abs(fcol - icol) <= 1
            and (frow, fcol) != (irow, icol)
        )


class Queen(Piece):
    """Moves any distance along a rank, file or diagonal through empty squares."""

    symbol = "Q"

    def is_move_allowed(
        self, grid: Grid, irow: int, icol: int, frow: int, fcol: int
    ) -> bool:
        straight = frow == irow or fcol == icol
        diagonal = abs(frow - irow) == abs(fcol - icol)
        if not (straight or diagonal):
            return False
        distance = max(abs(frow - irow), abs(fcol - icol))
        return _path_is_clear(
            grid, irow, icol, _sign(frow - irow), _sign(fcol - icol), distance
        )


class Bishop(Piece):
    """Moves any distance along a diagonal through empty squares."""

    symbol = "B"

    def is_move_allowed(
        self, grid: Grid, irow: int, icol: int, frow: int, fcol: int
    ) -> bool:
        distance = abs(frow - irow)
        if distance != abs(fcol - icol):
            return False
        row_dir = -1 if frow < irow else 1
        col_dir = -1 if fcol < icol else 1
        return _path_is_clear(grid, irow, icol, row_dir, col_dir, distance)


class Knight(Piece):
    """Jumps two squares one way and one square the other."""

    symbol = "N"

    def is_move_allowed(
        self, grid: Grid, irow: int, icol: int, frow: int, fcol: int
    ) -> bool:
        return {abs(frow - irow), abs(fcol - icol)} == {1, 2}


class Rook(Piece):
    """Moves any distance along a rank or file through empty squares."""

    symbol = "R"

    def is_move_allowed(
        self, grid: Grid, irow: int, icol: int, frow: int, fcol: int
    ) -> bool:
        if frow != irow and fcol != icol:
            return False
        if frow == irow:
            distance = abs(fcol - icol)
            return _path_is_clear(
                grid, irow, icol, 0, -1 if fcol < icol else 1, distance
            )
        distance = abs(frow - irow)
        return _path_is_clear(
            grid, irow, icol, -1 if frow < irow else 1, 0, distance
        )