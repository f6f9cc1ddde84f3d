# termchess

A chess game for two players who share one terminal. The board is drawn in
plain text. Players type squares such as `e2` and `e4` to move.

## Installing

```
pip install .
```

## Playing

```
termchess
```

`python -m termchess.game` starts the same game.

White moves first. For each move you give two squares:

1. The square of the piece you want to move, for example `e2`.
2. The square you want to move it to, for example `e4`.

White pieces are drawn as `[P]` and black pieces as `<P>`. The letters are
`K` king, `Q` queen, `R` rook, `B` bishop, `N` knight and `P` pawn. Files
`a`–`h` run along the top and bottom of the board, and ranks `8`–`1` run
down the sides.

A square that is not two characters, or does not name a square on the
board, is refused and you are asked again.

The game rejects a move and asks again when:

- the first square is empty or holds your opponent's piece,
- the destination holds one of your own pieces,
- the piece cannot move that way or its path is blocked,
- the move would leave your own king in check.

### Special moves

- **Castling**: move the king two squares toward a rook, for example `e1` to
  `g1` or `e1` to `c1`. The king and that rook must not have moved yet, the
  squares between them must be empty, and the king must not be in check or
  pass through an attacked square.
- **Promotion**: when a pawn reaches the last rank you are asked for `Q`, `R`,
  `B` or `N`. Any other answer is refused and you are asked again.

En passant is not supported, and there are no draws by repetition, by the
fifty-move rule or by agreement.

### End of the game

The game ends on checkmate, when the player in check has no legal move, or on
stalemate, when the player to move is not in check but has no legal move.
After that, an answer starting with `r` starts a new game; any other answer
quits. The program also stops when its input runs out, and exits on Ctrl-C.

## Using the library

The rules engine in `termchess.board` can be used without the terminal front
end:

```python
from termchess.board import Board, IllegalMove

board = Board()
board.alternate_turn()              # white to move
irow, icol = board.parse_square("e2")
frow, fcol = board.parse_square("e4")
board.try_move(irow, icol, frow, fcol, None)
print(board.render())
```

- `Board.parse_square` turns text such as `"e4"` into `(row, col)`, where row
  0 is rank 8 and column 0 is file a. It raises `InvalidSquare` for text that
  does not name a square.
- `Board.try_move` plays a move for the side to move (`Board.turn`) or raises
  `IllegalMove`. Its last argument is a callable that returns the promotion
  letter; with `None` a promoted pawn becomes a queen. It does not change the
  turn: call `Board.alternate_turn` after each move.
- `Board.is_checkmate()` and `Board.is_stalemate()` report how the game
  stands for the side to move.
- `Board.render()` returns the board drawn as text.

The pieces live in `termchess.pieces`: `Pawn`, `Knight`, `Bishop`, `Rook`,
`Queen` and `King`, each with an `is_move_allowed` method, and the `Colour`
enum with `WHITE` and `BLACK`.

## Running the tests

```
pip install ".[test]"
pytest
```