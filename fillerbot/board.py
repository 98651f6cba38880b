"""Reading the game master's input: player assignment, board and piece."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

ROW_PREFIX_WIDTH = 4
BOARD_PREFIX = "Plateau "
PIECE_PREFIX = "Piece "

_PLAYER_SLOT = 10
_PLAYER_CHARS = {
    "1": ("O", "X"),
    "2": ("X", "O"),
    "3": ("C", "O"),
    "4": ("D", "O"),
    "5": ("E", "O"),
}
_DIMENSIONS = re.compile(r"\s*([+-]?\d+)\s*([+-]?\d+)")


class InputError(ValueError):
    """Raised when the game master's input is malformed or incomplete."""


@dataclass(frozen=True)
class Coord:
    """A position or a size: x is the column, y the row."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Turn:
    """Everything the game master sends for one move.

    ``board`` holds the board rows without their row-number prefix,
    ``piece`` the rows of the piece to place.
    """

    size: Coord
    board: tuple[str, ...]
    piece_size: Coord
    piece: tuple[str, ...]
    opponent_cells: int = 0

    def cell(self, y: int, x: int) -> str:
        """Return the board character at row ``y``, column ``x``."""
        if not (0 <= y < len(self.board)) or not (0 <= x < len(self.board[y])):
            raise IndexError(f"cell ({y}, {x}) is outside the board")
        return self.board[y][x]


def parse_player(line: str) -> tuple[str, str]:
    """Return the (own, opponent) board characters for a player line."""
    line = line.rstrip("\r\n")
    if len(line) <= _PLAYER_SLOT or line[_PLAYER_SLOT] not in _PLAYER_CHARS:
        raise InputError(f"unrecognised player line: {line!r}")
    return _PLAYER_CHARS[line[_PLAYER_SLOT]]


def parse_dimensions(line: str, prefix: str) -> Coord:
    """Parse a ``<prefix><rows> <cols>:`` header into a Coord."""
    line = line.rstrip("\r\n")
    if not line.startswith(prefix):
        raise InputError(f"expected a line starting with {prefix!r}: {line!r}")
    match = _DIMENSIONS.match(line, len(prefix))
    if match is None:
        raise InputError(f"no dimensions in line: {line!r}")
    rows, cols = int(match.group(1)), int(match.group(2))
    if rows < 0 or cols < 0:
        raise InputError(f"negative dimensions in line: {line!r}")
    return Coord(x=cols, y=rows)


def _next_line(it: Iterator[str], what: str) -> str:
    try:
        return next(it).rstrip("\r\n")
    except StopIteration:
        raise InputError(f"input ended while reading {what}") from None


def read_turn(lines: Iterable[str], opponent: str) -> Turn:
    """Read one turn (board header, board, piece) from ``lines``.

    Raises EOFError if the input ends before a turn begins and
    InputError if it ends or is malformed part-way through.
    """
    it = iter(lines)
    try:
        header = next(it)
    except StopIteration:
        raise EOFError("no more turns") from None
    size = parse_dimensions(header, BOARD_PREFIX)
    _next_line(it, "the column header")

    board = []
    opponent_cells = 0
    for _ in range(size.y):
        row = _next_line(it, "the board")[ROW_PREFIX_WIDTH:]
        opponent_cells += row.count(opponent)
        board.append(row)

    piece_size = parse_dimensions(_next_line(it, "the piece header"), PIECE_PREFIX)
    piece = tuple(_next_line(it, "the piece") for _ in range(piece_size.y))

    return Turn(
        size=size,
        board=tuple(board),
        piece_size=piece_size,
        piece=piece,
        opponent_cells=opponent_cells,
    )