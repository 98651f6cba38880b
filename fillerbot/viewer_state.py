"""What the viewer knows about the game: players, scores and the board."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from fillerbot.board import BOARD_PREFIX, ROW_PREFIX_WIDTH, Coord, InputError, parse_dimensions

WIDTH = 1600
HEIGHT = 1000
COLOR_SCORE_BACKGROUND = 0xC9C9C9
COLOR_EMPTY = 0x363636
COLOR_GRID = 0x141414
COLOR_P1 = 0xFF2200
COLOR_P2 = 0x0072FF

NO_PLAYER = "no player"
VISUALISER_COMMAND = "./visual.fx"

_PLAYER_SLOT = 10
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ViewerError(ValueError):
    """Raised when the game master's output cannot be shown."""


@dataclass
class PlayerScore:
    """A player's name, board character and number of cells held."""

    name: str = NO_PLAYER
    char: str = ""
    positions: int = 0
    fac: float = 0.0


@dataclass
class ViewerState:
    """The board and scores as last read from the game master."""

    size: Coord = field(default_factory=Coord)
    board: list[str] = field(default_factory=list)
    p1: PlayerScore = field(default_factory=PlayerScore)
    p2: PlayerScore = field(default_factory=PlayerScore)

    def apply_player_line(self, line: str) -> None:
        """Take a player's name from a ``$$$ exec pN : [path]`` line."""
        line = line.rstrip("\r\n")
        slash = line.rfind("/")
        dot = line.rfind(".")
        if slash != -1 and dot != -1:
            name = line[slash + 1:dot]
            if _leading_int(line[_PLAYER_SLOT:]) == 1:
                self.p1.name = name
            else:
                self.p2.name = name
        self.p1.char = "O"
        self.p2.char = "X"

    def apply_size_line(self, line: str) -> None:
        """Take the board size from a ``Plateau <rows> <cols>:`` line."""
        try:
            self.size = parse_dimensions(line, BOARD_PREFIX)
        except InputError as exc:
            raise ViewerError(str(exc)) from None

    def read_map(self, lines: Iterable[str]) -> None:
        """Read the column header and board rows, recounting both scores."""
        it = iter(lines)
        next(it, None)
        self.p1.positions = 0
        self.p2.positions = 0
        board = []
        for _ in range(self.size.y):
            line = next(it, None)
            if line is None:
                break
            row = line.rstrip("\r\n")[ROW_PREFIX_WIDTH:]
            for cell in row:
                owner = cell.upper()
                if self.p1.char and owner == self.p1.char:
                    self.p1.positions += 1
                elif self.p2.char and owner == self.p2.char:
                    self.p2.positions += 1
            board.append(row)
        self.board = board

    def read_first(self, lines: Iterable[str]) -> None:
        """Read up to the first piece: players, board size and board."""
        it = iter(lines)
        for line in it:
            check_for_errors(line)
            if "$$$" in line:
                self.apply_player_line(line)
            elif "Plateau" in line:
                self.apply_size_line(line)
                self.read_map(it)
            elif "Piece" in line:
                return
        if self.size.y == 0 or self.size.x == 0:
            raise ViewerError("Error. The VM stopped.")

    def read_next(self, lines: Iterable[str]) -> bool:
        """Read up to the next piece, updating the board on the way.

        Returns True if a piece line was reached, False if the input ended.
        """
        it = iter(lines)
        for line in it:
            if "Plateau" in line:
                self.read_map(it)
            if "Piece" in line:
                return True
        return False


def check_for_errors(line: str) -> None:
    """Raise ViewerError if the line reports a failure of the game."""
    if VISUALISER_COMMAND in line:
        raise ViewerError("Error. Do not take the visualiser as a player.")
    if "error" in line or "Usage" in line or "the map is too small" in line:
        raise ViewerError("Error. The map is too small.")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0