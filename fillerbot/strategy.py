"""Choosing where to place each piece."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from fillerbot.board import Coord, InputError, Turn

_ANCHORS = {"LU", "RU", "LD", "RD"}
_FLIP = {"U": "D", "D": "U", "L": "R", "R": "L"}
_OPPONENT_NEIGHBOUR_POINTS = 50
_OWN_NEIGHBOUR_POINTS = 1


@dataclass(frozen=True)
class PlayerState:
    """A player's character and the cells it holds, in row-major order."""

    char: str
    cells: tuple[Coord, ...]

    @classmethod
    def locate(cls, turn: Turn, char: str) -> PlayerState:
        """Collect the cells of ``char`` on the board; raise if there are none."""
        cells = tuple(
            Coord(x=x, y=y)
            for y, row in enumerate(turn.board)
            for x, cell in enumerate(row)
            if cell == char
        )
        if not cells:
            raise InputError(f"Player not found: {char!r}")
        return cls(char=char, cells=cells)

    @property
    def first(self) -> Coord:
        return self.cells[0]

    @property
    def last(self) -> Coord:
        return self.cells[-1]


def quarter(pos: Coord, width: int, height: int) -> str:
    """Return which quarter of the board ``pos`` lies in, e.g. ``"LU"``."""
    horizontal = "L" if pos.x < width // 2 else "R"
    vertical = "U" if pos.y < height // 2 else "D"
    return horizontal + vertical


def direction(me: Coord, op: Coord) -> str:
    """Return the direction from ``me`` towards ``op``; ``-`` marks no offset."""
    dx = op.x - me.x
    dy = op.y - me.y
    horizontal = "L" if dx < 0 else "R" if dx > 0 else "-"
    vertical = "U" if dy < 0 else "D" if dy > 0 else "-"
    return horizontal + vertical


def adjust_direction(dir_pair: str, me_quarter: str) -> str:
    """Replace a missing component by heading away from our own quarter."""
    horizontal, vertical = dir_pair
    if vertical == "-":
        vertical = _FLIP.get(me_quarter[1], vertical) if me_quarter[1] in "UD" else vertical
    elif horizontal == "-":
        horizontal = _FLIP.get(me_quarter[0], horizontal) if me_quarter[0] in "LR" else horizontal
    return horizontal + vertical


def anchor_star(piece: tuple[str, ...] | list[str], dir_pair: str) -> Coord:
    """Return the star of ``piece`` that is laid on our own cell.

    ``U`` takes the last row holding a star, ``D`` the first; ``L`` takes
    the rightmost star of that row, ``R`` the leftmost.
    """
    if dir_pair not in _ANCHORS:
        raise ValueError(f"no anchor for direction {dir_pair!r}")
    rows = [(y, row) for y, row in enumerate(piece) if "*" in row]
    if not rows:
        raise ValueError("piece has no star")
    y, row = rows[-1] if dir_pair[1] == "U" else rows[0]
    x = row.rindex("*") if dir_pair[0] == "L" else row.index("*")
    return Coord(x=x, y=y)


class Strategy:
    """Pick placements: head for the opponent, then hug it once touched."""

    def __init__(self, me: str, op: str) -> None:
        self.me = me
        self.op = op
        self.touched = False

    def next_move(self, turn: Turn) -> Coord:
        """Return the top-left board position at which to place the piece."""
        if self.touched:
            return self._sweep(turn)
        return self._closest(turn)

    def _closest(self, turn: Turn) -> Coord:
        me = PlayerState.locate(turn, self.me)
        op = PlayerState.locate(turn, self.op)
        best: Coord | None = None
        smallest = turn.size.y * turn.size.x
        for op_pos in op.cells:
            for me_pos in me.cells:
                placement = self._placement(turn, me_pos, op_pos)
                valid, _ = self._evaluate(turn, placement)
                if not valid:
                    continue
                distance = abs(me_pos.y - op_pos.y) + abs(me_pos.x - op_pos.x)
                if distance < smallest:
                    smallest = distance
                    best = placement
        if best is None:
            return self._sweep(turn)
        return best

    def _placement(self, turn: Turn, me_pos: Coord, op_pos: Coord) -> Coord:
        heading = adjust_direction(
            direction(me_pos, op_pos),
            quarter(me_pos, turn.size.x, turn.size.y),
        )
        anchor = anchor_star(turn.piece, heading)
        return Coord(x=me_pos.x - anchor.x, y=me_pos.y - anchor.y)

    def _sweep(self, turn: Turn) -> Coord:
        anchor = anchor_star(turn.piece, "RD")
        start_y = anchor.y - turn.piece_size.y + 1 if anchor.y else 0
        start_x = anchor.x - turn.piece_size.x + 1 if anchor.x else 0
        best = Coord(x=start_x, y=start_y)
        best_points = 0
        for y in range(start_y, turn.size.y):
            for x in range(start_x, turn.size.x):
                placement = Coord(x=x, y=y)
                valid, points = self._evaluate(turn, placement)
                if valid and points >= best_points:
                    best_points = points
                    best = placement
        return best

    @staticmethod
    def _stars(turn: Turn) -> Iterator[tuple[int, int]]:
        for iy, row in enumerate(turn.piece):
            for ix, cell in enumerate(row[: turn.piece_size.x]):
                if cell == "*":
                    yield iy, ix

    def _evaluate(self, turn: Turn, pos: Coord) -> tuple[bool, int]:
        """Check a placement; return whether it is legal and its neighbour points."""
        height, width = turn.size.y, turn.size.x
        count = 0
        points = 0
        for iy, ix in self._stars(turn):
            if count >= 2:
                break
            y, x = pos.y + iy, pos.x + ix
            if not (0 <= y < height and 0 <= x < width):
                count += 5
                continue
            cell = turn.board[y][x]
            if cell == self.op:
                count += 5
                continue
            if cell == self.me:
                count += 1
            if not self.touched:
                self._check_touched(turn, y, x)
            else:
                points += self._neighbour_points(turn, y, x)
        return count == 1, points

    def _check_touched(self, turn: Turn, y: int, x: int) -> None:
        height, width = turn.size.y, turn.size.x
        if x >= width - 5 or x < 1 or y + 1 >= height or y < 1:
            return
        board = turn.board
        if self.op in (board[y][x + 1], board[y][x - 1], board[y + 1][x], board[y - 1][x]):
            self.touched = True

    def _neighbour_points(self, turn: Turn, y: int, x: int) -> int:
        height, width = turn.size.y, turn.size.x
        points = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                ny, nx = y + dy, x + dx
                if not (0 <= ny < height and 0 <= nx < width):
                    return points
                cell = turn.board[ny][nx]
                if cell == self.op:
                    points += _OPPONENT_NEIGHBOUR_POINTS
                if cell == self.me:
                    points += _OWN_NEIGHBOUR_POINTS
        return points