"""Drawing the viewer's frame: board squares, grid lines and score bars."""

from __future__ import annotations

import math

from fillerbot.board import Coord
from fillerbot.viewer_state import (
    COLOR_EMPTY,
    COLOR_GRID,
    COLOR_P1,
    COLOR_P2,
    COLOR_SCORE_BACKGROUND,
    HEIGHT,
    PlayerScore,
    ViewerError,
    ViewerState,
)

COLOR_DOT = 0xFFFF00

_PANEL_LEFT = 1190
_PANEL_RIGHT = 1405
_PANEL_MARGIN = 20
_BAR_MARGIN = 25
_BAR_WIDTH = 100
_BAR_LEFT_P1 = 1195
_BAR_LEFT_P2 = 1300
_DOT_SIZE = 10
_DOT_X_P1_LEADS = 1240
_DOT_X_P2_LEADS = 1340
_DOT_X_TIE = 1293

Label = tuple[int, int, int, str]


class Canvas:
    """An RGB pixel buffer; writes outside it are silently dropped."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.width = width
        self.height = height
        self._pixels = bytearray(width * height * 3)

    def put_pixel(self, y: int, x: int, color: int) -> None:
        """Set the pixel at row ``y``, column ``x`` if it lies on the canvas."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._fill_rect(y, x, y + 1, x + 1, color)

    def get_pixel(self, y: int, x: int) -> int:
        """Return the 24-bit colour at row ``y``, column ``x``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({y}, {x}) is outside the canvas")
        i = (y * self.width + x) * 3
        r, g, b = self._pixels[i:i + 3]
        return (r << 16) | (g << 8) | b

    def to_rgb(self) -> bytes:
        """Return the pixels row by row, three bytes (R, G, B) each."""
        return bytes(self._pixels)

    def _fill_rect(self, top: int, left: int, bottom: int, right: int, color: int) -> None:
        """Fill rows [top, bottom) and columns [left, right), clipped."""
        top, bottom = max(top, 0), min(bottom, self.height)
        left, right = max(left, 0), min(right, self.width)
        if top >= bottom or left >= right:
            return
        pixel = bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
        run = pixel * (right - left)
        for y in range(top, bottom):
            start = (y * self.width + left) * 3
            self._pixels[start:start + len(run)] = run


def square_size(state: ViewerState) -> tuple[int, Coord]:
    """Return the side of one board square and the board's offset."""
    rows, cols = state.size.y, state.size.x
    largest = rows if rows > cols else cols
    if largest <= 0:
        raise ViewerError("the board has no size")
    size = HEIGHT // largest
    offset = Coord(x=(HEIGHT - size * cols) // 2, y=(HEIGHT - size * rows) // 2)
    return size, offset


def cell_color(letter: str) -> int:
    """Return the colour a board character is drawn in."""
    owner = letter.upper()
    if owner == "O":
        return COLOR_P1
    if owner == "X":
        return COLOR_P2
    return COLOR_EMPTY


def draw_squares(canvas: Canvas, state: ViewerState) -> None:
    """Draw one coloured square for each board cell."""
    size, offset = square_size(state)
    for r, row in enumerate(state.board):
        top = offset.y + r * size
        for c, letter in enumerate(row):
            left = c * size
            canvas._fill_rect(top, left, top + size + 1, left + size + 1, cell_color(letter))


def draw_grids(canvas: Canvas, state: ViewerState) -> None:
    """Draw three-pixel-wide grid lines between the board squares."""
    size, offset = square_size(state)
    rows, cols = state.size.y, state.size.x
    board_width = size * cols
    board_height = size * rows
    for i in range(rows + 1):
        y = offset.y + i * size
        canvas._fill_rect(y - 1, 0, y + 2, board_width + 1, COLOR_GRID)
    for i in range(cols + 1):
        x = i * size
        canvas._fill_rect(offset.y, x - 1, offset.y + board_height + 1, x + 2, COLOR_GRID)


def draw_background(canvas: Canvas, state: ViewerState) -> None:
    """Draw the panel behind the score bars."""
    size, offset = square_size(state)
    board_height = state.size.y * size
    top = (HEIGHT - board_height) // 2 + _PANEL_MARGIN
    bottom = offset.y + board_height - _PANEL_MARGIN
    canvas._fill_rect(top, _PANEL_LEFT, bottom, _PANEL_RIGHT, COLOR_SCORE_BACKGROUND)


def _draw_dot(canvas: Canvas, state: ViewerState, offset: Coord) -> None:
    y = HEIGHT - offset.y - _DOT_SIZE
    if state.p1.positions > state.p2.positions:
        x = _DOT_X_P1_LEADS
    elif state.p1.positions < state.p2.positions:
        x = _DOT_X_P2_LEADS
    else:
        x = _DOT_X_TIE
    canvas._fill_rect(y, x, y + _DOT_SIZE, x + _DOT_SIZE, COLOR_DOT)


def draw_score(canvas: Canvas, state: ViewerState, player: PlayerScore, color: int) -> None:
    """Draw a player's score bar, filled from the bottom, and the leader dot.

    Sets ``player.fac`` to the filled height of the bar.
    """
    size, offset = square_size(state)
    total = state.size.y * state.size.x
    if total == 0:
        raise ViewerError("the board has no cells")
    board_height = state.size.y * size
    player.fac = ((board_height - 50) / total) * player.positions
    left = _BAR_LEFT_P1 if player.char == "O" else _BAR_LEFT_P2
    start = offset.y + _BAR_MARGIN
    end = offset.y + board_height - _BAR_MARGIN
    threshold = offset.y + (board_height - _BAR_MARGIN) - player.fac
    split = max(start, min(end, math.floor(threshold) + 1))
    canvas._fill_rect(start, left, split, left + _BAR_WIDTH, COLOR_EMPTY)
    canvas._fill_rect(split, left, end, left + _BAR_WIDTH, color)
    _draw_dot(canvas, state, offset)


def score_label(count: int) -> str:
    """Return a score padded with zeros to at least four digits."""
    if count < 10:
        return f"000{count}"
    if count < 100:
        return f"00{count}"
    if count < HEIGHT:
        return f"0{count}"
    return str(count)


def _labels(state: ViewerState, offset: Coord) -> list[Label]:
    p1, p2 = state.p1, state.p2
    base = HEIGHT - offset.y
    return [
        (1145, int(base - 25 - p1.fac), COLOR_P1, score_label(p1.positions)),
        (1185 - len(p1.name) * 10, int(base - 45 - p1.fac), COLOR_P1, p1.name),
        (1410, int(base - 25 - p2.fac), COLOR_P2, score_label(p2.positions)),
        (1410, int(base - 45 - p2.fac), COLOR_P2, p2.name),
    ]


def render(canvas: Canvas, state: ViewerState) -> list[Label]:
    """Draw a whole frame and return the text labels as (x, y, color, text)."""
    canvas._fill_rect(0, 0, canvas.height, canvas.width, 0)
    _, offset = square_size(state)
    draw_squares(canvas, state)
    draw_grids(canvas, state)
    draw_background(canvas, state)
    draw_score(canvas, state, state.p1, COLOR_P1)
    draw_score(canvas, state, state.p2, COLOR_P2)
    return _labels(state, offset)