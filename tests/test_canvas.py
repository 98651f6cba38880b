import pytest

from fillerbot.board import Coord
from fillerbot.canvas import (
    Canvas,
    cell_color,
    draw_background,
    draw_grids,
    draw_score,
    draw_squares,
    render,
    score_label,
    square_size,
)
from fillerbot.viewer_state import (
    COLOR_EMPTY,
    COLOR_GRID,
    COLOR_P1,
    COLOR_P2,
    COLOR_SCORE_BACKGROUND,
    HEIGHT,
    WIDTH,
    PlayerScore,
    ViewerError,
    ViewerState,
)


def make_state(rows=10, cols=10, p1=0, p2=0):
    board = ["." * cols for _ in range(rows)]
    return ViewerState(
        size=Coord(x=cols, y=rows),
        board=board,
        p1=PlayerScore(name="alpha", char="O", positions=p1),
        p2=PlayerScore(name="beta", char="X", positions=p2),
    )


def full_canvas():
    return Canvas(WIDTH, HEIGHT)


def test_pixel_round_trip():
    canvas = Canvas(5, 4)
    canvas.put_pixel(2, 3, COLOR_P2)
    assert canvas.get_pixel(2, 3) == COLOR_P2
    assert canvas.get_pixel(0, 0) == 0


def test_pixel_color_is_masked_to_24_bits():
    canvas = Canvas(3, 3)
    canvas.put_pixel(1, 1, COLOR_P1 | 0x1000000)
    assert canvas.get_pixel(1, 1) == COLOR_P1


def test_put_outside_is_ignored():
    canvas = Canvas(3, 3)
    for y, x in [(-1, 0), (0, -1), (3, 0), (0, 3)]:
        canvas.put_pixel(y, x, COLOR_P1)
    assert canvas.to_rgb() == bytes(3 * 3 * 3)


def test_get_outside_raises():
    canvas = Canvas(3, 3)
    with pytest.raises(IndexError):
        canvas.get_pixel(3, 0)


def test_to_rgb_byte_order():
    canvas = Canvas(1, 1)
    canvas.put_pixel(0, 0, COLOR_P1)
    data = canvas.to_rgb()
    assert (data[0] << 16) | (data[1] << 8) | data[2] == COLOR_P1


@pytest.mark.parametrize(
    "letter, color",
    [("O", COLOR_P1), ("o", COLOR_P1), ("X", COLOR_P2), ("x", COLOR_P2), (".", COLOR_EMPTY)],
)
def test_cell_color(letter, color):
    assert cell_color(letter) == color


@pytest.mark.parametrize("rows, cols", [(10, 10), (15, 17), (24, 40), (100, 99)])
def test_square_size_fits_board(rows, cols):
    size, offset = square_size(make_state(rows, cols))
    assert size * max(rows, cols) <= HEIGHT
    assert (size + 1) * max(rows, cols) > HEIGHT
    assert offset.y >= 0 and offset.x >= 0
    assert abs(HEIGHT - size * rows - 2 * offset.y) <= 1


def test_square_size_of_empty_board_raises():
    with pytest.raises(ViewerError):
        square_size(make_state(0, 0))


def test_score_label_is_zero_padded():
    for count in (0, 7, 42, 999):
        label = score_label(count)
        assert len(label) == 4
        assert int(label) == count


def test_score_label_large_values_unpadded():
    assert score_label(1000) == "1000"
    assert score_label(12345) == "12345"


def test_draw_squares_colors_cells():
    state = make_state(2, 2)
    state.board = ["O.", ".X"]
    canvas = full_canvas()
    draw_squares(canvas, state)
    size, offset = square_size(state)
    assert canvas.get_pixel(offset.y + size // 2, size // 2) == COLOR_P1
    assert canvas.get_pixel(offset.y + size // 2, size + size // 2) == COLOR_EMPTY
    assert canvas.get_pixel(offset.y + size + size // 2, size + size // 2) == COLOR_P2


def test_draw_grids_lines():
    state = make_state(4, 4)
    canvas = full_canvas()
    draw_grids(canvas, state)
    size, offset = square_size(state)
    assert canvas.get_pixel(offset.y + size, size // 2) == COLOR_GRID
    assert canvas.get_pixel(offset.y + size + 1, size // 2) == COLOR_GRID
    assert canvas.get_pixel(offset.y + size // 2, size) == COLOR_GRID
    assert canvas.get_pixel(offset.y + size // 2, size // 2) == 0


def test_draw_background_panel():
    state = make_state(10, 10)
    canvas = full_canvas()
    draw_background(canvas, state)
    size, offset = square_size(state)
    middle = offset.y + size * 5
    assert canvas.get_pixel(middle, 1190) == COLOR_SCORE_BACKGROUND
    assert canvas.get_pixel(middle, 1404) == COLOR_SCORE_BACKGROUND
    assert canvas.get_pixel(middle, 1189) == 0
    assert canvas.get_pixel(middle, 1405) == 0


def test_draw_score_empty_bar_for_no_positions():
    state = make_state(10, 10, p1=0, p2=0)
    canvas = full_canvas()
    draw_score(canvas, state, state.p1, COLOR_P1)
    size, offset = square_size(state)
    bottom = offset.y + size * 10 - 26
    assert state.p1.fac == 0
    assert canvas.get_pixel(bottom, 1195) == COLOR_EMPTY


def test_draw_score_fills_from_bottom():
    state = make_state(10, 10, p1=50, p2=10)
    canvas = full_canvas()
    draw_score(canvas, state, state.p1, COLOR_P1)
    size, offset = square_size(state)
    top = offset.y + 25
    bottom = offset.y + size * 10 - 26
    assert state.p1.fac > 0
    assert canvas.get_pixel(bottom, 1195) == COLOR_P1
    assert canvas.get_pixel(top, 1195) == COLOR_EMPTY


def test_draw_score_second_player_bar_position():
    state = make_state(10, 10, p1=0, p2=100)
    canvas = full_canvas()
    draw_score(canvas, state, state.p2, COLOR_P2)
    size, offset = square_size(state)
    bottom = offset.y + size * 10 - 26
    assert canvas.get_pixel(bottom, 1300) == COLOR_P2
    assert canvas.get_pixel(bottom, 1195) == 0


@pytest.mark.parametrize("p1, p2, dot_x", [(3, 1, 1240), (1, 3, 1340), (2, 2, 1293)])
def test_leader_dot(p1, p2, dot_x):
    state = make_state(10, 10, p1=p1, p2=p2)
    canvas = full_canvas()
    draw_score(canvas, state, state.p1, COLOR_P1)
    _, offset = square_size(state)
    assert canvas.get_pixel(HEIGHT - offset.y - 10, dot_x) == 0xFFFF00


def test_render_returns_labels():
    state = make_state(10, 10, p1=12, p2=3)
    canvas = full_canvas()
    labels = render(canvas, state)
    texts = [text for _, _, _, text in labels]
    assert texts == [score_label(12), "alpha", score_label(3), "beta"]
    assert {color for _, _, color, _ in labels} == {COLOR_P1, COLOR_P2}


def test_render_clears_previous_frame():
    state = make_state(10, 10)
    canvas = full_canvas()
    canvas.put_pixel(HEIGHT - 1, WIDTH - 1, COLOR_P1)
    render(canvas, state)
    assert canvas.get_pixel(HEIGHT - 1, WIDTH - 1) == 0
    assert state.p1.fac == 0