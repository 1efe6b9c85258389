"""Test arrow-key movement, column clamping and viewport scrolling."""

from visedit.model import Direction, TextModel, Viewport
from visedit.selection import CursorPosition


def make_model(lines, visible_rows=5, columns=80):
    return TextModel(lines=lines, viewport=Viewport(visible_rows=visible_rows, columns=columns))


def test_left_stops_at_column_zero():
    model = make_model(["abc"])
    model.move_cursor(Direction.LEFT)
    assert model.cursor == CursorPosition(0, 0)


def test_right_stops_at_end_of_line():
    model = make_model(["ab"])
    for _ in range(5):
        model.move_cursor(Direction.RIGHT)
    assert model.cursor == CursorPosition(2, 0)


def test_right_stops_at_last_screen_column():
    model = make_model(["x" * 20], columns=10)
    for _ in range(15):
        model.move_cursor(Direction.RIGHT)
    assert model.cursor.column == 9


def test_right_does_not_wrap_to_next_line():
    model = make_model(["ab", "cd"])
    model.cursor = CursorPosition(2, 0)
    model.move_cursor(Direction.RIGHT)
    assert model.cursor == CursorPosition(2, 0)


def test_down_stops_at_last_line():
    model = make_model(["a", "b"])
    model.move_cursor(Direction.DOWN)
    model.move_cursor(Direction.DOWN)
    assert model.cursor.row == 1


def test_up_stops_at_first_line():
    model = make_model(["a", "b"])
    model.move_cursor(Direction.UP)
    assert model.cursor.row == 0


def test_vertical_move_clamps_column_to_shorter_line():
    model = make_model(["a long line", "short"])
    model.cursor = CursorPosition(11, 0)

    model.move_cursor(Direction.DOWN)
    assert model.cursor == CursorPosition(5, 1)


def test_down_scrolls_minimally():
    """Moving below the window shifts it by exactly one row."""
    model = make_model([f"Line {i}" for i in range(10)], visible_rows=5)
    for _ in range(4):
        model.move_cursor(Direction.DOWN)
    assert model.viewport.scroll_offset == 0

    model.move_cursor(Direction.DOWN)
    assert model.cursor.row == 5
    assert model.viewport.scroll_offset == 1


def test_up_scrolls_back():
    model = make_model([f"Line {i}" for i in range(10)], visible_rows=5)
    model.cursor = CursorPosition(0, 9)
    model.restore_invariants()
    assert model.viewport.scroll_offset == 5

    for _ in range(5):
        model.move_cursor(Direction.UP)
    assert model.cursor.row == 4
    assert model.viewport.scroll_offset == 4


def test_viewport_invariant_holds_after_every_move():
    model = make_model([f"{i}" * (i % 7) for i in range(30)], visible_rows=4)
    moves = [Direction.DOWN] * 20 + [Direction.RIGHT] * 3 + [Direction.UP] * 15 + [Direction.DOWN] * 40
    for direction in moves:
        model.move_cursor(direction)
        viewport = model.viewport
        assert viewport.scroll_offset <= model.cursor.row < viewport.scroll_offset + viewport.visible_rows
        assert model.cursor.column <= model.line_length(model.cursor.row)


def test_viewport_resize_keeps_status_row():
    viewport = Viewport()
    viewport.resize(30, 100)
    assert viewport.visible_rows == 29
    assert viewport.columns == 100


def test_shrinking_viewport_rescrolls_to_cursor():
    model = make_model([str(i) for i in range(20)], visible_rows=10)
    model.cursor = CursorPosition(0, 8)
    model.restore_invariants()
    assert model.viewport.scroll_offset == 0

    model.viewport.resize(4, 80)
    model.restore_invariants()
    assert model.viewport.scroll_offset == 6
