"""Test line splitting with Enter."""

from visedit.model import TextModel
from visedit.selection import CursorPosition


def test_enter_at_end_of_line_inserts_empty_line():
    model = TextModel(lines=["hello", "world"])
    model.cursor = CursorPosition(5, 0)

    model.insert_newline()
    assert model.lines == ["hello", "", "world"]
    assert model.cursor == CursorPosition(0, 1)


def test_enter_in_middle_splits_line():
    model = TextModel(lines=["helloworld"])
    model.cursor = CursorPosition(5, 0)

    model.insert_newline()
    assert model.lines == ["hello", "world"]
    assert model.cursor == CursorPosition(0, 1)


def test_enter_at_start_of_line_pushes_it_down():
    model = TextModel(lines=["a", "b", "c"])
    model.cursor = CursorPosition(0, 1)

    model.insert_newline()
    assert model.lines == ["a", "", "b", "c"]
    assert model.line_count == 4
    assert model.cursor == CursorPosition(0, 2)


def test_enter_in_empty_buffer():
    """Enter on a row with no line creates it and moves below it."""
    model = TextModel(lines=[])

    model.insert_newline()
    assert model.lines == [""]
    assert model.cursor == CursorPosition(0, 1)

    model.insert_char('x')
    assert model.lines == ["", "x"]


def test_enter_scrolls_cursor_into_view():
    model = TextModel(lines=["line"] * 3)
    model.viewport.visible_rows = 3
    model.cursor = CursorPosition(4, 2)

    model.insert_newline()
    assert model.cursor.row == 3
    assert model.viewport.scroll_offset == 1
    assert model.viewport.contains(model.cursor.row)
