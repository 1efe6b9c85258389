"""Test the maximum line count."""

from visedit.constants import EditorConstants
from visedit.model import TextModel
from visedit.selection import CursorPosition


def test_default_capacity():
    model = TextModel()
    assert model.capacity == EditorConstants.MAX_LINES == 100


def test_enter_stops_at_capacity():
    model = TextModel()
    for _ in range(150):
        model.insert_newline()
    assert model.line_count == 99
    assert model.cursor.row == 99

    model.insert_char('x')
    assert model.line_count == 100

    model.insert_newline()
    assert model.line_count == 100
    assert model.cursor == CursorPosition(1, 99)


def test_split_refused_when_full():
    model = TextModel(lines=["ab", "c"], capacity=2)
    model.cursor = CursorPosition(1, 0)

    model.insert_newline()
    assert model.lines == ["ab", "c"]
    assert model.cursor == CursorPosition(1, 0)


def test_newline_on_last_allowed_row_is_noop():
    model = TextModel(lines=["a", "b"], capacity=2)
    model.cursor = CursorPosition(1, 1)

    model.insert_newline()
    assert model.lines == ["a", "b"]


def test_typing_past_capacity_is_ignored():
    model = TextModel(lines=["a", "b"], capacity=2)
    model.cursor = CursorPosition(0, 2)

    model.insert_char('x')
    assert model.lines == ["a", "b"]


def test_oversized_content_raises_capacity():
    """Content loaded from disk is never truncated."""
    model = TextModel(lines=[str(i) for i in range(5)], capacity=3)
    assert model.capacity == 5
    assert model.line_count == 5

    model.replace_lines([str(i) for i in range(8)])
    assert model.capacity == 8


def test_join_below_capacity_frees_a_row():
    model = TextModel(lines=["ab", "c"], capacity=2)
    model.cursor = CursorPosition(0, 1)
    model.delete_char()
    assert model.lines == ["abc"]

    model.insert_newline()
    assert model.lines == ["ab", "c"]


def test_capacity_drops_back_after_shorter_content():
    model = TextModel(lines=["x"] * 150, capacity=100)
    assert model.capacity == 150

    model.replace_lines(["a"])
    assert model.capacity == 100
    for _ in range(200):
        model.insert_newline()
    assert model.line_count == 100
