"""Visual-mode selection: editor modes and normalized selection ranges."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Mode(Enum):
    """Editing modes."""
    NORMAL = "normal"
    VISUAL = "visual"


@dataclass
class CursorPosition:
    column: int = 0
    row: int = 0

    def __lt__(self, other):
        if self.row != other.row:
            return self.row < other.row
        return self.column < other.column

    def __le__(self, other):
        return not other < self

    def copy(self) -> "CursorPosition":
        return CursorPosition(self.column, self.row)


@dataclass(frozen=True)
class SelectionRange:
    """A selection in document order; `end` is exclusive on its row."""
    start: CursorPosition
    end: CursorPosition

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def contains_row(self, row: int) -> bool:
        return self.start.row <= row <= self.end.row

    def span_for_row(self, row: int, line_length: int) -> Optional[Tuple[int, int]]:
        """Return the selected [start, end) columns on `row`.

        The first row is selected from the start column to the end of
        the line, the last row up to the end column, interior rows
        entirely. Returns None for rows outside the range.
        """
        if not self.contains_row(row):
            return None
        start_col = self.start.column if row == self.start.row else 0
        end_col = self.end.column if row == self.end.row else line_length
        start_col = min(start_col, line_length)
        end_col = min(end_col, line_length)
        return (start_col, max(start_col, end_col))


def normalize(anchor: CursorPosition, live: CursorPosition) -> SelectionRange:
    """Order two selection endpoints so that start <= end.

    The endpoint with the smaller row, or the same row and the smaller
    or equal column, becomes the start. Selecting from A to B and from
    B to A gives the same range.
    """
    if anchor <= live:
        return SelectionRange(anchor.copy(), live.copy())
    return SelectionRange(live.copy(), anchor.copy())
