"""Editable text model: line store, cursor, viewport and selection state."""

import logging
from enum import Enum
from typing import Iterable, Optional

from .clipboard import Clipboard, LINE_SEPARATOR
from .constants import EditorConstants
from .selection import CursorPosition, Mode, SelectionRange, normalize

logger = logging.getLogger(__name__)


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Viewport:
    """Vertical window onto the buffer.

    `visible_rows` excludes the status row. `scroll_offset` is the
    document row shown at the top of the screen.
    """

    def __init__(self,
                 visible_rows: int = EditorConstants.DEFAULT_SCREEN_ROWS - EditorConstants.STATUS_ROWS,
                 columns: int = EditorConstants.DEFAULT_SCREEN_COLUMNS,
                 scroll_offset: int = 0):
        self.visible_rows = max(1, visible_rows)
        self.columns = max(1, columns)
        self.scroll_offset = scroll_offset

    def resize(self, screen_rows: int, columns: int) -> None:
        """Adopt a new terminal size (screen_rows includes the status row)."""
        self.visible_rows = max(1, screen_rows - EditorConstants.STATUS_ROWS)
        self.columns = max(1, columns)

    def scroll_to(self, row: int) -> None:
        """Shift the window by the minimum needed to show `row`."""
        if row < self.scroll_offset:
            self.scroll_offset = row
        if row >= self.scroll_offset + self.visible_rows:
            self.scroll_offset = row - self.visible_rows + 1

    def contains(self, row: int) -> bool:
        return self.scroll_offset <= row < self.scroll_offset + self.visible_rows


class TextModel:
    lines: list[str]
    cursor: CursorPosition
    viewport: Viewport
    mode: Mode

    def __init__(self, lines: Optional[Iterable[str]] = None,
                 capacity: int = EditorConstants.MAX_LINES,
                 viewport: Optional[Viewport] = None):
        self.lines = list(lines) if lines is not None else []
        self._base_capacity = capacity  # Configured cap, before any oversized load
        self.capacity = capacity
        self._fit_capacity()
        self.cursor = CursorPosition()
        self.viewport = viewport or Viewport()
        self.mode = Mode.NORMAL
        self.anchor: Optional[CursorPosition] = None  # Fixed end of a visual selection
        self.clipboard = Clipboard()

    def _fit_capacity(self):
        # Loaded content is never truncated; the cap only limits growth.
        if len(self.lines) > self._base_capacity:
            logger.info(f"Buffer holds {len(self.lines)} lines, raising capacity from {self._base_capacity}")
        self.capacity = max(self._base_capacity, len(self.lines))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_length(self, row: int) -> int:
        """Length of `row`, or 0 for rows past the end of the buffer."""
        if 0 <= row < len(self.lines):
            return len(self.lines[row])
        return 0

    def restore_invariants(self):
        """Clamp the cursor to the buffer and scroll it into view.

        The row just past the last line (`row == line_count`) is a valid
        cursor row; typing there creates it.
        """
        if self.cursor.row > self.line_count:
            self.cursor.row = self.line_count
        self.cursor.row = max(0, self.cursor.row)
        self.cursor.column = max(0, min(self.cursor.column, self.line_length(self.cursor.row)))
        self.viewport.scroll_to(self.cursor.row)

    # --- Edit operations ---

    def insert_char(self, char: str):
        """Insert a single character at the cursor and advance it."""
        row = self.cursor.row
        if row >= self.capacity:
            return
        while len(self.lines) <= row:
            self.lines.append("")

        line = self.lines[row]
        col = min(self.cursor.column, len(line))
        self.lines[row] = line[:col] + char + line[col:]
        self.cursor.column = col + 1
        self.restore_invariants()

    def delete_char(self):
        """Delete the character before the cursor (backspace).

        At column 0 the current row is joined onto the previous one.
        Does nothing at the start of the document.
        """
        row = self.cursor.row
        col = min(self.cursor.column, self.line_length(row))

        if col > 0:
            line = self.lines[row]
            self.lines[row] = line[:col - 1] + line[col:]
            self.cursor.column = col - 1
        elif row > 0:
            prev_len = len(self.lines[row - 1])
            if row < self.line_count:
                self.lines[row - 1] += self.lines.pop(row)
            self.cursor = CursorPosition(prev_len, row - 1)
        self.restore_invariants()

    def insert_newline(self):
        """Split the current line at the cursor.

        The text right of the cursor moves to a new row below, and the
        cursor moves to its start. On a row past the end of the buffer
        the row is created empty and the cursor moves down.
        """
        row = self.cursor.row
        if row + 1 >= self.capacity:
            return

        if row >= self.line_count:
            while len(self.lines) <= row:
                self.lines.append("")
        else:
            if self.line_count >= self.capacity:
                return
            line = self.lines[row]
            col = min(self.cursor.column, len(line))
            self.lines[row] = line[:col]
            self.lines.insert(row + 1, line[col:])
        self.cursor = CursorPosition(0, row + 1)
        self.restore_invariants()

    def move_cursor(self, direction: Direction):
        if direction is Direction.LEFT:
            if self.cursor.column > 0:
                self.cursor.column -= 1
        elif direction is Direction.RIGHT:
            if self.cursor.column < self.viewport.columns - 1:
                self.cursor.column += 1
        elif direction is Direction.UP:
            if self.cursor.row > 0:
                self.cursor.row -= 1
        elif direction is Direction.DOWN:
            if self.cursor.row < self.line_count - 1:
                self.cursor.row += 1
        self.restore_invariants()

    def replace_lines(self, lines: Iterable[str]):
        """Swap in new buffer content, e.g. after reloading from disk."""
        self.lines = list(lines)
        self._fit_capacity()
        self.exit_visual_mode()
        self.restore_invariants()

    # --- Selection ---

    def enter_visual_mode(self) -> bool:
        """Start a selection anchored at the cursor.

        Returns:
            False if visual mode was already active.
        """
        if self.mode is Mode.VISUAL:
            return False
        self.mode = Mode.VISUAL
        self.anchor = self.cursor.copy()
        return True

    def exit_visual_mode(self):
        self.mode = Mode.NORMAL
        self.anchor = None

    def selection_range(self) -> Optional[SelectionRange]:
        """Normalized selection between the anchor and the cursor."""
        if self.mode is not Mode.VISUAL or self.anchor is None:
            return None
        return normalize(self.anchor, self.cursor)

    def _active_range(self) -> Optional[SelectionRange]:
        """Selection range clipped to rows that exist in the buffer."""
        rng = self.selection_range()
        if rng is None or self.line_count == 0:
            return None
        last = self.line_count - 1
        end_of_buffer = CursorPosition(len(self.lines[last]), last)
        start = rng.start if rng.start.row <= last else end_of_buffer
        end = rng.end if rng.end.row <= last else end_of_buffer
        return SelectionRange(start, end)

    def extract(self, rng: SelectionRange) -> str:
        """Return the text covered by `rng`, rows joined by LINE_SEPARATOR."""
        if rng.is_empty:
            return ""
        parts = []
        for row in range(rng.start.row, rng.end.row + 1):
            line = self.lines[row]
            start_col, end_col = rng.span_for_row(row, len(line))
            parts.append(line[start_col:end_col])
        return LINE_SEPARATOR.join(parts)

    def get_selected_text(self) -> str:
        rng = self._active_range()
        return self.extract(rng) if rng else ""

    def _remove_range(self, rng: SelectionRange):
        start, end = rng.start, rng.end
        if start.row == end.row:
            line = self.lines[start.row]
            self.lines[start.row] = line[:start.column] + line[end.column:]
        else:
            head = self.lines[start.row][:start.column]
            tail = self.lines[end.row][end.column:]
            self.lines[start.row] = head + tail
            del self.lines[start.row + 1:end.row + 1]
        self.cursor = CursorPosition(start.column, start.row)
        self.restore_invariants()

    def copy_selection(self) -> int:
        """Copy the selection to the clipboard and leave visual mode.

        Returns:
            Number of characters copied, separators included.
        """
        if self.mode is not Mode.VISUAL:
            return 0
        text = self.get_selected_text()
        self.clipboard.replace(text)
        self.exit_visual_mode()
        return len(text)

    def delete_selection(self) -> int:
        """Remove the selection without touching the clipboard.

        Returns:
            Number of characters deleted, separators included.
        """
        if self.mode is not Mode.VISUAL:
            return 0
        rng = self._active_range()
        self.exit_visual_mode()
        if rng is None or rng.is_empty:
            return 0
        count = len(self.extract(rng))
        self._remove_range(rng)
        return count

    def cut_selection(self) -> int:
        """Copy the selection to the clipboard, then delete it."""
        if self.mode is not Mode.VISUAL:
            return 0
        rng = self._active_range()
        count = self.copy_selection()
        if rng is not None and not rng.is_empty:
            self._remove_range(rng)
        return count

    def paste(self) -> int:
        """Type the clipboard content back in at the cursor.

        Separators split lines exactly like Enter does, so paste obeys
        the same capacity and clamping rules as typed input.

        Returns:
            Number of characters replayed.
        """
        if self.clipboard.is_empty:
            return 0
        text = self.clipboard.content
        for char in text:
            if char == LINE_SEPARATOR:
                self.insert_newline()
            else:
                self.insert_char(char)
        return len(text)
