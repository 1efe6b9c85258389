"""Render the text model into an ordered list of draw commands.

Rendering is split in two: `render_frame` is a pure function of the
model, and TerminalInterface.draw serializes its output to the screen.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .constants import EditorConstants
from .model import TextModel
from .selection import SelectionRange


@dataclass(frozen=True)
class ClearScreen:
    """Clear the screen and home the cursor."""


@dataclass(frozen=True)
class TextRun:
    text: str
    highlighted: bool = False


@dataclass(frozen=True)
class Placeholder:
    """Marker for a screen row past the end of the buffer."""
    text: str = EditorConstants.EMPTY_ROW_MARKER


@dataclass(frozen=True)
class EndRow:
    """Finish the current screen row."""


@dataclass(frozen=True)
class StatusLine:
    """Reverse-styled status row, already fitted to the screen width."""
    text: str


@dataclass(frozen=True)
class MoveCursor:
    """Place the terminal cursor; 1-indexed screen coordinates."""
    row: int
    column: int


DrawCommand = Union[ClearScreen, TextRun, Placeholder, EndRow, StatusLine, MoveCursor]


def fit_status(message: str, columns: int) -> str:
    """Truncate `message` to `columns` and pad it with spaces to fill the row."""
    return message[:columns].ljust(columns)


def render_line(line: str, span: Optional[Tuple[int, int]], columns: int) -> List[TextRun]:
    """Split a line into plain and highlighted runs, clipped to `columns`.

    Args:
        line: Buffer line to draw.
        span: Selected [start, end) columns on this line, or None.
        columns: Screen width; characters past it are not drawn.
    """
    visible = line[:columns]
    if span is None:
        return [TextRun(visible)] if visible else []

    start, end = span
    start = min(start, len(visible))
    end = min(end, len(visible))
    runs = []
    if start > 0:
        runs.append(TextRun(visible[:start]))
    if end > start:
        runs.append(TextRun(visible[start:end], highlighted=True))
    if end < len(visible):
        runs.append(TextRun(visible[end:]))
    return runs


def render_frame(model: TextModel, status_message: str = "",
                 columns: Optional[int] = None) -> List[DrawCommand]:
    """Produce the full-screen frame for the model.

    One row per visible screen row, each ending in EndRow, then the
    status line and the final cursor placement.
    """
    viewport = model.viewport
    if columns is None:
        columns = viewport.columns
    selection: Optional[SelectionRange] = model.selection_range()

    commands: List[DrawCommand] = [ClearScreen()]
    for screen_row in range(viewport.visible_rows):
        row = screen_row + viewport.scroll_offset
        if row >= model.line_count:
            commands.append(Placeholder())
        else:
            line = model.lines[row]
            span = selection.span_for_row(row, len(line)) if selection else None
            commands.extend(render_line(line, span, columns))
        commands.append(EndRow())

    commands.append(StatusLine(fit_status(status_message, columns)))
    commands.append(MoveCursor(model.cursor.row - viewport.scroll_offset + 1,
                               model.cursor.column + 1))
    return commands
