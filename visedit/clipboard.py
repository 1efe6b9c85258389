"""Single-slot internal clipboard."""

from typing import Optional

LINE_SEPARATOR = "\n"


class Clipboard:
    """Holds the most recently copied or cut text.

    Rows are joined with LINE_SEPARATOR. `content` is None until the
    first copy; an empty copy still replaces the slot with "".
    """

    def __init__(self):
        self._content: Optional[str] = None

    @property
    def content(self) -> Optional[str]:
        return self._content

    def replace(self, text: str) -> None:
        """Replace the slot wholesale with `text`."""
        self._content = text

    @property
    def is_empty(self) -> bool:
        return not self._content
