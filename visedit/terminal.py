"""Terminal interface using Blessed for display and Curtsies for input."""

import sys
import termios
from typing import Iterable, Optional

import blessed
from curtsies import Input

from .view import (ClearScreen, DrawCommand, EndRow, MoveCursor, Placeholder,
                   StatusLine, TextRun)


class TerminalError(RuntimeError):
    """The terminal could not be configured; the editor cannot run."""


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._input: Optional[Input] = None
        self._saved_attrs: Optional[list] = None

    def setup(self):
        """Enter raw mode and fullscreen.

        Raises:
            TerminalError: if terminal attributes cannot be read or set.
        """
        try:
            self._saved_attrs = termios.tcgetattr(sys.stdin)
        except (termios.error, OSError) as e:
            raise TerminalError(f"tcgetattr: {e}") from e

        # Curtsies puts the tty in cbreak mode on enter
        self._input = Input(keynames='curtsies')
        self._input.__enter__()

        try:
            raw = termios.tcgetattr(sys.stdin)
            # Deliver Ctrl-S/Ctrl-Q (flow control), Ctrl-C (signals)
            # and Ctrl-V/Ctrl-O (literal-next, discard) as keys
            raw[0] &= ~(termios.IXON | termios.IXOFF | termios.ICRNL)
            raw[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
            termios.tcsetattr(sys.stdin, termios.TCSANOW, raw)
        except (termios.error, OSError) as e:
            self.cleanup()
            raise TerminalError(f"tcsetattr: {e}") from e

        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True

    def cleanup(self):
        """Exit fullscreen mode and restore the original terminal settings."""
        if self.is_fullscreen:
            print(self.term.home + self.term.clear, end='')
            print(self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False
        if self._input is not None:
            try:
                self._input.__exit__(None, None, None)
            finally:
                self._input = None
        if self._saved_attrs is not None:
            try:
                termios.tcsetattr(sys.stdin, termios.TCSANOW, self._saved_attrs)
            finally:
                self._saved_attrs = None

    def serialize(self, commands: Iterable[DrawCommand]) -> str:
        """Turn draw commands into the terminal's escape sequences."""
        out = []
        for command in commands:
            if isinstance(command, ClearScreen):
                out.append(self.term.home + self.term.clear)
            elif isinstance(command, TextRun):
                if command.highlighted:
                    out.append(self.term.reverse + command.text + self.term.normal)
                else:
                    out.append(command.text)
            elif isinstance(command, Placeholder):
                out.append(command.text)
            elif isinstance(command, EndRow):
                out.append('\r\n')
            elif isinstance(command, StatusLine):
                out.append(self.term.move(self.height - 1, 0) + self.term.clear_eol)
                out.append(self.term.reverse + command.text + self.term.normal)
            elif isinstance(command, MoveCursor):
                out.append(self.term.move(command.row - 1, command.column - 1))
                out.append(self.term.normal_cursor)
            else:
                raise TypeError(f"Unknown draw command: {command!r}")
        return ''.join(out)

    def draw(self, commands: Iterable[DrawCommand]):
        """Write a rendered frame to the screen."""
        print(self.serialize(commands), end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if no key arrived in time.
        """
        if self._input is None:
            return None
        # send() also returns keys curtsies has already buffered
        event = self._input.send(timeout)
        if event is None:
            return None
        return str(event)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows, status line included."""
        return self.term.height
