"""Main editor controller."""

import logging
import os
import select
import signal
import sys
from typing import Optional

from .commands import CommandRegistry
from .constants import EditorConstants
from .fileio import read_lines, write_lines
from .keyboard import KeyboardHandler, KeyEvent
from .model import TextModel
from .settings import EditorSettings
from .terminal import TerminalInterface
from .view import render_frame

logger = logging.getLogger(__name__)


class Editor:
    """Owns the editor state and runs the input/render loop."""

    def __init__(self, filename: Optional[str] = None,
                 settings: Optional[EditorSettings] = None,
                 terminal: Optional[TerminalInterface] = None):
        """Initialize the editor components."""
        self.settings = settings or EditorSettings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.model = TextModel(capacity=self.settings.max_lines)
        self.command_registry = CommandRegistry()  # Command pattern for key handling
        self.running = False
        # Resize signaling pipe, open only while run() is active
        self._resize_pipe_r: Optional[int] = None
        self._resize_pipe_w: Optional[int] = None
        # File handling
        self.filename = filename
        self.modified = False
        self.status_message = EditorConstants.NORMAL_MODE_MESSAGE

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame # Unused
        if self._resize_pipe_w is None:
            return
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def run(self):
        """Run the main editor loop until quit.

        Raises:
            TerminalError: if the terminal cannot be put into raw mode.
        """
        self.terminal.setup()
        self.running = True
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)

        try:
            need_draw = True
            while self.running:
                if need_draw:
                    self._draw()
                    need_draw = False

                # Wait for input on stdin or resize pipe
                ready, _, _ = select.select([0, self._resize_pipe_r], [], [])

                if self._resize_pipe_r in ready:
                    # Clear the pipe
                    os.read(self._resize_pipe_r, 1024)
                    need_draw = True
                elif 0 in ready:
                    # Drain every key that is already buffered before redrawing
                    key_event = self.keyboard.get_key_event(timeout=0)
                    while key_event and self.running:
                        self._handle_key_event(key_event)
                        need_draw = True
                        key_event = self.keyboard.get_key_event(timeout=0)
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self._resize_pipe_r = self._resize_pipe_w = None
            self.terminal.cleanup()

    def _draw(self):
        """Draw the current editor state to terminal."""
        self.model.viewport.resize(self.terminal.height, self.terminal.width)
        self.model.restore_invariants()
        self.terminal.draw(render_frame(self.model, self.status_message))

    def _handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        was_modified = self.command_registry.execute(self, key_event)
        if was_modified:
            self.modified = True

    def load_file(self, filename: str):
        """Load a file into the editor, creating it if it does not exist.

        Args:
            filename: Path to file to load
        """
        self.filename = filename
        try:
            lines = read_lines(filename)
        except OSError as e:
            print(f"Error loading file: {e}", file=sys.stderr)
            sys.exit(1)
        self.model.replace_lines(lines)
        self.modified = False
        logger.info(f"Loaded {len(lines)} lines from {filename}")

    def save(self) -> bool:
        """Write the buffer to the current file.

        Failures are reported on the status line; editing continues.

        Returns:
            True if save succeeded, False otherwise.
        """
        if not self.filename:
            self.status_message = EditorConstants.SAVE_FAILED_MESSAGE.format("No file name")
            return False
        try:
            write_lines(self.filename, self.model.lines)
        except OSError as e:
            logger.warning(f"Could not save {self.filename}: {e}")
            self.status_message = EditorConstants.SAVE_FAILED_MESSAGE.format(e.strerror or e)
            return False

        self.modified = False
        self.status_message = EditorConstants.SAVED_MESSAGE.format(self.filename)
        logger.info(f"Saved {self.model.line_count} lines to {self.filename}")
        return True

    def reload(self) -> bool:
        """Replace the buffer with the file's content, discarding edits.

        Returns:
            True if the file was read, False otherwise.
        """
        if not self.filename:
            self.status_message = EditorConstants.RELOAD_FAILED_MESSAGE.format("No file name")
            return False
        try:
            lines = read_lines(self.filename)
        except OSError as e:
            logger.warning(f"Could not reload {self.filename}: {e}")
            self.status_message = EditorConstants.RELOAD_FAILED_MESSAGE.format(e.strerror or e)
            return False

        self.model.replace_lines(lines)
        self.modified = False
        self.status_message = EditorConstants.RELOADED_MESSAGE.format(self.filename)
        return True
