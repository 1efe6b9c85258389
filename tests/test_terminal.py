"""Test serializing draw commands and terminal setup."""

import io
import os
import tempfile
import termios
import unittest
from unittest.mock import Mock, patch

from visedit.fileio import read_lines
from visedit.model import TextModel, Viewport
from visedit.terminal import TerminalError, TerminalInterface
from visedit.view import (ClearScreen, EndRow, MoveCursor, Placeholder, StatusLine,
                          TextRun, render_frame)


def make_term(height=5):
    term = Mock()
    term.home = "<home>"
    term.clear = "<clear>"
    term.reverse = "<rev>"
    term.normal = "<norm>"
    term.clear_eol = "<eol>"
    term.normal_cursor = "<cur>"
    term.move = lambda row, col: f"<move {row},{col}>"
    term.height = height
    term.width = 10
    return term


class TestSerialize(unittest.TestCase):

    def setUp(self):
        self.terminal = TerminalInterface(terminal=make_term())

    def test_plain_rows(self):
        out = self.terminal.serialize([ClearScreen(), TextRun("abc"), EndRow(), Placeholder(), EndRow()])
        self.assertEqual(out, "<home><clear>abc\r\n~\r\n")

    def test_highlighted_run_is_reversed(self):
        out = self.terminal.serialize([TextRun("a"), TextRun("bc", highlighted=True), TextRun("d")])
        self.assertEqual(out, "a<rev>bc<norm>d")

    def test_status_line_on_last_row(self):
        out = self.terminal.serialize([StatusLine("[Normal Mode]")])
        self.assertEqual(out, "<move 4,0><eol><rev>[Normal Mode]<norm>")

    def test_cursor_is_zero_indexed_on_screen(self):
        out = self.terminal.serialize([MoveCursor(3, 7)])
        self.assertEqual(out, "<move 2,6><cur>")

    def test_unknown_command_raises(self):
        with self.assertRaises(TypeError):
            self.terminal.serialize(["not a command"])

    def test_size_comes_from_terminal(self):
        self.assertEqual(self.terminal.height, 5)
        self.assertEqual(self.terminal.width, 10)

    def test_draw_file_with_non_utf8_bytes(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "cafe.txt")
            with open(path, "wb") as f:
                f.write(b"caf\xe9\n")
            model = TextModel(lines=read_lines(path), viewport=Viewport(visible_rows=2, columns=10))

        stdout = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
        with patch("sys.stdout", stdout):
            self.terminal.draw(render_frame(model, "[Normal Mode]"))
        self.assertIn("caf\u00e9".encode("utf-8"), stdout.buffer.getvalue())


class TestInput(unittest.TestCase):

    def test_no_key_before_setup(self):
        terminal = TerminalInterface(terminal=make_term())
        self.assertIsNone(terminal.get_key(timeout=0))

    def test_get_key_returns_key_name(self):
        terminal = TerminalInterface(terminal=make_term())
        terminal._input = Mock()
        terminal._input.send.return_value = '<LEFT>'
        self.assertEqual(terminal.get_key(timeout=0), '<LEFT>')
        terminal._input.send.assert_called_once_with(0)

    def test_get_key_timeout(self):
        terminal = TerminalInterface(terminal=make_term())
        terminal._input = Mock()
        terminal._input.send.return_value = None
        self.assertIsNone(terminal.get_key(timeout=0))


class TestSetup(unittest.TestCase):

    def test_setup_fails_without_tty(self):
        terminal = TerminalInterface(terminal=make_term())
        with patch('visedit.terminal.termios.tcgetattr', side_effect=termios.error(25, "Not a tty")):
            with self.assertRaises(TerminalError):
                terminal.setup()
        self.assertFalse(terminal.is_fullscreen)


if __name__ == '__main__':
    unittest.main()
