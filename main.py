#!/usr/bin/env python3
"""Visedit - a minimal full-screen text editor.

Usage:
    python main.py <filename>

Controls:
    Arrow keys: Move cursor
    Type to insert text, Enter splits a line, Backspace deletes
    v or Ctrl-V: Visual mode (then y copy, c cut, d delete, Esc cancel)
    p: Paste
    Ctrl-S: Save
    Ctrl-O: Reload from disk
    Ctrl-Q: Quit without saving
"""

from visedit.__main__ import main


if __name__ == "__main__":
    main()
