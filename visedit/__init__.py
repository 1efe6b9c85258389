"""Visedit - a minimal full-screen text editor with visual selection."""

from .model import TextModel, Viewport, Direction
from .selection import CursorPosition, Mode, SelectionRange, normalize
from .clipboard import Clipboard
from .view import render_frame

__all__ = [
    'TextModel',
    'Viewport',
    'Direction',
    'CursorPosition',
    'Mode',
    'SelectionRange',
    'normalize',
    'Clipboard',
    'render_frame',
]
