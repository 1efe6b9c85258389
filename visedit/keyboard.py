"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw key string from curtsies


# Keys the editor acts on; every other named key degrades to escape
ARROWS = {'left', 'right', 'up', 'down'}
EDITING_KEYS = {'enter', 'backspace'}


def escape_event(raw: str) -> KeyEvent:
    return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=raw)


class KeyboardHandler:
    """Turns terminal key strings into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event, or None when no input arrived."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key name (or a raw character) into a KeyEvent.

        Extended keys such as Home, End, Delete, the page keys and
        function keys, and anything Alt/Esc-prefixed, are reported as a
        plain escape.
        """
        key_str = str(key)

        # Curtsies-style key names like '<LEFT>', '<Ctrl-x>', '<Esc+u>'
        if key_str.startswith('<') and key_str.endswith('>') and len(key_str) > 2:
            lower = key_str[1:-1].lower().replace('+', '-')
            parts = lower.split('-') if '-' in lower else [lower]
            mods = set(parts[:-1])
            base = parts[-1]

            if not mods:
                if base in ('space', 'spacebar', 'spc'):
                    return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
                if base == 'tab':
                    return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw='\t')
                if base in ARROWS or base in EDITING_KEYS:
                    return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)
            if mods == {'ctrl'} and len(base) == 1:
                # Terminals send Ctrl-J / Ctrl-M for Enter
                if base in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str)
            return escape_event(key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if o == 27:
                return escape_event(key_str)
            if o in (10, 13):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if o in (8, 127):
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
                ch = chr(ord('a') + o - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str)

        # Multi-character raw escape sequences
        if key_str.startswith('\x1b'):
            arrows = {'\x1b[A': 'up', '\x1b[B': 'down', '\x1b[C': 'right', '\x1b[D': 'left'}
            if key_str in arrows:
                return KeyEvent(key_type=KeyType.SPECIAL, value=arrows[key_str], raw=key_str)
            return escape_event(key_str)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)
