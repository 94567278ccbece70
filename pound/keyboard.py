"""Keyboard input handling using curtsies-style tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"
    SHIFT_SPECIAL = "shift_special"  # Shift + arrow keys, etc.


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'q', 'left', 'page_up')
    raw: str  # The token as delivered by the terminal
    is_alt: bool = False
    is_ctrl: bool = False
    is_shift: bool = False

    @property
    def has_modifiers(self) -> bool:
        return self.is_alt or self.is_ctrl or self.is_shift


_ALIASES = {
    'pageup': 'page_up',
    'pagedown': 'page_down',
    'pgup': 'page_up',
    'pgdn': 'page_down',
    'return': 'enter',
    'del': 'delete',
    'esc': 'escape',
}


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Wait up to ``timeout`` seconds for the next key and parse it."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Handles names like '<LEFT>', '<Ctrl-q>', '<Shift-UP>' and
        '<Esc+f>', single ASCII control characters and plain characters.
        """
        key_str = str(key)

        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_named(key_str)

        if len(key_str) == 1:
            code = ord(key_str)
            if code == 27:
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
            if code in (10, 13):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if code == 9:
                return KeyEvent(key_type=KeyType.SPECIAL, value='tab', raw=key_str)
            if 1 <= code <= 26:  # Ctrl-A .. Ctrl-Z
                ch = chr(ord('a') + code - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    def _parse_named(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1].lower().replace('+', '-')
        parts = name.split('-')
        # '<Ctrl-->' and friends: an empty last part means the key was '-'
        if len(parts) > 1 and parts[-1] == '':
            parts = parts[:-2] + ['-']
        base = _ALIASES.get(parts[-1], parts[-1])
        mods = set(parts[:-1])
        if 'meta' in mods or 'esc' in mods:
            mods.add('alt')

        if base in ('space', 'spc') and not mods:
            return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=key_str)
        if base == 'escape' and not mods:
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
        if 'ctrl' in mods and len(base) == 1:
            return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str,
                            is_ctrl=True, is_alt='alt' in mods)
        if 'alt' in mods:
            return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str,
                            is_alt=True, is_ctrl='ctrl' in mods, is_shift='shift' in mods)
        if 'shift' in mods:
            return KeyEvent(key_type=KeyType.SHIFT_SPECIAL, value=base, raw=key_str,
                            is_shift=True, is_ctrl='ctrl' in mods)
        if 'ctrl' in mods:
            # Ctrl + arrow and the like: modified, so not a plain special key
            return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)
