"""Terminal interface using Blessed for output and Curtsies for input."""

from __future__ import annotations

import logging
import termios
from collections import deque
from typing import Optional

import blessed
from curtsies import Input, events

logger = logging.getLogger(__name__)


class TerminalError(RuntimeError):
    """Raised when the terminal cannot be put into raw input mode."""


class TerminalInterface:
    """Handles terminal I/O: raw-mode input, frame output and screen size.

    Raw mode is process-wide state, so the interface is used as a scoped
    guard::

        with TerminalInterface() as terminal:
            ...

    ``cleanup()`` runs on every exit path and restores the terminal.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[Input] = None
        # Keys delivered together as a curtsies paste event
        self._pending: deque[str] = deque()

    def setup(self):
        """Enter raw input mode, then take over the screen.

        Raises:
            TerminalError: stdin is not a terminal or its mode can't be set.
        """
        if self._curtsies_input is None:
            try:
                # Start/stop flow control off so Ctrl-Q reaches us
                curtsies_input = Input(keynames='curtsies', disable_terminal_start_stop=True)
                curtsies_input.__enter__()
            except (termios.error, OSError, ValueError) as e:
                raise TerminalError(f"cannot enter raw mode: {e}") from e
            self._curtsies_input = curtsies_input
            logger.debug("Raw input mode enabled")
        self.write_frame(self.term.enter_fullscreen + self.term.clear)
        self.is_fullscreen = True

    def cleanup(self):
        """Clear the screen, leave fullscreen and restore the terminal mode."""
        try:
            if self.is_fullscreen:
                self.write_frame(
                    self.term.clear + self.term.home
                    + self.term.exit_fullscreen + self.term.normal_cursor
                )
                self.is_fullscreen = False
        finally:
            if self._curtsies_input is not None:
                try:
                    self._curtsies_input.__exit__(None, None, None)
                    logger.debug("Raw input mode disabled")
                finally:
                    self._curtsies_input = None
                    self._pending.clear()

    def __enter__(self) -> "TerminalInterface":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()

    def clear_screen(self):
        """Clear the entire screen and home the cursor."""
        self.write_frame(self.term.clear + self.term.home)

    def write_frame(self, frame: str) -> None:
        """Write a complete frame and flush it as one unit."""
        stream = self.term.stream
        stream.write(frame)
        stream.flush()

    def get_key(self, timeout: Optional[float] = None) -> Optional[str]:
        """Wait up to ``timeout`` seconds for a key and return its token.

        Args:
            timeout: Seconds to wait (None blocks, 0 does not wait).

        Returns:
            A curtsies key name such as '<UP>' or 'a', or None when no key
            arrived in time.
        """
        if self._pending:
            return self._pending.popleft()
        if self._curtsies_input is None:
            return None
        evt = self._curtsies_input.send(timeout)
        if evt is None:
            return None
        if isinstance(evt, events.PasteEvent):
            self._pending.extend(str(e) for e in evt.events)
            return self._pending.popleft() if self._pending else None
        if isinstance(evt, events.Event):
            # Scheduled/signal events carry no key
            return None
        return str(evt)

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows."""
        return self.term.height

    def get_size(self) -> tuple[int, int]:
        """Current terminal size as (columns, rows)."""
        return (self.width, self.height)
