"""Main viewer controller: the input/render loop."""

from __future__ import annotations

import logging
from typing import Optional

from .commands import CommandRegistry
from .config import ViewerConfig
from .cursor import CursorController
from .document import Document
from .keyboard import KeyboardHandler, KeyEvent
from .terminal import TerminalInterface
from .view import ScreenCompositor

logger = logging.getLogger(__name__)


class Viewer:
    """Read-only file viewer application controller."""

    def __init__(self, document: Optional[Document] = None,
                 terminal: Optional[TerminalInterface] = None,
                 config: Optional[ViewerConfig] = None):
        """Initialize the viewer components."""
        self.config = config or ViewerConfig()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.document = document if document is not None else Document.empty(self.config.tab_stop)
        self._last_size = self.terminal.get_size()
        self.controller = CursorController(*self._last_size)
        self.compositor = ScreenCompositor(self.terminal.term)
        self.command_registry = CommandRegistry()
        self.running = False

    def run(self):
        """Run the main loop until quit.

        The terminal guard restores the terminal on every way out of the
        loop. Raises TerminalError, before anything is drawn, if raw mode
        can't be entered.
        """
        with self.terminal:
            self.running = True
            logger.debug("Viewer loop started")
            need_draw = True
            try:
                while self.running:
                    if self._sync_screen_size():
                        need_draw = True
                    if need_draw:
                        self.refresh_screen()
                        need_draw = False

                    # Bounded wait so resizes are noticed without a key press
                    key_event = self.keyboard.get_key_event(timeout=self.config.poll_timeout)
                    if key_event is None:
                        continue
                    need_draw = self._handle_key_event(key_event)
            except KeyboardInterrupt:
                # Ctrl-C quits like Ctrl-Q
                self.running = False
            logger.debug("Viewer loop finished")

    def refresh_screen(self):
        """Scroll to the cursor and write one complete frame."""
        self.controller.scroll(self.document)
        frame = self.compositor.compose_frame(self.controller, self.document)
        self.terminal.write_frame(frame)

    def _sync_screen_size(self) -> bool:
        """Pick up a terminal resize; return True if the size changed."""
        size = self.terminal.get_size()
        if size == self._last_size:
            return False
        logger.debug("Terminal resized from %sx%s to %sx%s", *self._last_size, *size)
        self._last_size = size
        self.controller.resize(*size)
        return True

    def _handle_key_event(self, key_event: KeyEvent) -> bool:
        """Dispatch a key event; return True if a redraw is needed."""
        return self.command_registry.execute(self, key_event)
