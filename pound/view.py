"""Screen composition: turns controller state and a document into a frame."""

from __future__ import annotations

from typing import Any

from .constants import ViewerConstants
from .cursor import CursorController
from .document import Document


def welcome_row(screen_columns: int, message: str | None = None) -> str:
    """Return the centered banner row shown for an empty document.

    The message is truncated to the screen width. When there is room to
    pad, the first padding column holds the empty-row marker.
    """
    if message is None:
        message = ViewerConstants.welcome_message()
    welcome = message[:max(0, screen_columns)]
    padding = (screen_columns - len(welcome)) // 2
    prefix = ""
    if padding > 0:
        prefix = ViewerConstants.EMPTY_ROW_MARKER
        padding -= 1
    return prefix + " " * padding + welcome


class ScreenCompositor:
    """Builds whole frames as one string using the terminal's capabilities.

    ``term`` is a ``blessed.Terminal`` (or anything exposing ``hide_cursor``,
    ``normal_cursor``, ``home``, ``clear_eol`` and ``move_xy``).
    """

    def __init__(self, term: Any):
        self.term = term

    def draw_rows(self, controller: CursorController, document: Document) -> list[str]:
        """Text for every physical screen row, top to bottom."""
        screen_rows = controller.screen_rows
        screen_columns = controller.screen_columns
        column_offset = controller.column_offset
        num_rows = document.line_count()

        rows: list[str] = []
        for i in range(screen_rows):
            file_row = i + controller.row_offset
            if file_row >= num_rows:
                if num_rows == 0 and i == screen_rows // 3:
                    rows.append(welcome_row(screen_columns))
                else:
                    rows.append(ViewerConstants.EMPTY_ROW_MARKER)
            else:
                # Rows shorter than the offset slice to ''
                render = document.rendered(file_row)
                rows.append(render[column_offset:column_offset + screen_columns])
        return rows

    def compose_frame(self, controller: CursorController, document: Document) -> str:
        """Return the full frame: rows, stale-content clears and cursor placement.

        The cursor is hidden while rows are drawn and shown again only after
        it has been moved to its final position. ``controller.scroll()``
        must already have run for this frame.
        """
        term = self.term
        out: list[str] = [term.hide_cursor, term.home]
        rows = self.draw_rows(controller, document)
        for i, row in enumerate(rows):
            out.append(row)
            out.append(term.clear_eol)
            if i < len(rows) - 1:
                out.append("\r\n")
        cursor_x, cursor_y = controller.screen_cursor()
        out.append(term.move_xy(cursor_x, cursor_y))
        out.append(term.normal_cursor)
        return ''.join(str(part) for part in out)
