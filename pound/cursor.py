"""Cursor and viewport state for the viewer.

The controller keeps two coordinate systems apart:

* ``cursor_x`` / ``cursor_y`` index the document (``cursor_x`` is bounded by
  the rendered length of the current row).
* ``render_x`` is the column of the cursor on the rendered, tab-expanded
  row. It is recomputed by ``scroll()`` before every frame.

``row_offset`` / ``column_offset`` give the top-left corner of the viewport.
``cursor_y == line_count()`` is the valid "past the last row" position.
"""

from __future__ import annotations

from enum import Enum

from .constants import ViewerConstants
from .document import Document
from .render import render_column


class Direction(Enum):
    """Cursor movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


class CursorController:
    """Owns cursor position, screen size and scroll offsets."""

    def __init__(self, screen_columns: int, screen_rows: int):
        self.cursor_x = 0
        self.cursor_y = 0
        self.render_x = 0
        self.row_offset = 0
        self.column_offset = 0
        self.screen_columns = ViewerConstants.MIN_SCREEN_COLUMNS
        self.screen_rows = ViewerConstants.MIN_SCREEN_ROWS
        self.resize(screen_columns, screen_rows)

    def resize(self, screen_columns: int, screen_rows: int) -> None:
        """Set the viewport size, never smaller than one cell each way."""
        self.screen_columns = max(ViewerConstants.MIN_SCREEN_COLUMNS, int(screen_columns))
        self.screen_rows = max(ViewerConstants.MIN_SCREEN_ROWS, int(screen_rows))

    @property
    def size(self) -> tuple[int, int]:
        return (self.screen_columns, self.screen_rows)

    def move(self, direction: Direction, document: Document) -> None:
        """Move the cursor one step and clamp it to the current row."""
        num_rows = document.line_count()

        if direction == Direction.UP:
            if self.cursor_y > 0:
                self.cursor_y -= 1
        elif direction == Direction.DOWN:
            if self.cursor_y < num_rows:
                self.cursor_y += 1
        elif direction == Direction.LEFT:
            if self.cursor_x > 0:
                self.cursor_x -= 1
            elif self.cursor_y > 0:
                self.cursor_y -= 1
                self.cursor_x = len(document.rendered(self.cursor_y))
        elif direction == Direction.RIGHT:
            if self.cursor_y < num_rows:
                row_len = len(document.rendered(self.cursor_y))
                if self.cursor_x < row_len:
                    self.cursor_x += 1
                elif self.cursor_x == row_len:
                    self.cursor_y += 1
                    self.cursor_x = 0
        elif direction == Direction.HOME:
            self.cursor_x = 0
        elif direction == Direction.END:
            if self.cursor_y < num_rows:
                self.cursor_x = len(document.rendered(self.cursor_y))
        else:
            raise ValueError(f"Not a single-step direction: {direction}")

        self.cursor_x = min(self.cursor_x, document.rendered_length(self.cursor_y))

    def page_move(self, direction: Direction, document: Document) -> None:
        """Jump to the top or bottom edge of the viewport, then a page further.

        The jump is followed by ``screen_rows`` single steps so that every
        row crossed goes through the normal clamping in ``move()``.
        """
        if direction == Direction.PAGE_UP:
            self.cursor_y = self.row_offset
            step = Direction.UP
        elif direction == Direction.PAGE_DOWN:
            self.cursor_y = min(
                self.row_offset + self.screen_rows - 1, document.line_count()
            )
            step = Direction.DOWN
        else:
            raise ValueError(f"Not a paging direction: {direction}")

        for _ in range(self.screen_rows):
            self.move(step, document)

    def scroll(self, document: Document) -> None:
        """Recompute ``render_x`` and shift the viewport to contain the cursor.

        The viewport moves the least amount needed: up/left when the cursor
        is before it, down/right when the cursor is past it.
        """
        self.render_x = 0
        if self.cursor_y < document.line_count():
            self.render_x = render_column(
                document.raw(self.cursor_y), self.cursor_x, document.tab_stop
            )

        self.row_offset = min(self.row_offset, self.cursor_y)
        if self.cursor_y >= self.row_offset + self.screen_rows:
            self.row_offset = self.cursor_y - self.screen_rows + 1

        self.column_offset = min(self.column_offset, self.render_x)
        if self.render_x >= self.column_offset + self.screen_columns:
            self.column_offset = self.render_x - self.screen_columns + 1

    def screen_cursor(self) -> tuple[int, int]:
        """Cursor position relative to the viewport, as (x, y)."""
        return (self.render_x - self.column_offset, self.cursor_y - self.row_offset)
