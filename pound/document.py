"""Read-only document store: logical rows and their rendered forms."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .render import TAB_STOP, render_row

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Row:
    """One logical line and its tab-expanded display string."""
    raw: str
    render: str

    @classmethod
    def from_raw(cls, raw: str, tab_stop: int = TAB_STOP) -> "Row":
        return cls(raw=raw, render=render_row(raw, tab_stop))


def split_lines(text: str) -> list[str]:
    """Split text on line boundaries.

    Lines end at '\\n' (a preceding '\\r' is dropped with it). A final
    newline does not produce a trailing empty line, and empty text yields
    no lines at all.
    """
    if not text:
        return []
    parts = text.split('\n')
    terminated = len(parts) - 1
    if parts[-1] == '':
        parts.pop()
    return [
        part[:-1] if i < terminated and part.endswith('\r') else part
        for i, part in enumerate(parts)
    ]


class Document:
    """Immutable, index-addressable sequence of rows.

    Row accessors do not clamp: asking for a row outside
    ``range(line_count())`` raises ``IndexError``. Callers check bounds
    against ``line_count()`` first.
    """

    def __init__(self, rows: Iterable[Row] = (), tab_stop: int = TAB_STOP):
        self._rows: tuple[Row, ...] = tuple(rows)
        self.tab_stop = tab_stop

    @classmethod
    def empty(cls, tab_stop: int = TAB_STOP) -> "Document":
        return cls((), tab_stop=tab_stop)

    @classmethod
    def from_text(cls, text: str, tab_stop: int = TAB_STOP) -> "Document":
        """Build a document from raw text, rendering every line once."""
        return cls(
            (Row.from_raw(line, tab_stop) for line in split_lines(text)),
            tab_stop=tab_stop,
        )

    @classmethod
    def from_file(cls, path: str, tab_stop: int = TAB_STOP) -> "Document":
        """Load a UTF-8 text file.

        Raises:
            OSError: The file cannot be opened or read.
            UnicodeDecodeError: The file is not valid UTF-8.
        """
        with open(path, 'r', encoding='utf-8', newline='') as f:
            text = f.read()
        document = cls.from_text(text, tab_stop=tab_stop)
        logger.info("Loaded %s (%d lines)", path, document.line_count())
        return document

    def line_count(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def is_empty(self) -> bool:
        return not self._rows

    def row(self, at: int) -> Row:
        if not 0 <= at < len(self._rows):
            raise IndexError(f"row {at} out of range for {len(self._rows)} rows")
        return self._rows[at]

    def rendered(self, at: int) -> str:
        return self.row(at).render

    def raw(self, at: int) -> str:
        return self.row(at).raw

    def rendered_length(self, at: int) -> int:
        """Rendered length of row ``at``, or 0 when ``at`` is past the end."""
        if 0 <= at < len(self._rows):
            return len(self._rows[at].render)
        return 0
