"""Pound - a terminal text viewer."""

from .constants import VERSION
from .cursor import CursorController, Direction
from .document import Document, Row
from .render import render_row, render_column
from .view import ScreenCompositor

__version__ = VERSION

__all__ = [
    'CursorController',
    'Direction',
    'Document',
    'Row',
    'ScreenCompositor',
    'render_row',
    'render_column',
]
