"""Tests for single-step cursor movement and clamping."""

import random

import pytest
from pound.cursor import CursorController, Direction
from pound.document import Document


def create_controller(lines, columns=80, rows=24):
    doc = Document.from_text("\n".join(lines))
    return CursorController(columns, rows), doc


def assert_clamped(c, doc):
    if c.cursor_y < doc.line_count():
        assert 0 <= c.cursor_x <= len(doc.rendered(c.cursor_y))
    else:
        assert c.cursor_y == doc.line_count()
        assert c.cursor_x == 0


def test_new_controller_starts_at_origin():
    c = CursorController(80, 24)
    assert (c.cursor_x, c.cursor_y, c.render_x) == (0, 0, 0)
    assert (c.row_offset, c.column_offset) == (0, 0)
    assert c.size == (80, 24)


def test_up_at_top_is_noop():
    c, doc = create_controller(["abc"])
    c.move(Direction.UP, doc)
    assert (c.cursor_x, c.cursor_y) == (0, 0)


def test_down_stops_one_past_last_row():
    c, doc = create_controller(["a", "b"])
    for _ in range(5):
        c.move(Direction.DOWN, doc)
    assert c.cursor_y == 2
    assert c.cursor_x == 0


def test_down_on_empty_document_is_noop():
    c = CursorController(80, 24)
    doc = Document.empty()
    c.move(Direction.DOWN, doc)
    c.move(Direction.RIGHT, doc)
    c.move(Direction.END, doc)
    assert (c.cursor_x, c.cursor_y) == (0, 0)


def test_right_advances_then_wraps():
    c, doc = create_controller(["ab", "cd"])
    c.move(Direction.RIGHT, doc)
    c.move(Direction.RIGHT, doc)
    assert (c.cursor_x, c.cursor_y) == (2, 0)
    c.move(Direction.RIGHT, doc)
    assert (c.cursor_x, c.cursor_y) == (0, 1)


def test_right_past_last_row_is_noop():
    c, doc = create_controller(["ab"])
    c.cursor_y = 1
    c.move(Direction.RIGHT, doc)
    assert (c.cursor_x, c.cursor_y) == (0, 1)


def test_right_on_last_row_end_moves_past_document():
    c, doc = create_controller(["ab"])
    c.move(Direction.END, doc)
    c.move(Direction.RIGHT, doc)
    assert (c.cursor_x, c.cursor_y) == (0, 1)


def test_left_wraps_to_rendered_end_of_previous_row():
    """The previous row's length is measured on the rendered form."""
    c, doc = create_controller(["a\tb", "x"])
    c.cursor_y = 1
    c.move(Direction.LEFT, doc)
    assert c.cursor_y == 0
    assert c.cursor_x == len(doc.rendered(0)) == 9


def test_left_at_origin_is_noop():
    c, doc = create_controller(["abc"])
    c.move(Direction.LEFT, doc)
    assert (c.cursor_x, c.cursor_y) == (0, 0)


def test_home_and_end():
    c, doc = create_controller(["hello"])
    c.move(Direction.END, doc)
    assert c.cursor_x == 5
    c.move(Direction.HOME, doc)
    assert c.cursor_x == 0


def test_end_past_last_row_keeps_cursor():
    c, doc = create_controller(["hello"])
    c.cursor_y = 1
    c.move(Direction.END, doc)
    assert c.cursor_x == 0


def test_vertical_move_onto_shorter_row_truncates():
    c, doc = create_controller(["a long line", "ab"])
    c.move(Direction.END, doc)
    assert c.cursor_x == 11
    c.move(Direction.DOWN, doc)
    assert c.cursor_y == 1
    assert c.cursor_x == 2


def test_end_truncates_stale_cursor():
    """End on a row shorter than the previous cursor_x lands on its end."""
    c, doc = create_controller(["abcdefgh", "abc"])
    c.cursor_x = 8
    c.cursor_y = 1
    c.move(Direction.END, doc)
    assert c.cursor_x == 3


def test_moving_down_past_end_resets_column():
    c, doc = create_controller(["abc"])
    c.move(Direction.END, doc)
    c.move(Direction.DOWN, doc)
    assert (c.cursor_x, c.cursor_y) == (0, 1)


def test_right_then_left_wrap_symmetry():
    """Right from the end of a non-final row, then Left, returns there."""
    lines = ["first", "\tsecond", "", "last"]
    c, doc = create_controller(lines)
    for row in range(len(lines) - 1):
        c.cursor_y = row
        c.move(Direction.END, doc)
        start = (c.cursor_x, c.cursor_y)
        c.move(Direction.RIGHT, doc)
        assert (c.cursor_x, c.cursor_y) == (0, row + 1)
        c.move(Direction.LEFT, doc)
        assert (c.cursor_x, c.cursor_y) == start


def test_page_direction_rejected_by_move():
    c, doc = create_controller(["abc"])
    with pytest.raises(ValueError):
        c.move(Direction.PAGE_DOWN, doc)


def test_random_moves_keep_cursor_clamped():
    rng = random.Random(1234)
    lines = ["", "short", "\t\ttabbed", "a much longer line of text", "x\ty", ""]
    c, doc = create_controller(lines, columns=10, rows=3)
    single_steps = [Direction.UP, Direction.DOWN, Direction.LEFT,
                    Direction.RIGHT, Direction.HOME, Direction.END]
    for _ in range(500):
        if rng.random() < 0.1:
            c.page_move(rng.choice([Direction.PAGE_UP, Direction.PAGE_DOWN]), doc)
        else:
            c.move(rng.choice(single_steps), doc)
        assert_clamped(c, doc)
