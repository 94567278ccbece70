"""Tests for the read-only document store."""

import pytest
from pound.document import Document, Row, split_lines


def test_empty_text_has_no_rows():
    doc = Document.from_text("")
    assert doc.line_count() == 0
    assert doc.is_empty()


def test_final_newline_adds_no_row():
    assert Document.from_text("one\ntwo\n").line_count() == 2
    assert Document.from_text("one\ntwo").line_count() == 2


def test_blank_lines_are_kept():
    doc = Document.from_text("a\n\nb\n\n")
    assert [doc.raw(i) for i in range(doc.line_count())] == ["a", "", "b", ""]


def test_single_newline_is_one_empty_row():
    doc = Document.from_text("\n")
    assert doc.line_count() == 1
    assert doc.rendered(0) == ""


def test_crlf_line_endings():
    assert split_lines("a\r\nb\r\n") == ["a", "b"]


def test_lone_carriage_return_is_content():
    assert split_lines("a\rb") == ["a\rb"]


def test_rows_store_raw_and_rendered():
    doc = Document.from_text("ab\tc\nde")
    assert doc.raw(0) == "ab\tc"
    assert doc.rendered(0) == "ab      c"
    assert doc.row(1) == Row(raw="de", render="de")


def test_tab_stop_is_applied_and_kept():
    doc = Document.from_text("\tx", tab_stop=4)
    assert doc.rendered(0) == "    x"
    assert doc.tab_stop == 4


def test_out_of_range_row_raises():
    doc = Document.from_text("only")
    with pytest.raises(IndexError):
        doc.rendered(1)
    with pytest.raises(IndexError):
        doc.row(-1)
    with pytest.raises(IndexError):
        Document.empty().raw(0)


def test_rendered_length_past_end_is_zero():
    doc = Document.from_text("abc")
    assert doc.rendered_length(0) == 3
    assert doc.rendered_length(1) == 0


def test_from_file(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("first\n\tsecond\n", encoding="utf-8")

    doc = Document.from_file(str(path))

    assert doc.line_count() == 2
    assert doc.rendered(1) == " " * 8 + "second"


def test_from_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        Document.from_file(str(tmp_path / "missing.txt"))


def test_from_file_invalid_utf8_raises(tmp_path):
    path = tmp_path / "binary.bin"
    path.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(UnicodeDecodeError):
        Document.from_file(str(path))


def test_rows_are_immutable():
    row = Row.from_raw("x")
    with pytest.raises(AttributeError):
        row.raw = "y"
