"""Tests for hdrdoc.extract.doc_comments."""

from __future__ import annotations

import pytest

from hdrdoc.extract.doc_comments import capture_doc_comments
from hdrdoc.extract.placeholders import MarkerKind, PlaceholderTable


def _table() -> PlaceholderTable:
    return PlaceholderTable(MarkerKind.DOC_COMMENT)


@pytest.mark.parametrize("line_count", [1, 2, 5, 40])
def test_consecutive_lines_form_one_fragment(line_count: int) -> None:
    table = _table()
    comment = "".join(f"// line {n}\n" for n in range(line_count))
    captured = capture_doc_comments(comment + "void f();\n", table)
    assert captured == "&DOC0:void f();\n"
    assert len(table) == 1
    assert table.resolve(0) == comment


def test_indented_runs_stay_together() -> None:
    table = _table()
    captured = capture_doc_comments("  // first\n  // second\n  int x;\n", table)
    assert captured == "  &DOC0:int x;\n"
    assert table.resolve(0) == "// first\n  // second\n  "


def test_blank_line_splits_runs() -> None:
    table = _table()
    captured = capture_doc_comments("// license\n\n// doc\nint x;\n", table)
    assert captured == "&DOC0:\n&DOC1:int x;\n"
    assert table.resolve(0) == "// license\n"
    assert table.resolve(1) == "// doc\n"


def test_comment_at_end_of_text_without_newline() -> None:
    table = _table()
    assert capture_doc_comments("int x;\n// trailing", table) == "int x;\n&DOC0:"
    assert table.resolve(0) == "// trailing"


def test_text_without_comments_is_untouched() -> None:
    table = _table()
    assert capture_doc_comments("int x; /2/ y;", table) == "int x; /2/ y;"
    assert len(table) == 0
