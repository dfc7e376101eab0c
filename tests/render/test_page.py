"""Tests for hdrdoc.render.page."""

from __future__ import annotations

import pytest

from hdrdoc.extract.header import build_header_document
from hdrdoc.render.markup import MarkupError
from hdrdoc.render.page import Page, header_content, render_header_page, render_text_page

HEADER = (
    "// A box.\n"
    "template<typename T> class Box { T v; };\n"
    "// Makes a box.\n"
    "Box<int> make_box(int v);\n"
    "// Grows a box.\n"
    "void grow(Box<int>& box);\n"
)


def test_page_shell() -> None:
    markup = Page("Demo & co", language="de").render("x < y")
    assert markup == (
        "<!DOCTYPE html>\n"
        '<html lang="de">\n'
        '<head><meta charset="utf-8"><title>Demo &amp; co</title></head>\n'
        "<body><pre>x &lt; y</pre></body>\n"
        "</html>\n"
    )


def test_page_renders_once() -> None:
    page = Page("Demo")
    page.render("first")
    with pytest.raises(MarkupError):
        page.render("second")


def test_header_content_lists_entries_with_ordinals() -> None:
    document = build_header_document("box.hh", HEADER)
    content = header_content(document)

    assert content.startswith(document.text.rstrip("\n"))
    assert "Classes\n[1] &DOC0:template<typename T> class Box &BLOCK0;;" in content
    assert "Functions\n[1] &DOC1:Box<int> make_box(int v);\n[2] &DOC2:void grow(Box<int>&0. box);" in content


def test_header_content_with_resolved_markers() -> None:
    document = build_header_document("box.hh", HEADER)
    content = header_content(document, resolve_markers=True)

    assert content.startswith(HEADER.rstrip("\n"))
    assert "&DOC" not in content
    assert "&BLOCK" not in content
    assert "[1] // A box.\ntemplate<typename T> class Box { T v; };" in content
    assert "[2] // Grows a box.\nvoid grow(Box<int>& box);" in content


def test_render_header_page_escapes_folded_text() -> None:
    document = build_header_document("box.hh", HEADER)
    markup = render_header_page(document, "demo: box.hh")

    assert "<title>demo: box.hh</title>" in markup
    assert "[1] &amp;DOC0:template&lt;typename T&gt; class Box &amp;BLOCK0;;" in markup
    assert markup.endswith("</html>\n")
    assert markup.count("<pre>") == 1


def test_render_header_page_resolved_mode() -> None:
    document = build_header_document("box.hh", HEADER)
    markup = render_header_page(document, "demo: box.hh", resolve_markers=True)

    assert "class Box { T v; };" in markup
    assert "&amp;DOC" not in markup


def test_text_page_has_empty_declaration_section() -> None:
    markup = render_text_page("# Demo\n\nSee <include/demo>.\n", "demo")

    assert "<title>demo</title>" in markup
    assert "# Demo\n\nSee &lt;include/demo&gt;.\n\nClasses\n(none)\n\nFunctions\n(none)</pre>" in markup


def test_header_without_entries_renders_empty_sections() -> None:
    document = build_header_document("plain.hh", "int x;\n")
    assert header_content(document) == "int x;\n\nClasses\n(none)\n\nFunctions\n(none)"
