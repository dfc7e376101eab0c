"""Page assembly for header documents and plain text overviews."""

from __future__ import annotations

from typing import Callable, List, Sequence

from ..extract.classifier import Declaration
from ..extract.header import HeaderDocument
from .markup import MarkupError, TagBuilder

_EMPTY_SECTION = "(none)"


class Page:
    """A single HTML page with one preformatted block.

    The page owns its root :class:`TagBuilder` and drives it; it is rendered
    once.
    """

    def __init__(self, title: str, *, language: str = "en", charset: str = "utf-8") -> None:
        self.title = title
        self.language = language
        self.charset = charset
        self._builder = TagBuilder()
        self._rendered = False

    def render(self, content: str) -> str:
        if self._rendered:
            raise MarkupError(f"Page {self.title!r} has already been rendered")
        self._rendered = True
        builder = self._builder
        builder.raw("<!DOCTYPE html>\n")
        with builder:
            with builder.tag("html", lang=self.language):
                builder.raw("\n")
                with builder.tag("head"):
                    builder.void("meta", charset=self.charset)
                    with builder.tag("title"):
                        builder.text(self.title)
                builder.raw("\n")
                with builder.tag("body"):
                    with builder.tag("pre"):
                        builder.text(content)
                builder.raw("\n")
        return builder.getvalue() + "\n"


def format_section(
    heading: str,
    entries: Sequence[Declaration],
    transform: Callable[[str], str] = lambda text: text,
) -> str:
    """Render one numbered declaration listing."""
    lines: List[str] = [heading]
    if not entries:
        lines.append(_EMPTY_SECTION)
    for ordinal, entry in enumerate(entries, start=1):
        lines.append(f"[{ordinal}] {transform(entry.text).strip()}")
    return "\n".join(lines)


def header_content(document: HeaderDocument, *, resolve_markers: bool = False) -> str:
    """Return the pre block text for ``document``.

    With ``resolve_markers`` the original source is shown in place of the
    folded text, and declaration entries are restored the same way.
    """
    transform: Callable[[str], str] = document.resolve if resolve_markers else (lambda text: text)
    parts = [
        transform(document.text).rstrip("\n"),
        format_section("Classes", document.classes, transform),
        format_section("Functions", document.functions, transform),
    ]
    return "\n\n".join(parts)


def render_header_page(
    document: HeaderDocument,
    title: str,
    *,
    language: str = "en",
    charset: str = "utf-8",
    resolve_markers: bool = False,
) -> str:
    """Render ``document`` into a complete page."""
    page = Page(title, language=language, charset=charset)
    return page.render(header_content(document, resolve_markers=resolve_markers))


def render_text_page(
    text: str,
    title: str,
    *,
    language: str = "en",
    charset: str = "utf-8",
) -> str:
    """Render a plain text document (the project overview) in the same shape."""
    content = "\n\n".join(
        [
            text.rstrip("\n"),
            format_section("Classes", ()),
            format_section("Functions", ()),
        ]
    )
    return Page(title, language=language, charset=charset).render(content)


__all__ = [
    "Page",
    "format_section",
    "header_content",
    "render_header_page",
    "render_text_page",
]
