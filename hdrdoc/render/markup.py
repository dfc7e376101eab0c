"""Stack-disciplined HTML tag builder."""

from __future__ import annotations

from html import escape
from types import TracebackType
from typing import List, Optional, Type


class MarkupError(RuntimeError):
    """Raised when tags are closed out of order or left open."""


class Tag:
    """Handle for an open element; close it explicitly or use ``with``."""

    def __init__(self, builder: "TagBuilder", name: str) -> None:
        self._builder = builder
        self.name = name
        self.closed = False

    def close(self) -> None:
        self._builder._close(self)

    def __enter__(self) -> "Tag":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if not self.closed:
            self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<Tag {self.name} {state}>"


class TagBuilder:
    """Accumulates markup; open elements live on a stack and close in reverse.

    Used as a context manager, the builder closes whatever is still open when
    the block exits, innermost first.
    """

    def __init__(self) -> None:
        self._parts: List[str] = []
        self._open: List[Tag] = []

    @property
    def depth(self) -> int:
        return len(self._open)

    def tag(self, name: str, **attrs: object) -> Tag:
        """Open ``name`` and return the handle that closes it."""
        self._parts.append(f"<{name}{_format_attrs(attrs)}>")
        handle = Tag(self, name)
        self._open.append(handle)
        return handle

    def void(self, name: str, **attrs: object) -> None:
        """Emit an element that has no content and no closing tag."""
        self._parts.append(f"<{name}{_format_attrs(attrs)}>")

    def text(self, value: str) -> None:
        self._parts.append(escape(value, quote=False))

    def raw(self, value: str) -> None:
        self._parts.append(value)

    def close_all(self) -> None:
        while self._open:
            self._open[-1].close()

    def getvalue(self) -> str:
        if self._open:
            names = ", ".join(tag.name for tag in self._open)
            raise MarkupError(f"Unclosed tags: {names}")
        return "".join(self._parts)

    def _close(self, tag: Tag) -> None:
        if tag.closed:
            raise MarkupError(f"<{tag.name}> is already closed")
        if not self._open or self._open[-1] is not tag:
            current = self._open[-1].name if self._open else "nothing"
            raise MarkupError(f"Cannot close <{tag.name}> while <{current}> is innermost")
        self._open.pop()
        tag.closed = True
        self._parts.append(f"</{tag.name}>")

    def __enter__(self) -> "TagBuilder":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close_all()


def _format_attrs(attrs: dict[str, object]) -> str:
    rendered = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        name = key.rstrip("_").replace("_", "-")
        if value is True:
            rendered.append(f" {name}")
        else:
            rendered.append(f' {name}="{escape(str(value), quote=True)}"')
    return "".join(rendered)


__all__ = ["MarkupError", "Tag", "TagBuilder"]
