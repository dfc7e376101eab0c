"""Split folded text into documented class-like and function-like entries."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class DeclarationKind(str, Enum):
    CLASS = "class"
    FUNCTION = "function"


@dataclass(frozen=True)
class Declaration:
    """A documented top-level statement as it appears in the folded text."""

    kind: DeclarationKind
    text: str
    doc_index: int


# A statement head may not run into the next documentation run; that run
# belongs to the following declaration.
_DECLARATION = re.compile(
    r"""
    &DOC(?P<doc>\d+):
    \s*
    (?P<head>(?:(?!&DOC\d+:)[^;])*;)
    """,
    re.VERBOSE,
)

# Template argument lists hold no `;` once bodies are folded, so any
# nesting depth is skipped by the lazy scan up to `class` or `struct`.
_CLASS_HEAD = re.compile(r"(?:template\s*<[^;]*?>\s*)?(?:class|struct)\b")

# ``&BLOCKn;`` ends in ``;`` and so terminates a definition on its own; the
# ``;`` that closes a class body is folded into the same entry.
_ENDS_WITH_BLOCK = re.compile(r"&BLOCK\d+;$")
_TRAILING_SEMICOLON = re.compile(r"[ \t]*;")


def classify(folded: str) -> Tuple[Tuple[Declaration, ...], Tuple[Declaration, ...]]:
    """Return ``(classes, functions)`` found in ``folded``, in text order."""
    classes: List[Declaration] = []
    functions: List[Declaration] = []
    for match in _DECLARATION.finditer(folded):
        text = match.group(0)
        if _ENDS_WITH_BLOCK.search(text):
            trailer = _TRAILING_SEMICOLON.match(folded, match.end())
            if trailer:
                text += trailer.group(0)

        if _CLASS_HEAD.match(match.group("head")):
            kind = DeclarationKind.CLASS
            bucket = classes
        else:
            kind = DeclarationKind.FUNCTION
            bucket = functions
        bucket.append(Declaration(kind=kind, text=text, doc_index=int(match.group("doc"))))
    return tuple(classes), tuple(functions)


__all__ = ["Declaration", "DeclarationKind", "classify"]
