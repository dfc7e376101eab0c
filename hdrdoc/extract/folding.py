"""Fold nested ``{...}`` bodies into block markers, innermost first."""

from __future__ import annotations

import re
from typing import List

from .placeholders import PlaceholderTable

_BRACE = re.compile(r"[{}]")


def fold_blocks(text: str, table: PlaceholderTable) -> str:
    """Replace every matched brace pair with a marker into ``table``.

    A single pass with an explicit stack: each ``}`` closes the innermost open
    ``{``, so an outer block's fragment already holds the markers of the
    blocks nested inside it. Markers are numbered in closing order. Stray
    closing braces and blocks still open at end of text are kept verbatim.
    """
    # stack[0] collects top-level text; every open brace pushes a new buffer.
    stack: List[List[str]] = [[]]
    position = 0
    for match in _BRACE.finditer(text):
        stack[-1].append(text[position : match.start()])
        position = match.end()
        if match.group(0) == "{":
            stack.append(["{"])
        elif len(stack) > 1:
            body = stack.pop()
            body.append("}")
            stack[-1].append(table.marker("".join(body)))
        else:
            stack[-1].append("}")
    stack[-1].append(text[position:])

    while len(stack) > 1:
        unclosed = stack.pop()
        stack[-1].append("".join(unclosed))
    return "".join(stack[0])


__all__ = ["fold_blocks"]
