"""Move literals and block comments out of the way of structural scanning."""

from __future__ import annotations

import re

from .placeholders import AMPERSAND_INDEX, MarkerKind, PlaceholderTable

# A bare ampersand, unless it already opens a generic marker.
_AMPERSAND = re.compile(r"&(?!\d+\.)")

# Scanned left to right so whichever construct opens first wins. Line comments
# are matched only to be stepped over; doc-comment capture handles them later.
_LEXEME = re.compile(
    r"""
    (?P<line_comment>//[^\n]*)
    | (?P<block_comment>/\*.*?\*/)
    | (?P<string>"(?:\\.|[^"\\\n])*")
    | (?P<char>'(?:\\.|[^'\\\n])*')
    """,
    re.DOTALL | re.VERBOSE,
)


def shield_ampersands(text: str) -> str:
    """Replace every literal ``&`` with the reserved generic marker."""
    return _AMPERSAND.sub(MarkerKind.GENERIC.format(AMPERSAND_INDEX), text)


def shield_literals(text: str, table: PlaceholderTable) -> str:
    """Capture string/char literals and block comments into ``table``."""

    def _replace(match: re.Match[str]) -> str:
        if match.lastgroup == "line_comment":
            return match.group(0)
        return table.marker(match.group(0))

    return _LEXEME.sub(_replace, text)


def shield(text: str, table: PlaceholderTable) -> str:
    """Run the full shielding pass; ampersands must go first."""
    return shield_literals(shield_ampersands(text), table)


__all__ = ["shield", "shield_ampersands", "shield_literals"]
