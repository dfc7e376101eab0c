"""Append-only fragment tables and the markers that reference them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Sequence, Tuple


class MarkerKind(Enum):
    """Marker flavours, one per table kind; ``group`` names the index capture."""

    GENERIC = ("&{index}.", "generic", r"&(?P<generic>\d+)\.")
    DOC_COMMENT = ("&DOC{index}:", "doc", r"&DOC(?P<doc>\d+):")
    BLOCK = ("&BLOCK{index};", "block", r"&BLOCK(?P<block>\d+);")

    def __init__(self, template: str, group: str, pattern: str) -> None:
        self.template = template
        self.group = group
        self.pattern = pattern

    def format(self, index: int) -> str:
        return self.template.format(index=index)

    @classmethod
    def for_group(cls, group: str) -> "MarkerKind":
        for kind in cls:
            if kind.group == group:
                return kind
        raise KeyError(group)


# Any marker; ``match.lastgroup`` names the kind, see MarkerKind.for_group.
ANY_MARKER = re.compile("|".join(kind.pattern for kind in MarkerKind))


def _lookup(kind: MarkerKind, fragments: Sequence[str], index: int) -> str:
    if index < 0 or index >= len(fragments):
        raise IndexError(f"{kind.name.lower()} table has no entry {index}")
    return fragments[index]


@dataclass(frozen=True)
class FrozenTable:
    """Read-only snapshot of a table, held by finished documents."""

    kind: MarkerKind
    fragments: Tuple[str, ...]

    def resolve(self, index: int) -> str:
        return _lookup(self.kind, self.fragments, index)

    def __len__(self) -> int:
        return len(self.fragments)

    def __iter__(self) -> Iterator[str]:
        return iter(self.fragments)


class PlaceholderTable:
    """Indexed store of text fragments lifted out of the working text."""

    def __init__(self, kind: MarkerKind, *, seed: List[str] | None = None) -> None:
        self.kind = kind
        self._fragments: List[str] = list(seed or [])

    def capture(self, fragment: str) -> int:
        """Append ``fragment`` and return its stable index."""
        self._fragments.append(fragment)
        return len(self._fragments) - 1

    def resolve(self, index: int) -> str:
        """Return the fragment stored under ``index``."""
        return _lookup(self.kind, self._fragments, index)

    def marker(self, fragment: str) -> str:
        """Capture ``fragment`` and return the marker that stands in for it."""
        return self.kind.format(self.capture(fragment))

    def freeze(self) -> FrozenTable:
        return FrozenTable(kind=self.kind, fragments=tuple(self._fragments))

    def __len__(self) -> int:
        return len(self._fragments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fragments)

    def __repr__(self) -> str:
        return f"PlaceholderTable({self.kind.name}, entries={len(self._fragments)})"


AMPERSAND_INDEX = 0


def generic_table() -> PlaceholderTable:
    """Return a generic table whose entry 0 is the escaped ampersand."""
    return PlaceholderTable(MarkerKind.GENERIC, seed=["&"])


__all__ = [
    "AMPERSAND_INDEX",
    "ANY_MARKER",
    "FrozenTable",
    "MarkerKind",
    "PlaceholderTable",
    "generic_table",
]
