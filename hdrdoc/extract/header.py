"""Per-file extraction pipeline and the resulting header document."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from ..logging import get_logger
from .classifier import Declaration, classify
from .doc_comments import capture_doc_comments
from .folding import fold_blocks
from .placeholders import ANY_MARKER, FrozenTable, MarkerKind, PlaceholderTable, generic_table
from .shielding import shield

_LOGGER = get_logger("extract")


class RejectedFileError(ValueError):
    """Raised when a candidate file is not a documentable header."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class WrongExtensionError(RejectedFileError):
    """The file name does not end in the header extension."""


class ImplementationFileError(RejectedFileError):
    """The path marks the file as an implementation detail."""


@dataclass(frozen=True)
class HeaderDocument:
    """Everything extracted from one header; built once, never mutated."""

    path: str
    text: str
    generic: FrozenTable
    doc_comments: FrozenTable
    blocks: FrozenTable
    classes: Tuple[Declaration, ...]
    functions: Tuple[Declaration, ...]

    def table_for(self, kind: MarkerKind) -> FrozenTable:
        if kind is MarkerKind.GENERIC:
            return self.generic
        if kind is MarkerKind.DOC_COMMENT:
            return self.doc_comments
        return self.blocks

    def resolve(self, text: str) -> str:
        """Expand every marker in ``text`` back into the source it replaced.

        Marker-shaped text the pipeline did not produce is left as it is.
        """
        return self._expand(text, len(self.generic), len(self.doc_comments), len(self.blocks))

    def _expand(self, text: str, generic_limit: int, doc_limit: int, block_limit: int) -> str:
        # Literal, comment and doc fragments were captured after ampersand
        # shielding and hold no marker but ``&0.``. A block only holds blocks
        # folded before it, so every level of recursion shrinks a limit.
        limits = {
            MarkerKind.GENERIC: generic_limit,
            MarkerKind.DOC_COMMENT: doc_limit,
            MarkerKind.BLOCK: block_limit,
        }

        def _sub(match: re.Match[str]) -> str:
            kind = MarkerKind.for_group(match.lastgroup or "")
            index = int(match.group(kind.group))
            if index >= limits[kind]:
                return match.group(0)
            fragment = self.table_for(kind).resolve(index)
            if kind is MarkerKind.BLOCK:
                return self._expand(fragment, len(self.generic), len(self.doc_comments), index)
            return self._expand(fragment, 1, 0, 0)

        return ANY_MARKER.sub(_sub, text)


def check_header_path(
    relative_path: str,
    *,
    header_extension: str = ".hh",
    implementation_marker: str = "_impl",
) -> None:
    """Raise a :class:`RejectedFileError` unless ``relative_path`` is a header."""
    if not relative_path.endswith(header_extension):
        raise WrongExtensionError(
            relative_path, f"not a {header_extension} header"
        )
    if implementation_marker and implementation_marker in relative_path:
        raise ImplementationFileError(
            relative_path, f"path contains {implementation_marker!r}"
        )


def build_header_document(relative_path: str, text: str) -> HeaderDocument:
    """Run shield, doc-comment capture, folding and classification on ``text``."""
    generic = generic_table()
    doc_comments = PlaceholderTable(MarkerKind.DOC_COMMENT)
    blocks = PlaceholderTable(MarkerKind.BLOCK)

    shielded = shield(text, generic)
    captured = capture_doc_comments(shielded, doc_comments)
    folded = fold_blocks(captured, blocks)
    classes, functions = classify(folded)

    _LOGGER.debug(
        "%d literal(s), %d doc run(s), %d block(s), %d class(es), %d function(s)",
        len(generic) - 1,
        len(doc_comments),
        len(blocks),
        len(classes),
        len(functions),
    )
    return HeaderDocument(
        path=relative_path,
        text=folded,
        generic=generic.freeze(),
        doc_comments=doc_comments.freeze(),
        blocks=blocks.freeze(),
        classes=classes,
        functions=functions,
    )


__all__ = [
    "HeaderDocument",
    "ImplementationFileError",
    "RejectedFileError",
    "WrongExtensionError",
    "build_header_document",
    "check_header_path",
]
