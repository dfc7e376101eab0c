"""Text-substitution passes that pull documented declarations out of headers."""

from __future__ import annotations

from .classifier import Declaration, DeclarationKind, classify
from .doc_comments import capture_doc_comments
from .folding import fold_blocks
from .header import (
    HeaderDocument,
    ImplementationFileError,
    RejectedFileError,
    WrongExtensionError,
    build_header_document,
    check_header_path,
)
from .placeholders import FrozenTable, MarkerKind, PlaceholderTable, generic_table
from .shielding import shield

__all__ = [
    "Declaration",
    "DeclarationKind",
    "FrozenTable",
    "HeaderDocument",
    "ImplementationFileError",
    "MarkerKind",
    "PlaceholderTable",
    "RejectedFileError",
    "WrongExtensionError",
    "build_header_document",
    "capture_doc_comments",
    "check_header_path",
    "classify",
    "fold_blocks",
    "generic_table",
    "shield",
]
