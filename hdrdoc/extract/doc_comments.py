"""Collapse runs of ``//`` comment lines into doc-comment markers."""

from __future__ import annotations

import re

from .placeholders import PlaceholderTable

# One or more comment lines, each followed by its line break and the
# indentation of the next line. Blank lines end a run.
_RUN = re.compile(r"(?://[^\n]*(?:\n[ \t]*|$))+")


def capture_doc_comments(text: str, table: PlaceholderTable) -> str:
    """Replace each maximal comment run with a single marker into ``table``."""
    return _RUN.sub(lambda match: table.marker(match.group(0)), text)


__all__ = ["capture_doc_comments"]
