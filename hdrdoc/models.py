"""Data records shared between the scanner, generator and CLI."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class SourceFile:
    """A candidate file found under the source directory."""

    path: str
    absolute: Path


@dataclass
class SkippedFile:
    """A candidate that was not turned into a page, and why."""

    path: str
    reason: str


@dataclass
class GenerationReport:
    """Outcome of a full documentation run."""

    output_dir: Path
    pages: List[Path] = field(default_factory=list)
    skipped: List[SkippedFile] = field(default_factory=list)
    index_page: Optional[Path] = None
