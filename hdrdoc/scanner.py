"""Source tree walking for header discovery."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

from .models import SourceFile

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "__pycache__",
    ".idea",
    ".vscode",
    ".cache",
}

_EXCLUDED_FILES = {
    ".DS_Store",
    "Thumbs.db",
}


def _is_excluded(rel_path: str, patterns: Sequence[str]) -> bool:
    for pattern in patterns:
        pattern = pattern.rstrip("/")
        if not pattern:
            continue
        if fnmatchcase(rel_path, pattern):
            return True
        if rel_path.startswith(f"{pattern}/"):
            return True
        if "/" not in pattern and any(fnmatchcase(part, pattern) for part in rel_path.split("/")):
            return True
    return False


def _iter_files(root: Path, patterns: Sequence[str]) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        # Sorted in place so the walk order, and therefore output order, is stable.
        dirnames[:] = sorted(
            name
            for name in dirnames
            if name not in _EXCLUDED_DIRS
            and not _is_excluded(f"{rel_dir}/{name}" if rel_dir else name, patterns)
        )

        for filename in sorted(filenames):
            if filename in _EXCLUDED_FILES:
                continue
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if _is_excluded(rel_path, patterns):
                continue
            yield current_dir / filename


class SourceScanner:
    """Walks the source directory and lists every regular file in it."""

    def __init__(self, exclude_paths: Sequence[str] = ()) -> None:
        self.exclude_paths = list(exclude_paths)

    def scan(self, source_dir: Path) -> List[SourceFile]:
        """Return candidate files under ``source_dir`` with POSIX relative paths."""
        root = source_dir.expanduser().resolve()
        if not root.exists():
            raise FileNotFoundError(f"Source directory not found: {source_dir}")
        if not root.is_dir():
            raise NotADirectoryError(f"Source path is not a directory: {source_dir}")

        return [
            SourceFile(path=path.relative_to(root).as_posix(), absolute=path)
            for path in _iter_files(root, self.exclude_paths)
            if path.is_file()
        ]


__all__ = ["SourceScanner"]
