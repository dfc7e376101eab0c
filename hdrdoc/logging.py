"""Logging utilities for hdrdoc runs.

Records emitted while a header is being processed carry that header's relative
path, so per-stage messages need not repeat it.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

_LOGGER_NAME = "hdrdoc"

_CURRENT_FILE: contextvars.ContextVar[str] = contextvars.ContextVar(
    "hdrdoc_current_file", default=""
)


class _SourceFileFilter(logging.Filter):
    """Set ``record.source_file`` to ``"<path>: "`` inside :func:`processing_file`."""

    def filter(self, record: logging.LogRecord) -> bool:
        current = _CURRENT_FILE.get()
        record.source_file = f"{current}: " if current else ""
        return True


@contextmanager
def processing_file(relative_path: str) -> Iterator[None]:
    """Tag every record logged inside the block with ``relative_path``."""
    token = _CURRENT_FILE.set(relative_path)
    try:
        yield
    finally:
        _CURRENT_FILE.reset(token)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the hdrdoc hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Configure the hdrdoc logger with console output and an optional file sink."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.addFilter(_SourceFileFilter())
    stream_handler.setFormatter(
        logging.Formatter("[hdrdoc] %(levelname)s %(source_file)s%(message)s")
    )
    logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.addFilter(_SourceFileFilter())
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(source_file)s%(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger", "processing_file"]
