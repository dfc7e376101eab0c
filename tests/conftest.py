from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_hdrdoc_logger() -> Iterator[None]:
    """Drop handlers the CLI installs so they never outlive a captured stream."""
    yield
    logger = logging.getLogger("hdrdoc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
