"""Shared fixtures for capsula tests.

``template_dir`` writes a small kida template tree into a temp directory;
``engine`` is an in-memory ``RecordingEngine`` that records every render
so tests can inspect the exact context a template received.
"""

from pathlib import Path

import pytest
from helpers import ECHO, NOT_FOUND, PAGE, RecordingEngine, write_templates


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A template root with ``404``, ``page`` and ``echo`` templates."""
    return write_templates(
        tmp_path / "templates",
        {"404": NOT_FOUND, "page": PAGE, "echo": ECHO},
    )


@pytest.fixture
def engine() -> RecordingEngine:
    return RecordingEngine()
