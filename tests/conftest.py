"""Shared test fixtures for the sticky-widget test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from sticky_widget.core.constants import STORAGE_FILE_PREFIX
from sticky_widget.core.models import Note
from sticky_widget.log import logger


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by CLI tests so they don't outlive capsys."""
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """An empty notes-app storage directory."""
    path = tmp_path / "storage"
    path.mkdir()
    return path


@pytest.fixture
def write_record(storage_dir: Path) -> Callable[[str, str], Path]:
    """Write a raw storage record for a key, the way the notes app names it."""

    def _write(key: str, text: str) -> Path:
        path = storage_dir / f"{STORAGE_FILE_PREFIX}{key}"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_notes() -> Callable[..., list[Note]]:
    """Build notes ``n<ts>`` with the given ``updated_at`` values."""

    def _make(*timestamps: int) -> list[Note]:
        return [
            Note(id=f"n{ts}", title=f"Note {ts}", content="", updated_at=ts)
            for ts in timestamps
        ]

    return _make
