# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from taskline.manager import TaskManager
from taskline.schema import Document


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    """Store file inside a per-test directory (not created yet)."""
    return tmp_path / "tasks.json"


@pytest.fixture()
def manager(store_path: Path) -> TaskManager:
    return TaskManager(store_path=store_path)


@pytest.fixture()
def doc() -> Document:
    return Document()


@pytest.fixture()
def now() -> datetime:
    return datetime(2026, 1, 28, 9, 15)
