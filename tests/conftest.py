# tests/conftest.py

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskbook.tasks.gateway import TaskGateway
from taskbook.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI entry point.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskbook-test",
        log_level="WARNING",
        file_logging=False,
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "tasks.sqlite3",
    )


@pytest.fixture()
def store(tmp_path: Path) -> Iterator[TaskStore]:
    """Real SQLite store on disk (per-test file)."""
    s = TaskStore.open(tmp_path / "tasks.sqlite3")
    try:
        yield s
    finally:
        s.close()


@pytest.fixture()
def memory_store() -> Iterator[TaskStore]:
    """Store over an injected in-memory connection."""
    conn = sqlite3.connect(":memory:")
    s = TaskStore(conn)
    s.ensure_schema()
    try:
        yield s
    finally:
        conn.close()


@pytest.fixture()
def gateway(memory_store: TaskStore) -> TaskGateway:
    return TaskGateway(memory_store)
