# src/taskbook/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from pathlib import Path

from .task_models import Task, TaskState

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task store.

    The store borrows the connection it is given and never changes its
    settings: rows are unpacked by column position (plain tuples or sqlite3.Row).
    `close()` closes that connection; whoever created it decides when.

    `TaskStore.open()` is the path used by the CLI: it opens the file,
    creates the table if missing and returns a store whose connection the
    caller closes through `close()`.

    Schema (one table, state stored as a small integer):
        tasks(id INTEGER PRIMARY KEY AUTOINCREMENT, task TEXT, state INTEGER)

    sqlite3.Error is not caught here; mapping driver errors to user-facing
    errors is the gateway's job.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    @classmethod
    def open(cls, db_path: str | Path = "tasks.sqlite3") -> TaskStore:
        db_path = Path(db_path)
        if str(db_path) != ":memory:":
            db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(db_path), timeout=30.0)
        try:
            cls._configure_conn(conn)
            store = cls(conn)
            store.ensure_schema()
        except Exception:
            conn.close()
            raise
        logger.debug("TaskStore ready db=%s", db_path)
        return store

    def close(self) -> None:
        self._conn.close()

    # ---- low-level helpers ----

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    def ensure_schema(self) -> None:
        self._conn.execute(
            """
            CREATE TABLE IF NOT EXISTS tasks (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                task TEXT NOT NULL,
                state INTEGER NOT NULL DEFAULT 1
            )
            """
        )
        self._conn.execute("CREATE INDEX IF NOT EXISTS idx_tasks_state ON tasks(state)")
        self._conn.commit()

    @staticmethod
    def _row_to_task(row) -> Task:
        # Column order fixed by the SELECTs below: id, task, state.
        task_id, text, raw_state = row
        try:
            state = TaskState.from_db(raw_state)
        except ValueError as exc:
            raise sqlite3.DataError(f"task id={task_id} has unknown state {raw_state!r}") from exc
        return Task(id=int(task_id), description=str(text), state=state)

    # ---- public API ----

    def list_tasks(self, state: TaskState | None = None) -> list[Task]:
        """
        Tasks in insertion order (ascending id).

        state=None selects every row regardless of state.
        """
        if state is None:
            cur = self._conn.execute("SELECT id, task, state FROM tasks ORDER BY id ASC")
        else:
            cur = self._conn.execute(
                "SELECT id, task, state FROM tasks WHERE state = ? ORDER BY id ASC",
                (int(state),),
            )
        return [self._row_to_task(r) for r in cur.fetchall()]

    def add_task(self, description: str) -> int:
        cur = self._conn.execute("INSERT INTO tasks(task) VALUES (?)", (description,))
        self._conn.commit()
        rowid = cur.lastrowid
        if rowid is None:
            raise sqlite3.DatabaseError("SQLite did not return lastrowid for tasks insert")
        task_id = int(rowid)
        logger.debug("Task added id=%s", task_id)
        return task_id

    def set_task_state(self, task_id: int, state: TaskState) -> int:
        """Set the state of one task. Returns the number of rows updated (0 or 1)."""
        cur = self._conn.execute(
            "UPDATE tasks SET state = ? WHERE id = ?",
            (int(state), int(task_id)),
        )
        self._conn.commit()
        logger.debug("Task state set id=%s state=%s rows=%s", task_id, state.label, cur.rowcount)
        return cur.rowcount
