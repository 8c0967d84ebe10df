# src/taskbook/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The gateway depends on a Protocol instead of the SQLite store, so tests can
hand it an in-memory fake.
"""

from typing import Protocol

from ..tasks.task_models import Task, TaskState


class TaskRepo(Protocol):
    def list_tasks(self, state: TaskState | None = None) -> list[Task]: ...
    def add_task(self, description: str) -> int: ...
    def set_task_state(self, task_id: int, state: TaskState) -> int: ...
