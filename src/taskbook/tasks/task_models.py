# src/taskbook/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum


class TaskState(IntEnum):
    """
    Task lifecycle state.

    Values are the stored discriminants and must never change:
    rows written by older runs are read back with the same meaning.

    Any state may be overwritten by DONE or DROPPED (last write wins).
    Nothing leads back to PENDING.
    """

    PENDING = 1
    DONE = 2
    DROPPED = 3

    @classmethod
    def from_db(cls, raw: int | None) -> TaskState:
        if raw is None:
            return cls.PENDING
        return cls(int(raw))

    @property
    def label(self) -> str:
        return self.name.lower()


class TaskFilter(StrEnum):
    """Selection used by `list`. ALL matches every stored state."""

    ALL = "all"
    PENDING = "todo"
    DONE = "done"
    DROPPED = "drop"

    @property
    def state(self) -> TaskState | None:
        if self is TaskFilter.ALL:
            return None
        return TaskState[self.name]


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    description: str
    state: TaskState


# ---- actions ----


@dataclass(frozen=True, slots=True)
class HelpAction:
    pass


@dataclass(frozen=True, slots=True)
class ListAction:
    filter: TaskFilter = TaskFilter.PENDING


@dataclass(frozen=True, slots=True)
class AddAction:
    description: str


@dataclass(frozen=True, slots=True)
class DoneAction:
    task_id: int


@dataclass(frozen=True, slots=True)
class DropAction:
    task_id: int


Action = HelpAction | ListAction | AddAction | DoneAction | DropAction
