# src/taskbook/tasks/gateway.py

"""
Execute one Action against the task store.

Each action maps to at most one store call. Driver errors are logged with
their traceback and re-raised as coarse GatewayError kinds whose messages
carry no backend detail.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field

from ..core.ports import TaskRepo
from .errors import InvalidTaskNumber, StoreUnavailable, UnableToAddTask
from .task_models import (
    Action,
    AddAction,
    DoneAction,
    DropAction,
    HelpAction,
    ListAction,
    Task,
    TaskFilter,
    TaskState,
)

logger = logging.getLogger(__name__)

USAGE = """Options
    help: print this message
    list [all|todo|done|drop]: list tasks (default: todo)
    show: same as list
    add "Task": add the task
    done [task number]: set the task to done state
    drop [task number]: set the task to dropped state"""


@dataclass(slots=True)
class ActionResult:
    """Outcome of one action: a text message, a task listing, or nothing."""

    message: str | None = None
    tasks: list[Task] = field(default_factory=list)
    show_state: bool = False

    def lines(self) -> list[str]:
        out: list[str] = []
        if self.message is not None:
            out.extend(self.message.splitlines())
        for t in self.tasks:
            line = f"{t.id} {t.description}"
            if self.show_state:
                line += f" [{t.state.label}]"
            out.append(line)
        return out


class TaskGateway:
    def __init__(self, repo: TaskRepo) -> None:
        self._repo = repo

    def execute(self, action: Action) -> ActionResult:
        match action:
            case HelpAction():
                return ActionResult(message=USAGE)
            case ListAction(filter=task_filter):
                return ActionResult(
                    tasks=self.list_tasks(task_filter),
                    show_state=task_filter is TaskFilter.ALL,
                )
            case AddAction(description=description):
                self.add_task(description)
                return ActionResult()
            case DoneAction(task_id=task_id):
                self.set_state(task_id, TaskState.DONE)
                return ActionResult()
            case DropAction(task_id=task_id):
                self.set_state(task_id, TaskState.DROPPED)
                return ActionResult()
        raise TypeError(f"unsupported action: {action!r}")

    def list_tasks(self, task_filter: TaskFilter) -> list[Task]:
        try:
            return list(self._repo.list_tasks(task_filter.state))
        except sqlite3.Error as exc:
            logger.debug("list_tasks failed filter=%s", task_filter.value, exc_info=True)
            raise StoreUnavailable() from exc

    def add_task(self, description: str) -> int:
        try:
            task_id = self._repo.add_task(description)
        except sqlite3.Error as exc:
            logger.debug("add_task failed", exc_info=True)
            raise UnableToAddTask() from exc
        logger.info("Added task id=%s", task_id)
        return task_id

    def set_state(self, task_id: int, state: TaskState) -> None:
        """
        Overwrite the state of an existing task.

        No transition guard: DONE and DROPPED may replace each other freely.
        A missing id and a failed write are both InvalidTaskNumber.
        """
        try:
            updated = self._repo.set_task_state(task_id, state)
        except sqlite3.Error as exc:
            logger.debug("set_task_state failed id=%s", task_id, exc_info=True)
            raise InvalidTaskNumber(task_id) from exc
        if updated == 0:
            logger.info("No task with id=%s", task_id)
            raise InvalidTaskNumber(task_id)
        logger.info("Task id=%s -> %s", task_id, state.label)
