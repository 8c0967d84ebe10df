# tests/test_gateway.py

from __future__ import annotations

import pytest

from taskbook.tasks.errors import (
    ErrorKind,
    InvalidTaskNumber,
    StoreUnavailable,
    UnableToAddTask,
)
from taskbook.tasks.gateway import USAGE, TaskGateway
from taskbook.tasks.task_models import (
    AddAction,
    DoneAction,
    DropAction,
    HelpAction,
    ListAction,
    Task,
    TaskFilter,
    TaskState,
)

from .fakes import BrokenTaskRepo, FakeTaskRepo


def _states(gateway: TaskGateway) -> dict[int, TaskState]:
    return {t.id: t.state for t in gateway.execute(ListAction(TaskFilter.ALL)).tasks}


def test_help_returns_usage_without_store_calls() -> None:
    repo = FakeTaskRepo()
    result = TaskGateway(repo).execute(HelpAction())
    assert result.message == USAGE
    assert result.lines()[0] == "Options"
    assert result.lines() == USAGE.splitlines()
    assert all("\n" not in line for line in result.lines())
    assert repo.calls == []


def test_help_never_fails_even_with_broken_store() -> None:
    assert TaskGateway(BrokenTaskRepo()).execute(HelpAction()).message == USAGE


def test_each_action_issues_exactly_one_store_call() -> None:
    repo = FakeTaskRepo([Task(1, "a", TaskState.PENDING)])
    gw = TaskGateway(repo)

    gw.execute(ListAction(TaskFilter.DONE))
    gw.execute(AddAction("b"))
    gw.execute(DoneAction(1))
    gw.execute(DropAction(2))

    assert repo.calls == [
        ("list_tasks", (TaskState.DONE,)),
        ("add_task", ("b",)),
        ("set_task_state", (1, TaskState.DONE)),
        ("set_task_state", (2, TaskState.DROPPED)),
    ]


def test_list_all_selects_unconditionally() -> None:
    repo = FakeTaskRepo()
    TaskGateway(repo).execute(ListAction(TaskFilter.ALL))
    assert repo.calls == [("list_tasks", (None,))]


def test_add_then_list_round_trip(gateway: TaskGateway) -> None:
    assert gateway.execute(AddAction("buy milk")).lines() == []

    pending = gateway.execute(ListAction(TaskFilter.PENDING)).tasks
    assert [(t.description, t.state) for t in pending] == [("buy milk", TaskState.PENDING)]
    task_id = pending[0].id

    gateway.execute(DoneAction(task_id))
    assert gateway.execute(ListAction(TaskFilter.PENDING)).tasks == []
    done = gateway.execute(ListAction(TaskFilter.DONE)).tasks
    assert [t.id for t in done] == [task_id]


def test_done_twice_is_idempotent(gateway: TaskGateway) -> None:
    gateway.execute(AddAction("x"))
    gateway.execute(DoneAction(1))
    assert _states(gateway) == {1: TaskState.DONE}
    gateway.execute(DoneAction(1))
    assert _states(gateway) == {1: TaskState.DONE}


def test_transitions_are_unguarded_last_write_wins(gateway: TaskGateway) -> None:
    gateway.execute(AddAction("x"))

    gateway.execute(DoneAction(1))
    gateway.execute(DropAction(1))
    assert _states(gateway) == {1: TaskState.DROPPED}

    gateway.execute(DropAction(1))
    assert _states(gateway) == {1: TaskState.DROPPED}

    gateway.execute(DoneAction(1))
    assert _states(gateway) == {1: TaskState.DONE}


def test_list_all_renders_state(gateway: TaskGateway) -> None:
    gateway.execute(AddAction("a"))
    gateway.execute(AddAction("b"))
    gateway.execute(AddAction("c"))
    gateway.execute(DoneAction(2))
    gateway.execute(DropAction(3))

    assert gateway.execute(ListAction(TaskFilter.ALL)).lines() == [
        "1 a [pending]",
        "2 b [done]",
        "3 c [dropped]",
    ]
    assert gateway.execute(ListAction(TaskFilter.DONE)).lines() == ["2 b"]


def test_unknown_id_is_invalid_task_number(gateway: TaskGateway) -> None:
    # A zero-row update is a hard failure, not a silent no-op.
    for action in (DoneAction(999), DropAction(999)):
        with pytest.raises(InvalidTaskNumber) as exc:
            gateway.execute(action)
        assert exc.value.kind is ErrorKind.INVALID_TASK_NUMBER
        assert exc.value.task_id == 999


def test_write_failure_and_missing_id_share_one_error_kind() -> None:
    with pytest.raises(InvalidTaskNumber) as missing:
        TaskGateway(FakeTaskRepo()).execute(DoneAction(5))
    with pytest.raises(InvalidTaskNumber) as failed:
        TaskGateway(BrokenTaskRepo()).execute(DoneAction(5))
    assert missing.value.kind is failed.value.kind
    assert missing.value.message == failed.value.message


def test_store_errors_are_mapped_without_driver_detail() -> None:
    gw = TaskGateway(BrokenTaskRepo())

    with pytest.raises(StoreUnavailable) as listing:
        gw.execute(ListAction())
    with pytest.raises(UnableToAddTask) as adding:
        gw.execute(AddAction("x"))
    with pytest.raises(InvalidTaskNumber) as dropping:
        gw.execute(DropAction(1))

    for err in (listing.value, adding.value, dropping.value):
        assert "locked" not in err.message
        assert "readonly" not in err.message
        assert "disk" not in err.message
        assert err.__cause__ is not None


def test_default_list_action_is_pending() -> None:
    assert ListAction() == ListAction(TaskFilter.PENDING)
