# src/taskbook/tasks/errors.py

"""
Error taxonomy for parsing and executing actions.

Every failure the user can see is a TaskbookError carrying a `kind` and a
one-line `message`. Store driver details are never part of the message;
they stay on the exception chain for the logs.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    MISSING_VERB = "MissingVerb"
    MISSING_ARGUMENT = "MissingArgument"
    NOT_A_NUMBER = "NotANumber"
    UNKNOWN_ACTION = "UnknownAction"
    UNKNOWN_FILTER = "UnknownFilter"
    STORE_UNAVAILABLE = "StoreUnavailable"
    UNABLE_TO_ADD_TASK = "UnableToAddTask"
    INVALID_TASK_NUMBER = "InvalidTaskNumber"


class TaskbookError(Exception):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ---- parse errors ----


class ParseError(TaskbookError):
    """Raised by the action parser. Never touches the store."""


class MissingVerb(ParseError):
    kind = ErrorKind.MISSING_VERB

    def __init__(self) -> None:
        super().__init__("Need at least 1 parameter.")


class MissingArgument(ParseError):
    kind = ErrorKind.MISSING_ARGUMENT

    def __init__(self, verb: str) -> None:
        super().__init__("This action needs two parameters.")
        self.verb = verb


class NotANumber(ParseError):
    kind = ErrorKind.NOT_A_NUMBER

    def __init__(self, value: str) -> None:
        super().__init__(f"{value} is not a number.")
        self.value = value


class UnknownAction(ParseError):
    kind = ErrorKind.UNKNOWN_ACTION

    def __init__(self, verb: str) -> None:
        super().__init__(f"Unknown action '{verb}', please refer to the 'help' action.")
        self.verb = verb


class UnknownFilter(ParseError):
    kind = ErrorKind.UNKNOWN_FILTER

    def __init__(self, value: str, choices: list[str]) -> None:
        super().__init__(
            f"Unknown list filter '{value}', expected one of: {', '.join(choices)}."
        )
        self.value = value


# ---- gateway errors ----


class GatewayError(TaskbookError):
    """Raised when the store cannot carry out an action."""


class StoreUnavailable(GatewayError):
    kind = ErrorKind.STORE_UNAVAILABLE

    def __init__(self) -> None:
        super().__init__("Task store unavailable.")


class UnableToAddTask(GatewayError):
    kind = ErrorKind.UNABLE_TO_ADD_TASK

    def __init__(self) -> None:
        super().__init__("Unable to add task.")


class InvalidTaskNumber(GatewayError):
    kind = ErrorKind.INVALID_TASK_NUMBER

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Invalid task number {task_id}.")
        self.task_id = task_id
