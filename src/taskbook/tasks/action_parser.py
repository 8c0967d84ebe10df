# src/taskbook/tasks/action_parser.py

"""
Turn the raw command line into exactly one Action.

The parser is pure: no I/O, no store access. Unknown verbs and filters are
rejected with typed errors instead of falling through to a default.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import StrEnum

from .errors import MissingArgument, MissingVerb, NotANumber, UnknownAction, UnknownFilter
from .task_models import (
    Action,
    AddAction,
    DoneAction,
    DropAction,
    HelpAction,
    ListAction,
    TaskFilter,
)

U32_MAX = 2**32 - 1

_NUMBER_RE = re.compile(r"\+?[0-9]+")


class Verb(StrEnum):
    HELP = "help"
    LIST = "list"
    SHOW = "show"  # alias of list
    ADD = "add"
    DONE = "done"
    DROP = "drop"


def parse_task_id(raw: str) -> int:
    """Parse an unsigned 32-bit task number; anything else is NotANumber."""
    if not _NUMBER_RE.fullmatch(raw):
        raise NotANumber(raw)
    value = int(raw)
    if value > U32_MAX:
        raise NotANumber(raw)
    return value


def parse_filter(raw: str) -> TaskFilter:
    try:
        return TaskFilter(raw)
    except ValueError:
        raise UnknownFilter(raw, [f.value for f in TaskFilter]) from None


def parse_action(args: Sequence[str]) -> Action:
    """
    Parse the arguments that follow the program name.

    Only the verb and the first argument after it are looked at;
    anything further is ignored.
    """
    if not args:
        raise MissingVerb()

    raw_verb = args[0]
    arg: str | None = args[1] if len(args) > 1 else None

    try:
        verb = Verb(raw_verb)
    except ValueError:
        raise UnknownAction(raw_verb) from None

    match verb:
        case Verb.HELP:
            return HelpAction()
        case Verb.LIST | Verb.SHOW:
            if arg is None:
                return ListAction(TaskFilter.PENDING)
            return ListAction(parse_filter(arg))
        case Verb.ADD:
            if arg is None:
                raise MissingArgument(verb)
            # Verbatim: no trimming, empty text is allowed here.
            return AddAction(arg)
        case Verb.DONE:
            if arg is None:
                raise MissingArgument(verb)
            return DoneAction(parse_task_id(arg))
        case Verb.DROP:
            if arg is None:
                raise MissingArgument(verb)
            return DropAction(parse_task_id(arg))
