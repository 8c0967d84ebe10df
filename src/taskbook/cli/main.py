# src/taskbook/cli/main.py

"""
CLI entrypoint.

One invocation = one action: parse argv, open the task store, execute,
print the result, close the store. Errors are printed as a single line on
stdout; the exit code tells parse failures (2) from store failures (1).
"""

from __future__ import annotations

import logging
import sqlite3
import sys
from collections.abc import Sequence

from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.action_parser import parse_action
from ..tasks.errors import GatewayError, ParseError, StoreUnavailable
from ..tasks.gateway import USAGE, ActionResult, TaskGateway
from ..tasks.task_models import HelpAction
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_GATEWAY_ERROR = 1
EXIT_PARSE_ERROR = 2


def _configure_logging(settings) -> None:
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_dir = settings.data_dir if getattr(settings, "file_logging", True) else None
    setup_logging(log_dir=log_dir, console_level=console_level)


def _print_result(result: ActionResult) -> None:
    for line in result.lines():
        print(line)


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    if settings is None:
        settings = get_settings()
    _configure_logging(settings)

    args = list(sys.argv[1:] if argv is None else argv)

    try:
        action = parse_action(args)
    except ParseError as err:
        logger.debug("Parse failed kind=%s args=%r", err.kind, args)
        print(err.message)
        return EXIT_PARSE_ERROR

    logger.debug("%s: %r", getattr(settings, "app_name", "taskbook"), action)

    # Help never needs the store.
    if isinstance(action, HelpAction):
        _print_result(ActionResult(message=USAGE))
        return EXIT_OK

    try:
        store = TaskStore.open(settings.tasks_db_path)
    except (sqlite3.Error, OSError):
        logger.debug("Failed to open task store %s", settings.tasks_db_path, exc_info=True)
        print(StoreUnavailable().message)
        return EXIT_GATEWAY_ERROR

    try:
        result = TaskGateway(store).execute(action)
    except GatewayError as err:
        print(err.message)
        return EXIT_GATEWAY_ERROR
    finally:
        store.close()

    _print_result(result)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
