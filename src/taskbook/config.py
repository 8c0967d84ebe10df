# src/taskbook/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Only the CLI entry point reads settings; the parser and gateway never do.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOOK"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    file_logging: bool

    # ---- Local data paths ----
    data_dir: Path
    tasks_db_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskbook").strip() or "taskbook"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        # Opt-in: a one-shot CLI should not leave log files in the working directory.
        file_logging = _env_bool(_k("FILE_LOGGING"), False)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskbook"))
        # Same default file name as earlier releases: next to where the tool is run.
        tasks_db_path = _env_path(_k("DB_PATH"), Path("tasks.sqlite3"))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            file_logging=file_logging,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
