# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKBOOK_APP_NAME": "Name used in log records (default: taskbook).",
    "TASKBOOK_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TASKBOOK_FILE_LOGGING": "Write taskbook.log into the data dir (true/false, default: false).",
    # Paths
    "TASKBOOK_DATA_DIR": "Directory for the log file (default: .local/taskbook).",
    "TASKBOOK_DB_PATH": "SQLite task database (default: tasks.sqlite3 in the working directory).",
}
