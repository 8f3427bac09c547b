# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-calendar).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory for logs and storage (default: .local/todo_calendar).",
    # Storage
    "TODO_STORAGE_BACKEND": "Key-value backend: sqlite | json (default: sqlite).",
    "TODO_STORAGE_DB_PATH": "SQLite storage path (default: <data_dir>/storage.sqlite3).",
    "TODO_STORAGE_JSON_PATH": "JSON storage path (default: <data_dir>/storage.json).",
    "TODO_STORAGE_KEY": "Key holding the task list (default: taskList).",
    # Tasks
    "TODO_DEFAULT_FREQUENCY": "Frequency for '/add <text>': once | daily | weekly | monthly (default: once).",
}
