# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "Title shown above the task list (default: todolist).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory for the store and log file (default: .local/todolist).",
    "TODO_STORAGE_DB_PATH": "Key/value SQLite path (default: <data_dir>/storage.sqlite3).",
    # Console
    "TODO_ERROR_DISPLAY_SECONDS": "How long validation errors stay visible (default: 3).",
    "TODO_SEED_SAMPLE_DATA": "Create two sample tasks on first run (true/false, default: true).",
    "TODO_CLEAR_SCREEN": "Clear the terminal before each redraw when on a TTY (default: true).",
    # Colour
    "NO_COLOR": "Disable ANSI colours entirely.",
    "FORCE_COLOR": "Keep colours even when stdout is not a TTY.",
}
