# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.

Example .env:
    KIKO_DATA_DIR=data
    KIKO_LOG_LEVEL=WARNING
"""

ENV_VARS = {
    # App / logging
    "KIKO_APP_NAME": "Name shown in console replies (default: Kiko).",
    "KIKO_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths
    "KIKO_DATA_DIR": "Local data directory (default: data).",
    "KIKO_TASKS_PATH": "Task file, one 'T | 0 | description' line per task (default: <data_dir>/kiko.txt).",
    "KIKO_LOG_DIR": "Directory for kiko.log (default: <data_dir>/logs).",
}
