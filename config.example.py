# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "ASTRO_APP_NAME": "App display name used in logs (default: astro-schedule).",
    "ASTRO_LOG_LEVEL": "Console logging level (default: INFO).",
    "ASTRO_DATA_DIR": "Local directory for the log file (default: .local/astro_schedule).",
    "ASTRO_LOG_TO_FILE": "Write DEBUG logs to <data_dir>/astro_schedule.log (default: true).",
    # Schedule behavior
    "ASTRO_STRICT_TIMES": "Reject times that are not zero-padded HH:mm or start >= end (default: false).",
    "ASTRO_CHECK_EDIT_CONFLICTS": "Re-check overlaps when editing a task (default: false).",
    # Console
    "ASTRO_NOTIFY_PREFIX": "Prefix printed before notifications (default: [NOTIFY]).",
}
