# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TRACKERBOT_APP_NAME": "App display name used in greetings (default: TrackerBot).",
    "TRACKERBOT_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TRACKERBOT_LOG_FILE": "Write full debug logs to <data_dir>/trackerbot.log (true/false, default: true).",
    # Persistence (gitignored)
    "TRACKERBOT_DATA_DIR": "Local data directory (default: .local/trackerbot).",
    "TRACKERBOT_SAVE_PATH": "Task save file (default: <data_dir>/data.txt).",
    "TRACKERBOT_AUTOSAVE": "Save after every add/mark/unmark/delete instead of only on exit (true/false).",
}
