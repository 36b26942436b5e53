"""Shared application constants.

File names and display defaults used by the persistence layer and the
analytics helpers live here so they are documented in one place.
"""

# One JSON document per collection, all inside settings.data_dir
GOALS_FILE = "goals.json"
HABITS_FILE = "habits.json"
DAILY_LOGS_FILE = "daily_logs.json"

COLLECTION_FILES = {
    "goals": GOALS_FILE,
    "habits": HABITS_FILE,
    "daily_logs": DAILY_LOGS_FILE,
}

# Defaults for newly created records
DEFAULT_GOAL_TARGET = 100
DEFAULT_GOAL_UNIT = "%"
DEFAULT_HABIT_TARGET_DAYS = 30

# Calendar-day key format ("2024-01-02")
DATE_KEY_FORMAT = "%Y-%m-%d"

# Length of the weekly habit completion window
WEEK_DAYS = 7
