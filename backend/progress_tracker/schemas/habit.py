from enum import Enum

from pydantic import Field

from progress_tracker.core.constants import DEFAULT_HABIT_TARGET_DAYS
from progress_tracker.core.time_utils import now_millis
from progress_tracker.schemas.common import RecordModel, new_id


class HabitFrequency(str, Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    WEEKDAYS = "WEEKDAYS"
    WEEKENDS = "WEEKENDS"

    def display_name(self) -> str:
        return FREQUENCY_DISPLAY_NAMES[self]


FREQUENCY_DISPLAY_NAMES = {
    HabitFrequency.DAILY: "Daily",
    HabitFrequency.WEEKLY: "Weekly",
    HabitFrequency.WEEKDAYS: "Weekdays",
    HabitFrequency.WEEKENDS: "Weekends",
}


class Habit(RecordModel):
    id: str = Field(default_factory=new_id)
    title: str
    description: str = ""
    frequency: HabitFrequency = HabitFrequency.DAILY  # display only
    target_days: int = DEFAULT_HABIT_TARGET_DAYS
    # Epoch millis of each completion; one entry per toggle-on
    completed_dates: list[int] = Field(default_factory=list)
    created_at: int = Field(default_factory=now_millis)
    # Stored counter, bumped by toggles (not recomputed from completed_dates)
    streak: int = 0
    longest_streak: int = 0
