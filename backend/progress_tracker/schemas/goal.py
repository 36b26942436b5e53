from enum import Enum
from typing import Optional

from pydantic import Field

from progress_tracker.core.constants import DEFAULT_GOAL_TARGET, DEFAULT_GOAL_UNIT
from progress_tracker.core.time_utils import now_millis
from progress_tracker.schemas.common import RecordModel, new_id


class GoalCategory(str, Enum):
    PERSONAL = "PERSONAL"
    HEALTH = "HEALTH"
    CAREER = "CAREER"
    LEARNING = "LEARNING"
    FINANCE = "FINANCE"
    FITNESS = "FITNESS"
    CREATIVE = "CREATIVE"

    def display_name(self) -> str:
        return CATEGORY_DISPLAY_NAMES[self]


CATEGORY_DISPLAY_NAMES = {
    GoalCategory.PERSONAL: "Personal",
    GoalCategory.HEALTH: "Health",
    GoalCategory.CAREER: "Career",
    GoalCategory.LEARNING: "Learning",
    GoalCategory.FINANCE: "Finance",
    GoalCategory.FITNESS: "Fitness",
    GoalCategory.CREATIVE: "Creative",
}


class Milestone(RecordModel):
    id: str = Field(default_factory=new_id)
    title: str
    target_value: int
    is_completed: bool = False
    completed_at: Optional[int] = None  # epoch millis


class Goal(RecordModel):
    """A numeric target the user works towards.

    `is_completed` is toggled by the user; it is not derived from
    current_value reaching target_value.
    """

    id: str = Field(default_factory=new_id)
    title: str
    description: str = ""
    category: GoalCategory = GoalCategory.PERSONAL
    target_value: int = DEFAULT_GOAL_TARGET
    current_value: int = 0
    unit: str = DEFAULT_GOAL_UNIT
    created_at: int = Field(default_factory=now_millis)  # epoch millis
    deadline: Optional[int] = None  # epoch millis
    is_completed: bool = False
    milestones: list[Milestone] = Field(default_factory=list)


class DailyLog(RecordModel):
    """One progress increment applied to a goal. Never edited once written."""

    id: str = Field(default_factory=new_id)
    goal_id: str
    date: int = Field(default_factory=now_millis)  # epoch millis
    value: int
    notes: str = ""
