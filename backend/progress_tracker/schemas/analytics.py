from datetime import date

from pydantic import BaseModel

from progress_tracker.schemas.goal import DailyLog, Goal, GoalCategory


class CategoryAggregate(BaseModel):
    category: GoalCategory
    count: int
    completed: int
    progress: float  # mean progress fraction, 0..1

    @property
    def percent(self) -> int:
        return int(self.progress * 100)


class WeeklyCompletionPoint(BaseModel):
    day: date
    completed: int


class ActivityEntry(BaseModel):
    """A progress log joined with the goal it was applied to."""

    log: DailyLog
    goal: Goal

    def describe(self) -> str:
        return f"Added {self.log.value} {self.goal.unit} to {self.goal.title}"


class DailyHabitSummary(BaseModel):
    day: date
    completed: int
    total: int
    progress: float


class DashboardSummary(BaseModel):
    active_goals: int
    completed_goals: int
    logs_today: int
    current_streak: int


class AnalyticsSummary(BaseModel):
    total_goals: int
    completed_goals: int
    average_progress: int  # percent
    total_habits: int
    total_streak: int
    best_streak: int
