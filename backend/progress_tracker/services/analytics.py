"""Derived state computed from the goal, habit and log collections.

Everything here is a pure read of the values passed in: nothing is cached
and no input is mutated, so calling a function twice on the same snapshot
gives the same answer. Empty collections and zero targets give 0 rather
than raising.

Calendar-day comparisons go through `local_date`, so two timestamps on the
same local day match regardless of time of day.
"""
from typing import Iterable, Optional, Sequence

from progress_tracker.core.config import settings
from progress_tracker.core.constants import WEEK_DAYS
from progress_tracker.core.time_utils import last_n_days, local_date, now_millis, to_millis
from progress_tracker.schemas.analytics import (
    ActivityEntry,
    AnalyticsSummary,
    CategoryAggregate,
    DailyHabitSummary,
    DashboardSummary,
    WeeklyCompletionPoint,
)
from progress_tracker.schemas.goal import DailyLog, Goal, GoalCategory
from progress_tracker.schemas.habit import Habit


# --- goals -----------------------------------------------------------------

def progress_fraction(goal: Goal) -> float:
    """current/target clamped to [0, 1]; 0 when the target is not positive."""
    if goal.target_value > 0:
        return min(max(goal.current_value / goal.target_value, 0.0), 1.0)
    return 0.0


def progress_percent(goal: Goal) -> int:
    return int(progress_fraction(goal) * 100)


def goals_in_category(goals: Sequence[Goal], category: Optional[GoalCategory]) -> list[Goal]:
    if category is None:
        return list(goals)
    return [g for g in goals if g.category == category]


def category_aggregate(goals: Sequence[Goal], category: GoalCategory) -> CategoryAggregate:
    in_category = goals_in_category(goals, category)
    progress = (
        sum(progress_fraction(g) for g in in_category) / len(in_category)
        if in_category
        else 0.0
    )
    return CategoryAggregate(
        category=category,
        count=len(in_category),
        completed=sum(1 for g in in_category if g.is_completed),
        progress=progress,
    )


def category_breakdown(goals: Sequence[Goal]) -> list[CategoryAggregate]:
    """Aggregates for every category that has at least one goal, in enum order."""
    aggregates = [category_aggregate(goals, category) for category in GoalCategory]
    return [agg for agg in aggregates if agg.count > 0]


def overall_average_progress(goals: Sequence[Goal]) -> int:
    """Mean progress percent across all goals, truncated to an int."""
    if not goals:
        return 0
    return int(sum(progress_fraction(g) * 100 for g in goals) / len(goals))


# --- habits ----------------------------------------------------------------

def is_completed_on_date(habit: Habit, day, tz_name: Optional[str] = None) -> bool:
    target = local_date(day, tz_name)
    return any(local_date(ts, tz_name) == target for ts in habit.completed_dates)


def habits_completed_on(habits: Iterable[Habit], day, tz_name: Optional[str] = None) -> int:
    return sum(1 for h in habits if is_completed_on_date(h, day, tz_name))


def weekly_completion_series(
    habits: Sequence[Habit],
    reference_date,
    tz_name: Optional[str] = None,
) -> list[WeeklyCompletionPoint]:
    """Per-day completed-habit counts for the 7 days ending at reference_date."""
    reference = local_date(reference_date, tz_name)
    return [
        WeeklyCompletionPoint(day=day, completed=habits_completed_on(habits, day, tz_name))
        for day in last_n_days(reference, WEEK_DAYS)
    ]


def daily_habit_summary(habits: Sequence[Habit], day, tz_name: Optional[str] = None) -> DailyHabitSummary:
    completed = habits_completed_on(habits, day, tz_name)
    total = len(habits)
    return DailyHabitSummary(
        day=local_date(day, tz_name),
        completed=completed,
        total=total,
        progress=completed / total if total else 0.0,
    )


def streak_toggle(habit: Habit, today=None, tz_name: Optional[str] = None) -> Habit:
    """Next state of `habit` after the user taps "done today".

    Already done today: drop every entry for today and decrement the streak
    (not below 0). Otherwise append `today` and bump the streak, raising
    longest_streak if needed. `today` may be epoch millis, a datetime or a
    date; it is stored as epoch millis. The streak is a toggle counter; whether
    yesterday was also completed is not checked.
    """
    today = now_millis() if today is None else to_millis(today, tz_name)
    today_date = local_date(today, tz_name)

    if is_completed_on_date(habit, today_date, tz_name):
        return habit.model_copy(
            update={
                "completed_dates": [
                    ts for ts in habit.completed_dates if local_date(ts, tz_name) != today_date
                ],
                "streak": max(0, habit.streak - 1),
            }
        )

    new_streak = habit.streak + 1
    return habit.model_copy(
        update={
            "completed_dates": habit.completed_dates + [today],
            "streak": new_streak,
            "longest_streak": max(habit.longest_streak, new_streak),
        }
    )


# --- logs ------------------------------------------------------------------

def logs_on_date(logs: Iterable[DailyLog], day, tz_name: Optional[str] = None) -> list[DailyLog]:
    target = local_date(day, tz_name)
    return [log for log in logs if local_date(log.date, tz_name) == target]


def recent_activity(
    logs: Sequence[DailyLog],
    goals: Sequence[Goal],
    limit: Optional[int] = None,
) -> list[ActivityEntry]:
    """Newest `limit` logs joined to their goals.

    The limit is applied before the join, so logs whose goal has been
    deleted take a slot and are then dropped from the result.
    """
    if limit is None:
        limit = settings.recent_activity_limit
    goals_by_id = {g.id: g for g in goals}
    newest = sorted(logs, key=lambda log: log.date, reverse=True)[:max(limit, 0)]
    return [
        ActivityEntry(log=log, goal=goals_by_id[log.goal_id])
        for log in newest
        if log.goal_id in goals_by_id
    ]


# --- summaries -------------------------------------------------------------

def dashboard_summary(
    goals: Sequence[Goal],
    habits: Sequence[Habit],
    logs: Sequence[DailyLog],
    today=None,
    tz_name: Optional[str] = None,
) -> DashboardSummary:
    if today is None:
        today = now_millis()
    return DashboardSummary(
        active_goals=sum(1 for g in goals if not g.is_completed),
        completed_goals=sum(1 for g in goals if g.is_completed),
        logs_today=len(logs_on_date(logs, today, tz_name)),
        current_streak=max((h.streak for h in habits), default=0),
    )


def analytics_summary(goals: Sequence[Goal], habits: Sequence[Habit]) -> AnalyticsSummary:
    return AnalyticsSummary(
        total_goals=len(goals),
        completed_goals=sum(1 for g in goals if g.is_completed),
        average_progress=overall_average_progress(goals),
        total_habits=len(habits),
        total_streak=sum(h.streak for h in habits),
        best_streak=max((h.longest_streak for h in habits), default=0),
    )
