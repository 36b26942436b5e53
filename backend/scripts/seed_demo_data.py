from datetime import datetime, timedelta
import logging
import random

from progress_tracker.core.time_utils import datetime_to_millis
from progress_tracker.main import create_tracker
from progress_tracker.schemas.goal import DailyLog, Goal, GoalCategory
from progress_tracker.schemas.habit import Habit, HabitFrequency
from progress_tracker.services.tracker import ProgressTracker

logger = logging.getLogger(__name__)


DEMO_GOALS = [
    ("Read 24 books", GoalCategory.LEARNING, 24, "books"),
    ("Run 500 miles", GoalCategory.FITNESS, 500, "mi"),
    ("Save emergency fund", GoalCategory.FINANCE, 5000, "$"),
    ("Finish portfolio site", GoalCategory.CAREER, 100, "%"),
]

DEMO_HABITS = [
    ("Meditate", HabitFrequency.DAILY),
    ("Stretch", HabitFrequency.DAILY),
    ("Plan the week", HabitFrequency.WEEKLY),
    ("Inbox zero", HabitFrequency.WEEKDAYS),
]


def seed_demo_data(tracker: ProgressTracker, days: int = 14) -> None:
    """Insert demo goals with `days` of progress logs plus a few habits."""
    now = datetime.now()
    start = now - timedelta(days=days - 1)

    goals = [
        tracker.add_goal(Goal(title=title, category=category, target_value=target, unit=unit))
        for title, category, target, unit in DEMO_GOALS
    ]

    n_logs = 0
    for offset in range(days):
        day = start + timedelta(days=offset)
        for goal in goals:
            # Skip roughly a third of the days so the feed looks realistic
            if random.random() < 0.33:
                continue
            value = max(1, round(goal.target_value * random.uniform(0.01, 0.05)))
            tracker.log_progress(
                DailyLog(goal_id=goal.id, date=datetime_to_millis(day), value=value, notes="Demo entry")
            )
            n_logs += 1

    for title, frequency in DEMO_HABITS:
        habit = tracker.add_habit(Habit(title=title, frequency=frequency))
        for offset in range(days):
            if random.random() < 0.6:
                day = datetime_to_millis(start + timedelta(days=offset))
                habit = tracker.update_habit(tracker.toggle_habit_today(habit, today=day))

    logger.info("Seeded %d goals, %d logs and %d habits", len(goals), n_logs, len(DEMO_HABITS))


def main():
    tracker = create_tracker(log_level="INFO")
    tracker.clear_all_data()
    seed_demo_data(tracker)


if __name__ == "__main__":
    main()
