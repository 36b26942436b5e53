import json
import logging
from pathlib import Path
from typing import Optional

from progress_tracker.core.time_utils import now_millis
from progress_tracker.db import JsonStorage
from progress_tracker.schemas.goal import DailyLog, Goal
from progress_tracker.schemas.habit import Habit
from progress_tracker.services import analytics
from progress_tracker.services.store import EntityStore

logger = logging.getLogger(__name__)


class ProgressTracker:
    """Owns the three collections and is the only writer to them.

    Presentation code reads snapshots through the list_* methods and calls
    the mutation methods; each mutation is persisted before it returns.
    """

    def __init__(self, storage: Optional[JsonStorage] = None, data_dir: Optional[Path] = None):
        self.storage = storage or JsonStorage(data_dir)
        self.goals: EntityStore[Goal] = EntityStore("goals", self.storage)
        self.habits: EntityStore[Habit] = EntityStore("habits", self.storage)
        self.logs: EntityStore[DailyLog] = EntityStore("daily_logs", self.storage)
        logger.info(
            "Loaded %d goals, %d habits, %d logs from %s",
            len(self.goals), len(self.habits), len(self.logs), self.storage.data_dir,
        )

    # Reads

    def list_goals(self) -> list[Goal]:
        return self.goals.all()

    def list_habits(self) -> list[Habit]:
        return self.habits.all()

    def list_logs(self) -> list[DailyLog]:
        return self.logs.all()

    def get_goal(self, goal_id: str) -> Optional[Goal]:
        return self.goals.get(goal_id)

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        return self.habits.get(habit_id)

    # Goals

    def add_goal(self, goal: Goal) -> Goal:
        self.goals.add(goal)
        return goal

    def update_goal(self, goal: Goal) -> Goal:
        self.goals.replace(goal.id, goal)
        return goal

    def delete_goal(self, goal_id: str) -> None:
        # Logs pointing at this goal are kept; views skip them
        self.goals.remove(goal_id)

    def log_progress(self, log: DailyLog) -> DailyLog:
        """Append `log` and add its value to the goal, capped at the target."""
        self.logs.add(log)
        goal = self.goals.get(log.goal_id)
        if goal is None:
            logger.debug("Log %s references unknown goal %s", log.id, log.goal_id)
        else:
            new_value = min(goal.current_value + log.value, goal.target_value)
            self.goals.replace(goal.id, goal.model_copy(update={"current_value": new_value}))
        return log

    # Habits

    def add_habit(self, habit: Habit) -> Habit:
        self.habits.add(habit)
        return habit

    def update_habit(self, habit: Habit) -> Habit:
        self.habits.replace(habit.id, habit)
        return habit

    def delete_habit(self, habit_id: str) -> None:
        self.habits.remove(habit_id)

    def toggle_habit_today(
        self, habit: Habit, today=None, tz_name: Optional[str] = None
    ) -> Habit:
        """Return the toggled habit. Not persisted; pass it to update_habit."""
        return analytics.streak_toggle(habit, today, tz_name)

    # Data management

    def export_data(self) -> dict:
        return {
            "exportedAt": now_millis(),
            "goals": [g.to_record() for g in self.goals.all()],
            "habits": [h.to_record() for h in self.habits.all()],
            "dailyLogs": [log.to_record() for log in self.logs.all()],
        }

    def clear_all_data(self) -> None:
        logger.info("Clearing all goals, habits and logs in %s", self.storage.data_dir)
        self.goals.clear()
        self.habits.clear()
        self.logs.clear()

    def reload(self) -> None:
        self.goals.reload()
        self.habits.reload()
        self.logs.reload()

    def write_export(self, path: Path) -> Path:
        path = Path(path)
        path.write_text(json.dumps(self.export_data(), indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info("Exported data to %s", path)
        return path
