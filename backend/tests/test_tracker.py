import json

import pytest
from pydantic import ValidationError

from progress_tracker.main import create_tracker
from progress_tracker.schemas.goal import DailyLog, Goal
from progress_tracker.schemas.habit import Habit
from progress_tracker.services.tracker import ProgressTracker

from helpers import utc_ms


def test_starts_empty(tracker):
    assert tracker.list_goals() == []
    assert tracker.list_habits() == []
    assert tracker.list_logs() == []


def test_goal_crud_persists(tracker, storage):
    goal = tracker.add_goal(Goal(title="Read"))
    tracker.update_goal(goal.model_copy(update={"is_completed": True}))
    assert tracker.get_goal(goal.id).is_completed
    assert storage.load("goals")[0].is_completed

    tracker.delete_goal(goal.id)
    assert tracker.list_goals() == []
    assert storage.load("goals") == []


def test_update_can_set_any_current_value(tracker):
    goal = tracker.add_goal(Goal(title="Read", target_value=10))
    tracker.update_goal(goal.model_copy(update={"current_value": 25}))
    assert tracker.get_goal(goal.id).current_value == 25


def test_log_progress_clamps_to_target(tracker, storage):
    goal = tracker.add_goal(Goal(title="Run", target_value=100, current_value=40))
    tracker.log_progress(DailyLog(goal_id=goal.id, value=70))

    assert tracker.get_goal(goal.id).current_value == 100
    assert storage.load("goals")[0].current_value == 100
    assert [log.value for log in storage.load("daily_logs")] == [70]


def test_log_progress_accumulates(tracker):
    goal = tracker.add_goal(Goal(title="Run", target_value=100))
    tracker.log_progress(DailyLog(goal_id=goal.id, value=10))
    tracker.log_progress(DailyLog(goal_id=goal.id, value=15))
    assert tracker.get_goal(goal.id).current_value == 25
    assert len(tracker.list_logs()) == 2


def test_log_for_unknown_goal_is_kept(tracker):
    other = tracker.add_goal(Goal(title="Other", current_value=1))
    tracker.log_progress(DailyLog(goal_id="X", value=5))
    assert len(tracker.list_logs()) == 1
    assert tracker.get_goal(other.id).current_value == 1


def test_deleting_goal_keeps_its_logs(tracker):
    goal = tracker.add_goal(Goal(title="Run"))
    tracker.log_progress(DailyLog(goal_id=goal.id, value=5))
    tracker.delete_goal(goal.id)
    assert len(tracker.list_logs()) == 1


def test_toggle_is_persisted_only_through_update(tracker, storage):
    habit = tracker.add_habit(Habit(title="Meditate", streak=3, longest_streak=5))
    toggled = tracker.toggle_habit_today(habit, today=utc_ms(2024, 1, 2), tz_name="UTC")
    assert toggled.streak == 4
    assert storage.load("habits")[0].streak == 3

    tracker.update_habit(toggled)
    saved = storage.load("habits")[0]
    assert (saved.streak, saved.longest_streak) == (4, 5)
    assert saved.completed_dates == [utc_ms(2024, 1, 2)]


def test_habit_delete(tracker):
    habit = tracker.add_habit(Habit(title="Stretch"))
    tracker.delete_habit(habit.id)
    tracker.delete_habit("missing")
    assert tracker.list_habits() == []


def test_state_survives_restart(tmp_path):
    first = create_tracker(tmp_path)
    goal = first.add_goal(Goal(title="Persist me"))
    first.add_habit(Habit(title="Daily"))
    first.log_progress(DailyLog(goal_id=goal.id, value=1))

    second = ProgressTracker(data_dir=tmp_path)
    assert [g.title for g in second.list_goals()] == ["Persist me"]
    assert second.list_goals()[0].current_value == 1
    assert len(second.list_habits()) == 1
    assert len(second.list_logs()) == 1


def test_corrupt_file_does_not_stop_startup(tmp_path):
    (tmp_path / "goals.json").write_text("{oops")
    tracker = ProgressTracker(data_dir=tmp_path)
    assert tracker.list_goals() == []
    assert (tmp_path / "goals.json").read_text() == "{oops"


def test_export_and_clear(tracker, tmp_path):
    goal = tracker.add_goal(Goal(title="Export me"))
    tracker.add_habit(Habit(title="Habit"))
    tracker.log_progress(DailyLog(goal_id=goal.id, value=2))

    exported = tracker.export_data()
    assert exported["goals"][0]["title"] == "Export me"
    assert exported["goals"][0]["currentValue"] == 2
    assert len(exported["habits"]) == 1
    assert exported["dailyLogs"][0]["goalId"] == goal.id
    assert exported["exportedAt"] > 0

    path = tracker.write_export(tmp_path / "export.json")
    assert json.loads(path.read_text())["goals"][0]["id"] == goal.id

    tracker.clear_all_data()
    assert tracker.list_goals() == tracker.list_habits() == tracker.list_logs() == []
    fresh = ProgressTracker(storage=tracker.storage)
    assert fresh.list_goals() == []


def test_reload_picks_up_external_changes(tracker, storage):
    storage.save("habits", [Habit(id="h1", title="From disk")])
    tracker.reload()
    assert [h.id for h in tracker.list_habits()] == ["h1"]


def test_listed_records_are_read_only(tracker, storage):
    goal = tracker.add_goal(Goal(id="g", title="Read"))
    tracker.add_habit(Habit(id="h", title="Walk"))

    with pytest.raises(ValidationError):
        tracker.list_goals()[0].current_value = 77
    with pytest.raises(ValidationError):
        tracker.list_habits()[0].streak = 9

    assert tracker.get_goal("g").current_value == 0
    assert storage.load("goals")[0].current_value == 0
    updated = tracker.update_goal(goal.model_copy(update={"current_value": 5}))
    assert updated.current_value == 5
