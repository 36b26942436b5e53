import pytest
from pydantic import ValidationError

from progress_tracker.schemas.goal import DailyLog, Goal, GoalCategory, Milestone
from progress_tracker.schemas.habit import Habit, HabitFrequency


def test_goal_defaults():
    goal = Goal(title="Learn Spanish")
    assert goal.id
    assert goal.description == ""
    assert goal.category is GoalCategory.PERSONAL
    assert goal.target_value == 100
    assert goal.current_value == 0
    assert goal.unit == "%"
    assert goal.deadline is None
    assert goal.is_completed is False
    assert goal.milestones == []
    assert goal.created_at > 0


def test_ids_are_unique():
    assert Goal(title="a").id != Goal(title="a").id


def test_record_uses_camel_case_keys_and_enum_names():
    goal = Goal(title="Run", category=GoalCategory.FITNESS, target_value=50)
    record = goal.to_record()
    assert record["targetValue"] == 50
    assert record["currentValue"] == 0
    assert record["isCompleted"] is False
    assert record["category"] == "FITNESS"
    assert "target_value" not in record

    habit = Habit(title="Stretch", frequency=HabitFrequency.WEEKENDS)
    record = habit.to_record()
    assert record["frequency"] == "WEEKENDS"
    assert record["completedDates"] == []
    assert record["longestStreak"] == 0


def test_reading_records_ignores_unknown_keys():
    goal = Goal.model_validate(
        {"id": "g1", "title": "Save", "targetValue": 10, "color": "green", "archived": True}
    )
    assert goal.id == "g1"
    assert goal.target_value == 10
    assert not hasattr(goal, "color")


def test_missing_keys_take_defaults():
    habit = Habit.model_validate({"id": "h1", "title": "Read"})
    assert habit.frequency is HabitFrequency.DAILY
    assert habit.target_days == 30
    assert habit.streak == 0


def test_invalid_input_is_rejected_at_construction():
    with pytest.raises(ValidationError):
        Goal(target_value=10)  # no title
    with pytest.raises(ValidationError):
        Goal(title="x", target_value="lots")
    with pytest.raises(ValidationError):
        Goal(title="x", category="SPORTS")


def test_daily_log_is_immutable():
    log = DailyLog(goal_id="g1", value=5)
    with pytest.raises(ValidationError):
        log.value = 10
    assert log.notes == ""


def test_milestone_shape():
    milestone = Milestone(title="Halfway", target_value=50)
    assert milestone.to_record()["completedAt"] is None
    goal = Goal(title="x", milestones=[milestone])
    assert goal.to_record()["milestones"][0]["targetValue"] == 50


def test_display_names():
    assert GoalCategory.CREATIVE.display_name() == "Creative"
    assert HabitFrequency.WEEKDAYS.display_name() == "Weekdays"
    assert [c.display_name() for c in GoalCategory] == [
        "Personal", "Health", "Career", "Learning", "Finance", "Fitness", "Creative",
    ]
