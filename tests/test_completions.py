from datetime import datetime

import pytest

from habit_tracker.completions import (
    completed_today_count,
    completions_for,
    is_completed,
    toggle_completion,
)
from habit_tracker.registry import add_habit
from habit_tracker.state import load_state

from conftest import NOW, TODAY


@pytest.fixture
def habit(state):
    return add_habit(state, "Read", now=NOW)


def test_first_toggle_marks_completed(state, habit):
    record = toggle_completion(state, habit.id, TODAY)
    assert record.completed is True
    assert record.date == TODAY
    assert is_completed(state, habit.id, TODAY)


def test_double_toggle_is_identity(state, habit):
    toggle_completion(state, habit.id, TODAY)
    toggle_completion(state, habit.id, TODAY)
    assert not is_completed(state, habit.id, TODAY)
    toggle_completion(state, habit.id, TODAY)
    assert is_completed(state, habit.id, TODAY)


def test_toggle_keeps_one_record_per_day(state, habit):
    first = toggle_completion(state, habit.id, datetime(2026, 3, 2, 8, 0))
    second = toggle_completion(state, habit.id, datetime(2026, 3, 2, 22, 0))
    assert first is second
    assert len(completions_for(state, habit.id)) == 1


def test_missing_record_reads_as_not_completed(state, habit):
    assert not is_completed(state, habit.id, TODAY)
    assert completions_for(state, habit.id) == []


def test_toggle_unknown_habit_is_noop(state, habit):
    assert toggle_completion(state, "missing", TODAY) is None
    assert state.completions == []


def test_toggle_defaults_to_today(state, habit):
    record = toggle_completion(state, habit.id)
    assert record.date == datetime.now().date().isoformat()


def test_toggle_persists(state, storage, habit):
    toggle_completion(state, habit.id, TODAY)
    reloaded = load_state(storage)
    assert [(c.habit_id, c.date, c.completed) for c in reloaded.completions] == [(habit.id, TODAY, True)]


def test_completed_today_count(state, habit):
    other = add_habit(state, "Walk", now=NOW)
    toggle_completion(state, habit.id, TODAY)
    toggle_completion(state, other.id, "2026-03-01")
    assert completed_today_count(state, NOW) == 1
