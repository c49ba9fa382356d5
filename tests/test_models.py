from datetime import datetime

from habit_tracker.models import COLOR_OPTIONS, CompletionRecord, Habit
from habit_tracker.state import COMPLETIONS_KEY, HABITS_KEY, TrackerState, load_state


def test_palette_has_eight_colors():
    assert len(COLOR_OPTIONS) == 8
    assert len(set(COLOR_OPTIONS)) == 8


def test_dict_form_uses_persisted_field_names():
    h = Habit(id="h1", name="Read", color="#EF4444", created_at=datetime(2026, 3, 1, 8, 0))
    assert h.to_dict() == {
        "id": "h1",
        "name": "Read",
        "color": "#EF4444",
        "createdAt": "2026-03-01T08:00:00",
    }
    c = CompletionRecord(id="c1", habit_id="h1", date="2026-03-01", completed=True)
    assert c.to_dict() == {"id": "c1", "habitId": "h1", "date": "2026-03-01", "completed": True}


def test_habit_accepts_utc_suffix():
    h = Habit.from_dict({"id": "h1", "name": "Read", "color": "#3B82F6", "createdAt": "2026-03-01T08:00:00.000Z"})
    assert h.created_at.utcoffset().total_seconds() == 0


def test_saved_sequences_reload_identically(storage):
    habits = [
        Habit(id="h1", name="Read", color="#3B82F6", created_at=datetime(2026, 2, 1, 7, 5, 3, 120000)),
        Habit(id="h2", name="Walk", color="#10B981", created_at=datetime(2026, 2, 3, 19, 0)),
    ]
    completions = [
        CompletionRecord(id="c2", habit_id="h2", date="2026-02-04", completed=True),
        CompletionRecord(id="c1", habit_id="h1", date="2026-02-02", completed=False),
    ]
    state = TrackerState(habits=habits, completions=completions, storage=storage)
    state.persist_habits()
    state.persist_completions()

    reloaded = load_state(storage)
    assert reloaded.habits == habits
    assert reloaded.completions == completions
    assert storage.load(HABITS_KEY)[0]["id"] == "h1"
    assert storage.load(COMPLETIONS_KEY)[0]["id"] == "c2"
