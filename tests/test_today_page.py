from streamlit.testing.v1 import AppTest

from habit_tracker.registry import add_habit
from habit_tracker.state import load_state
from habit_tracker.storage import SqliteStorage


def test_delete_waits_for_confirmation(tmp_path, monkeypatch):
    db_path = str(tmp_path / "habits.db")
    monkeypatch.setenv("HABIT_TRACKER_DB_PATH", db_path)
    storage = SqliteStorage(db_path)
    habit = add_habit(load_state(storage), "Read")

    at = AppTest.from_file("../Habit_Tracker.py", default_timeout=10).run()
    at.button(key=f"delete_{habit.id}").click().run()
    assert at.button(key=f"purge_{habit.id}").disabled
    assert [h.id for h in load_state(storage).habits] == [habit.id]

    at.checkbox(key=f"confirm_{habit.id}").check().run()
    at.button(key=f"purge_{habit.id}").click().run()
    assert load_state(storage).habits == []
