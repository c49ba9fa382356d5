from __future__ import annotations

from datetime import datetime

import pytest

from habit_tracker.state import load_state
from habit_tracker.storage import SqliteStorage

NOW = datetime(2026, 3, 2, 9, 30)
TODAY = "2026-03-02"


@pytest.fixture
def storage(tmp_path):
    return SqliteStorage(str(tmp_path / "habits.db"))


@pytest.fixture
def state(storage):
    return load_state(storage)
