"""
Habit registry: create, look up and delete habit definitions.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from habit_tracker.models import DEFAULT_COLOR, Habit, new_id
from habit_tracker.state import TrackerState

logger = logging.getLogger(__name__)


def list_habits(state: TrackerState) -> List[Habit]:
    return list(state.habits)


def get_habit(state: TrackerState, habit_id: str) -> Optional[Habit]:
    for h in state.habits:
        if h.id == habit_id:
            return h
    return None


def add_habit(
    state: TrackerState,
    name: str,
    color: str = DEFAULT_COLOR,
    now: Optional[datetime] = None,
) -> Optional[Habit]:
    """
    Append a habit. A blank name is ignored and ``None`` is returned.
    """
    name = (name or "").strip()
    if not name:
        return None
    habit = Habit(
        id=new_id(),
        name=name,
        color=color,
        created_at=now if now is not None else datetime.now(),
    )
    state.habits.append(habit)
    state.persist_habits()
    logger.info("Added habit %s (%s)", habit.id, habit.name)
    return habit


def delete_habit(state: TrackerState, habit_id: str) -> None:
    """
    Remove the habit and every completion record pointing at it.
    """
    if get_habit(state, habit_id) is None:
        logger.debug("delete_habit: unknown id %s", habit_id)
    else:
        state.habits = [h for h in state.habits if h.id != habit_id]
        state.persist_habits()
        logger.info("Deleted habit %s", habit_id)
    remaining = [c for c in state.completions if c.habit_id != habit_id]
    if len(remaining) != len(state.completions):
        state.completions = remaining
        state.persist_completions()
