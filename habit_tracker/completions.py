"""
Completion log: one record per (habit, day), flipped by toggles.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from habit_tracker.dates import DayLike, canonical_day, today_key
from habit_tracker.models import CompletionRecord, new_id
from habit_tracker.registry import get_habit
from habit_tracker.state import TrackerState

logger = logging.getLogger(__name__)


def find_record(state: TrackerState, habit_id: str, day: DayLike) -> Optional[CompletionRecord]:
    key = canonical_day(day)
    for c in state.completions:
        if c.habit_id == habit_id and c.date == key:
            return c
    return None


def toggle_completion(
    state: TrackerState,
    habit_id: str,
    day: Optional[DayLike] = None,
) -> Optional[CompletionRecord]:
    """
    Flip the completion for (habit, day).

    The first toggle of a day creates a record with ``completed=True``;
    later toggles flip that record in place. Unknown habits are ignored.
    """
    if get_habit(state, habit_id) is None:
        logger.debug("toggle_completion: unknown habit %s", habit_id)
        return None
    key = today_key() if day is None else canonical_day(day)
    record = find_record(state, habit_id, key)
    if record is None:
        record = CompletionRecord(id=new_id(), habit_id=habit_id, date=key, completed=True)
        state.completions.append(record)
    else:
        record.completed = not record.completed
    state.persist_completions()
    return record


def is_completed(state: TrackerState, habit_id: str, day: DayLike) -> bool:
    record = find_record(state, habit_id, day)
    return bool(record and record.completed)


def completions_for(state: TrackerState, habit_id: str) -> List[CompletionRecord]:
    return [c for c in state.completions if c.habit_id == habit_id]


def completed_today_count(state: TrackerState, now: Optional[DayLike] = None) -> int:
    key = today_key(now)
    return sum(1 for h in state.habits if is_completed(state, h.id, key))
