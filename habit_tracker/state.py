"""
The tracker's in-memory state: habits and the completion log.

One ``TrackerState`` owns both sequences and the storage handle it writes
them back to. Registry and log operations take the state explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from habit_tracker.models import CompletionRecord, Habit

logger = logging.getLogger(__name__)

HABITS_KEY = "habits"
COMPLETIONS_KEY = "completions"
THEME_KEY = "theme"
THEMES = ("light", "dark")


@dataclass
class TrackerState:
    habits: List[Habit] = field(default_factory=list)
    completions: List[CompletionRecord] = field(default_factory=list)
    storage: Optional[Any] = None
    # bumped on every mutation; handy as a memo key for derived values
    version: int = 0

    def persist_habits(self) -> None:
        self.version += 1
        if self.storage is not None:
            self.storage.save(HABITS_KEY, [h.to_dict() for h in self.habits])

    def persist_completions(self) -> None:
        self.version += 1
        if self.storage is not None:
            self.storage.save(COMPLETIONS_KEY, [c.to_dict() for c in self.completions])


def _load_slot(storage, key: str, factory) -> list:
    raw = storage.load(key, [])
    if not isinstance(raw, list):
        logger.warning("Slot %r is not a list, starting empty", key)
        return []
    try:
        return [factory(item) for item in raw]
    except (KeyError, TypeError, ValueError, AttributeError):
        logger.warning("Slot %r holds malformed records, starting empty", key)
        return []


def _dedupe_completions(completions: List[CompletionRecord]) -> List[CompletionRecord]:
    """
    Keep one record per (habit, day). The last stored record wins and takes
    the slot of the first one.
    """
    by_key: Dict[Tuple[str, str], CompletionRecord] = {}
    for c in completions:
        by_key[(c.habit_id, c.date)] = c
    if len(by_key) != len(completions):
        logger.warning("Dropped %d duplicate completion records", len(completions) - len(by_key))
    return list(by_key.values())


def load_state(storage) -> TrackerState:
    """
    Build a state from storage. Missing or corrupt slots come back empty.
    """
    habits = _load_slot(storage, HABITS_KEY, Habit.from_dict)
    completions = _dedupe_completions(_load_slot(storage, COMPLETIONS_KEY, CompletionRecord.from_dict))
    logger.debug("Loaded %d habits and %d completion records", len(habits), len(completions))
    return TrackerState(habits=habits, completions=completions, storage=storage)


def get_theme(storage) -> str:
    theme = storage.load(THEME_KEY, "light")
    return theme if theme in THEMES else "light"


def set_theme(storage, theme: str) -> None:
    if theme not in THEMES:
        theme = "light"
    storage.save(THEME_KEY, theme)
