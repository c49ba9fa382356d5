"""
Metrics and date logic: streaks, completion rates, and the frames the
pages chart from.

Nothing here is cached; every value is recomputed from the records passed in.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Dict, Optional, Sequence

import pandas as pd

from habit_tracker.dates import DayLike, days_between_inclusive, sub_days, today_key, week_days
from habit_tracker.models import CompletionRecord, Habit

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]  # 0..6


def completion_lookup(habit_id: str, completions: Sequence[CompletionRecord]) -> Dict[str, bool]:
    """
    'YYYY-MM-DD' -> completed, for one habit.
    """
    return {c.date: c.completed for c in completions if c.habit_id == habit_id}


def current_streak(
    habit: Habit,
    completions: Sequence[CompletionRecord],
    today: Optional[DayLike] = None,
) -> int:
    """
    Count consecutive completed days ending today.

    An unfinished today doesn't break the chain: the walk starts at
    yesterday instead. Any other missing day ends it.
    """
    lookup = completion_lookup(habit.id, completions)
    today = today_key(today)
    streak = 0
    cur = today
    while True:
        if lookup.get(cur, False):
            streak += 1
            cur = sub_days(cur, 1)
        elif streak == 0 and cur == today:
            cur = sub_days(cur, 1)
        else:
            break
    return streak


def longest_streak(habit: Habit, completions: Sequence[CompletionRecord]) -> int:
    days = sorted(date.fromisoformat(d) for d, done in completion_lookup(habit.id, completions).items() if done)
    longest = 0
    cur_streak = 0
    prev = None
    for d in days:
        if prev is not None and d - prev == timedelta(days=1):
            cur_streak += 1
        else:
            cur_streak = 1
        longest = max(longest, cur_streak)
        prev = d
    return longest


def total_completions(habit: Habit, completions: Sequence[CompletionRecord]) -> int:
    return sum(1 for c in completions if c.habit_id == habit.id and c.completed)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def completion_rate(
    habit: Habit,
    completions: Sequence[CompletionRecord],
    now: Optional[DayLike] = None,
) -> int:
    """
    Completed records over days since creation, as a whole percent.

    Counts every completed record of the habit, including ones dated
    before ``created_at``, so the result can go above 100.
    """
    days_elapsed = max(1, days_between_inclusive(habit.created_at, today_key(now)))
    done = total_completions(habit, completions)
    return _round_half_up(100 * done / days_elapsed)


@dataclass
class HabitStats:
    habit_id: str
    name: str
    color: str
    streak: int
    best_streak: int
    completion_rate: int
    total_completions: int


def habit_stats(
    habit: Habit,
    completions: Sequence[CompletionRecord],
    now: Optional[DayLike] = None,
) -> HabitStats:
    return HabitStats(
        habit_id=habit.id,
        name=habit.name,
        color=habit.color,
        streak=current_streak(habit, completions, now),
        best_streak=longest_streak(habit, completions),
        completion_rate=completion_rate(habit, completions, now),
        total_completions=total_completions(habit, completions),
    )


STATS_COLUMNS = [
    "habit_id",
    "name",
    "color",
    "streak",
    "best_streak",
    "completion_rate",
    "total_completions",
]


def stats_frame(
    habits: Sequence[Habit],
    completions: Sequence[CompletionRecord],
    now: Optional[DayLike] = None,
) -> pd.DataFrame:
    """
    One row per habit, in registry order.
    """
    rows = [asdict(habit_stats(h, completions, now)) for h in habits]
    return pd.DataFrame(rows, columns=STATS_COLUMNS)


def week_frame(
    habits: Sequence[Habit],
    completions: Sequence[CompletionRecord],
    day: DayLike,
) -> pd.DataFrame:
    """
    Build a dataframe for the weekly calendar containing ``day``.

    Columns:
      - habit_id, name
      - day ('YYYY-MM-DD')
      - dow (0..6, Monday first)
      - done (bool)
    """
    days = week_days(day)
    rows = []
    for h in habits:
        lookup = completion_lookup(h.id, completions)
        for dow, d in enumerate(days):
            rows.append(
                {
                    "habit_id": h.id,
                    "name": h.name,
                    "day": d,
                    "dow": dow,
                    "done": bool(lookup.get(d, False)),
                }
            )
    return pd.DataFrame(rows, columns=["habit_id", "name", "day", "dow", "done"])
