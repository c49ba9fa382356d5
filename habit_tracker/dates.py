"""
Calendar helpers built around the canonical day key ('YYYY-MM-DD').

Everything here is pure: the only place "now" leaks in is the optional
``now`` argument, which defaults to the local clock.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List, Optional, Union

DayLike = Union[date, datetime, str]


def _to_date(value: DayLike) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            # aware timestamps are truncated in local time
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return _to_date(datetime.fromisoformat(text))


def canonical_day(value: DayLike) -> str:
    """
    Truncate a timestamp (datetime, date or ISO string) to its local day key.
    """
    return _to_date(value).isoformat()


def today_key(now: Optional[DayLike] = None) -> str:
    return canonical_day(now if now is not None else datetime.now())


def is_same_day_as_today(day: DayLike, now: Optional[DayLike] = None) -> bool:
    return canonical_day(day) == today_key(now)


def add_days(day: DayLike, n: int) -> str:
    return (_to_date(day) + timedelta(days=n)).isoformat()


def sub_days(day: DayLike, n: int) -> str:
    return (_to_date(day) - timedelta(days=n)).isoformat()


def days_between_inclusive(start: DayLike, end: DayLike) -> int:
    """
    Number of calendar days from start to end, counting both ends.

    Same day -> 1. If end is before start the result is <= 0.
    """
    return (_to_date(end) - _to_date(start)).days + 1


def daterange(start: DayLike, end: DayLike) -> List[str]:
    """
    Inclusive range of day keys.
    """
    days = []
    cur = _to_date(start)
    last = _to_date(end)
    while cur <= last:
        days.append(cur.isoformat())
        cur += timedelta(days=1)
    return days


def week_days(day: DayLike) -> List[str]:
    """
    Monday..Sunday of the week containing ``day``.
    """
    d = _to_date(day)
    monday = d - timedelta(days=d.weekday())
    return daterange(monday, monday + timedelta(days=6))
