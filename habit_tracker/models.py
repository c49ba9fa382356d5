"""
Habit and completion records, plus their JSON-friendly dict form.

The dict form uses the field names of the persisted slots
(``habitId``, ``createdAt``), the dataclasses use Python names.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

COLOR_OPTIONS = [
    "#3B82F6",
    "#EF4444",
    "#10B981",
    "#F59E0B",
    "#8B5CF6",
    "#EC4899",
    "#06B6D4",
    "#84CC16",
]
DEFAULT_COLOR = COLOR_OPTIONS[0]


def new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Habit:
    id: str
    name: str
    color: str
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Habit":
        created = data["createdAt"]
        if not isinstance(created, str):
            raise TypeError("createdAt must be an ISO string")
        if created.endswith("Z"):
            created = created[:-1] + "+00:00"
        name = str(data["name"]).strip()
        if not name:
            raise ValueError("habit name is empty")
        return cls(
            id=str(data["id"]),
            name=name,
            color=str(data.get("color", DEFAULT_COLOR)),
            created_at=datetime.fromisoformat(created),
        )


@dataclass
class CompletionRecord:
    id: str
    habit_id: str
    date: str  # YYYY-MM-DD
    completed: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "habitId": self.habit_id,
            "date": self.date,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CompletionRecord":
        day = str(data["date"])
        # reject anything that is not a zero-padded day key
        if datetime.strptime(day, "%Y-%m-%d").date().isoformat() != day:
            raise ValueError(f"not a canonical day key: {day!r}")
        completed = data["completed"]
        if not isinstance(completed, bool):
            raise TypeError("completed must be a boolean")
        return cls(
            id=str(data["id"]),
            habit_id=str(data["habitId"]),
            date=day,
            completed=completed,
        )
