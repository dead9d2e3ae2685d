"""
Domain entities for the task tracker.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """
    ISO-8601 with millisecond precision and a trailing Z, e.g.
    `2024-03-20T00:00:00.000Z`. MongoDB dates carry milliseconds, so this is
    exactly what a stored value reads back as.
    """
    text = ensure_utc(value).isoformat(timespec="milliseconds")
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def parse_timestamp(value: str) -> datetime:
    return ensure_utc(datetime.fromisoformat(value.replace("Z", "+00:00")))


@dataclass
class Task:
    """Task entity. `id` is assigned once at creation and never changes."""

    id: str
    title: str
    description: str
    due_date: datetime

    def __post_init__(self):
        self.due_date = ensure_utc(self.due_date)

    def to_document(self) -> Dict[str, Any]:
        """Convert to a MongoDB document (`_id` is the primary key)."""
        return {
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date,
        }

    @classmethod
    def from_document(cls, data: Dict[str, Any]) -> "Task":
        """Build a task from a MongoDB document."""
        due_date = data["dueDate"]
        if isinstance(due_date, str):
            due_date = parse_timestamp(due_date)
        return cls(
            id=str(data["_id"]),
            title=data["title"],
            description=data.get("description", ""),
            due_date=due_date,
        )

    def to_json(self) -> Dict[str, Any]:
        """Wire representation: `{_id, title, description, dueDate}`."""
        return {
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": format_timestamp(self.due_date),
        }

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Task":
        return cls.from_document(data)
