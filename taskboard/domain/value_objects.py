"""
Domain value objects.
"""

import math
from dataclasses import dataclass, field
from typing import List

from bson import ObjectId

from taskboard.core.errors import ValidationError
from taskboard.domain.entities import Task


@dataclass(frozen=True)
class TaskId:
    """
    Task Identifier.

    Backed by a BSON ObjectId: a 4-byte creation timestamp followed by a
    per-process counter, so ids sort close to creation order.
    """

    value: str

    @classmethod
    def generate(cls) -> "TaskId":
        return cls(str(ObjectId()))

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class PageRequest:
    """1-indexed page of `limit` items."""

    page: int = 1
    limit: int = 10

    def __post_init__(self):
        errors = []
        if self.page < 1:
            errors.append("Page must be a positive integer")
        if self.limit < 1:
            errors.append("Limit must be a positive integer")
        if errors:
            raise ValidationError(errors)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total: int) -> int:
        return math.ceil(total / self.limit)


@dataclass
class TaskPage:
    """One page of tasks plus the count of all tasks."""

    items: List[Task] = field(default_factory=list)
    total: int = 0


@dataclass
class TaskListing:
    """A page of tasks shaped for the list endpoint."""

    tasks: List[Task]
    total: int
    current_page: int
    total_pages: int
