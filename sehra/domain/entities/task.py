"""Domain entity representing a wedding planning task."""

from dataclasses import dataclass
from datetime import date, datetime

TASK_STATUSES = ("pending", "in_progress", "completed")
TASK_PRIORITIES = ("low", "medium", "high")


@dataclass
class Task:
    """Checklist item owned by a client."""

    id: int | None
    user_id: int
    title: str
    description: str | None = None
    due_date: date | None = None
    completed: bool = False
    status: str = "pending"
    category: str = "general"
    priority: str = "medium"
    created_at: datetime | None = None
    updated_at: datetime | None = None
