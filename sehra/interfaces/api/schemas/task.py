"""Checklist task schemas."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TaskStatus = Literal["pending", "in_progress", "completed"]
TaskPriority = Literal["low", "medium", "high"]


class TaskCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    due_date: date | None = None
    completed: bool = False
    status: TaskStatus = "pending"
    category: str = Field(default="general", max_length=50)
    priority: TaskPriority = "medium"


class TaskUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    due_date: date | None = None
    completed: bool | None = None
    status: TaskStatus | None = None
    category: str | None = Field(default=None, max_length=50)
    priority: TaskPriority | None = None


class TaskRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str | None
    due_date: date | None
    completed: bool
    status: str
    category: str
    priority: str
    created_at: datetime | None
    updated_at: datetime | None
