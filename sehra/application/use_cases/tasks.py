"""Use cases for the wedding checklist."""

from collections.abc import Mapping
from dataclasses import fields, replace
from typing import Any

from sqlalchemy.orm import Session

from sehra.domain.entities import TASK_PRIORITIES, TASK_STATUSES, Task, User
from sehra.infrastructure.repositories import TaskRepository
from sehra.utils import now_utc_naive

from .access import ensure_can_manage

_EDITABLE_FIELDS = {
    field.name for field in fields(Task)
} - {"id", "user_id", "created_at", "updated_at"}


def _validate(task: Task) -> None:
    if not task.title or not task.title.strip():
        raise ValueError("Task title is required")
    if task.status not in TASK_STATUSES:
        raise ValueError(f"Invalid task status: {task.status}")
    if task.priority not in TASK_PRIORITIES:
        raise ValueError(f"Invalid task priority: {task.priority}")


def _sync_completion(task: Task, changes: Mapping[str, Any]) -> Task:
    """Keep ``completed`` and ``status`` in agreement after an edit."""

    if "status" in changes and "completed" not in changes:
        return replace(task, completed=task.status == "completed")
    if "completed" in changes and "status" not in changes:
        if task.completed:
            return replace(task, status="completed")
        if task.status == "completed":
            return replace(task, status="pending")
    return task


def list_tasks(session: Session, *, user_id: int) -> list[Task]:
    """Return the checklist of ``user_id`` ordered by due date."""

    return list(TaskRepository(session).list_for_user(user_id))


def get_task(session: Session, task_id: int) -> Task:
    task = TaskRepository(session).get(task_id)
    if task is None:
        raise ValueError("Task not found")
    return task


def create_task(session: Session, *, user_id: int, data: Mapping[str, Any]) -> Task:
    """Create a task for ``user_id`` from the submitted ``data``."""

    values = {key: value for key, value in data.items() if key in _EDITABLE_FIELDS}
    task = Task(id=None, user_id=user_id, created_at=now_utc_naive(), **values)
    task = _sync_completion(task, values)
    _validate(task)
    return TaskRepository(session).create(task)


def update_task(
    session: Session, *, task_id: int, actor: User, changes: Mapping[str, Any]
) -> Task:
    """Apply ``changes`` to a task the ``actor`` is allowed to manage."""

    repository = TaskRepository(session)
    current = get_task(session, task_id)
    ensure_can_manage(actor, current.user_id, resource="task")

    values = {key: value for key, value in changes.items() if key in _EDITABLE_FIELDS}
    updated = replace(current, **values, updated_at=now_utc_naive())
    updated = _sync_completion(updated, values)
    _validate(updated)
    return repository.update(updated)


def delete_task(session: Session, *, task_id: int, actor: User) -> None:
    current = get_task(session, task_id)
    ensure_can_manage(actor, current.user_id, resource="task")
    TaskRepository(session).delete(task_id)


__all__ = ["list_tasks", "get_task", "create_task", "update_task", "delete_task"]
