"""Persistence helpers for planning tasks."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from sehra.domain.entities import Task
from sehra.infrastructure.models import TaskModel


class TaskRepository:
    """Provide CRUD operations for :class:`Task` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: int) -> Sequence[Task]:
        query = (
            self.session.query(TaskModel)
            .filter(TaskModel.user_id == user_id)
            .order_by(TaskModel.due_date.is_(None), TaskModel.due_date, TaskModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, task_id: int) -> Task | None:
        model = self.session.get(TaskModel, task_id)
        return self._to_entity(model) if model else None

    def create(self, task: Task) -> Task:
        model = TaskModel(user_id=task.user_id)
        self._apply_entity_to_model(model, task)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, task: Task) -> Task:
        model = self.session.get(TaskModel, task.id)
        if model is None:
            msg = f"Task with id {task.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, task)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, task_id: int) -> None:
        model = self.session.get(TaskModel, task_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: TaskModel, task: Task) -> None:
        model.title = task.title
        model.description = task.description
        model.due_date = task.due_date
        model.completed = task.completed
        model.status = task.status
        model.category = task.category
        model.priority = task.priority

    @staticmethod
    def _to_entity(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            description=model.description,
            due_date=model.due_date,
            completed=model.completed,
            status=model.status,
            category=model.category,
            priority=model.priority,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["TaskRepository"]
