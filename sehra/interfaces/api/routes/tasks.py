"""Endpoints for the wedding checklist."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from sehra.application.use_cases.tasks import (
    create_task,
    delete_task,
    list_tasks,
    update_task,
)
from sehra.domain.entities import User
from sehra.infrastructure.database import get_db
from sehra.interfaces.api.dependencies import get_current_user
from sehra.interfaces.api.routes_helpers import use_case_error_to_http
from sehra.interfaces.api.schemas import TaskCreate, TaskRead, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskRead])
def read_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[TaskRead]:
    return [TaskRead.model_validate(task) for task in list_tasks(db, user_id=current_user.id)]


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def add_task(
    payload: TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    try:
        task = create_task(db, user_id=current_user.id, data=payload.model_dump())
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return TaskRead.model_validate(task)


@router.patch("/{task_id}", response_model=TaskRead)
def edit_task(
    task_id: int,
    payload: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TaskRead:
    try:
        task = update_task(
            db,
            task_id=task_id,
            actor=current_user,
            changes=payload.model_dump(exclude_unset=True),
        )
    except (ValueError, PermissionError) as exc:
        raise use_case_error_to_http(exc) from exc
    return TaskRead.model_validate(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    try:
        delete_task(db, task_id=task_id, actor=current_user)
    except (ValueError, PermissionError) as exc:
        raise use_case_error_to_http(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
