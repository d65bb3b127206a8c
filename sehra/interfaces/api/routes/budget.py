"""Endpoints for budget tracking."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from sehra.application.use_cases.budget import (
    create_budget_item,
    delete_budget_item,
    list_budget_items,
    update_budget_item,
)
from sehra.domain.entities import BudgetItem, User
from sehra.infrastructure.database import get_db
from sehra.interfaces.api.dependencies import get_current_user
from sehra.interfaces.api.routes_helpers import use_case_error_to_http
from sehra.interfaces.api.schemas import BudgetItemCreate, BudgetItemRead, BudgetItemUpdate

router = APIRouter(prefix="/budget", tags=["budget"])


def _to_schema(item: BudgetItem) -> BudgetItemRead:
    return BudgetItemRead.model_validate(item)


@router.get("", response_model=list[BudgetItemRead])
def read_budget(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[BudgetItemRead]:
    return [_to_schema(item) for item in list_budget_items(db, user_id=current_user.id)]


@router.post("", response_model=BudgetItemRead, status_code=status.HTTP_201_CREATED)
def add_budget_item(
    payload: BudgetItemCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BudgetItemRead:
    try:
        item = create_budget_item(db, user_id=current_user.id, data=payload.model_dump())
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return _to_schema(item)


@router.patch("/{item_id}", response_model=BudgetItemRead)
def edit_budget_item(
    item_id: int,
    payload: BudgetItemUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BudgetItemRead:
    try:
        item = update_budget_item(
            db,
            item_id=item_id,
            actor=current_user,
            changes=payload.model_dump(exclude_unset=True),
        )
    except (ValueError, PermissionError) as exc:
        raise use_case_error_to_http(exc) from exc
    return _to_schema(item)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_budget_item(
    item_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    try:
        delete_budget_item(db, item_id=item_id, actor=current_user)
    except (ValueError, PermissionError) as exc:
        raise use_case_error_to_http(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
