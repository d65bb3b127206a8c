"""Use cases for budget tracking."""

from collections.abc import Mapping
from dataclasses import fields, replace
from typing import Any

from sqlalchemy.orm import Session

from sehra.domain.entities import BudgetItem, User
from sehra.infrastructure.repositories import BudgetItemRepository, VendorProfileRepository
from sehra.utils import now_utc_naive

from .access import ensure_can_manage

_EDITABLE_FIELDS = {
    field.name for field in fields(BudgetItem)
} - {"id", "user_id", "created_at", "updated_at"}


def _validate(session: Session, item: BudgetItem) -> None:
    if not item.title or not item.title.strip():
        raise ValueError("Budget item title is required")
    if not item.category or not item.category.strip():
        raise ValueError("Budget item category is required")
    for label, amount in (
        ("estimated_cost", item.estimated_cost),
        ("actual_cost", item.actual_cost),
        ("paid_amount", item.paid_amount),
    ):
        if amount is not None and amount < 0:
            raise ValueError(f"{label} cannot be negative")
    if item.vendor_id is not None and VendorProfileRepository(session).get(item.vendor_id) is None:
        raise ValueError("Vendor not found")


def list_budget_items(session: Session, *, user_id: int) -> list[BudgetItem]:
    return list(BudgetItemRepository(session).list_for_user(user_id))


def get_budget_item(session: Session, item_id: int) -> BudgetItem:
    item = BudgetItemRepository(session).get(item_id)
    if item is None:
        raise ValueError("Budget item not found")
    return item


def create_budget_item(
    session: Session, *, user_id: int, data: Mapping[str, Any]
) -> BudgetItem:
    values = {key: value for key, value in data.items() if key in _EDITABLE_FIELDS}
    item = BudgetItem(id=None, user_id=user_id, created_at=now_utc_naive(), **values)
    _validate(session, item)
    return BudgetItemRepository(session).create(item)


def update_budget_item(
    session: Session, *, item_id: int, actor: User, changes: Mapping[str, Any]
) -> BudgetItem:
    """Apply ``changes`` to a budget line the ``actor`` is allowed to manage."""

    current = get_budget_item(session, item_id)
    ensure_can_manage(actor, current.user_id, resource="budget item")

    values = {key: value for key, value in changes.items() if key in _EDITABLE_FIELDS}
    updated = replace(current, **values, updated_at=now_utc_naive())
    _validate(session, updated)
    return BudgetItemRepository(session).update(updated)


def delete_budget_item(session: Session, *, item_id: int, actor: User) -> None:
    current = get_budget_item(session, item_id)
    ensure_can_manage(actor, current.user_id, resource="budget item")
    BudgetItemRepository(session).delete(item_id)


__all__ = [
    "list_budget_items",
    "get_budget_item",
    "create_budget_item",
    "update_budget_item",
    "delete_budget_item",
]
