"""Persistence helpers for budget items."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from sehra.domain.entities import BudgetItem
from sehra.infrastructure.models import BudgetItemModel


class BudgetItemRepository:
    """Provide CRUD operations for :class:`BudgetItem` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: int) -> Sequence[BudgetItem]:
        query = (
            self.session.query(BudgetItemModel)
            .filter(BudgetItemModel.user_id == user_id)
            .order_by(BudgetItemModel.category, BudgetItemModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, item_id: int) -> BudgetItem | None:
        model = self.session.get(BudgetItemModel, item_id)
        return self._to_entity(model) if model else None

    def create(self, item: BudgetItem) -> BudgetItem:
        model = BudgetItemModel(user_id=item.user_id)
        self._apply_entity_to_model(model, item)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, item: BudgetItem) -> BudgetItem:
        model = self.session.get(BudgetItemModel, item.id)
        if model is None:
            msg = f"Budget item with id {item.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, item)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, item_id: int) -> None:
        model = self.session.get(BudgetItemModel, item_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: BudgetItemModel, item: BudgetItem) -> None:
        model.category = item.category
        model.title = item.title
        model.description = item.description
        model.estimated_cost = item.estimated_cost
        model.actual_cost = item.actual_cost
        model.paid_amount = item.paid_amount or 0.0
        model.vendor_id = item.vendor_id
        model.due_date = item.due_date
        model.is_paid = item.is_paid
        model.notes = item.notes

    @staticmethod
    def _to_entity(model: BudgetItemModel) -> BudgetItem:
        return BudgetItem(
            id=model.id,
            user_id=model.user_id,
            category=model.category,
            title=model.title,
            description=model.description,
            estimated_cost=model.estimated_cost,
            actual_cost=model.actual_cost,
            paid_amount=model.paid_amount or 0.0,
            vendor_id=model.vendor_id,
            due_date=model.due_date,
            is_paid=model.is_paid,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["BudgetItemRepository"]
