"""Persistence helpers for guests."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from sehra.domain.entities import Guest
from sehra.infrastructure.models import GuestModel


class GuestRepository:
    """Provide CRUD operations for :class:`Guest` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: int) -> Sequence[Guest]:
        query = (
            self.session.query(GuestModel)
            .filter(GuestModel.user_id == user_id)
            .order_by(GuestModel.name, GuestModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, guest_id: int) -> Guest | None:
        model = self.session.get(GuestModel, guest_id)
        return self._to_entity(model) if model else None

    def create(self, guest: Guest) -> Guest:
        model = GuestModel(user_id=guest.user_id)
        self._apply_entity_to_model(model, guest)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, guest: Guest) -> Guest:
        model = self.session.get(GuestModel, guest.id)
        if model is None:
            msg = f"Guest with id {guest.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, guest)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, guest_id: int) -> None:
        model = self.session.get(GuestModel, guest_id)
        if model is None:
            return
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: GuestModel, guest: Guest) -> None:
        model.name = guest.name
        model.email = guest.email
        model.phone = guest.phone
        model.address = guest.address
        model.rsvp_status = guest.rsvp_status
        model.plus_one = guest.plus_one
        model.plus_one_name = guest.plus_one_name
        model.group = guest.group
        model.dietary_restrictions = guest.dietary_restrictions
        model.notes = guest.notes

    @staticmethod
    def _to_entity(model: GuestModel) -> Guest:
        return Guest(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            address=model.address,
            rsvp_status=model.rsvp_status,
            plus_one=model.plus_one,
            plus_one_name=model.plus_one_name,
            group=model.group,
            dietary_restrictions=model.dietary_restrictions,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["GuestRepository"]
