"""Use cases for the guest list."""

from collections.abc import Mapping
from dataclasses import fields, replace
from typing import Any

from sqlalchemy.orm import Session

from sehra.domain.entities import RSVP_STATUSES, Guest, User
from sehra.infrastructure.repositories import GuestRepository
from sehra.utils import now_utc_naive

from .access import ensure_can_manage

_EDITABLE_FIELDS = {
    field.name for field in fields(Guest)
} - {"id", "user_id", "created_at", "updated_at"}


def _validate(guest: Guest) -> None:
    if not guest.name or not guest.name.strip():
        raise ValueError("Guest name is required")
    if guest.rsvp_status not in RSVP_STATUSES:
        raise ValueError(f"Invalid RSVP status: {guest.rsvp_status}")
    if not guest.plus_one and guest.plus_one_name:
        raise ValueError("A plus-one name requires plus_one to be enabled")


def list_guests(session: Session, *, user_id: int) -> list[Guest]:
    return list(GuestRepository(session).list_for_user(user_id))


def get_guest(session: Session, guest_id: int) -> Guest:
    guest = GuestRepository(session).get(guest_id)
    if guest is None:
        raise ValueError("Guest not found")
    return guest


def create_guest(session: Session, *, user_id: int, data: Mapping[str, Any]) -> Guest:
    values = {key: value for key, value in data.items() if key in _EDITABLE_FIELDS}
    guest = Guest(id=None, user_id=user_id, created_at=now_utc_naive(), **values)
    _validate(guest)
    return GuestRepository(session).create(guest)


def update_guest(
    session: Session, *, guest_id: int, actor: User, changes: Mapping[str, Any]
) -> Guest:
    """Apply ``changes`` to a guest entry the ``actor`` is allowed to manage."""

    current = get_guest(session, guest_id)
    ensure_can_manage(actor, current.user_id, resource="guest")

    values = {key: value for key, value in changes.items() if key in _EDITABLE_FIELDS}
    if values.get("plus_one") is False and "plus_one_name" not in values:
        values["plus_one_name"] = None
    updated = replace(current, **values, updated_at=now_utc_naive())
    _validate(updated)
    return GuestRepository(session).update(updated)


def delete_guest(session: Session, *, guest_id: int, actor: User) -> None:
    current = get_guest(session, guest_id)
    ensure_can_manage(actor, current.user_id, resource="guest")
    GuestRepository(session).delete(guest_id)


__all__ = ["list_guests", "get_guest", "create_guest", "update_guest", "delete_guest"]
