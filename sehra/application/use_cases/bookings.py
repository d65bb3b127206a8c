"""Use cases for vendor bookings."""

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from sehra.domain.entities import BOOKING_STATUSES, User, UserRole, VendorBooking
from sehra.infrastructure.email import send_booking_confirmation_email
from sehra.infrastructure.realtime import dispatch_realtime_event
from sehra.infrastructure.repositories import (
    VendorBookingRepository,
    VendorProfileRepository,
)
from sehra.utils import now_utc_naive

logger = logging.getLogger(__name__)

_BOOKING_FIELDS = {
    "event_date",
    "start_time",
    "end_time",
    "status",
    "package",
    "amount",
    "notes",
}


def _validate(booking: VendorBooking) -> None:
    if booking.status not in BOOKING_STATUSES:
        raise ValueError(f"Invalid booking status: {booking.status}")
    if booking.amount is not None and booking.amount < 0:
        raise ValueError("Amount cannot be negative")


def serialize_booking(booking: VendorBooking) -> dict[str, Any]:
    """Return the realtime payload describing ``booking``."""

    return {
        "id": booking.id,
        "user_id": booking.user_id,
        "vendor_id": booking.vendor_id,
        "event_date": booking.event_date.isoformat(),
        "start_time": booking.start_time,
        "end_time": booking.end_time,
        "status": booking.status,
        "package": booking.package,
        "amount": booking.amount,
    }


def list_bookings(session: Session, *, actor: User) -> list[VendorBooking]:
    """Vendors see bookings made with them; everyone else sees their own."""

    repository = VendorBookingRepository(session)
    if actor.has_role(UserRole.VENDOR):
        profile = VendorProfileRepository(session).get_by_user(actor.id)
        if profile is None:
            return []
        return list(repository.list_for_vendor(profile.id))
    return list(repository.list_for_user(actor.id))


def get_booking(session: Session, booking_id: int) -> VendorBooking:
    booking = VendorBookingRepository(session).get(booking_id)
    if booking is None:
        raise ValueError("Booking not found")
    return booking


def create_booking(
    session: Session, *, actor: User, vendor_id: int, data: Mapping[str, Any]
) -> VendorBooking:
    """Book ``vendor_id`` for ``actor`` and notify the vendor."""

    vendor = VendorProfileRepository(session).get(vendor_id)
    if vendor is None:
        raise ValueError("Vendor not found")

    values = {key: value for key, value in data.items() if key in _BOOKING_FIELDS}
    if values.get("event_date") is None:
        raise ValueError("Event date is required")
    values.setdefault("status", "pending")

    booking = VendorBooking(
        id=None,
        user_id=actor.id,
        vendor_id=vendor.id,
        created_at=now_utc_naive(),
        **values,
    )
    _validate(booking)
    saved = VendorBookingRepository(session).create(booking)

    dispatch_realtime_event(
        [vendor.user_id],
        event_type="booking_created",
        payload={**serialize_booking(saved), "client_name": actor.name},
    )
    if not send_booking_confirmation_email(
        actor.name,
        actor.email,
        business_name=vendor.business_name,
        vendor_type=vendor.vendor_type.value,
        event_date=saved.event_date,
    ):
        logger.info("Booking %s confirmation email not delivered", saved.id)
    return saved


def update_booking(
    session: Session, *, booking_id: int, actor: User, changes: Mapping[str, Any]
) -> VendorBooking:
    """Update a booking as its client, the booked vendor or an overseer."""

    current = get_booking(session, booking_id)
    allowed = current.user_id == actor.id or actor.has_role(
        UserRole.ADMIN, UserRole.SUPERVISOR
    )
    if not allowed and actor.has_role(UserRole.VENDOR):
        vendor = VendorProfileRepository(session).get(current.vendor_id)
        allowed = vendor is not None and vendor.user_id == actor.id
    if not allowed:
        raise PermissionError("Not authorized to modify this booking")

    values = {key: value for key, value in changes.items() if key in _BOOKING_FIELDS}
    if "event_date" in values and values["event_date"] is None:
        raise ValueError("Event date is required")
    updated = replace(current, **values, updated_at=now_utc_naive())
    _validate(updated)
    return VendorBookingRepository(session).update(updated)


__all__ = [
    "list_bookings",
    "get_booking",
    "create_booking",
    "update_booking",
    "serialize_booking",
]
