"""Persistence helpers for vendor bookings."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from sehra.domain.entities import VendorBooking
from sehra.infrastructure.models import VendorBookingModel


class VendorBookingRepository:
    """Provide CRUD operations for :class:`VendorBooking` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(self, user_id: int) -> Sequence[VendorBooking]:
        query = (
            self.session.query(VendorBookingModel)
            .filter(VendorBookingModel.user_id == user_id)
            .order_by(VendorBookingModel.event_date, VendorBookingModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_vendor(self, vendor_id: int) -> Sequence[VendorBooking]:
        query = (
            self.session.query(VendorBookingModel)
            .filter(VendorBookingModel.vendor_id == vendor_id)
            .order_by(VendorBookingModel.event_date, VendorBookingModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, booking_id: int) -> VendorBooking | None:
        model = self.session.get(VendorBookingModel, booking_id)
        return self._to_entity(model) if model else None

    def create(self, booking: VendorBooking) -> VendorBooking:
        model = VendorBookingModel(user_id=booking.user_id, vendor_id=booking.vendor_id)
        self._apply_entity_to_model(model, booking)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, booking: VendorBooking) -> VendorBooking:
        model = self.session.get(VendorBookingModel, booking.id)
        if model is None:
            msg = f"Booking with id {booking.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, booking)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: VendorBookingModel, booking: VendorBooking) -> None:
        model.event_date = booking.event_date
        model.start_time = booking.start_time
        model.end_time = booking.end_time
        model.status = booking.status
        model.package = booking.package
        model.amount = booking.amount
        model.notes = booking.notes

    @staticmethod
    def _to_entity(model: VendorBookingModel) -> VendorBooking:
        return VendorBooking(
            id=model.id,
            user_id=model.user_id,
            vendor_id=model.vendor_id,
            event_date=model.event_date,
            start_time=model.start_time,
            end_time=model.end_time,
            status=model.status,
            package=model.package,
            amount=model.amount,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["VendorBookingRepository"]
