"""Domain entity representing a client's booking of a vendor."""

from dataclasses import dataclass
from datetime import date, datetime

BOOKING_STATUSES = ("pending", "confirmed", "canceled")


@dataclass
class VendorBooking:
    """Reservation of a vendor for a given event date."""

    id: int | None
    user_id: int
    vendor_id: int
    event_date: date
    start_time: str | None = None
    end_time: str | None = None
    status: str = "pending"
    package: str | None = None
    amount: float | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
