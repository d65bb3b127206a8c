"""Domain entity representing a wedding guest."""

from dataclasses import dataclass
from datetime import datetime

RSVP_STATUSES = ("pending", "confirmed", "declined")


@dataclass
class Guest:
    """Guest list entry owned by a client."""

    id: int | None
    user_id: int
    name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    rsvp_status: str = "pending"
    plus_one: bool = False
    plus_one_name: str | None = None
    group: str | None = None
    dietary_restrictions: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
