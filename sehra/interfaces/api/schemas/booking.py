"""Vendor booking schemas."""

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

BookingStatus = Literal["pending", "confirmed", "canceled"]


class BookingCreate(BaseModel):
    vendor_id: int
    event_date: date
    start_time: str | None = None
    end_time: str | None = None
    package: str | None = None
    amount: float | None = Field(default=None, ge=0)
    notes: str | None = None


class BookingUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    event_date: date | None = None
    start_time: str | None = None
    end_time: str | None = None
    status: BookingStatus | None = None
    package: str | None = None
    amount: float | None = Field(default=None, ge=0)
    notes: str | None = None


class BookingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    vendor_id: int
    event_date: date
    start_time: str | None
    end_time: str | None
    status: str
    package: str | None
    amount: float | None
    notes: str | None
    created_at: datetime | None
    updated_at: datetime | None
