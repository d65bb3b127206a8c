"""Guest list schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

RsvpStatus = Literal["pending", "confirmed", "declined"]


class GuestCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=30)
    address: str | None = None
    rsvp_status: RsvpStatus = "pending"
    plus_one: bool = False
    plus_one_name: str | None = None
    group: str | None = Field(default=None, max_length=50)
    dietary_restrictions: str | None = None
    notes: str | None = None


class GuestUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=30)
    address: str | None = None
    rsvp_status: RsvpStatus | None = None
    plus_one: bool | None = None
    plus_one_name: str | None = None
    group: str | None = Field(default=None, max_length=50)
    dietary_restrictions: str | None = None
    notes: str | None = None


class GuestRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    email: str | None
    phone: str | None
    address: str | None
    rsvp_status: str
    plus_one: bool
    plus_one_name: str | None
    group: str | None
    dietary_restrictions: str | None
    notes: str | None
    created_at: datetime | None
    updated_at: datetime | None
