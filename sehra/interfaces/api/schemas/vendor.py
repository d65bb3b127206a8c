"""Vendor profile schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from sehra.domain.entities import VendorType


class VendorProfileCreate(BaseModel):
    business_name: str = Field(..., min_length=1, max_length=150)
    vendor_type: VendorType
    description: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    address: str | None = None
    website: str | None = None
    services: list[str] = Field(default_factory=list)
    pricing: dict[str, Any] = Field(default_factory=dict)


class VendorProfileUpdate(BaseModel):
    """Profile changes; ``rating``, ``featured`` and ``verified`` apply to admins only."""

    model_config = ConfigDict(extra="forbid")

    business_name: str | None = Field(default=None, min_length=1, max_length=150)
    vendor_type: VendorType | None = None
    description: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    address: str | None = None
    website: str | None = None
    services: list[str] | None = None
    pricing: dict[str, Any] | None = None
    rating: float | None = Field(default=None, ge=0, le=5)
    featured: bool | None = None
    verified: bool | None = None


class VendorProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    business_name: str
    vendor_type: VendorType
    description: str | None
    contact_email: str | None
    contact_phone: str | None
    address: str | None
    website: str | None
    services: list[str]
    pricing: dict[str, Any]
    rating: float
    featured: bool
    verified: bool
    created_at: datetime | None
    updated_at: datetime | None
