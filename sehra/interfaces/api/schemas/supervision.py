"""Schemas for supervisor-assigned vendors."""

from pydantic import BaseModel, EmailStr, Field

from .vendor import VendorProfileRead


class VendorAssignmentRequest(BaseModel):
    client_id: int
    vendor_ids: list[int] = Field(default_factory=list)


class AssignedVendorRead(BaseModel):
    id: int
    name: str
    email: EmailStr
    profile: VendorProfileRead | None = None
