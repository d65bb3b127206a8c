"""Domain entity representing a vendor's public profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class VendorType(str, Enum):
    """Service categories offered by vendors."""

    HOTEL = "hotel"
    PHOTOGRAPHER = "photographer"
    VIDEOGRAPHER = "videographer"
    CATERING = "catering"
    MAKEUP = "makeup"
    HAIRDRESSER = "hairdresser"
    DECORATION = "decoration"
    MEHANDI = "mehandi"
    DJ = "dj"
    LIGHTING = "lighting"


@dataclass
class VendorProfile:
    """Business information a vendor exposes to clients."""

    id: int | None
    user_id: int
    business_name: str
    vendor_type: VendorType
    description: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    address: str | None = None
    website: str | None = None
    services: list[str] = field(default_factory=list)
    pricing: dict[str, Any] = field(default_factory=dict)
    rating: float = 0.0
    featured: bool = False
    verified: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
