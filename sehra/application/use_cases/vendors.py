"""Use cases for vendor profiles."""

from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from sehra.domain.entities import User, UserRole, VendorProfile, VendorType
from sehra.infrastructure.repositories import VendorProfileRepository
from sehra.utils import now_utc_naive

_PROFILE_FIELDS = {
    "business_name",
    "vendor_type",
    "description",
    "contact_email",
    "contact_phone",
    "address",
    "website",
    "services",
    "pricing",
}
# Curation flags only administrators may set.
_ADMIN_FIELDS = {"rating", "featured", "verified"}


def _coerce_vendor_type(value: Any) -> VendorType:
    if isinstance(value, VendorType):
        return value
    try:
        return VendorType(str(value).strip().lower())
    except ValueError as exc:
        raise ValueError(f"Invalid vendor type: {value}") from exc


def _validate(profile: VendorProfile) -> None:
    if not profile.business_name or not profile.business_name.strip():
        raise ValueError("Business name is required")
    if not 0 <= profile.rating <= 5:
        raise ValueError("Rating must be between 0 and 5")


def list_vendors(
    session: Session, *, vendor_type: VendorType | str | None = None
) -> list[VendorProfile]:
    """Return vendor profiles, featured and verified ones first."""

    type_filter = _coerce_vendor_type(vendor_type) if vendor_type else None
    return list(VendorProfileRepository(session).list(vendor_type=type_filter))


def get_vendor(session: Session, vendor_id: int) -> VendorProfile:
    profile = VendorProfileRepository(session).get(vendor_id)
    if profile is None:
        raise ValueError("Vendor not found")
    return profile


def get_own_vendor_profile(session: Session, *, user_id: int) -> VendorProfile:
    profile = VendorProfileRepository(session).get_by_user(user_id)
    if profile is None:
        raise ValueError("Vendor profile not found")
    return profile


def create_vendor_profile(
    session: Session, *, actor: User, data: Mapping[str, Any]
) -> VendorProfile:
    """Create the single profile a vendor account may own."""

    if not actor.has_role(UserRole.VENDOR):
        raise PermissionError("Only vendors can create a vendor profile")

    repository = VendorProfileRepository(session)
    if repository.get_by_user(actor.id) is not None:
        raise ValueError("Vendor profile already exists")

    values = {key: value for key, value in data.items() if key in _PROFILE_FIELDS}
    if "vendor_type" not in values:
        raise ValueError("Vendor type is required")
    values["vendor_type"] = _coerce_vendor_type(values["vendor_type"])
    values["services"] = list(values.get("services") or [])
    values["pricing"] = dict(values.get("pricing") or {})

    profile = VendorProfile(
        id=None,
        user_id=actor.id,
        created_at=now_utc_naive(),
        **values,
    )
    _validate(profile)
    return repository.create(profile)


def update_vendor_profile(
    session: Session, *, vendor_id: int, actor: User, changes: Mapping[str, Any]
) -> VendorProfile:
    """Update a profile; vendors edit their own, admins edit any."""

    current = get_vendor(session, vendor_id)
    is_admin = actor.is_admin()
    if not is_admin and current.user_id != actor.id:
        raise PermissionError("Not authorized to modify this vendor profile")

    allowed = _PROFILE_FIELDS | _ADMIN_FIELDS if is_admin else _PROFILE_FIELDS
    values = {key: value for key, value in changes.items() if key in allowed}
    if "vendor_type" in values:
        values["vendor_type"] = _coerce_vendor_type(values["vendor_type"])

    updated = replace(current, **values, updated_at=now_utc_naive())
    _validate(updated)
    return VendorProfileRepository(session).update(updated)


__all__ = [
    "list_vendors",
    "get_vendor",
    "get_own_vendor_profile",
    "create_vendor_profile",
    "update_vendor_profile",
]
