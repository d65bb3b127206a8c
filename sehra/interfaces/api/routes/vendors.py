"""Endpoints for vendor profiles."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from sehra.application.use_cases.vendors import (
    create_vendor_profile,
    get_own_vendor_profile,
    get_vendor,
    list_vendors,
    update_vendor_profile,
)
from sehra.domain.entities import User, UserRole, VendorType
from sehra.infrastructure.database import get_db
from sehra.interfaces.api.dependencies import require_roles
from sehra.interfaces.api.routes_helpers import use_case_error_to_http
from sehra.interfaces.api.schemas import (
    VendorProfileCreate,
    VendorProfileRead,
    VendorProfileUpdate,
)

router = APIRouter(prefix="/vendors", tags=["vendors"])


@router.get("", response_model=list[VendorProfileRead])
def read_vendors(
    vendor_type: VendorType | None = Query(None, alias="type"),
    db: Session = Depends(get_db),
) -> list[VendorProfileRead]:
    """Public vendor directory, optionally filtered by ``type``."""

    vendors = list_vendors(db, vendor_type=vendor_type)
    return [VendorProfileRead.model_validate(vendor) for vendor in vendors]


# Declared before "/{vendor_id}" so "me" is not parsed as an identifier.
@router.get("/me", response_model=VendorProfileRead)
def read_own_profile(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(UserRole.VENDOR)),
) -> VendorProfileRead:
    try:
        profile = get_own_vendor_profile(db, user_id=current_user.id)
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return VendorProfileRead.model_validate(profile)


@router.get("/{vendor_id}", response_model=VendorProfileRead)
def read_vendor(vendor_id: int, db: Session = Depends(get_db)) -> VendorProfileRead:
    try:
        profile = get_vendor(db, vendor_id)
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return VendorProfileRead.model_validate(profile)


@router.post("", response_model=VendorProfileRead, status_code=status.HTTP_201_CREATED)
def add_vendor_profile(
    payload: VendorProfileCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(UserRole.VENDOR)),
) -> VendorProfileRead:
    try:
        profile = create_vendor_profile(db, actor=current_user, data=payload.model_dump())
    except (ValueError, PermissionError) as exc:
        raise use_case_error_to_http(exc) from exc
    return VendorProfileRead.model_validate(profile)


@router.patch("/{vendor_id}", response_model=VendorProfileRead)
def edit_vendor_profile(
    vendor_id: int,
    payload: VendorProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(UserRole.VENDOR, UserRole.ADMIN)),
) -> VendorProfileRead:
    try:
        profile = update_vendor_profile(
            db,
            vendor_id=vendor_id,
            actor=current_user,
            changes=payload.model_dump(exclude_unset=True),
        )
    except (ValueError, PermissionError) as exc:
        raise use_case_error_to_http(exc) from exc
    return VendorProfileRead.model_validate(profile)
