"""Endpoints for vendor bookings."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from sehra.application.use_cases.bookings import create_booking, list_bookings, update_booking
from sehra.domain.entities import User
from sehra.infrastructure.database import get_db
from sehra.interfaces.api.dependencies import get_current_user
from sehra.interfaces.api.routes_helpers import use_case_error_to_http
from sehra.interfaces.api.schemas import BookingCreate, BookingRead, BookingUpdate

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("", response_model=list[BookingRead])
def read_bookings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[BookingRead]:
    """Vendors receive bookings made with them; other users their own."""

    return [BookingRead.model_validate(b) for b in list_bookings(db, actor=current_user)]


@router.post("", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
def add_booking(
    payload: BookingCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BookingRead:
    data = payload.model_dump(exclude={"vendor_id"})
    try:
        booking = create_booking(
            db, actor=current_user, vendor_id=payload.vendor_id, data=data
        )
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return BookingRead.model_validate(booking)


@router.patch("/{booking_id}", response_model=BookingRead)
def edit_booking(
    booking_id: int,
    payload: BookingUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> BookingRead:
    try:
        booking = update_booking(
            db,
            booking_id=booking_id,
            actor=current_user,
            changes=payload.model_dump(exclude_unset=True),
        )
    except (ValueError, PermissionError) as exc:
        raise use_case_error_to_http(exc) from exc
    return BookingRead.model_validate(booking)
