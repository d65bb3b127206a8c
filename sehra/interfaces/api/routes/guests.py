"""Endpoints for the guest list."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from sehra.application.use_cases.guests import (
    create_guest,
    delete_guest,
    list_guests,
    update_guest,
)
from sehra.domain.entities import User
from sehra.infrastructure.database import get_db
from sehra.interfaces.api.dependencies import get_current_user
from sehra.interfaces.api.routes_helpers import use_case_error_to_http
from sehra.interfaces.api.schemas import GuestCreate, GuestRead, GuestUpdate

router = APIRouter(prefix="/guests", tags=["guests"])


@router.get("", response_model=list[GuestRead])
def read_guests(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[GuestRead]:
    guests = list_guests(db, user_id=current_user.id)
    return [GuestRead.model_validate(guest) for guest in guests]


@router.post("", response_model=GuestRead, status_code=status.HTTP_201_CREATED)
def add_guest(
    payload: GuestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> GuestRead:
    """Add a guest to the caller's list."""

    try:
        guest = create_guest(db, user_id=current_user.id, data=payload.model_dump())
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return GuestRead.model_validate(guest)


@router.patch("/{guest_id}", response_model=GuestRead)
def edit_guest(
    guest_id: int,
    payload: GuestUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> GuestRead:
    try:
        guest = update_guest(
            db,
            guest_id=guest_id,
            actor=current_user,
            changes=payload.model_dump(exclude_unset=True),
        )
    except (ValueError, PermissionError) as exc:
        raise use_case_error_to_http(exc) from exc
    return GuestRead.model_validate(guest)


@router.delete("/{guest_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_guest(
    guest_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Response:
    try:
        delete_guest(db, guest_id=guest_id, actor=current_user)
    except (ValueError, PermissionError) as exc:
        raise use_case_error_to_http(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
