"""Endpoints for supervisors curating vendors for their clients."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sehra.application.use_cases.supervision import (
    AssignedVendor,
    assign_vendors,
    list_client_vendors,
    list_my_assigned_vendors,
    list_supervisor_clients,
)
from sehra.domain.entities import CLIENT_ROLES, User, UserRole
from sehra.infrastructure.database import get_db
from sehra.interfaces.api.dependencies import require_roles
from sehra.interfaces.api.routes_helpers import use_case_error_to_http
from sehra.interfaces.api.schemas import (
    AssignedVendorRead,
    UserRead,
    VendorAssignmentRequest,
    VendorProfileRead,
)

router = APIRouter(tags=["supervision"])

require_supervisor = require_roles(UserRole.SUPERVISOR)


def _to_read(vendor: AssignedVendor) -> AssignedVendorRead:
    return AssignedVendorRead(
        id=vendor.user.id,
        name=vendor.user.name,
        email=vendor.user.email,
        profile=VendorProfileRead.model_validate(vendor.profile) if vendor.profile else None,
    )


@router.get("/supervisor/clients", response_model=list[UserRead])
def read_supervised_clients(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_supervisor),
) -> list[UserRead]:
    clients = list_supervisor_clients(db, supervisor=current_user)
    return [UserRead.model_validate(client) for client in clients]


@router.post("/supervisor/assign-vendors", response_model=list[AssignedVendorRead])
def assign_client_vendors(
    payload: VendorAssignmentRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_supervisor),
) -> list[AssignedVendorRead]:
    """Replace the vendors recommended to one of the caller's clients."""

    try:
        vendors = assign_vendors(
            db,
            supervisor=current_user,
            client_id=payload.client_id,
            vendor_user_ids=payload.vendor_ids,
        )
    except (ValueError, PermissionError) as exc:
        raise use_case_error_to_http(exc) from exc
    return [_to_read(vendor) for vendor in vendors]


@router.get("/supervisor/assigned-vendors/{client_id}", response_model=list[AssignedVendorRead])
def read_client_vendors(
    client_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_supervisor),
) -> list[AssignedVendorRead]:
    try:
        vendors = list_client_vendors(db, supervisor=current_user, client_id=client_id)
    except (ValueError, PermissionError) as exc:
        raise use_case_error_to_http(exc) from exc
    return [_to_read(vendor) for vendor in vendors]


@router.get("/client/assigned-vendors", response_model=list[AssignedVendorRead])
def read_my_assigned_vendors(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(*CLIENT_ROLES)),
) -> list[AssignedVendorRead]:
    return [_to_read(vendor) for vendor in list_my_assigned_vendors(db, client=current_user)]
