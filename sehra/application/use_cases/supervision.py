"""Use cases linking clients to supervisors and supervisor-picked vendors."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from sqlalchemy.orm import Session

from sehra.domain.entities import User, UserRole, VendorProfile
from sehra.infrastructure.email import send_supervisor_assignment_email
from sehra.infrastructure.realtime import dispatch_realtime_event
from sehra.infrastructure.repositories import (
    UserRepository,
    VendorAssignmentRepository,
    VendorProfileRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class AssignedVendor:
    """A vendor account recommended to a client, with its profile if one exists."""

    user: User
    profile: VendorProfile | None


def _get_client(session: Session, client_id: int) -> User:
    client = UserRepository(session).get(client_id)
    if client is None or not client.is_client():
        raise ValueError("Client not found")
    return client


def _ensure_supervises(supervisor: User, client: User, action: str) -> None:
    if client.supervisor_id != supervisor.id:
        raise PermissionError(f"Not authorized to {action} for this client")


def assign_supervisor(session: Session, *, client_id: int, supervisor_id: int) -> User:
    """Put ``client_id`` in the care of ``supervisor_id`` and tell both of them.

    The client receives ``supervisor_assigned`` and the supervisor
    ``client_assigned``; re-assigning the current supervisor sends nothing.
    """

    client = _get_client(session, client_id)
    supervisor = UserRepository(session).get(supervisor_id)
    if supervisor is None or supervisor.role is not UserRole.SUPERVISOR:
        raise ValueError("Supervisor not found")

    if client.supervisor_id == supervisor.id:
        return client

    updated = UserRepository(session).update(replace(client, supervisor_id=supervisor.id))
    dispatch_realtime_event(
        [updated.id],
        event_type="supervisor_assigned",
        payload={
            "supervisor_id": supervisor.id,
            "supervisor_name": supervisor.name,
            "supervisor_email": supervisor.email,
        },
    )
    dispatch_realtime_event(
        [supervisor.id],
        event_type="client_assigned",
        payload={
            "client_id": updated.id,
            "client_name": updated.name,
            "client_email": updated.email,
            "package": updated.package.value if updated.package else None,
        },
    )
    if not send_supervisor_assignment_email(
        updated.name,
        updated.email,
        supervisor_name=supervisor.name,
        supervisor_email=supervisor.email,
    ):
        logger.info("Supervisor introduction for client %s was not emailed", updated.id)
    return updated


def list_supervisor_clients(session: Session, *, supervisor: User) -> list[User]:
    return list(UserRepository(session).list_by_supervisor(supervisor.id))


def _assigned_vendors(session: Session, client: User) -> list[AssignedVendor]:
    users = UserRepository(session)
    profiles = VendorProfileRepository(session)
    vendors = []
    for vendor_user_id in VendorAssignmentRepository(session).list_vendor_ids(client.id):
        vendor = users.get(vendor_user_id)
        if vendor is None:
            continue
        vendors.append(AssignedVendor(user=vendor, profile=profiles.get_by_user(vendor.id)))
    return vendors


def assign_vendors(
    session: Session,
    *,
    supervisor: User,
    client_id: int,
    vendor_user_ids: Iterable[int],
) -> list[AssignedVendor]:
    """Replace the vendors ``supervisor`` recommends to one of their clients."""

    client = _get_client(session, client_id)
    _ensure_supervises(supervisor, client, "assign vendors")

    requested = list(vendor_user_ids)
    users = UserRepository(session)
    for vendor_user_id in requested:
        vendor = users.get(vendor_user_id)
        if vendor is None or vendor.role is not UserRole.VENDOR:
            raise ValueError(f"Vendor {vendor_user_id} not found")

    VendorAssignmentRepository(session).replace(
        client.id, requested, assigned_by=supervisor.id
    )
    return _assigned_vendors(session, client)


def list_client_vendors(session: Session, *, supervisor: User, client_id: int) -> list[AssignedVendor]:
    client = _get_client(session, client_id)
    _ensure_supervises(supervisor, client, "view assigned vendors")
    return _assigned_vendors(session, client)


def list_my_assigned_vendors(session: Session, *, client: User) -> list[AssignedVendor]:
    return _assigned_vendors(session, client)


__all__ = [
    "AssignedVendor",
    "assign_supervisor",
    "assign_vendors",
    "list_client_vendors",
    "list_my_assigned_vendors",
    "list_supervisor_clients",
]
