"""Ownership rules shared by the planning use cases."""

from sehra.domain.entities import User, UserRole

_OVERSEEING_ROLES = (UserRole.ADMIN, UserRole.SUPERVISOR)


def ensure_can_manage(actor: User, owner_id: int, *, resource: str) -> None:
    """Raise :class:`PermissionError` unless ``actor`` owns or oversees the record."""

    if actor.id == owner_id or actor.has_role(*_OVERSEEING_ROLES):
        return
    raise PermissionError(f"Not authorized to modify this {resource}")
