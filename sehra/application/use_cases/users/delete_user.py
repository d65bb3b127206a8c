"""Use case for deleting an account."""

import logging

from sqlalchemy.orm import Session

from sehra.domain.entities import User, UserRole
from sehra.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


def delete_user(session: Session, *, actor: User, user_id: int) -> None:
    """Delete ``user_id`` together with the data it owns.

    Clients of a deleted supervisor are left without a supervisor.
    """

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise ValueError("User not found")
    if user.id == actor.id:
        raise ValueError("You cannot delete your own account")

    if user.role is UserRole.SUPERVISOR:
        detached = repository.clear_supervisor(user.id)
        logger.info("Detached %s clients from deleted supervisor %s", detached, user.id)
    repository.delete(user.id)
