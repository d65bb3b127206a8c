"""Use case for listing users."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from sehra.domain.entities import User
from sehra.infrastructure.repositories import UserRepository


def list_users(session: Session, *, skip: int = 0, limit: int = 100) -> Sequence[User]:
    return UserRepository(session).list(skip=skip, limit=limit)
