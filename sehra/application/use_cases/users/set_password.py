"""Use cases for administrators changing or resetting passwords."""

from dataclasses import replace

from sqlalchemy.orm import Session

from sehra.domain.entities import User
from sehra.infrastructure.email import send_password_reset_email
from sehra.infrastructure.repositories import UserRepository
from sehra.infrastructure.security import generate_temporary_password, get_password_hash
from sehra.utils import now_utc_naive


def _store_password(session: Session, user_id: int, password: str) -> User:
    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise ValueError("User not found")
    return repository.update(
        replace(user, password=get_password_hash(password), updated_at=now_utc_naive())
    )


def set_password(session: Session, *, user_id: int, password: str) -> User:
    """Replace the password of ``user_id``; existing tokens stop working."""

    if not password:
        raise ValueError("Password is required")
    return _store_password(session, user_id, password)


def reset_password(session: Session, *, user_id: int) -> tuple[User, str]:
    """Give ``user_id`` a generated password and email it to them."""

    temporary_password = generate_temporary_password()
    user = _store_password(session, user_id, temporary_password)
    send_password_reset_email(user.name, user.email, temporary_password)
    return user, temporary_password


__all__ = ["reset_password", "set_password"]
