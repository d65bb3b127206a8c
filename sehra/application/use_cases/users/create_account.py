"""Use case for administrators creating accounts of any role."""

import logging

from sqlalchemy.orm import Session

from sehra.domain.entities import User, UserRole
from sehra.infrastructure.email import send_account_credentials_email
from sehra.infrastructure.repositories import UserRepository
from sehra.infrastructure.security import generate_temporary_password, get_password_hash
from sehra.utils import now_utc_naive

logger = logging.getLogger(__name__)


def create_account(
    session: Session,
    *,
    name: str,
    email: str,
    role: UserRole,
    password: str | None = None,
    location: str | None = None,
) -> tuple[User, str | None]:
    """Create an account on behalf of an administrator.

    When no ``password`` is given a temporary one is generated, emailed to the
    new user and returned as the second element; otherwise that element is
    ``None``.
    """

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise ValueError("User with this email already exists")

    generated = None if password else generate_temporary_password()
    user = repository.create(
        User(
            id=None,
            name=name.strip(),
            email=email.strip().lower(),
            password=get_password_hash(password or generated),
            role=role,
            location=location,
            created_at=now_utc_naive(),
        )
    )

    if generated is not None and not send_account_credentials_email(
        user.name, user.email, role=user.role.value, password=generated
    ):
        logger.info("Credentials email for user %s was not delivered", user.id)
    return user, generated
