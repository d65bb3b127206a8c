"""Use case for self-service account registration."""

from sqlalchemy.orm import Session

from sehra.domain.entities import User, UserRole
from sehra.infrastructure.repositories import UserRepository
from sehra.infrastructure.security import get_password_hash
from sehra.utils import now_utc_naive


def register_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role: UserRole,
) -> User:
    """Create a new account ensuring unique email addresses."""

    repository = UserRepository(session)

    if repository.get_by_email(email):
        raise ValueError("User already exists")

    user = User(
        id=None,
        name=name.strip(),
        email=email.strip().lower(),
        password=get_password_hash(password),
        role=role,
        created_at=now_utc_naive(),
    )
    return repository.create(user)
