"""FastAPI dependency utilities."""

from collections.abc import Callable
from datetime import timedelta

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from sehra.config import get_settings
from sehra.domain.entities import User, UserRole
from sehra.infrastructure.database import get_db
from sehra.infrastructure.repositories import UserRepository
from sehra.infrastructure.security import (
    create_access_token,
    decode_access_token,
    password_signature,
)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def _credentials_error(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def issue_access_token(user: User) -> str:
    """Return a bearer token bound to ``user``'s current password hash."""

    settings = get_settings()
    return create_access_token(
        data={
            "sub": user.email,
            "uid": user.id,
            "role": user.role.value,
            "pwd_sig": password_signature(user.password),
        },
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_error() from exc

    email = payload.get("sub")
    signature_claim = payload.get("pwd_sig")
    if not isinstance(email, str) or not isinstance(signature_claim, str):
        raise _credentials_error()

    user = UserRepository(db).get_by_email(email)
    if user is None:
        raise _credentials_error("User not found")

    if signature_claim != password_signature(user.password):
        raise _credentials_error()

    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def require_roles(*roles: UserRole) -> Callable[..., User]:
    """Build a dependency that only lets users holding ``roles`` through."""

    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if not current_user.has_role(*roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not authorized",
            )
        return current_user

    return dependency


require_admin = require_roles(UserRole.ADMIN)
