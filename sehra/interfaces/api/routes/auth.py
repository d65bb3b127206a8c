"""Endpoints for registration, login and package selection."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from sehra.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    register_user,
    select_package,
)
from sehra.domain.entities import CLIENT_ROLES, User
from sehra.infrastructure.database import get_db
from sehra.infrastructure.email import send_welcome_email
from sehra.interfaces.api.dependencies import issue_access_token, require_roles
from sehra.interfaces.api.routes_helpers import use_case_error_to_http
from sehra.interfaces.api.schemas import (
    AuthResponse,
    LoginRequest,
    PackageSelectionRequest,
    RegisterRequest,
    UserEnvelope,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(user=UserRead.model_validate(user), token=issue_access_token(user))


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)) -> AuthResponse:
    """Create an account and return it together with a bearer token."""

    try:
        user = register_user(
            db,
            name=payload.name,
            email=payload.email,
            password=payload.password,
            role=payload.role,
        )
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc

    if not send_welcome_email(user.name, user.email, user.role.value):
        logger.info("Welcome email not delivered to %s", user.email)

    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> AuthResponse:
    user, auth_status = authenticate_user(db, payload.email, payload.password)
    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid email or password",
        )
    return _auth_response(user)


@router.post("/select-package", response_model=UserEnvelope)
def choose_package(
    payload: PackageSelectionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(*CLIENT_ROLES)),
) -> UserEnvelope:
    """Record the package a client selected along with their wedding details."""

    try:
        user = select_package(
            db,
            user_id=current_user.id,
            package=payload.package,
            budget=payload.budget,
            wedding_date=payload.wedding_date,
            location=payload.location,
            partner_name=payload.partner_name,
        )
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return UserEnvelope(user=UserRead.model_validate(user))
