"""Endpoints for the caller's profile and the admin user directory."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from sehra.application.use_cases.supervision import assign_supervisor
from sehra.application.use_cases.users import (
    create_account,
    delete_user,
    get_user,
    list_users,
    reset_password,
    set_password,
    update_profile,
)
from sehra.domain.entities import User
from sehra.infrastructure.database import get_db
from sehra.interfaces.api.dependencies import get_current_user, require_admin
from sehra.interfaces.api.routes_helpers import use_case_error_to_http
from sehra.interfaces.api.schemas import (
    AdminUserCreate,
    AdminUserCreated,
    PasswordUpdateRequest,
    PasswordUpdateResponse,
    SupervisorAssignmentRequest,
    UserRead,
    UserUpdate,
)

router = APIRouter(tags=["users"])


@router.get("/users/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(current_user)


@router.patch("/users/me", response_model=UserRead)
def update_me(
    payload: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserRead:
    """Update the caller's profile. Role and password are not editable here."""

    try:
        user = update_profile(
            db,
            user_id=current_user.id,
            **payload.model_dump(exclude_unset=True),
        )
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return UserRead.model_validate(user)


@router.get("/admin/users", response_model=list[UserRead])
def list_all_users(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> list[UserRead]:
    return [UserRead.model_validate(user) for user in list_users(db, skip=skip, limit=limit)]


@router.get("/admin/users/{user_id}", response_model=UserRead)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> UserRead:
    try:
        user = get_user(db, user_id)
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return UserRead.model_validate(user)


@router.post(
    "/admin/users/create",
    response_model=AdminUserCreated,
    status_code=status.HTTP_201_CREATED,
)
def create_user_account(
    payload: AdminUserCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> AdminUserCreated:
    """Create an account of any role.

    Without a ``password`` a temporary one is generated, emailed and returned
    once in ``generated_password``.
    """

    try:
        user, generated_password = create_account(db, **payload.model_dump())
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return AdminUserCreated(
        user=UserRead.model_validate(user),
        generated_password=generated_password,
    )


@router.patch("/admin/users/{user_id}/password", response_model=PasswordUpdateResponse)
def update_user_password(
    user_id: int,
    payload: PasswordUpdateRequest,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> PasswordUpdateResponse:
    try:
        if payload.send_reset_email:
            _, new_password = reset_password(db, user_id=user_id)
            return PasswordUpdateResponse(
                message="Password reset and emailed to the user",
                new_password=new_password,
            )
        set_password(db, user_id=user_id, password=payload.password or "")
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return PasswordUpdateResponse(message="Password updated successfully")


@router.patch("/admin/users/{user_id}/supervisor", response_model=UserRead)
def allocate_supervisor(
    user_id: int,
    payload: SupervisorAssignmentRequest,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> UserRead:
    try:
        client = assign_supervisor(db, client_id=user_id, supervisor_id=payload.supervisor_id)
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return UserRead.model_validate(client)


@router.delete("/admin/users/{user_id}")
def remove_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> dict[str, str]:
    try:
        delete_user(db, actor=current_user, user_id=user_id)
    except ValueError as exc:
        raise use_case_error_to_http(exc) from exc
    return {"message": "User deleted successfully"}
