"""Tests for password hashing, tokens and the current-user dependency."""

from __future__ import annotations

from dataclasses import replace
from datetime import timedelta

import pytest
from fastapi import HTTPException

from sehra.application.use_cases.users import register_user
from sehra.domain.entities import PackageTier, UserRole
from sehra.infrastructure import database
from sehra.infrastructure import models  # noqa: F401
from sehra.infrastructure.repositories import UserRepository
from sehra.infrastructure.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from sehra.interfaces.api.dependencies import (
    issue_access_token,
    require_roles,
    resolve_current_user,
)


@pytest.fixture()
def db():
    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


def test_password_hashing() -> None:
    hashed = get_password_hash("Secret123")
    assert hashed != "Secret123"
    assert verify_password("Secret123", hashed)
    assert not verify_password("secret123", hashed)


def test_tokens_round_trip_and_expire() -> None:
    token = create_access_token({"sub": "asha@example.com"})
    assert decode_access_token(token)["sub"] == "asha@example.com"

    expired = create_access_token({"sub": "asha@example.com"}, timedelta(seconds=-1))
    with pytest.raises(ValueError):
        decode_access_token(expired)
    with pytest.raises(ValueError):
        decode_access_token("garbage")


def test_resolve_current_user(db) -> None:
    user = register_user(
        db, name="Asha", email="Asha@Example.com", password="Secret123", role=UserRole.BRIDE
    )
    token = issue_access_token(user)

    resolved = resolve_current_user(token, db)
    assert resolved.id == user.id
    assert resolved.email == "asha@example.com"


def test_password_change_invalidates_existing_tokens(db) -> None:
    user = register_user(
        db, name="Asha", email="asha@example.com", password="Secret123", role=UserRole.BRIDE
    )
    token = issue_access_token(user)
    UserRepository(db).update(replace(user, password=get_password_hash("Changed456")))

    with pytest.raises(HTTPException) as error:
        resolve_current_user(token, db)
    assert error.value.status_code == 401
    assert error.value.headers == {"WWW-Authenticate": "Bearer"}


def test_token_for_deleted_account_is_rejected(db) -> None:
    token = create_access_token({"sub": "ghost@example.com", "pwd_sig": "x"})

    with pytest.raises(HTTPException) as error:
        resolve_current_user(token, db)
    assert error.value.detail == "User not found"


def test_require_roles(db) -> None:
    vendor = register_user(
        db, name="Vera", email="vera@example.com", password="Secret123", role=UserRole.VENDOR
    )
    only_admins = require_roles(UserRole.ADMIN)
    vendors = require_roles(UserRole.VENDOR, UserRole.ADMIN)

    assert vendors(vendor) is vendor
    with pytest.raises(HTTPException) as error:
        only_admins(vendor)
    assert error.value.status_code == 403


def test_staff_accounts_count_as_having_a_package(db) -> None:
    bride = register_user(
        db, name="Asha", email="asha@example.com", password="Secret123", role=UserRole.BRIDE
    )
    admin = register_user(
        db, name="Root", email="root@example.com", password="Secret123", role=UserRole.ADMIN
    )

    assert not bride.has_package()
    assert replace(bride, package=PackageTier.GOLD).has_package()
    assert admin.has_package()
