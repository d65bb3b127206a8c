"""Fixtures for API tests running against a fresh SQLite database."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from sehra.application.use_cases.users import register_user
from sehra.domain.entities import UserRole
from sehra.infrastructure import database
from sehra.infrastructure import models  # noqa: F401
from sehra.interfaces.api.dependencies import issue_access_token

DEFAULT_PASSWORD = "Secret123"


@pytest.fixture()
def client():
    """Return a test client bound to a clean application instance."""

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()

    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_user(client: TestClient) -> Callable[..., tuple[dict, dict[str, str]]]:
    """Create a user of any role directly and return ``(user, auth_headers)``."""

    def _make(
        name: str,
        email: str,
        role: UserRole = UserRole.BRIDE,
        package: str | None = None,
    ) -> tuple[dict, dict[str, str]]:
        session = database.SessionLocal()
        try:
            user = register_user(
                session, name=name, email=email, password=DEFAULT_PASSWORD, role=role
            )
        finally:
            session.close()

        headers = {"Authorization": f"Bearer {issue_access_token(user)}"}
        if package is not None:
            response = client.post(
                "/api/auth/select-package", json={"package": package}, headers=headers
            )
            assert response.status_code == 200, response.text
        return {"id": user.id, "name": user.name, "email": user.email}, headers

    return _make
