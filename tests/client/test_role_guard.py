import pytest

from sehra.client.role_guard import (
    Allow,
    RedirectTo,
    evaluate_access,
    evaluate_public_access,
    landing_path,
    role_home_path,
)
from sehra.domain.entities import UserRole

ADMIN_ONLY = {UserRole.ADMIN}


def test_unauthenticated_users_go_to_auth() -> None:
    assert evaluate_access(False, None, False) == RedirectTo("/auth")
    assert evaluate_access(False, None, False, ADMIN_ONLY, True) == RedirectTo("/auth")


@pytest.mark.parametrize(
    ("role", "expected"),
    [
        (UserRole.VENDOR, "/vendor-dashboard"),
        (UserRole.SUPERVISOR, "/supervisor-dashboard"),
        (UserRole.BRIDE, "/dashboard"),
        (UserRole.FAMILY, "/dashboard"),
        (None, "/dashboard"),
    ],
)
def test_wrong_role_goes_to_own_dashboard(role, expected) -> None:
    assert evaluate_access(True, role, True, ADMIN_ONLY) == RedirectTo(expected)


def test_role_is_checked_before_package() -> None:
    decision = evaluate_access(True, UserRole.GROOM, False, ADMIN_ONLY, requires_package=True)
    assert decision == RedirectTo("/dashboard")


def test_missing_package_goes_to_selection() -> None:
    assert evaluate_access(True, UserRole.BRIDE, False, requires_package=True) == RedirectTo(
        "/select-package"
    )


def test_allowed_when_all_checks_pass() -> None:
    assert evaluate_access(True, UserRole.ADMIN, True, ADMIN_ONLY) == Allow()
    assert evaluate_access(True, UserRole.BRIDE, False) == Allow()
    assert evaluate_access(True, UserRole.BRIDE, True, requires_package=True) == Allow()


def test_role_home_path_defaults_to_client_dashboard() -> None:
    assert role_home_path(UserRole.ADMIN) == "/admin-dashboard"
    assert role_home_path(None) == "/dashboard"


def test_landing_path() -> None:
    assert landing_path(UserRole.BRIDE, False) == "/select-package"
    assert landing_path(UserRole.BRIDE, True) == "/dashboard"
    assert landing_path(UserRole.VENDOR, True) == "/vendor-dashboard"


def test_public_access() -> None:
    assert evaluate_public_access(False, None, False) == Allow()
    assert evaluate_public_access(True, UserRole.GROOM, True) == RedirectTo("/dashboard")
    assert evaluate_public_access(True, UserRole.GROOM, True, no_redirect=True) == Allow()
