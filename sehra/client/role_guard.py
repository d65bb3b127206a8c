"""Pure access decisions for client routes."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

from sehra.domain.entities import CLIENT_ROLES, UserRole

AUTH_PATH = "/auth"
SELECT_PACKAGE_PATH = "/select-package"
DEFAULT_HOME_PATH = "/dashboard"

_ROLE_HOME_PATHS = {
    UserRole.ADMIN: "/admin-dashboard",
    UserRole.VENDOR: "/vendor-dashboard",
    UserRole.SUPERVISOR: "/supervisor-dashboard",
}


@dataclass(frozen=True)
class Allow:
    """Render the requested view."""


@dataclass(frozen=True)
class RedirectTo:
    """Navigate to ``path`` instead of rendering."""

    path: str


AccessDecision = Allow | RedirectTo


def role_home_path(role: UserRole | None) -> str:
    """Return the dashboard a ``role`` lands on; unknown roles get the client dashboard."""

    return _ROLE_HOME_PATHS.get(role, DEFAULT_HOME_PATH)


def evaluate_access(
    is_authenticated: bool,
    role: UserRole | None,
    has_package: bool,
    required_roles: Collection[UserRole] = (),
    requires_package: bool = False,
) -> AccessDecision:
    """Decide whether a protected view may render.

    Checks run in order: authentication, role membership, then package.
    """

    if not is_authenticated:
        return RedirectTo(AUTH_PATH)
    if required_roles and role not in required_roles:
        return RedirectTo(role_home_path(role))
    if requires_package and not has_package:
        return RedirectTo(SELECT_PACKAGE_PATH)
    return Allow()


def landing_path(role: UserRole | None, has_package: bool) -> str:
    """Where a freshly authenticated user is sent."""

    if role in CLIENT_ROLES and not has_package:
        return SELECT_PACKAGE_PATH
    return role_home_path(role)


def evaluate_public_access(
    is_authenticated: bool,
    role: UserRole | None,
    has_package: bool,
    no_redirect: bool = False,
) -> AccessDecision:
    """Decide for views meant for anonymous visitors, such as the login page."""

    if not is_authenticated or no_redirect:
        return Allow()
    return RedirectTo(landing_path(role, has_package))


__all__ = [
    "AUTH_PATH",
    "AccessDecision",
    "Allow",
    "DEFAULT_HOME_PATH",
    "RedirectTo",
    "SELECT_PACKAGE_PATH",
    "evaluate_access",
    "evaluate_public_access",
    "landing_path",
    "role_home_path",
]
