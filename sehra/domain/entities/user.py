"""Domain entity representing a user and the role/package vocabulary."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class UserRole(str, Enum):
    """Roles a Sehra account can hold."""

    BRIDE = "bride"
    GROOM = "groom"
    FAMILY = "family"
    VENDOR = "vendor"
    SUPERVISOR = "supervisor"
    ADMIN = "admin"


class PackageTier(str, Enum):
    """Service level a client selects before using the full dashboard."""

    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


CLIENT_ROLES = frozenset({UserRole.BRIDE, UserRole.GROOM, UserRole.FAMILY})
STAFF_ROLES = frozenset({UserRole.VENDOR, UserRole.SUPERVISOR, UserRole.ADMIN})


def parse_role(value: str | UserRole | None) -> UserRole | None:
    """Return the :class:`UserRole` matching ``value`` case-insensitively."""

    if value is None or isinstance(value, UserRole):
        return value
    try:
        return UserRole(str(value).strip().lower())
    except ValueError:
        return None


def parse_package_tier(value: str | PackageTier | None) -> PackageTier | None:
    """Return the :class:`PackageTier` matching ``value`` case-insensitively."""

    if value is None or isinstance(value, PackageTier):
        return value
    normalized = str(value).strip().lower()
    for tier in PackageTier:
        if tier.value.lower() == normalized:
            return tier
    return None


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    name: str
    email: str
    password: str
    role: UserRole
    package: PackageTier | None = None
    wedding_date: date | None = None
    budget: float | None = None
    location: str | None = None
    partner_name: str | None = None
    supervisor_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_role(self, *roles: UserRole) -> bool:
        """Return ``True`` when the user holds any of ``roles``."""

        return self.role in roles

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.role is UserRole.ADMIN

    def is_client(self) -> bool:
        return self.role in CLIENT_ROLES

    def has_package(self) -> bool:
        """Staff accounts never select a package, so they always count as having one."""

        return self.package is not None or self.role in STAFF_ROLES
