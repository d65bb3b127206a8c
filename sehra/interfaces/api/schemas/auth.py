"""Authentication related schemas."""

from datetime import date

from pydantic import BaseModel, EmailStr, Field, field_validator

from sehra.domain.entities import PackageTier, UserRole, parse_package_tier, parse_role

from .user import UserRead

# Supervisors and administrators are provisioned, never self-registered.
SELF_SERVICE_ROLES = (UserRole.BRIDE, UserRole.GROOM, UserRole.FAMILY, UserRole.VENDOR)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: UserRole = UserRole.BRIDE

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value):
        if isinstance(value, str):
            return parse_role(value) or value
        return value

    @field_validator("role")
    @classmethod
    def _self_service_only(cls, value: UserRole) -> UserRole:
        if value not in SELF_SERVICE_ROLES:
            raise ValueError("This role cannot be registered")
        return value


class PackageSelectionRequest(BaseModel):
    package: PackageTier
    budget: float | None = Field(default=None, ge=0)
    wedding_date: date | None = None
    location: str | None = Field(default=None, max_length=200)
    partner_name: str | None = Field(default=None, max_length=100)

    @field_validator("package", mode="before")
    @classmethod
    def _normalize_package(cls, value):
        if isinstance(value, str):
            return parse_package_tier(value) or value
        return value


class AuthResponse(BaseModel):
    user: UserRead
    token: str


class UserEnvelope(BaseModel):
    user: UserRead
