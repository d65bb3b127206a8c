"""User schemas."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from sehra.domain.entities import PackageTier, UserRole


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: EmailStr
    role: UserRole
    package: PackageTier | None = None
    wedding_date: date | None = None
    budget: float | None = None
    location: str | None = None
    partner_name: str | None = None
    supervisor_id: int | None = None
    created_at: datetime | None = None


class UserUpdate(BaseModel):
    """Fields a user may change on their own profile."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    wedding_date: date | None = None
    budget: float | None = Field(default=None, ge=0)
    location: str | None = Field(default=None, max_length=200)
    partner_name: str | None = Field(default=None, max_length=100)


class ChatContactRead(BaseModel):
    id: int
    name: str
    email: EmailStr
    role: UserRole
    unread_count: int = 0


class AdminUserCreate(BaseModel):
    """Account created by an administrator; any role is allowed."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    role: UserRole
    password: str | None = Field(default=None, min_length=6)
    location: str | None = Field(default=None, max_length=200)


class AdminUserCreated(BaseModel):
    user: UserRead
    generated_password: str | None = None


class PasswordUpdateRequest(BaseModel):
    """Either an explicit new password or a request for a generated, emailed one."""

    password: str | None = Field(default=None, min_length=6)
    send_reset_email: bool = False


class PasswordUpdateResponse(BaseModel):
    message: str
    new_password: str | None = None


class SupervisorAssignmentRequest(BaseModel):
    supervisor_id: int
