from .auth import (
    AuthResponse,
    LoginRequest,
    PackageSelectionRequest,
    RegisterRequest,
    SELF_SERVICE_ROLES,
    UserEnvelope,
)
from .booking import BookingCreate, BookingRead, BookingUpdate
from .budget import BudgetItemCreate, BudgetItemRead, BudgetItemUpdate
from .common import ErrorResponse
from .guest import GuestCreate, GuestRead, GuestUpdate
from .message import (
    AuthenticatePayload,
    MarkReadPayload,
    MessageRead,
    SendMessagePayload,
    SupervisorAllocatedPayload,
    UnreadCountResponse,
    WsInbound,
)
from .supervision import AssignedVendorRead, VendorAssignmentRequest
from .task import TaskCreate, TaskRead, TaskUpdate
from .user import (
    AdminUserCreate,
    AdminUserCreated,
    ChatContactRead,
    PasswordUpdateRequest,
    PasswordUpdateResponse,
    SupervisorAssignmentRequest,
    UserRead,
    UserUpdate,
)
from .vendor import VendorProfileCreate, VendorProfileRead, VendorProfileUpdate

__all__ = [
    "AdminUserCreate",
    "AdminUserCreated",
    "AssignedVendorRead",
    "AuthResponse",
    "AuthenticatePayload",
    "BookingCreate",
    "BookingRead",
    "BookingUpdate",
    "BudgetItemCreate",
    "BudgetItemRead",
    "BudgetItemUpdate",
    "ChatContactRead",
    "ErrorResponse",
    "GuestCreate",
    "GuestRead",
    "GuestUpdate",
    "LoginRequest",
    "MarkReadPayload",
    "MessageRead",
    "PackageSelectionRequest",
    "PasswordUpdateRequest",
    "PasswordUpdateResponse",
    "RegisterRequest",
    "SELF_SERVICE_ROLES",
    "SendMessagePayload",
    "SupervisorAllocatedPayload",
    "SupervisorAssignmentRequest",
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    "UnreadCountResponse",
    "UserEnvelope",
    "UserRead",
    "UserUpdate",
    "VendorAssignmentRequest",
    "VendorProfileCreate",
    "VendorProfileRead",
    "VendorProfileUpdate",
    "WsInbound",
]
