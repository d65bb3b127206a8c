"""Domain entities exposed by the application."""

from .budget_item import BudgetItem
from .guest import RSVP_STATUSES, Guest
from .message import Message, MessageCategory
from .task import TASK_PRIORITIES, TASK_STATUSES, Task
from .user import (
    CLIENT_ROLES,
    STAFF_ROLES,
    PackageTier,
    User,
    UserRole,
    parse_package_tier,
    parse_role,
)
from .vendor_booking import BOOKING_STATUSES, VendorBooking
from .vendor_profile import VendorProfile, VendorType

__all__ = [
    "BOOKING_STATUSES",
    "BudgetItem",
    "CLIENT_ROLES",
    "Guest",
    "Message",
    "MessageCategory",
    "PackageTier",
    "RSVP_STATUSES",
    "STAFF_ROLES",
    "TASK_PRIORITIES",
    "TASK_STATUSES",
    "Task",
    "User",
    "UserRole",
    "VendorBooking",
    "VendorProfile",
    "VendorType",
    "parse_package_tier",
    "parse_role",
]
