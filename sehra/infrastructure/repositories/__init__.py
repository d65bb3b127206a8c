"""Repository implementations for infrastructure layer."""

from .budget_item_repository import BudgetItemRepository
from .guest_repository import GuestRepository
from .message_repository import MessageRepository
from .task_repository import TaskRepository
from .user_repository import UserRepository
from .vendor_assignment_repository import VendorAssignmentRepository
from .vendor_booking_repository import VendorBookingRepository
from .vendor_profile_repository import VendorProfileRepository

__all__ = [
    "BudgetItemRepository",
    "GuestRepository",
    "MessageRepository",
    "TaskRepository",
    "UserRepository",
    "VendorAssignmentRepository",
    "VendorBookingRepository",
    "VendorProfileRepository",
]
