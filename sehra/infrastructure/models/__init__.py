"""ORM models used by the application infrastructure."""

from .budget_item import BudgetItemModel
from .guest import GuestModel
from .message import MessageModel
from .task import TaskModel
from .user import UserModel
from .vendor_assignment import VendorAssignmentModel
from .vendor_booking import VendorBookingModel
from .vendor_profile import VendorProfileModel

__all__ = [
    "BudgetItemModel",
    "GuestModel",
    "MessageModel",
    "TaskModel",
    "UserModel",
    "VendorAssignmentModel",
    "VendorBookingModel",
    "VendorProfileModel",
]
