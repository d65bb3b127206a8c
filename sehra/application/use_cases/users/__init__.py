"""Use cases for managing accounts."""

from .authenticate_user import AuthenticationStatus, authenticate_user
from .create_account import create_account
from .delete_user import delete_user
from .get_user import get_user
from .list_users import list_users
from .register_user import register_user
from .select_package import select_package
from .set_password import reset_password, set_password
from .update_profile import update_profile

__all__ = [
    "AuthenticationStatus",
    "authenticate_user",
    "create_account",
    "delete_user",
    "get_user",
    "list_users",
    "register_user",
    "reset_password",
    "select_package",
    "set_password",
    "update_profile",
]
