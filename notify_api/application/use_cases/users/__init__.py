"""Use cases for managing users."""

from .authenticate_user import authenticate_user
from .delete_user import delete_user
from .get_user import find_active_by_email, get_user
from .grant_admin import grant_admin
from .register_user import register_user

__all__ = [
    "authenticate_user",
    "delete_user",
    "find_active_by_email",
    "get_user",
    "grant_admin",
    "register_user",
]
