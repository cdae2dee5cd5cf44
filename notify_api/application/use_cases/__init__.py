"""Aggregate application use cases."""

from .notifications import create_notification, delete_notification
from .users import authenticate_user, register_user

__all__ = [
    "authenticate_user",
    "create_notification",
    "delete_notification",
    "register_user",
]
