"""ORM models used by the application infrastructure."""

from .notification import (
    NotificationModel,
    notification_recipient_table,
    user_notification_table,
)
from .user import UserModel

__all__ = [
    "NotificationModel",
    "UserModel",
    "notification_recipient_table",
    "user_notification_table",
]
