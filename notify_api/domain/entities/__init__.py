"""Domain entities exposed by the application."""

from .notification import Notification
from .token import TokenClaims
from .user import User

__all__ = [
    "Notification",
    "TokenClaims",
    "User",
]
