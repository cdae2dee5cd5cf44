"""Domain entity representing a user."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    email: str
    username: str
    password_hash: str
    is_admin: bool = False
    is_deleted: bool = False
    created_at: datetime | None = None
    notification_ids: list[int] = field(default_factory=list)


__all__ = ["User"]
