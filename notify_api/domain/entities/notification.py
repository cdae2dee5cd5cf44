"""Domain entity representing a notification addressed to several users."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Notification:
    """Message delivered to a set of recipients.

    ``is_read`` is a single flag shared by every recipient: marking the
    notification as read for one recipient marks it for all of them.
    """

    id: int | None
    message: str
    recipient_ids: list[int] = field(default_factory=list)
    is_read: bool = False
    created_at: datetime | None = None

    def is_addressed_to(self, user_id: int) -> bool:
        """Return ``True`` when ``user_id`` is one of the recipients."""

        return user_id in self.recipient_ids


__all__ = ["Notification"]
