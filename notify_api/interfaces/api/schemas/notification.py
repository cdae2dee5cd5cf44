"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import EntityId


class NotificationCreate(BaseModel):
    """Payload used by administrators to address a message to several users."""

    message: str = Field(..., min_length=1, max_length=1000)
    recipient_ids: list[EntityId] = Field(..., min_length=1, description="Recipient user ids")


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a batch of notifications as read."""

    notification_ids: list[EntityId] = Field(
        ..., min_length=1, description="Notification identifiers"
    )

    def unique_ids(self) -> list[int]:
        """Return the list of identifiers without duplicates preserving order."""

        return list(dict.fromkeys(self.notification_ids))


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    message: str
    recipient_ids: list[int]
    is_read: bool
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class NotificationEnvelope(BaseModel):
    message: str
    notification: NotificationRead


class NotificationListResponse(BaseModel):
    message: str
    notifications: list[NotificationRead]


class MarkReadResponse(BaseModel):
    message: str
    modified: int


class ReconcileResponse(BaseModel):
    message: str
    changed: int


__all__ = [
    "MarkReadResponse",
    "NotificationCreate",
    "NotificationEnvelope",
    "NotificationListResponse",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "ReconcileResponse",
]
