"""Endpoints for sending, reading and removing notifications."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from notify_api.application.use_cases.notifications import (
    create_notification as create_notification_uc,
    delete_notification as delete_notification_uc,
    list_notifications,
    list_notifications_between,
    mark_all_read,
    mark_read,
    reconcile_back_references,
)
from notify_api.domain.entities import Notification, TokenClaims
from notify_api.domain.exceptions import NotifyError
from notify_api.infrastructure.database import get_db
from notify_api.interfaces.api.dependencies import get_current_identity, require_admin
from notify_api.interfaces.api.routes_helpers import http_error
from notify_api.interfaces.api.schemas import (
    MAX_ENTITY_ID,
    MarkReadResponse,
    MessageResponse,
    NotificationCreate,
    NotificationEnvelope,
    NotificationListResponse,
    NotificationMarkReadRequest,
    NotificationRead,
    ReconcileResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.post("", response_model=NotificationEnvelope, status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    identity: TokenClaims = Depends(get_current_identity),
) -> NotificationEnvelope:
    """Send ``message`` to every user in ``recipient_ids`` (administrators only)."""

    try:
        notification = create_notification_uc(
            db,
            message=payload.message,
            recipient_ids=payload.recipient_ids,
            actor=identity,
        )
    except NotifyError as exc:
        raise http_error(exc, message="Error creating notification") from exc
    return NotificationEnvelope(
        message="Notification created",
        notification=_notification_to_schema(notification),
    )


@router.get("/me", response_model=NotificationListResponse)
def list_my_notifications(
    newest_first: bool = Query(False, description="Order by creation time, newest first"),
    db: Session = Depends(get_db),
    identity: TokenClaims = Depends(get_current_identity),
) -> NotificationListResponse:
    """Return the notifications addressed to the authenticated user."""

    notifications = list_notifications(db, identity.user_id, newest_first=newest_first)
    return NotificationListResponse(
        message="Notifications retrieved",
        notifications=[_notification_to_schema(n) for n in notifications],
    )


@router.get("/me/range", response_model=NotificationListResponse)
def list_my_notifications_between(
    start: datetime | None = Query(None, description="Inclusive lower bound (ISO 8601)"),
    end: datetime | None = Query(None, description="Inclusive upper bound (ISO 8601)"),
    db: Session = Depends(get_db),
    identity: TokenClaims = Depends(get_current_identity),
) -> NotificationListResponse:
    """Return the caller's notifications created within a date range."""

    try:
        notifications = list_notifications_between(db, identity.user_id, start=start, end=end)
    except NotifyError as exc:
        raise http_error(exc, message="Error filtering notifications") from exc
    return NotificationListResponse(
        message="Notifications retrieved",
        notifications=[_notification_to_schema(n) for n in notifications],
    )


@router.put("/read", response_model=MarkReadResponse)
def mark_notifications_as_read(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    identity: TokenClaims = Depends(get_current_identity),
) -> MarkReadResponse:
    """Mark the listed notifications as read; ids not addressed to the caller are ignored."""

    try:
        modified = mark_read(db, payload.unique_ids(), user_id=identity.user_id)
    except NotifyError as exc:
        raise http_error(exc, message="Error marking notifications") from exc
    return MarkReadResponse(message="Notifications marked as read", modified=modified)


@router.put("/me/read-all", response_model=MarkReadResponse)
def mark_all_notifications_as_read(
    db: Session = Depends(get_db),
    identity: TokenClaims = Depends(get_current_identity),
) -> MarkReadResponse:
    try:
        modified = mark_all_read(db, user_id=identity.user_id)
    except NotifyError as exc:
        raise http_error(exc, message="Error marking all notifications") from exc
    return MarkReadResponse(message="All notifications marked as read", modified=modified)


@router.post("/reconcile", response_model=ReconcileResponse)
def reconcile(
    user_id: int | None = Query(
        None, gt=0, le=MAX_ENTITY_ID, description="Limit the rebuild to one user"
    ),
    db: Session = Depends(get_db),
    _: TokenClaims = Depends(require_admin),
) -> ReconcileResponse:
    """Rebuild users' notification back-references from the recipient lists."""

    try:
        changed = reconcile_back_references(db, user_id=user_id)
    except NotifyError as exc:
        raise http_error(exc, message="Error reconciling notifications") from exc
    return ReconcileResponse(message="Back-references reconciled", changed=changed)


@router.delete("/{notification_id}", response_model=MessageResponse)
def delete_notification(
    notification_id: int = Path(..., gt=0, le=MAX_ENTITY_ID),
    db: Session = Depends(get_db),
    identity: TokenClaims = Depends(get_current_identity),
) -> MessageResponse:
    """Delete a notification addressed to the caller (or any, for administrators)."""

    try:
        delete_notification_uc(db, notification_id, actor=identity)
    except NotifyError as exc:
        raise http_error(exc, message="Error deleting notification") from exc
    return MessageResponse(message="Notification deleted")
