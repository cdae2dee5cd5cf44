"""Use cases for delivering and managing notifications."""

from .create_notification import create_notification
from .delete_notification import delete_notification
from .list_notifications import list_notifications, list_notifications_between
from .mark_read import mark_all_read, mark_read
from .policy import ensure_can_create, ensure_can_delete
from .reconcile import reconcile_back_references

__all__ = [
    "create_notification",
    "delete_notification",
    "ensure_can_create",
    "ensure_can_delete",
    "list_notifications",
    "list_notifications_between",
    "mark_all_read",
    "mark_read",
    "reconcile_back_references",
]
