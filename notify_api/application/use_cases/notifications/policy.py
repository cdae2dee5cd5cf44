"""Rules deciding which caller may touch which notification."""

from notify_api.domain.entities import Notification, TokenClaims
from notify_api.domain.exceptions import Forbidden


def ensure_can_create(actor: TokenClaims) -> None:
    """Only administrators may send notifications."""

    if not actor.is_admin:
        raise Forbidden("Admin privileges required")


def ensure_can_delete(notification: Notification, actor: TokenClaims) -> None:
    """Recipients and administrators may delete a notification."""

    if actor.is_admin or notification.is_addressed_to(actor.user_id):
        return
    raise Forbidden("Only recipients or administrators can delete this notification")
