"""SQLAlchemy models for notifications and their user links."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Table, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from notify_api.infrastructure.database import Base
from notify_api.utils import now_utc_naive

# Authoritative recipient list of each notification.
notification_recipient_table = Table(
    "notification_recipient",
    Base.metadata,
    Column(
        "notification_id",
        Integer,
        ForeignKey("notification.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)

# Back-reference from a user to the notifications addressed to it. Rebuildable
# from ``notification_recipient``.
user_notification_table = Table(
    "user_notification",
    Base.metadata,
    Column(
        "user_id",
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "notification_id",
        Integer,
        ForeignKey("notification.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    ),
)


class NotificationModel(Base):
    """Database representation for notifications."""

    __tablename__ = "notification"
    # Ids of deleted rows are never handed out again.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    message = Column(Text, nullable=False)
    is_read = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    created_at = Column(DateTime(), nullable=False, default=now_utc_naive, index=True)

    recipients = relationship(
        "UserModel",
        secondary=notification_recipient_table,
        order_by="UserModel.id",
        lazy="selectin",
    )


__all__ = [
    "NotificationModel",
    "notification_recipient_table",
    "user_notification_table",
]
