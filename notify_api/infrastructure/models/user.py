"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from notify_api.infrastructure.database import Base
from notify_api.infrastructure.models.notification import user_notification_table
from notify_api.utils import now_utc_naive


class UserModel(Base):
    """Database representation of the system user."""

    __tablename__ = "user"
    # Ids of deleted rows are never handed out again.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(254), nullable=False, unique=True, index=True)
    username = Column(String(50), nullable=False)
    password_hash = Column(String(255), nullable=False)
    is_admin = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    is_deleted = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    created_at = Column(DateTime, nullable=False, default=now_utc_naive)

    inbox = relationship(
        "NotificationModel",
        secondary=user_notification_table,
        order_by="NotificationModel.id",
        lazy="selectin",
        viewonly=True,
    )


__all__ = ["UserModel"]
