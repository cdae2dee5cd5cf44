from .auth import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ProtectedResponse,
    RegisterRequest,
    RegisterResponse,
)
from .notification import (
    MarkReadResponse,
    NotificationCreate,
    NotificationEnvelope,
    NotificationListResponse,
    NotificationMarkReadRequest,
    NotificationRead,
    ReconcileResponse,
)
from .common import MAX_ENTITY_ID, EntityId
from .user import UserEnvelope, UserRead

__all__ = [
    "EntityId",
    "MAX_ENTITY_ID",
    "LoginRequest",
    "LoginResponse",
    "MarkReadResponse",
    "MessageResponse",
    "NotificationCreate",
    "NotificationEnvelope",
    "NotificationListResponse",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "ProtectedResponse",
    "ReconcileResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UserEnvelope",
    "UserRead",
]
