"""Routes for inspecting and administering users."""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from notify_api.application.use_cases.users import (
    delete_user as delete_user_uc,
    get_user as get_user_uc,
    grant_admin as grant_admin_uc,
)
from notify_api.domain.entities import TokenClaims, User
from notify_api.domain.exceptions import NotifyError
from notify_api.infrastructure.database import get_db
from notify_api.interfaces.api.dependencies import get_current_identity, require_admin
from notify_api.interfaces.api.routes_helpers import http_error
from notify_api.interfaces.api.schemas import MAX_ENTITY_ID, UserEnvelope, UserRead

router = APIRouter(prefix="/users", tags=["users"])


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.get("/me", response_model=UserEnvelope)
def read_current_user(
    db: Session = Depends(get_db),
    identity: TokenClaims = Depends(get_current_identity),
) -> UserEnvelope:
    """Return the authenticated user's record."""

    try:
        user = get_user_uc(db, identity.user_id)
    except NotifyError as exc:
        raise http_error(exc) from exc
    return UserEnvelope(message="Current user", user=_to_read_model(user))


@router.put("/{user_id}/admin", response_model=UserEnvelope)
def grant_admin(
    user_id: int = Path(..., gt=0, le=MAX_ENTITY_ID),
    db: Session = Depends(get_db),
    identity: TokenClaims = Depends(require_admin),
) -> UserEnvelope:
    """Grant administrator privileges to ``user_id``."""

    try:
        user = grant_admin_uc(db, user_id, granted_by=identity.user_id)
    except NotifyError as exc:
        raise http_error(exc, message="Error granting admin privileges") from exc
    return UserEnvelope(message="User granted admin privileges", user=_to_read_model(user))


@router.delete("/{user_id}", response_model=UserEnvelope)
def delete_user(
    user_id: int = Path(..., gt=0, le=MAX_ENTITY_ID),
    db: Session = Depends(get_db),
    identity: TokenClaims = Depends(get_current_identity),
) -> UserEnvelope:
    """Soft delete ``user_id``; admins may delete anyone, users only themselves."""

    try:
        user = delete_user_uc(db, user_id, actor=identity)
    except NotifyError as exc:
        raise http_error(exc, message="Error deleting user") from exc
    return UserEnvelope(message="User deleted", user=_to_read_model(user))
