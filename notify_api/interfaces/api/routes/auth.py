"""Endpoints for registration, login and session handling."""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from notify_api.application.use_cases.users import (
    authenticate_user,
    register_user as register_user_uc,
)
from notify_api.config import get_settings
from notify_api.domain.entities import TokenClaims
from notify_api.domain.exceptions import InvalidCredentials, NotifyError
from notify_api.infrastructure.database import get_db
from notify_api.infrastructure.security import TokenIssuer
from notify_api.interfaces.api.dependencies import get_current_identity, get_token_issuer
from notify_api.interfaces.api.routes_helpers import http_error
from notify_api.interfaces.api.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ProtectedResponse,
    RegisterRequest,
    RegisterResponse,
)

router = APIRouter(prefix="/auth", tags=["auth"])
settings = get_settings()
logger = logging.getLogger(__name__)


def _set_session_cookie(response: Response, token: str, max_age: int) -> None:
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
        max_age=max_age,
        path="/",
    )


def _clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.cookie_name,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.secure_cookies,
    )


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)) -> RegisterResponse:
    """Create a regular (non admin) user account."""

    try:
        user = register_user_uc(
            db,
            email=payload.email,
            username=payload.username,
            password=payload.password,
        )
    except NotifyError as exc:
        raise http_error(exc, message="Registration error") from exc

    return RegisterResponse(message="User successfully registered", id=user.id)


@router.post("/login", response_model=LoginResponse)
def login(
    payload: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> LoginResponse:
    """Verify the credentials and open a one hour session."""

    user = authenticate_user(db, payload.email, payload.password)
    if user is None:
        logger.info("Rejected login attempt for %s", payload.email)
        raise http_error(InvalidCredentials(), message="Invalid credentials")

    token = issuer.issue(user.id, user.is_admin)
    _set_session_cookie(response, token, int(issuer.lifetime.total_seconds()))
    return LoginResponse(
        message="Login successful",
        id=user.id,
        is_admin=user.is_admin,
        access_token=token,
    )


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response) -> MessageResponse:
    """Drop the session cookie."""

    _clear_session_cookie(response)
    return MessageResponse(message="Logout successful, token removed")


@router.get("/protected", response_model=ProtectedResponse)
def protected(identity: TokenClaims = Depends(get_current_identity)) -> ProtectedResponse:
    return ProtectedResponse(
        message="Access to protected route",
        user_id=identity.user_id,
        is_admin=identity.is_admin,
    )
