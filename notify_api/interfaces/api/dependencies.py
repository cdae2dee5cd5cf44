"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from notify_api.config import get_settings
from notify_api.domain.entities import TokenClaims
from notify_api.domain.exceptions import Forbidden, Unauthorized
from notify_api.infrastructure.database import get_db
from notify_api.infrastructure.repositories import UserRepository
from notify_api.infrastructure.security import TokenIssuer
from notify_api.interfaces.api.routes_helpers import error_envelope, http_error

bearer_scheme = HTTPBearer(auto_error=False)
settings = get_settings()


def get_token_issuer(request: Request) -> TokenIssuer:
    """Return the issuer created when the application started."""

    issuer = getattr(request.app.state, "token_issuer", None)
    if issuer is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_envelope("Unexpected error", "Token issuer is not configured"),
        )
    return issuer


def extract_token(
    request: Request, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    """Return the session token sent by the client.

    An explicit ``Authorization: Bearer`` header wins over the session cookie.
    """

    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.cookie_name)


def get_current_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> TokenClaims:
    """Verify the caller's token and attach its claims to ``request.state``."""

    token = extract_token(request, credentials)
    if not token:
        raise http_error(Unauthorized())

    try:
        claims = issuer.verify(token)
    except Unauthorized as exc:
        raise http_error(exc) from exc

    if UserRepository(db).get(claims.user_id) is None:
        raise http_error(Unauthorized("User no longer exists"))

    request.state.identity = claims
    return claims


def require_admin(identity: TokenClaims = Depends(get_current_identity)) -> TokenClaims:
    """Ensure the authenticated caller has administrator privileges."""

    if not identity.is_admin:
        raise http_error(Forbidden("Admin privileges required"))
    return identity
