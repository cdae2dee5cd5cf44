"""Security helpers for password hashing and session tokens."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from notify_api.domain.entities import TokenClaims
from notify_api.domain.exceptions import InvalidToken, TokenExpired
from notify_api.utils import ensure_utc, now_utc

# ---- Password hashing (passlib) ----
# 310000 rounds keeps a single verify well above 100ms on current hardware.
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__rounds=310_000,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a hash passlib recognizes.
        return False


# ---- JWT ----
TOKEN_ALGORITHM = "HS256"
TOKEN_LIFETIME = timedelta(hours=1)


class TokenIssuer:
    """Create and verify signed, time-limited session tokens.

    The signing key is provided once when the application starts and never
    changes afterwards. The issuer does not know how tokens travel; cookies
    and headers are handled by the HTTP layer.
    """

    def __init__(self, secret_key: str, *, lifetime: timedelta = TOKEN_LIFETIME) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret_key = secret_key
        self.lifetime = lifetime

    def issue(
        self,
        user_id: int,
        is_admin: bool,
        *,
        issued_at: datetime | None = None,
    ) -> str:
        """Return a token embedding ``user_id``, ``is_admin`` and the issue time."""

        issued = ensure_utc(issued_at) or now_utc()
        claims = {
            "sub": str(user_id),
            "is_admin": bool(is_admin),
            "iat": issued,
            "exp": issued + self.lifetime,
        }
        return jwt.encode(claims, self._secret_key, algorithm=TOKEN_ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """Return the claims of ``token`` or raise an authentication error."""

        if not token:
            raise InvalidToken("Token is missing")
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[TOKEN_ALGORITHM])
        except ExpiredSignatureError as exc:
            raise TokenExpired() from exc
        except JWTError as exc:
            raise InvalidToken() from exc

        return self._claims_from_payload(payload)

    @staticmethod
    def _claims_from_payload(payload: dict) -> TokenClaims:
        subject = payload.get("sub")
        is_admin = payload.get("is_admin")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")

        if not isinstance(subject, str) or not subject.isdigit():
            raise InvalidToken("Token subject is not a user id")
        if not isinstance(is_admin, bool):
            raise InvalidToken("Token admin claim is missing")
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            raise InvalidToken("Token timestamps are missing")

        return TokenClaims(
            user_id=int(subject),
            is_admin=is_admin,
            issued_at=datetime.fromtimestamp(issued_at, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(expires_at, tz=timezone.utc),
        )


__all__ = [
    "TOKEN_ALGORITHM",
    "TOKEN_LIFETIME",
    "TokenIssuer",
    "get_password_hash",
    "pwd_context",
    "verify_password",
]
