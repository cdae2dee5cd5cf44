"""Identity claims carried by a verified session token."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenClaims:
    """Verified identity attached to an authenticated request."""

    user_id: int
    is_admin: bool
    issued_at: datetime
    expires_at: datetime


__all__ = ["TokenClaims"]
