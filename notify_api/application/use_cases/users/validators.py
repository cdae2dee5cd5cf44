"""Common validation helpers for user use cases."""

from notify_api.domain.exceptions import InvalidInput

USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6


def normalize_email(email: str) -> str:
    """Return a stripped, lower-cased email address or raise ``InvalidInput``."""

    normalized = (email or "").strip().lower()
    if normalized.count("@") != 1:
        raise InvalidInput("Invalid email format")

    local_part, domain = normalized.split("@", 1)
    if not local_part or "." not in domain or domain.startswith(".") or domain.endswith("."):
        raise InvalidInput("Invalid email format")

    return normalized


def ensure_valid_username(username: str) -> str:
    normalized = (username or "").strip()
    if len(normalized) < USERNAME_MIN_LENGTH:
        raise InvalidInput(
            f"Username must be at least {USERNAME_MIN_LENGTH} characters long"
        )
    if len(normalized) > USERNAME_MAX_LENGTH:
        raise InvalidInput(
            f"Username must be at most {USERNAME_MAX_LENGTH} characters long"
        )
    return normalized


def ensure_valid_password(password: str) -> str:
    if len(password or "") < PASSWORD_MIN_LENGTH:
        raise InvalidInput(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
        )
    return password
