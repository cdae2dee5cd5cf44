"""Tests for password hashing and session tokens."""

from __future__ import annotations

from datetime import timedelta

import pytest
from jose import jwt

from notify_api.domain.exceptions import InvalidToken, TokenExpired, Unauthorized
from notify_api.infrastructure.security import (
    TOKEN_ALGORITHM,
    TOKEN_LIFETIME,
    TokenIssuer,
    get_password_hash,
    verify_password,
)
from notify_api.utils import now_utc


def test_password_hash_never_stores_plaintext() -> None:
    hashed = get_password_hash("secret1")

    assert hashed != "secret1"
    assert "secret1" not in hashed
    assert hashed.startswith("$pbkdf2-sha256$")


def test_password_hash_is_salted() -> None:
    assert get_password_hash("secret1") != get_password_hash("secret1")


def test_verify_password_accepts_only_the_original() -> None:
    hashed = get_password_hash("secret1")

    assert verify_password("secret1", hashed) is True
    assert verify_password("secret2", hashed) is False
    assert verify_password("", hashed) is False


def test_verify_password_rejects_unknown_hash_format() -> None:
    assert verify_password("secret1", "secret1") is False


def test_token_lifetime_is_one_hour(issuer: TokenIssuer) -> None:
    assert TOKEN_LIFETIME == timedelta(hours=1)

    claims = issuer.verify(issuer.issue(7, True))

    assert claims.expires_at - claims.issued_at == timedelta(hours=1)


def test_issue_and_verify_returns_identity(issuer: TokenIssuer) -> None:
    claims = issuer.verify(issuer.issue(42, False))

    assert claims.user_id == 42
    assert claims.is_admin is False


def test_expired_token_is_rejected_even_with_valid_signature(issuer: TokenIssuer) -> None:
    token = issuer.issue(1, True, issued_at=now_utc() - timedelta(hours=2))

    with pytest.raises(TokenExpired):
        issuer.verify(token)


def test_token_close_to_expiry_is_still_valid(issuer: TokenIssuer) -> None:
    token = issuer.issue(1, False, issued_at=now_utc() - timedelta(minutes=59))

    assert issuer.verify(token).user_id == 1


def test_token_signed_with_another_key_is_invalid(issuer: TokenIssuer) -> None:
    forged = TokenIssuer("another-secret").issue(1, True)

    with pytest.raises(InvalidToken):
        issuer.verify(forged)


def test_expired_token_with_bad_signature_reports_invalid(issuer: TokenIssuer) -> None:
    forged = TokenIssuer("another-secret").issue(
        1, True, issued_at=now_utc() - timedelta(hours=2)
    )

    with pytest.raises(InvalidToken):
        issuer.verify(forged)


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_malformed_tokens_are_invalid(issuer: TokenIssuer, token: str) -> None:
    with pytest.raises(Unauthorized):
        issuer.verify(token)


def test_token_without_admin_claim_is_invalid(issuer: TokenIssuer) -> None:
    issued = now_utc()
    token = jwt.encode(
        {"sub": "1", "iat": issued, "exp": issued + timedelta(minutes=5)},
        "test-secret",
        algorithm=TOKEN_ALGORITHM,
    )

    with pytest.raises(InvalidToken):
        issuer.verify(token)


def test_issuer_requires_a_secret() -> None:
    with pytest.raises(ValueError):
        TokenIssuer("")
