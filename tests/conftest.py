"""Shared fixtures: a throwaway SQLite database and helpers to build users."""

from __future__ import annotations

import os
import sys
import tempfile
from datetime import timedelta
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / f"notify_api_test_{os.getpid()}.db"
TEST_SECRET = "test-secret"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = TEST_SECRET
os.environ["ENVIRONMENT"] = "test"

from notify_api.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from notify_api.application.use_cases.users import register_user  # noqa: E402
from notify_api.domain.entities import TokenClaims, User  # noqa: E402
from notify_api.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from notify_api.infrastructure.security import TokenIssuer, pwd_context  # noqa: E402
from notify_api.utils import now_utc  # noqa: E402

DEFAULT_PASSWORD = "secret1"

# Fewer rounds keep the suite fast; the hash format is unchanged.
pwd_context.update(pbkdf2_sha256__rounds=1_000)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def issuer() -> TokenIssuer:
    return TokenIssuer(TEST_SECRET)


@pytest.fixture()
def make_user(session):
    """Return a factory registering users through the regular use case."""

    def _make_user(
        username: str,
        *,
        email: str | None = None,
        password: str = DEFAULT_PASSWORD,
        is_admin: bool = False,
    ) -> User:
        return register_user(
            session,
            email=email or f"{username}@example.com",
            username=username,
            password=password,
            is_admin=is_admin,
        )

    return _make_user


@pytest.fixture()
def claims_for():
    """Return a factory building verified identities for use case calls."""

    def _claims_for(user: User) -> TokenClaims:
        issued = now_utc()
        return TokenClaims(
            user_id=user.id,
            is_admin=user.is_admin,
            issued_at=issued,
            expires_at=issued + timedelta(hours=1),
        )

    return _claims_for


@pytest.fixture()
def client():
    """Return a test client bound to a fresh application instance."""

    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def login(client):
    """Log a user in and return bearer headers for the issued token."""

    def _login(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        response = client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login
