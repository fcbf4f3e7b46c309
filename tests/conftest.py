"""
Shared test fixtures and utilities.

Environment is set before any application module is imported so the
module-level settings object picks it up.
"""

import os

TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"

os.environ["JWT_SECRET"] = TEST_JWT_SECRET
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017/admin_dashboard_test")

from datetime import datetime, timedelta, timezone  # noqa: E402

import jwt  # noqa: E402
import pytest  # noqa: E402
from bson import ObjectId  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402


def create_test_token(
    user_id: str = "64b7f0c2a1b2c3d4e5f60718",
    email: str = "test@example.com",
    role: str = "user",
    name: str = "Test User",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """Create a signed token shaped like the ones the API issues."""
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
    payload = {
        "id": user_id,
        "email": email,
        "role": role,
        "name": name,
        "createdAt": "2025-01-01T00:00:00.000Z",
        "iat": int((now - timedelta(hours=2)).timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_user_doc(
    email: str = "test@example.com",
    role: str = "user",
    name: str = "Test User",
    user_id: ObjectId = None,
    password: str = None,
    created_at: datetime = None,
) -> dict:
    """A user document as returned by the store."""
    now = created_at or datetime(2025, 1, 1, tzinfo=timezone.utc)
    doc = {
        "_id": user_id or ObjectId(),
        "email": email,
        "role": role,
        "name": name,
        "created_at": now,
        "updated_at": now,
    }
    if password is not None:
        doc["password"] = password
    return doc


@pytest.fixture
def client() -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def user_headers() -> dict:
    return {"Authorization": f"Bearer {create_test_token()}"}


@pytest.fixture
def admin_headers() -> dict:
    token = create_test_token(
        user_id="64b7f0c2a1b2c3d4e5f60700",
        email="admin@example.com",
        role="admin",
        name="Admin",
    )
    return {"Authorization": f"Bearer {token}"}
