# app/utils/auth_utils.py
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from app.core.config import settings


def to_iso(value: Optional[datetime]) -> Optional[str]:
    """Render a datetime as an ISO-8601 UTC string with millisecond precision."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_token_payload(user: dict) -> dict:
    """Identity claims carried by a token, built from a stored user document."""
    return {
        "id": str(user["_id"]),
        "email": user["email"],
        "role": user.get("role", "user"),
        "name": user.get("name", ""),
        "createdAt": to_iso(user.get("created_at")),
    }


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    if not settings.JWT_SECRET:
        raise RuntimeError("JWT_SECRET is not configured")

    now = datetime.now(timezone.utc)
    to_encode = data.copy()
    to_encode.update({
        "iat": now,
        "exp": now + (expires_delta or settings.token_lifetime),
    })
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    """Verify signature and expiry; raises a jwt.PyJWTError subclass on failure."""
    if not settings.JWT_SECRET:
        raise jwt.InvalidKeyError("JWT_SECRET is not configured")
    return jwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "iat"]},
    )
