# app/utils/validators.py
from typing import Optional, Tuple

from app.core.config import settings
from app.core.error_messages import ErrorResponses
from app.models.user import Role, normalize_email
from app.schemas.user import is_valid_email


def require_credentials(email: Optional[str], password: Optional[str]) -> Tuple[str, str]:
    if not email or not email.strip() or not password:
        raise ErrorResponses.MISSING_CREDENTIALS
    return normalize_email(email), password


def validate_new_account(email: Optional[str], password: Optional[str]) -> Tuple[str, str]:
    """Checks applied before any account is stored. Returns the normalized email."""
    email, password = require_credentials(email, password)
    if not is_valid_email(email):
        raise ErrorResponses.INVALID_EMAIL
    if len(password) < settings.PASSWORD_MIN_LENGTH:
        raise ErrorResponses.password_too_short(settings.PASSWORD_MIN_LENGTH)
    return email, password


def validate_role(role: Optional[str]) -> str:
    if role not in Role.values():
        raise ErrorResponses.INVALID_ROLE
    return role
