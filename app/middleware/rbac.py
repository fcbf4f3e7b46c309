# app/middleware/rbac.py
from typing import Optional

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError

from app.core.error_messages import ErrorResponses
from app.models.user import Role
from app.schemas.user import TokenPayload
from app.utils.auth_utils import decode_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenPayload:
    if credentials is None or not credentials.credentials:
        raise ErrorResponses.MISSING_TOKEN
    try:
        return TokenPayload(**decode_token(credentials.credentials))
    except (jwt.PyJWTError, ValidationError):
        raise ErrorResponses.INVALID_TOKEN


def is_admin(user: TokenPayload = Depends(get_current_user)) -> TokenPayload:
    if user.role != Role.ADMIN.value:
        raise ErrorResponses.ADMIN_ONLY
    return user
