# app/routes/auth.py
import logging

from fastapi import APIRouter, Security, status
from pymongo.errors import DuplicateKeyError

from app.core.error_messages import ErrorResponses
from app.middleware.rbac import get_current_user
from app.models import user as user_model
from app.schemas.user import (
    AuthResponse,
    LoginSchema,
    RegisterSchema,
    TokenPayload,
    UserOut,
    UserResponse,
)
from app.utils.auth_utils import build_token_payload, create_access_token
from app.utils.hash_utils import verify_password
from app.utils.validators import require_credentials, validate_new_account

logger = logging.getLogger(__name__)

auth_router = APIRouter(tags=["Auth"])


def _auth_response(user: dict) -> dict:
    payload = build_token_payload(user)
    return {"token": create_access_token(payload), "user": payload}


@auth_router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(data: RegisterSchema):
    email, password = validate_new_account(data.email, data.password)

    if await user_model.get_user_by_email(email):
        raise ErrorResponses.USER_EXISTS

    try:
        user = await user_model.create_user(
            email=email,
            password=password,
            name=data.name or "",
            role=user_model.Role.USER.value,
        )
    except DuplicateKeyError:
        # lost a race with a concurrent registration
        raise ErrorResponses.USER_EXISTS

    logger.info("Registered %s", email)
    return _auth_response(user)


@auth_router.post("/login", response_model=AuthResponse)
async def login(data: LoginSchema):
    email, password = require_credentials(data.email, data.password)

    user = await user_model.get_user_by_email(email, include_password=True)
    if not user or not verify_password(password, user.get("password", "")):
        logger.info("Failed login for %s", email)
        raise ErrorResponses.INVALID_CREDENTIALS

    return _auth_response(user)


@auth_router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: TokenPayload = Security(get_current_user)):
    user = await user_model.get_user_by_id(current_user.id)
    if not user:
        raise ErrorResponses.USER_NOT_FOUND
    return {"user": UserOut.from_document(user)}
