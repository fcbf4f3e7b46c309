# app/routes/admin.py
import logging

from fastapi import APIRouter, Depends, status
from pymongo.errors import DuplicateKeyError

from app.core.error_messages import ErrorResponses
from app.middleware.rbac import is_admin
from app.models import user as user_model
from app.schemas.user import (
    MessageResponse,
    RoleUpdateSchema,
    TokenPayload,
    UserCreateSchema,
    UserListResponse,
    UserOut,
    UserResponse,
)
from app.utils.validators import validate_new_account, validate_role

logger = logging.getLogger(__name__)

admin_router = APIRouter(tags=["Admin"], dependencies=[Depends(is_admin)])


@admin_router.get("/users", response_model=UserListResponse)
async def get_all_users():
    users = await user_model.list_users()
    return {"users": [UserOut.from_document(user) for user in users]}


@admin_router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(data: UserCreateSchema, admin: TokenPayload = Depends(is_admin)):
    email, password = validate_new_account(data.email, data.password)
    role = validate_role(data.role or user_model.Role.USER.value)

    if await user_model.get_user_by_email(email):
        raise ErrorResponses.ADMIN_USER_EXISTS

    try:
        user = await user_model.create_user(email=email, password=password, name=data.name or "", role=role)
    except DuplicateKeyError:
        raise ErrorResponses.ADMIN_USER_EXISTS

    logger.info("Admin %s created %s (%s)", admin.email, email, role)
    return {"user": UserOut.from_document(user)}


@admin_router.delete("/users/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str, admin: TokenPayload = Depends(is_admin)):
    if not await user_model.delete_user(user_id):
        raise ErrorResponses.USER_NOT_FOUND

    logger.info("Admin %s deleted user %s", admin.email, user_id)
    return {"message": "User deleted successfully."}


@admin_router.patch("/users/{user_id}/role", response_model=UserResponse)
async def update_role(user_id: str, data: RoleUpdateSchema, admin: TokenPayload = Depends(is_admin)):
    role = validate_role(data.role)

    user = await user_model.update_user_role(user_id, role)
    if not user:
        raise ErrorResponses.USER_NOT_FOUND

    logger.info("Admin %s set role of %s to %s", admin.email, user_id, role)
    return {"user": UserOut.from_document(user)}
