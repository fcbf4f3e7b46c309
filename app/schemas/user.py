# app/schemas/user.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

_email_adapter = TypeAdapter(EmailStr)


def is_valid_email(value: str) -> bool:
    try:
        _email_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Request bodies keep every field optional so missing values surface as
# the route's own 400 messages instead of generic validation errors.

class RegisterSchema(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginSchema(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserCreateSchema(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None
    name: Optional[str] = None


class RoleUpdateSchema(BaseModel):
    role: Optional[str] = None


class UserOut(CamelModel):
    id: str
    email: str
    role: str
    name: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, document: dict) -> "UserOut":
        return cls(
            id=str(document["_id"]),
            email=document["email"],
            role=document.get("role", "user"),
            name=document.get("name", ""),
            created_at=document.get("created_at"),
            updated_at=document.get("updated_at"),
        )


class TokenPayload(CamelModel):
    """Claims carried by an access token."""

    id: str
    email: str
    role: str
    name: str = ""
    created_at: Optional[str] = None
    iat: Optional[int] = None
    exp: Optional[int] = None


class AuthUser(CamelModel):
    id: str
    email: str
    role: str
    name: str = ""
    created_at: Optional[str] = None


class AuthResponse(BaseModel):
    token: str
    user: AuthUser


class UserResponse(BaseModel):
    user: UserOut


class UserListResponse(BaseModel):
    users: List[UserOut] = Field(default_factory=list)


class MessageResponse(BaseModel):
    message: str
