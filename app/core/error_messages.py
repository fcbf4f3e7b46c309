# app/core/error_messages.py
from fastapi import HTTPException, status


class ErrorResponses:
    # 400
    MISSING_CREDENTIALS = HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Email and password are required.",
    )
    INVALID_EMAIL = HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Please enter a valid email.",
    )
    INVALID_ROLE = HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail='Role must be "admin" or "user".',
    )

    # 401
    INVALID_CREDENTIALS = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid credentials.",
    )
    MISSING_TOKEN = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Access denied. No token provided.",
        headers={"WWW-Authenticate": "Bearer"},
    )
    INVALID_TOKEN = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token.",
        headers={"WWW-Authenticate": "Bearer"},
    )

    # 403
    ADMIN_ONLY = HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Forbidden. Admin access required.",
    )

    # 404
    USER_NOT_FOUND = HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="User not found.",
    )

    # 409
    USER_EXISTS = HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="An account with this email already exists.",
    )
    ADMIN_USER_EXISTS = HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail="A user with this email already exists.",
    )

    # 500
    INTERNAL_SERVER_ERROR = HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error.",
    )

    @staticmethod
    def password_too_short(min_length: int) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password must be at least {min_length} characters.",
        )
