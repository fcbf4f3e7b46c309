# app/core/config.py
import re
from datetime import timedelta
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhdwy]?)\s*$")
_UNIT_SECONDS = {
    "": 1,
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 24 * 60 * 60,
    "w": 7 * 24 * 60 * 60,
    "y": 365 * 24 * 60 * 60,
}


def parse_duration(value: str) -> timedelta:
    """Parse "7d", "12h", "30m" or bare seconds into a timedelta."""
    match = _DURATION_RE.match(str(value).lower())
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(seconds=int(amount) * _UNIT_SECONDS[unit])


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = [
        "http://localhost:4200",
        "http://127.0.0.1:4200",
    ]

    # MongoDB
    MONGODB_URI: str = "mongodb://localhost:27017/admin_dashboard"
    MONGODB_DB: str = "admin_dashboard"

    # JWT
    JWT_SECRET: str = ""
    JWT_EXPIRES_IN: str = "7d"
    JWT_ALGORITHM: str = "HS256"

    # Passwords
    PASSWORD_MIN_LENGTH: int = 6
    BCRYPT_ROUNDS: int = 12

    @property
    def token_lifetime(self) -> timedelta:
        return parse_duration(self.JWT_EXPIRES_IN)


settings = Settings()
