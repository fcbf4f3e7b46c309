# app/utils/hash_utils.py
import bcrypt

from app.core.config import settings

# bcrypt only reads the first 72 bytes of a secret
BCRYPT_MAX_BYTES = 72


def _secret(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_secret(password), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    if not plain or not hashed:
        return False
    try:
        return bcrypt.checkpw(_secret(plain), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False
