# core/security.py

from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import jwt, JWTError

from core.config import settings
from core.logging_config import logger


DEV_TOKEN_PREFIX = "dev-token-"


# -----------------------------------------------------
# Passwords (bcrypt)
# -----------------------------------------------------
def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=12)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: Optional[str]) -> bool:
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # malformed hash in the users table
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


# -----------------------------------------------------
# JWT
# -----------------------------------------------------
def create_access_token(user: dict, expires_hours: Optional[int] = None) -> str:
    hours = expires_hours if expires_hours is not None else settings.JWT_EXPIRE_HOURS
    payload = {
        "sub": str(user.get("id")),
        "username": user.get("username"),
        "role": user.get("role", "user"),
        "name": user.get("name"),
        "exp": datetime.now(timezone.utc) + timedelta(hours=hours),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Return the claims of a valid token, or None."""
    try:
        return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None


def is_dev_token(token: str) -> bool:
    return bool(token) and token.startswith(DEV_TOKEN_PREFIX)
