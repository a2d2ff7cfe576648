"""
Security Utilities Module

Password hashing (bcrypt) and JWT access tokens (python-jose) used by the
authentication endpoints and the role gate.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import JWTError, jwt

from junkcrm.core.config import settings


def get_password_hash(password: str) -> str:
    """
    Hash a password with bcrypt.

    Every call draws a fresh random salt, so hashing the same password twice
    yields two different strings that both verify.
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Check a plain password against a stored bcrypt hash.

    bcrypt re-derives the key from the stored salt and compares in constant
    time. A missing or malformed stored hash never verifies.
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    subject: str, role: str, username: str, expires_delta: Optional[timedelta] = None
) -> str:
    """Issue a signed token carrying the user's id, username and role."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {"sub": subject, "role": role, "username": username, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and verify an access token.

    Raises:
        JWTError: If the signature is invalid or the token has expired
    """
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    if "role" not in payload:
        raise JWTError("Token carries no role claim")
    return payload
