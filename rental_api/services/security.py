"""
Security Service

Handles password hashing and credential (JWT) operations.

Security Features:
==================
1. Password hashing with bcrypt (passlib), salted per password
2. Signed, time-limited JWT credentials embedding the user identifier
3. Constant-time password verification

Usage:
    from rental_api.services.security import hash_password, verify_password

    hashed = hash_password("secret123")
    is_valid = verify_password("secret123", hashed)
"""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from rental_api.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("secret123")
        >>> hashed.startswith("$2b$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


# -------------------------------------------------------------------------
# Credential Configuration
# -------------------------------------------------------------------------
ALGORITHM = "HS256"


def create_access_token(
    user_id: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed credential for a user.

    The payload carries the user identifier under ``userId`` and an ``exp``
    claim. Lifetime defaults to ``settings.access_token_expire_minutes``
    (one hour).

    Example:
        >>> token = create_access_token("3f2a9c0b")
        >>> token.count(".") == 2  # JWT format: header.payload.signature
        True
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "userId": user_id,
        "exp": datetime.now(UTC) + expires_delta,
    }

    return jwt.encode(
        to_encode,
        settings.jwt_secret,
        algorithm=ALGORITHM,
    )


def decode_token(token: str) -> dict | None:
    """
    Decode and validate a credential.

    Returns:
        Decoded payload if valid, None if invalid or expired
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[ALGORITHM],
        )
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None
