"""
Identity Service

Registers and authenticates users and issues credentials.

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords are never logged or stored
- Unknown email and wrong password produce the same error, so a caller
  cannot discover which emails are registered
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from rental_api.exceptions import ConflictError, InvalidCredentialsError
from rental_api.models import User
from rental_api.schemas import TokenResponse
from rental_api.services.security import (
    create_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


class IdentityService:
    """User registration and login against a single session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def register(self, name: str, email: str, password: str) -> TokenResponse:
        """
        Create a user and return a fresh credential.

        Raises:
            ConflictError: If the email is already registered
        """
        if self.find_by_email(email) is not None:
            raise ConflictError("User already exists")

        user = User(
            name=name,
            email=email,
            hashed_password=hash_password(password),
        )

        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)

        logger.info(f"New user registered: {user.email}")

        return TokenResponse(token=create_access_token(user.id), user_id=user.id)

    def login(self, email: str, password: str) -> TokenResponse:
        """
        Authenticate with email and password.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password
                does not match
        """
        user = self.find_by_email(email)

        if user is None:
            logger.warning(f"Login failed: user not found for {email}")
            raise InvalidCredentialsError("Invalid credentials")

        if not verify_password(password, user.hashed_password):
            logger.warning(f"Login failed: incorrect password for {email}")
            raise InvalidCredentialsError("Invalid credentials")

        logger.info(f"User logged in: {user.email}")

        return TokenResponse(token=create_access_token(user.id), user_id=user.id)
