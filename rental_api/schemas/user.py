"""
User Pydantic Schemas

Schemas:
- RegisterRequest: Registration data (name, email, password)
- LoginRequest: Login data (email, password)
- TokenResponse: Issued credential plus the user's identifier

No schema here ever exposes the password hash.
"""

from pydantic import Field

from rental_api.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    """
    Schema for user registration.

    Example request body:
    {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "password": "secret123"
    }
    """

    name: str = Field(
        ...,
        description="User's display name",
        examples=["Jane Doe"],
    )

    email: str = Field(
        ...,
        description="User's email address (must be unique)",
        examples=["jane@example.com"],
    )

    password: str = Field(
        ...,
        description="Plain text password, hashed before storage",
        examples=["secret123"],
    )


class LoginRequest(CamelModel):
    """Schema for email/password login."""

    email: str = Field(..., examples=["jane@example.com"])
    password: str = Field(..., examples=["secret123"])


class TokenResponse(CamelModel):
    """
    Schema for authentication responses.

    Example:
    {
        "token": "eyJhbGciOiJIUzI1NiIs...",
        "userId": "3f2a9c0b7d6e4f1a8b5c2d9e0f1a2b3c"
    }
    """

    token: str = Field(..., description="Signed credential, valid for one hour")
    user_id: str = Field(..., description="Identifier of the authenticated user")
