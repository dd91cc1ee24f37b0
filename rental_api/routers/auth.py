"""
Authentication Router

Handles user authentication endpoints:
- POST /register: create an account, receive a credential
- POST /login: exchange email/password for a credential

Both return ``{"token": ..., "userId": ...}``. Duplicate emails and bad
credentials are reported as 400 with a ``message`` body. Bodies may be JSON
or urlencoded form data.
"""

from fastapi import APIRouter, status

from rental_api.dependencies import Identity, LoginBody, RegisterBody
from rental_api.schemas import MessageResponse, TokenResponse

router = APIRouter(
    tags=["Authentication"],
    responses={
        400: {"model": MessageResponse, "description": "User exists or invalid credentials"},
    },
)


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(user_data: RegisterBody, identity: Identity) -> TokenResponse:
    """
    Register a new user with name, email and password.

    1. Checks for a duplicate email
    2. Hashes the password with bcrypt
    3. Creates the user record
    4. Returns a one-hour credential and the new user's id
    """
    return identity.register(user_data.name, user_data.email, user_data.password)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with email and password",
)
def login(credentials: LoginBody, identity: Identity) -> TokenResponse:
    """Authenticate and return a fresh one-hour credential."""
    return identity.login(credentials.email, credentials.password)
