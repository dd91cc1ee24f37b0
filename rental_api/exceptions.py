"""
Domain Exceptions

Services raise these instead of HTTPException so they stay independent of
the HTTP layer. ``rental_api.main`` registers a handler that turns any
``RentalAPIError`` into a JSON response of the form::

    {"message": "<message>"}

with the exception's ``status_code``.
"""

from fastapi import status


class RentalAPIError(Exception):
    """Base class for errors that map to a client-facing response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ConflictError(RentalAPIError):
    """The write would duplicate an existing user or active rental."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Conflict"


class InvalidCredentialsError(RentalAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class NotFoundError(RentalAPIError):
    """No record matches the requested identifier."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"
