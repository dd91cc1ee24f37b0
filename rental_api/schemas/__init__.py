"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schema Naming Convention:
- XxxRequest / XxxCreate: Request bodies
- XxxUpdate: Fields allowed when updating
- XxxResponse: Fields returned in API responses
"""

from rental_api.schemas.base import CamelModel, MessageResponse
from rental_api.schemas.book import (
    BookCreate,
    BookListResponse,
    BookResponse,
    BookUpdate,
)
from rental_api.schemas.rental import (
    RentalCreate,
    RentalResponse,
    RentalReturnResponse,
)
from rental_api.schemas.user import LoginRequest, RegisterRequest, TokenResponse

__all__ = [
    "CamelModel",
    "MessageResponse",
    # Book schemas
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookListResponse",
    # Rental schemas
    "RentalCreate",
    "RentalResponse",
    "RentalReturnResponse",
    # User schemas
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
]
