"""
Rental Pydantic Schemas
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from rental_api.schemas.base import CamelModel


class RentalCreate(CamelModel):
    """
    Schema for creating a rental.

    Identifiers are opaque; numeric JSON values are accepted and stored as
    strings.

    Example request body:
    {
        "userId": "u1",
        "bookId": "9b1f0c6e2d7a4e5f8c3b1a0d9e8f7c6b"
    }
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    user_id: str = Field(..., description="Identifier of the renting user")
    book_id: str = Field(..., description="Identifier of the rented book")


class RentalResponse(CamelModel):
    id: str
    user_id: str
    book_id: str
    rental_date: datetime
    return_date: datetime | None = None
    returned: bool
    created_at: datetime
    updated_at: datetime


class RentalReturnResponse(CamelModel):
    """Acknowledgement of a return with the updated rental."""

    message: str
    rental: RentalResponse
