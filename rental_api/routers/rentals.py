"""
Rentals Router

- POST /rentals               rent a book (400 if already rented)
- PUT  /rentals/{id}/return   mark a rental returned
"""

from fastapi import APIRouter, status

from rental_api.dependencies import RentalBody, Rentals
from rental_api.schemas import (
    MessageResponse,
    RentalResponse,
    RentalReturnResponse,
)

router = APIRouter(
    prefix="/rentals",
    tags=["Rentals"],
)


@router.post(
    "",
    response_model=RentalResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Rent a book",
    responses={
        400: {"model": MessageResponse, "description": "Book already rented by this user"},
    },
)
def create_rental(rental_data: RentalBody, rentals: Rentals) -> RentalResponse:
    """
    Create an active rental for a (user, book) pair.

    Fails when the user already holds an unreturned rental of the book.
    Neither id is checked against existing users or books.
    """
    rental = rentals.create_rental(rental_data.user_id, rental_data.book_id)
    return RentalResponse.model_validate(rental)


@router.put(
    "/{rental_id}/return",
    response_model=RentalReturnResponse,
    summary="Return a rented book",
    responses={
        404: {"model": MessageResponse, "description": "Rental not found"},
    },
)
def return_rental(rental_id: str, rentals: Rentals) -> RentalReturnResponse:
    """
    Mark a rental returned.

    Returning an already returned rental succeeds again and moves
    ``returnDate`` forward.
    """
    rental = rentals.return_rental(rental_id)
    return RentalReturnResponse(
        message="Book returned successfully",
        rental=RentalResponse.model_validate(rental),
    )
