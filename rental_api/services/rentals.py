"""
Rental Service

Creates rentals and marks them returned.

Rental Lifecycle
================
Each (user_id, book_id) pair moves independently through:

    None ──create──▶ Active (returned=False) ──return──▶ Returned (returned=True)

Returned is terminal for that record; the pair may be rented again, which
inserts a new Active record.

Rules:
- At most one Active rental per pair. Enforced by looking for an Active
  record before inserting. The lookup and the insert are separate
  statements, so two concurrent requests for the same pair can both pass
  the check and both insert.
- Returning always succeeds for an existing record, even one that is
  already returned: returned stays True and return_date moves to now.
- user_id and book_id are not checked against the users or books tables.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from rental_api.database import utcnow
from rental_api.exceptions import ConflictError, NotFoundError
from rental_api.models import Rental

logger = logging.getLogger(__name__)


class RentalService:
    """Rental lifecycle operations against a single session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_active(self, user_id: str, book_id: str) -> Rental | None:
        """Return the pair's unreturned rental, if any."""
        stmt = (
            select(Rental)
            .where(
                Rental.user_id == user_id,
                Rental.book_id == book_id,
                Rental.returned.is_(False),
            )
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def create_rental(self, user_id: str, book_id: str) -> Rental:
        """
        Rent a book to a user.

        Raises:
            ConflictError: If the user already has this book rented
        """
        if self.find_active(user_id, book_id) is not None:
            logger.info(f"Rejected duplicate rental of book {book_id} by user {user_id}")
            raise ConflictError("You have already rented this book")

        rental = Rental(user_id=user_id, book_id=book_id, returned=False)

        self.db.add(rental)
        self.db.commit()
        self.db.refresh(rental)

        logger.info(f"Created rental {rental.id}: book {book_id} to user {user_id}")
        return rental

    def return_rental(self, rental_id: str) -> Rental:
        """
        Mark a rental returned now.

        Raises:
            NotFoundError: If no rental has this id
        """
        rental = self.db.get(Rental, rental_id)
        if rental is None:
            raise NotFoundError("Rental not found")

        if rental.returned:
            logger.warning(f"Rental {rental_id} was already returned; updating return date")

        rental.returned = True
        rental.return_date = utcnow()

        self.db.commit()
        self.db.refresh(rental)

        logger.info(f"Returned rental {rental.id}")
        return rental
