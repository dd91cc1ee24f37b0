"""
Rental Model

Tracks one rental of a book by a user. ``user_id`` and ``book_id`` are
opaque strings: they are not foreign keys and nothing checks that the user
or book exists.

Lifecycle of a record:
    created  → returned=False, rental_date=now, return_date=None
    returned → returned=True,  return_date=now
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, String, false
from sqlalchemy.orm import Mapped, mapped_column

from rental_api.database import Base, generate_id, utcnow


class Rental(Base):
    """
    Rental model.

    Table: rentals

    Indexes:
    - ix_rentals_active_lookup: (user_id, book_id, returned), the lookup
      performed before every insert
    """

    __tablename__ = "rentals"
    __table_args__ = (
        Index("ix_rentals_active_lookup", "user_id", "book_id", "returned"),
    )

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=generate_id,
    )

    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Identifier of the renting user"
    )

    book_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Identifier of the rented book"
    )

    rental_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    return_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    returned: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        server_default=false(),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"Rental(id={self.id!r}, user_id={self.user_id!r}, "
            f"book_id={self.book_id!r}, returned={self.returned})"
        )
