"""
Book Model

The catalog record. Books are owned by the catalog service: created with a
multipart upload, replaced field-by-field on update, deleted by id.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, true
from sqlalchemy.orm import Mapped, mapped_column

from rental_api.database import Base, generate_id, utcnow


class Book(Base):
    """
    Book model representing books in the catalog.

    Table: books

    Fields:
    - title, author, genre: Required text
    - cover_image: Path of the uploaded cover inside the content store
    - available: Defaults to true; no operation changes it

    Indexes:
    - Primary key on id (automatic)
    - genre: Index for the list filter

    Example:
        book = Book(title="Dune", author="Frank Herbert", genre="SciFi")
    """

    __tablename__ = "books"

    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=generate_id,
    )

    title: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author name"
    )

    genre: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Genre, matched exactly by the list filter"
    )

    cover_image: Mapped[str | None] = mapped_column(
        String(1024),
        nullable=True,
        comment="Stored path of the uploaded cover image"
    )

    available: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        server_default=true(),
        nullable=False,
        comment="Availability flag (not maintained by rentals)"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    # Python-side defaults keep sub-second precision on every backend, which
    # the list endpoint relies on for insertion ordering.
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
        return f"Book(id={self.id!r}, title='{self.title}', genre='{self.genre}')"
