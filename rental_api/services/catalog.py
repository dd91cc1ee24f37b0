"""
Catalog Service

Create, list, update and delete book records.

Listing
=======
- Optional exact-match filter on genre
- Pagination is 1-indexed: page 1 skips nothing, page 2 skips ``limit``
- total_pages = ceil(matching books / limit)
- Books come back in insertion order (created_at, then id)
"""

import logging
import math
from typing import BinaryIO

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from rental_api.exceptions import NotFoundError
from rental_api.models import Book
from rental_api.schemas import BookListResponse, BookResponse, BookUpdate
from rental_api.services.storage import ContentStore

logger = logging.getLogger(__name__)


class CatalogService:
    """Book catalog operations against a single session."""

    def __init__(self, db: Session, content_store: ContentStore | None = None) -> None:
        self.db = db
        self.content_store = content_store

    def get_book(self, book_id: str) -> Book:
        """
        Get a book by ID.

        Raises:
            NotFoundError: If no book has this id
        """
        book = self.db.get(Book, book_id)
        if book is None:
            raise NotFoundError("Book not found")
        return book

    def create_book(
        self,
        title: str,
        author: str,
        genre: str,
        cover_filename: str | None = None,
        cover_stream: BinaryIO | None = None,
    ) -> Book:
        """
        Create a book, storing the cover image first when one is supplied.
        """
        cover_image = None
        if cover_filename and cover_stream is not None:
            if self.content_store is None:
                raise RuntimeError("A content store is required to save cover images")
            cover_image = self.content_store.save(cover_filename, cover_stream)

        book = Book(
            title=title,
            author=author,
            genre=genre,
            cover_image=cover_image,
        )

        self.db.add(book)
        self.db.commit()
        self.db.refresh(book)

        logger.info(f"Created book {book.id}: {book.title}")
        return book

    def list_books(
        self,
        page: int = 1,
        limit: int = 10,
        genre: str | None = None,
    ) -> BookListResponse:
        """
        Return one page of books, optionally filtered by exact genre.
        """
        base_stmt = select(Book)
        if genre:
            base_stmt = base_stmt.where(Book.genre == genre)

        count_stmt = select(func.count()).select_from(base_stmt.subquery())
        total = self.db.execute(count_stmt).scalar() or 0

        stmt = (
            base_stmt
            .order_by(Book.created_at, Book.id)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        books = self.db.execute(stmt).scalars().all()

        return BookListResponse(
            books=[BookResponse.model_validate(book) for book in books],
            total_pages=math.ceil(total / limit),
            current_page=page,
        )

    def update_book(self, book_id: str, data: BookUpdate) -> Book:
        """
        Replace a book's title, author and genre.

        Raises:
            NotFoundError: If no book has this id
        """
        book = self.get_book(book_id)

        book.title = data.title
        book.author = data.author
        book.genre = data.genre

        self.db.commit()
        self.db.refresh(book)

        logger.info(f"Updated book {book.id}")
        return book

    def delete_book(self, book_id: str) -> None:
        """
        Permanently delete a book. Its cover file, if any, is left in place.

        Raises:
            NotFoundError: If no book has this id
        """
        book = self.get_book(book_id)

        self.db.delete(book)
        self.db.commit()

        logger.info(f"Deleted book {book_id}")
