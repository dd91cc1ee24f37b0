"""
Books Router

CRUD endpoints for the catalog:
- POST   /books        create; multipart with optional cover image, or JSON
- GET    /books        paginated list, optional exact genre filter
- PUT    /books/{id}   replace title, author and genre
- DELETE /books/{id}   permanent delete
"""

from typing import Annotated

from fastapi import APIRouter, Query, status

from rental_api.dependencies import BookBody, BookUpdateBody, Catalog, Pagination
from rental_api.schemas import (
    BookListResponse,
    BookResponse,
    MessageResponse,
)

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"model": MessageResponse, "description": "Book not found"},
    },
)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description=(
        "Create a book from multipart form data with an optional `coverImage` "
        "file, or from a JSON or urlencoded body without one."
    ),
)
def create_book(submission: BookBody, catalog: Catalog) -> BookResponse:
    """
    Create a new book.

    The cover image, when present, is written to the content store before
    the record is saved and its stored path is returned as ``coverImage``.
    """
    data = submission.book
    cover_image = submission.cover_image

    if cover_image is not None:
        book = catalog.create_book(
            data.title,
            data.author,
            data.genre,
            cover_filename=cover_image.filename,
            cover_stream=cover_image.file,
        )
    else:
        book = catalog.create_book(data.title, data.author, data.genre)

    return BookResponse.model_validate(book)


@router.get(
    "",
    response_model=BookListResponse,
    summary="List books",
    description="Get a page of books, optionally filtered by exact genre.",
)
def list_books(
    catalog: Catalog,
    pagination: Pagination,
    genre: Annotated[
        str | None,
        Query(description="Exact genre to filter by", examples=["Fantasy"]),
    ] = None,
) -> BookListResponse:
    """
    List books with pagination.

    Returns:
        ``books``, ``totalPages`` (ceil(matching / limit)) and
        ``currentPage``
    """
    return catalog.list_books(page=pagination.page, limit=pagination.limit, genre=genre)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
)
def update_book(book_id: str, book_data: BookUpdateBody, catalog: Catalog) -> BookResponse:
    """Replace the title, author and genre of an existing book."""
    book = catalog.update_book(book_id, book_data)
    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    summary="Delete a book",
)
def delete_book(book_id: str, catalog: Catalog) -> MessageResponse:
    """Permanently delete a book."""
    catalog.delete_book(book_id)
    return MessageResponse(message="Book deleted successfully")
