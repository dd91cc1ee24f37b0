"""
Book Pydantic Schemas

Book creation usually arrives as multipart form data carrying a cover
image, but JSON and urlencoded bodies validate through the same schema.
Updates replace all three text fields.
"""

from datetime import datetime

from pydantic import Field

from rental_api.schemas.base import CamelModel


class BookCreate(CamelModel):
    """Text fields of a new book. The cover image travels separately."""

    title: str = Field(..., description="Book title", examples=["Dune"])
    author: str = Field(..., description="Author name", examples=["Frank Herbert"])
    genre: str = Field(..., description="Genre", examples=["SciFi"])


class BookUpdate(CamelModel):
    """
    Schema for updating an existing book.

    All three fields are required: an update replaces them as a whole.
    """

    title: str = Field(..., description="Book title", examples=["Dune"])
    author: str = Field(..., description="Author name", examples=["Frank Herbert"])
    genre: str = Field(..., description="Genre", examples=["SciFi"])


class BookResponse(CamelModel):
    """
    Schema for book API responses.

    Example:
    {
        "id": "9b1f0c6e2d7a4e5f8c3b1a0d9e8f7c6b",
        "title": "Dune",
        "author": "Frank Herbert",
        "genre": "SciFi",
        "coverImage": "uploads/1718000000000-dune.jpg",
        "available": true,
        "createdAt": "2024-06-10T12:00:00Z",
        "updatedAt": "2024-06-10T12:00:00Z"
    }
    """

    id: str
    title: str
    author: str
    genre: str
    cover_image: str | None = None
    available: bool = True
    created_at: datetime
    updated_at: datetime


class BookListResponse(CamelModel):
    """
    Paginated list of books.

    ``total_pages`` is ceil(matching books / limit); ``current_page`` echoes
    the requested page.
    """

    books: list[BookResponse]
    total_pages: int = Field(..., ge=0)
    current_page: int = Field(..., ge=1)
