"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

Every service is built per request from the request's database session, so
routes never touch a global connection. Tests swap the store handles by
overriding ``get_db`` and ``get_content_store``.

Request Bodies
==============
Write endpoints accept either a JSON body or a form body
(``application/x-www-form-urlencoded`` or ``multipart/form-data``). The
``body_of`` dependency reads whichever encoding arrived and validates it
through the same Pydantic schema, so both produce identical 422 errors.
"""

import json
from typing import Annotated, Any

from fastapi import Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session
from starlette.datastructures import UploadFile

from rental_api.database import get_db
from rental_api.schemas import (
    BookCreate,
    BookUpdate,
    LoginRequest,
    RegisterRequest,
    RentalCreate,
)
from rental_api.services import (
    CatalogService,
    ContentStore,
    IdentityService,
    RentalService,
)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


# =============================================================================
# Store Handles
# =============================================================================
DbSession = Annotated[Session, Depends(get_db)]


def get_content_store(request: Request) -> ContentStore:
    """Return the content store created at application startup."""
    return request.app.state.content_store


# =============================================================================
# Services
# =============================================================================
def get_identity_service(db: DbSession) -> IdentityService:
    return IdentityService(db)


def get_catalog_service(
    db: DbSession,
    content_store: Annotated[ContentStore, Depends(get_content_store)],
) -> CatalogService:
    return CatalogService(db, content_store)


def get_rental_service(db: DbSession) -> RentalService:
    return RentalService(db)


Identity = Annotated[IdentityService, Depends(get_identity_service)]
Catalog = Annotated[CatalogService, Depends(get_catalog_service)]
Rentals = Annotated[RentalService, Depends(get_rental_service)]


# =============================================================================
# Pagination Parameters
# =============================================================================
class PaginationParams:
    """
    Pagination parameters for the book list.

    Usage:
        GET /books?page=2&limit=20
    """

    def __init__(
        self,
        page: int = Query(
            default=1,
            ge=1,
            description="Page number (1-indexed)",
            examples=[1, 2, 3],
        ),
        limit: int = Query(
            default=10,
            ge=1,
            description="Number of books per page",
            examples=[10, 25, 50],
        ),
    ) -> None:
        self.page = page
        self.limit = limit


Pagination = Annotated[PaginationParams, Depends()]


# =============================================================================
# Request Bodies
# =============================================================================
def _body_error(message: str) -> RequestValidationError:
    return RequestValidationError(
        [{"type": "body_invalid", "loc": ("body",), "msg": message, "input": None}]
    )


async def read_body(request: Request) -> tuple[dict[str, Any], UploadFile | None]:
    """
    Read a JSON or form body into a plain dict.

    Form file parts are split out: only the ``coverImage`` part is
    returned, and only when the client actually chose a file.

    Returns:
        (fields, cover file or None)
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        fields = {
            key: value
            for key, value in form.multi_items()
            if not isinstance(value, UploadFile)
        }
        cover = form.get("coverImage")
        if isinstance(cover, UploadFile) and cover.filename:
            return fields, cover
        return fields, None

    raw = await request.body()
    if not raw:
        return {}, None
    try:
        data = json.loads(raw)
    except ValueError:
        raise _body_error("Body is not valid JSON")
    if not isinstance(data, dict):
        raise _body_error("Body must be a JSON object")
    return data, None


def validate_body(model: type[BaseModel], data: dict[str, Any]) -> Any:
    """Validate a body dict, reporting failures as a standard 422."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc


def body_of(model: type[BaseModel]):
    """
    Build a dependency that parses a JSON or form body into ``model``.

    Usage:
        def register(user_data: Annotated[RegisterRequest, Depends(body_of(RegisterRequest))]):
            ...
    """

    async def dependency(request: Request):
        data, _ = await read_body(request)
        return validate_body(model, data)

    return dependency


class BookSubmission:
    """A validated book create body plus the optional uploaded cover."""

    def __init__(self, book: BookCreate, cover_image: UploadFile | None = None) -> None:
        self.book = book
        self.cover_image = cover_image


async def get_book_submission(request: Request) -> BookSubmission:
    """
    Parse ``POST /books``: multipart (with an optional ``coverImage``
    file), urlencoded, or JSON.
    """
    data, cover = await read_body(request)
    return BookSubmission(validate_body(BookCreate, data), cover)


RegisterBody = Annotated[RegisterRequest, Depends(body_of(RegisterRequest))]
LoginBody = Annotated[LoginRequest, Depends(body_of(LoginRequest))]
RentalBody = Annotated[RentalCreate, Depends(body_of(RentalCreate))]
BookUpdateBody = Annotated[BookUpdate, Depends(body_of(BookUpdate))]
BookBody = Annotated[BookSubmission, Depends(get_book_submission)]
