"""
Uploads Router

- GET /uploads/{filename}   serve a stored cover image

Files are read through the request's content store, so the directory is
whatever the running application (or a test) configured.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from rental_api.dependencies import get_content_store
from rental_api.exceptions import NotFoundError
from rental_api.schemas import MessageResponse
from rental_api.services import ContentStore
from rental_api.services.storage import URL_PREFIX

router = APIRouter(
    prefix=f"/{URL_PREFIX}",
    tags=["Uploads"],
)


@router.get(
    "/{filename}",
    response_class=FileResponse,
    summary="Download an uploaded file",
    responses={
        404: {"model": MessageResponse, "description": "File not found"},
    },
)
def get_upload(
    filename: str,
    content_store: Annotated[ContentStore, Depends(get_content_store)],
) -> FileResponse:
    path = content_store.resolve(filename)
    if not path.is_file():
        raise NotFoundError("File not found")
    return FileResponse(path)
