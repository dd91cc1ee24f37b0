"""
Shared Schema Configuration

The API speaks camelCase JSON (``coverImage``, ``userId``, ``totalPages``)
while Python code uses snake_case. ``CamelModel`` bridges the two with an
alias generator:

- Responses are serialized by alias (FastAPI's default)
- Requests accept either the camelCase alias or the field name
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        # Allows building responses directly from SQLAlchemy objects
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """Plain acknowledgement or error body."""

    message: str
