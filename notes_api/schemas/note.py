"""
Notes API — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract.
Why:   Strict input parsing, automatic serialization, and OpenAPI doc generation.
How:   Route handlers parse request bodies into `Note` and serialize envelopes
       with `model_dump(mode="json", by_alias=True)`.

Wire format:
    Note:            {"id": "...", "description": "...", "dateTime": "2024-01-15T12:00:00Z"}
    SuccessResponse: {"data": <Note | [Note, ...] | "confirmation">}
    ErrorResponse:   {"errors": [{"code": "...", "title": "...", "detail": "..."}]}

Design Decision:
    Schemas are separate from the SQLAlchemy model because the repository
    contract speaks in documents (Note in, Note out); the insertion sequence
    column never leaves the persistence layer.
"""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Note(BaseModel):
    """
    What:  A note document as seen by clients and by the repository.

    Why every field is optional:
        - id is absent on create and assigned by the store
        - description is checked by the service so an empty or missing value
          produces the 400 ErrorResponse instead of FastAPI's 422
        - dateTime is server-assigned on create
    """
    id: Optional[str] = Field(default=None, description="Store-assigned note identifier")
    description: Optional[str] = Field(default=None, description="Note text (required on create)")
    date_time: Optional[datetime] = Field(
        default=None,
        alias="dateTime",
        description="Creation timestamp (UTC ISO 8601), set by the server",
    )

    model_config = {"from_attributes": True, "populate_by_name": True}


# ══════════════════════════════════════════════════════════════════════════
# Envelopes — Uniform success and error bodies
# ══════════════════════════════════════════════════════════════════════════


class SuccessResponse(BaseModel, Generic[T]):
    """Wraps a successful payload: a Note, a list of Notes, or a confirmation string."""
    data: T


class ErrorDetail(BaseModel):
    """
    One entry of an ErrorResponse.

    Example:
        {"code": "400_BAD_REQUEST", "title": "Invalid Request",
         "detail": "Validation error: Description is 'Null/Empty'"}
    """
    code: str = Field(description="Categorical error code, e.g. 400_BAD_REQUEST")
    title: str = Field(description="Short category label")
    detail: str = Field(description="Human-readable message")


class ErrorResponse(BaseModel):
    """Ordered list of errors. Never empty."""
    errors: List[ErrorDetail] = Field(min_length=1, description="At least one error entry")


# Concrete envelopes, used for OpenAPI documentation of each endpoint
NoteEnvelope = SuccessResponse[Note]
NoteListEnvelope = SuccessResponse[List[Note]]
MessageEnvelope = SuccessResponse[str]
