"""Success envelopes shared by every route.

Failures use the same shape (see error_responses.ErrorResponse) so clients
can always branch on ``success``.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    success: bool = True
    data: T | None = None
    error: str | None = None


class PaginationDTO(BaseModel):
    total: int = Field(description="Matching items before paging")
    page: int
    limit: int
    pages: int = Field(description="ceil(total / limit), 0 when limit is 0")


class PaginatedEnvelope(BaseModel, Generic[T]):
    success: bool = True
    data: list[T] = Field(default_factory=list)
    pagination: PaginationDTO
    error: str | None = None
