"""Paged response envelope."""

from pydantic import BaseModel, Field


class PaginationResponse[T](BaseModel):
    """One page of results plus page metadata. content keeps repository order."""

    total_pages: int = Field(..., ge=0)
    payload_size: int = Field(..., ge=0)
    has_next: bool
    content: list[T]
    current_page: int = Field(..., ge=1)
    skipped_records: int = Field(..., ge=0)
    total_records: int = Field(..., ge=0)
