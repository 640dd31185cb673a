"""Pagination request DTO (no dependency on ORM or HTTP)."""

from dataclasses import dataclass
from typing import Literal

from access_admin.domain.exceptions import ValidationException

OrderDirection = Literal["asc", "desc"]


@dataclass(frozen=True)
class PaginationRequest:
    """Page request for list operations.

    page is 1-based; skip is derived. order_by is checked against a
    whitelist by the repository, not here.
    """

    page: int = 1
    limit: int = 10
    order_by: str | None = None
    order_direction: OrderDirection = "desc"
    search: str | None = None

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationException("page must be >= 1", field="page")
        if self.limit < 1:
            raise ValidationException("limit must be >= 1", field="limit")
        if self.order_direction not in ("asc", "desc"):
            raise ValidationException(
                "order_direction must be 'asc' or 'desc'", field="order_direction"
            )

    @property
    def skip(self) -> int:
        """Number of records before this page."""
        return (self.page - 1) * self.limit
