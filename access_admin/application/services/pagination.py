"""Pagination helper: builds the paged response envelope."""

from collections.abc import Sequence

from access_admin.application.dtos.pagination import PaginationRequest
from access_admin.schemas.pagination import PaginationResponse


class Pagination:
    """Envelope construction for list operations."""

    @staticmethod
    def of[T](
        request: PaginationRequest, total_records: int, items: Sequence[T]
    ) -> PaginationResponse[T]:
        """Wrap items (already in repository order) with page metadata.

        total_pages is ceil(total_records / limit); has_next is True when the
        current page is not the last one.
        """
        full_pages, remainder = divmod(total_records, request.limit)
        total_pages = full_pages + (1 if remainder > 0 else 0)
        current_page = request.page if request.page > 0 else 1
        return PaginationResponse(
            total_pages=total_pages,
            payload_size=len(items),
            has_next=current_page <= total_pages - 1,
            content=list(items),
            current_page=current_page,
            skipped_records=request.skip,
            total_records=total_records,
        )
