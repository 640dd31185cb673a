"""Application DTOs (no dependency on ORM)."""

from access_admin.application.dtos.pagination import OrderDirection, PaginationRequest

__all__ = ["OrderDirection", "PaginationRequest"]
