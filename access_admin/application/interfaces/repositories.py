"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
The user repository hands out ORM entities because the service mutates and
saves them as a whole.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from access_admin.application.dtos.pagination import PaginationRequest
    from access_admin.infrastructure.persistence.models.user import User


class IUserRepository(Protocol):
    """Protocol for user persistence access."""

    async def get_by_id(
        self, user_id: str, *, with_relations: bool = False
    ) -> User | None:
        """Return user by id (roles and permissions loaded when with_relations), or None."""

    async def get_users_and_count(
        self, pagination: PaginationRequest
    ) -> tuple[list[User], int]:
        """Return one page of users (repository order) and the unpaged total."""

    async def save(self, user: User) -> User:
        """Insert a new user or flush changes to an existing one; return the persisted entity."""
