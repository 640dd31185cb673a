"""User repository: lookups with relations, filtered paging and save."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from access_admin.application.dtos.pagination import PaginationRequest
from access_admin.infrastructure.persistence.models.role import Role
from access_admin.infrastructure.persistence.models.user import User
from access_admin.infrastructure.persistence.repositories.base import BaseRepository

# Columns a caller may order by; anything else falls back to created_at.
_ORDERABLE_COLUMNS: dict[str, Any] = {
    "username": User.username,
    "first_name": User.first_name,
    "last_name": User.last_name,
    "status": User.status,
    "created_at": User.created_at,
}


def _with_relations() -> tuple[Any, ...]:
    return (
        selectinload(User.roles).selectinload(Role.permissions),
        selectinload(User.permissions),
    )


def _apply_search(stmt: Select[Any], search: str | None) -> Select[Any]:
    if not search:
        return stmt
    pattern = f"%{search}%"
    return stmt.where(
        or_(
            User.username.ilike(pattern),
            User.first_name.ilike(pattern),
            User.last_name.ilike(pattern),
        )
    )


class UserRepository(BaseRepository[User]):
    """IUserRepository over SQLAlchemy. Returns ORM entities."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_by_id(
        self, user_id: str, *, with_relations: bool = False
    ) -> User | None:
        stmt = select(User).where(User.id == user_id)
        if with_relations:
            stmt = stmt.options(*_with_relations())
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_users_and_count(
        self, pagination: PaginationRequest
    ) -> tuple[list[User], int]:
        """Return one page of users with relations and the total matching the search."""
        column = _ORDERABLE_COLUMNS.get(pagination.order_by or "", User.created_at)
        order = column.asc() if pagination.order_direction == "asc" else column.desc()
        page_stmt = (
            _apply_search(select(User), pagination.search)
            .options(*_with_relations())
            .order_by(order, User.id)
            .offset(pagination.skip)
            .limit(pagination.limit)
        )
        count_stmt = _apply_search(
            select(func.count()).select_from(User), pagination.search
        )
        users = list((await self.db.execute(page_stmt)).scalars().all())
        total = int((await self.db.execute(count_stmt)).scalar_one())
        return users, total
