"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the user repository, the password hasher and
UserService. Routes depend only on these, not on infrastructure directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from access_admin.application.dtos.pagination import OrderDirection, PaginationRequest
from access_admin.application.services.user_service import UserService
from access_admin.core.config import get_settings
from access_admin.infrastructure.persistence.database import get_db_transactional
from access_admin.infrastructure.persistence.repositories import UserRepository
from access_admin.infrastructure.security.password import BcryptPasswordHasher


async def get_user_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> UserRepository:
    """User repository for writes (transactional)."""
    return UserRepository(db)


def get_password_hasher() -> BcryptPasswordHasher:
    """bcrypt hasher using the configured cost factor."""
    return BcryptPasswordHasher(rounds=get_settings().password_hash_rounds)


def get_user_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repo_for_write)],
    password_hasher: Annotated[BcryptPasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    """User lifecycle service (composition root)."""
    return UserService(user_repo=user_repo, password_hasher=password_hasher)


def get_pagination(
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int | None, Query(ge=1)] = None,
    order_by: str | None = None,
    order_direction: OrderDirection = "desc",
    search: str | None = None,
) -> PaginationRequest:
    """Page request from query params; limit defaults to and is capped by settings."""
    settings = get_settings()
    effective_limit = min(
        limit if limit is not None else settings.pagination_default_limit,
        settings.pagination_max_limit,
    )
    return PaginationRequest(
        page=page,
        limit=effective_limit,
        order_by=order_by,
        order_direction=order_direction,
        search=search or None,
    )
