"""SQLAlchemy repository implementations."""

from access_admin.infrastructure.persistence.repositories.base import BaseRepository
from access_admin.infrastructure.persistence.repositories.user_repo import (
    UserRepository,
)

__all__ = ["BaseRepository", "UserRepository"]
