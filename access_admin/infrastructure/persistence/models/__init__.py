"""Persistence models: ORM entities, link tables and mixins."""

from access_admin.infrastructure.persistence.models.mixins import (
    CuidMixin,
    IdentifiedModel,
    TimestampMixin,
)
from access_admin.infrastructure.persistence.models.permission import (
    Permission,
    UserPermission,
    UserRole,
    role_permission,
)
from access_admin.infrastructure.persistence.models.role import Role
from access_admin.infrastructure.persistence.models.user import User

__all__ = [
    "User",
    "Role",
    "Permission",
    "UserRole",
    "UserPermission",
    "role_permission",
    "CuidMixin",
    "TimestampMixin",
    "IdentifiedModel",
]
