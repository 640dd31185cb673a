"""User mapper: pure transforms between API schemas and the User entity.

No I/O and no hashing here; the service hashes the password on the entity
returned by the create variants.
"""

from __future__ import annotations

from typing import Any

from access_admin.domain.enums import UserStatus
from access_admin.infrastructure.persistence.models import (
    User,
    UserPermission,
    UserRole,
)
from access_admin.schemas.permission import PermissionResponse
from access_admin.schemas.role import RoleResponse
from access_admin.schemas.user import (
    CreateUserBaseRequest,
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

_RELATION_FIELDS = frozenset({"roles", "permissions"})


def _role_links(user: User, role_ids: list[str]) -> list[UserRole]:
    """Links for role_ids, reusing the user's existing link rows where the role is unchanged."""
    existing = {link.role_id: link for link in user.role_links}
    return [existing.get(rid) or UserRole(role_id=rid) for rid in dict.fromkeys(role_ids)]


def _permission_links(user: User, permission_ids: list[str]) -> list[UserPermission]:
    existing = {link.permission_id: link for link in user.permission_links}
    return [
        existing.get(pid) or UserPermission(permission_id=pid)
        for pid in dict.fromkeys(permission_ids)
    ]


class UserMapper:
    """Static transforms used by UserService."""

    @staticmethod
    def to_dto(user: User) -> UserResponse:
        """Map entity to response without relations (and without the password)."""
        return UserResponse(
            id=user.id,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            status=user.status,
            is_super_user=user.is_super_user,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def to_dto_with_relations(user: User) -> UserResponse:
        """Map entity to response including roles (with their permissions) and direct permissions."""
        dto = UserMapper.to_dto(user)
        dto.roles = [RoleResponse.model_validate(role) for role in user.roles]
        dto.permissions = [
            PermissionResponse.model_validate(permission)
            for permission in user.permissions
        ]
        return dto

    @staticmethod
    def to_create_entity(dto: CreateUserRequest) -> User:
        """New entity with initial roles and permissions. password is still plaintext."""
        user = User(
            username=dto.username,
            first_name=dto.first_name,
            last_name=dto.last_name,
            password=dto.password,
            is_super_user=dto.is_super_user,
            status=dto.status,
            role_links=[],
            permission_links=[],
        )
        user.role_links = _role_links(user, dto.roles)
        user.permission_links = _permission_links(user, dto.permissions)
        return user

    @staticmethod
    def to_create_simple_entity(dto: CreateUserBaseRequest) -> User:
        """New active, non-super user without relations. password is still plaintext."""
        return User(
            username=dto.username,
            first_name=dto.first_name,
            last_name=dto.last_name,
            password=dto.password,
            is_super_user=False,
            status=UserStatus.ACTIVE,
            role_links=[],
            permission_links=[],
        )

    @staticmethod
    def to_update_entity(user: User, dto: UpdateUserRequest) -> User:
        """Apply only the fields present in dto onto user; others keep their values."""
        changes: dict[str, Any] = {
            field: getattr(dto, field) for field in dto.model_fields_set
        }
        for field, value in changes.items():
            if field in _RELATION_FIELDS:
                continue
            setattr(user, field, value)
        if "roles" in changes:
            user.role_links = _role_links(user, changes["roles"] or [])
        if "permissions" in changes:
            user.permission_links = _permission_links(
                user, changes["permissions"] or []
            )
        return user
