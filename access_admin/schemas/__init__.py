"""API schemas (pydantic request and response models)."""

from access_admin.schemas.health import HealthResponse
from access_admin.schemas.pagination import PaginationResponse
from access_admin.schemas.permission import PermissionResponse
from access_admin.schemas.role import RoleResponse
from access_admin.schemas.user import (
    ChangePasswordRequest,
    CreateUserBaseRequest,
    CreateUserRequest,
    UpdateUserRequest,
    UserResponse,
)

__all__ = [
    "ChangePasswordRequest",
    "CreateUserBaseRequest",
    "CreateUserRequest",
    "HealthResponse",
    "PaginationResponse",
    "PermissionResponse",
    "RoleResponse",
    "UpdateUserRequest",
    "UserResponse",
]
