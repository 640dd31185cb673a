"""User API schemas: creation (full and simple), partial update, password change, response."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from access_admin.domain.enums import UserStatus
from access_admin.schemas.permission import PermissionResponse
from access_admin.schemas.role import RoleResponse


class CreateUserBaseRequest(BaseModel):
    """Request body for creating a user without roles or permissions."""

    username: str = Field(..., min_length=1, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class CreateUserRequest(CreateUserBaseRequest):
    """Request body for creating a user with initial roles and permissions (ids)."""

    is_super_user: bool = False
    status: UserStatus = UserStatus.ACTIVE
    roles: list[str] = Field(default_factory=list)
    permissions: list[str] = Field(default_factory=list)


class UpdateUserRequest(BaseModel):
    """Request body for a partial user update.

    Only fields present in the request (model_fields_set) are applied; an
    explicit null is applied as well and rejected by the database when the
    column is required.
    """

    username: str | None = Field(default=None, min_length=1, max_length=20)
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    is_super_user: bool | None = None
    status: UserStatus | None = None
    roles: list[str] | None = None
    permissions: list[str] | None = None


class ChangePasswordRequest(BaseModel):
    """Request body for changing a user's password (requires the current one)."""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    """User response (no password). roles/permissions only when loaded with relations."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    first_name: str
    last_name: str
    status: UserStatus
    is_super_user: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    roles: list[RoleResponse] | None = None
    permissions: list[PermissionResponse] | None = None
