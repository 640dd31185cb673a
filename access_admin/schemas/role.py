"""Role API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from access_admin.schemas.permission import PermissionResponse


class RoleResponse(BaseModel):
    """Role response with its permissions."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    active: bool
    permissions: list[PermissionResponse] = Field(default_factory=list)
