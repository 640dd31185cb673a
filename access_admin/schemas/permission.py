"""Permission API schemas."""

from pydantic import BaseModel, ConfigDict


class PermissionResponse(BaseModel):
    """Permission response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    slug: str
    description: str | None = None
    active: bool
