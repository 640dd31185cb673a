"""Role ORM model. A role groups permissions and is assigned to users."""

from sqlalchemy import Boolean, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from access_admin.infrastructure.persistence.database import Base
from access_admin.infrastructure.persistence.models.mixins import IdentifiedModel
from access_admin.infrastructure.persistence.models.permission import (
    Permission,
    role_permission,
)


class Role(IdentifiedModel, Base):
    """Role. Table: role. Unique name."""

    __tablename__ = "role"

    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )

    permissions: Mapped[list[Permission]] = relationship(
        secondary=role_permission, lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name={self.name})>"
