"""User ORM model (administrative users with roles and direct permissions)."""

from sqlalchemy import Boolean, Enum, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from access_admin.domain.enums import UserStatus
from access_admin.infrastructure.persistence.database import Base
from access_admin.infrastructure.persistence.models.mixins import IdentifiedModel
from access_admin.infrastructure.persistence.models.permission import (
    Permission,
    UserPermission,
    UserRole,
)
from access_admin.infrastructure.persistence.models.role import Role


class User(IdentifiedModel, Base):
    """User model. Table: app_user. Unique username.

    password holds the bcrypt digest, never plaintext. Assignments are
    written through role_links / permission_links; roles and permissions
    are read-only views over them. Everything loads eagerly (selectin) so
    the async session never lazy-loads.
    """

    __tablename__ = "app_user"

    username: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    password: Mapped[str] = mapped_column(String(100), nullable=False)
    is_super_user: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false")
    )
    status: Mapped[UserStatus] = mapped_column(
        Enum(
            UserStatus,
            name="user_status",
            native_enum=False,
            length=16,
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        nullable=False,
        default=UserStatus.ACTIVE,
        server_default=UserStatus.ACTIVE.value,
    )

    role_links: Mapped[list[UserRole]] = relationship(
        cascade="all, delete-orphan", lazy="selectin"
    )
    permission_links: Mapped[list[UserPermission]] = relationship(
        cascade="all, delete-orphan", lazy="selectin"
    )
    roles: Mapped[list[Role]] = relationship(
        secondary="user_role", viewonly=True, lazy="selectin"
    )
    permissions: Mapped[list[Permission]] = relationship(
        secondary="user_permission", viewonly=True, lazy="selectin"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username})>"
