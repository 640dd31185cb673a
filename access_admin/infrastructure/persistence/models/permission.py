"""Permission, UserRole and UserPermission ORM models, plus the role_permission table (RBAC links).

User links are ORM classes so that assigning an unknown role or permission
id inserts a row the database rejects with a foreign-key violation.
"""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from access_admin.infrastructure.persistence.database import Base
from access_admin.infrastructure.persistence.models.mixins import (
    CuidMixin,
    IdentifiedModel,
)

role_permission = Table(
    "role_permission",
    Base.metadata,
    Column("role_id", String, ForeignKey("role.id", ondelete="CASCADE"), primary_key=True),
    Column(
        "permission_id",
        String,
        ForeignKey("permission.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Permission(IdentifiedModel, Base):
    """Permission. Table: permission. Unique slug (e.g. 'admin.access.users.read')."""

    __tablename__ = "permission"

    slug: Mapped[str] = mapped_column(String(60), nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )

    def __repr__(self) -> str:
        return f"<Permission(id={self.id}, slug={self.slug})>"


class UserRole(CuidMixin, Base):
    """Many-to-many user-role. Table: user_role."""

    __tablename__ = "user_role"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    role_id: Mapped[str] = mapped_column(
        String, ForeignKey("role.id", ondelete="CASCADE"), nullable=False
    )
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("user_id", "role_id", name="uq_user_role"),
        Index("ix_user_role_user", "user_id"),
    )


class UserPermission(CuidMixin, Base):
    """Many-to-many user-permission (direct grants). Table: user_permission."""

    __tablename__ = "user_permission"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    permission_id: Mapped[str] = mapped_column(
        String, ForeignKey("permission.id", ondelete="CASCADE"), nullable=False
    )
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("user_id", "permission_id", name="uq_user_permission"),
        Index("ix_user_permission_user", "user_id"),
    )
