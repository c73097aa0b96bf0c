from __future__ import annotations

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from folders_api.db.base import Base, OrganizationMixin, TimestampMixin, UUIDPkMixin


class GroupPermission(UUIDPkMixin, OrganizationMixin, TimestampMixin, Base):
    """Named user group within an organization (e.g. admin, all_users)."""
    __tablename__ = "group_permissions"
    __table_args__ = (
        UniqueConstraint("organization_id", "group", name="uq_group_permissions_organization_group"),
    )

    group: Mapped[str] = mapped_column(Text, nullable=False)


class UserGroupPermission(UUIDPkMixin, TimestampMixin, Base):
    """Association of users to groups."""
    __tablename__ = "user_group_permissions"
    __table_args__ = (
        UniqueConstraint("user_id", "group_permission_id", name="uq_user_group_permissions_user_group"),
    )

    user_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    group_permission_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("group_permissions.id", ondelete="CASCADE"), nullable=False
    )


class AppGroupPermission(UUIDPkMixin, TimestampMixin, Base):
    """Per-app rights granted to a group."""
    __tablename__ = "app_group_permissions"
    __table_args__ = (
        UniqueConstraint("app_id", "group_permission_id", name="uq_app_group_permissions_app_group"),
    )

    app_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("apps.id", ondelete="CASCADE"), nullable=False, index=True
    )
    group_permission_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("group_permissions.id", ondelete="CASCADE"), nullable=False
    )
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="false")
    update: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="false")
    delete: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="false")
