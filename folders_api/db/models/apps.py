from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from folders_api.db.base import Base, OrganizationMixin, TimestampMixin, UUIDPkMixin
from folders_api.db.models.organization import User
from folders_api.db.models.permissions import AppGroupPermission, GroupPermission


class App(UUIDPkMixin, OrganizationMixin, TimestampMixin, Base):
    """Low-code application owned by a user."""
    __tablename__ = "apps"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="false")
    user_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    user: Mapped[User] = relationship(User, lazy="raise")
    app_group_permissions: Mapped[list[AppGroupPermission]] = relationship(
        AppGroupPermission, lazy="raise"
    )
    group_permissions: Mapped[list[GroupPermission]] = relationship(
        GroupPermission,
        secondary="app_group_permissions",
        primaryjoin="App.id==AppGroupPermission.app_id",
        secondaryjoin="GroupPermission.id==AppGroupPermission.group_permission_id",
        viewonly=True,
        lazy="raise",
    )
