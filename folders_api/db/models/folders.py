from __future__ import annotations

from uuid import UUID

from sqlalchemy import ForeignKey, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from folders_api.db.base import Base, OrganizationMixin, TimestampMixin, UUIDPkMixin


class Folder(UUIDPkMixin, OrganizationMixin, TimestampMixin, Base):
    """Named grouping of apps inside an organization."""
    __tablename__ = "folders"

    name: Mapped[str] = mapped_column(Text, nullable=False)

    folder_apps: Mapped[list["FolderApp"]] = relationship(
        "FolderApp",
        back_populates="folder",
        order_by="FolderApp.created_at",
        lazy="raise",
    )


class FolderApp(UUIDPkMixin, TimestampMixin, Base):
    """Membership of an app in a folder."""
    __tablename__ = "folder_apps"
    __table_args__ = (
        UniqueConstraint("folder_id", "app_id", name="uq_folder_apps_folder_app"),
    )

    folder_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("folders.id", ondelete="CASCADE"), nullable=False, index=True
    )
    app_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("apps.id", ondelete="CASCADE"), nullable=False, index=True
    )

    folder: Mapped[Folder] = relationship(Folder, back_populates="folder_apps", lazy="raise")
