from __future__ import annotations

from typing import Optional

from sqlalchemy import Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from folders_api.db.base import Base, OrganizationMixin, TimestampMixin, UUIDPkMixin


class Organization(UUIDPkMixin, TimestampMixin, Base):
    """Scoping unit owning users, groups, apps and folders."""
    __tablename__ = "organizations"

    name: Mapped[str] = mapped_column(Text, nullable=False)


class User(UUIDPkMixin, OrganizationMixin, TimestampMixin, Base):
    """Platform user, member of exactly one organization."""
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("organization_id", "email", name="uq_users_organization_email"),
    )

    email: Mapped[str] = mapped_column(Text, nullable=False)
    first_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
