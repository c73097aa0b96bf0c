from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import exists, select

from folders_api.db.models import GroupPermission, User, UserGroupPermission
from .base import BaseRepository


class UserRepository(BaseRepository):
    """Repository for users and their group memberships."""

    async def get_user_by_id(self, user_id: UUID) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        return await self.scalar_one_or_none(stmt)

    async def has_group(self, user: User, group: str) -> bool:
        """Return True if the user belongs to the named group of their organization."""
        stmt = select(
            exists().where(
                UserGroupPermission.user_id == user.id,
                UserGroupPermission.group_permission_id == GroupPermission.id,
                GroupPermission.organization_id == user.organization_id,
                GroupPermission.group == group,
            )
        )
        return bool(await self.scalar_one(stmt))
