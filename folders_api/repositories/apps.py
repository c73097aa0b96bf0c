from __future__ import annotations

from typing import Collection, List, Optional
from uuid import UUID

from sqlalchemy import Select, and_, func, or_, select
from sqlalchemy.orm import selectinload

from folders_api.db.models import App, AppGroupPermission, User, UserGroupPermission
from .base import BaseRepository


class AppRepository(BaseRepository):
    """Repository for apps and the app visibility rule."""

    # PUBLIC_INTERFACE
    @staticmethod
    def viewable_app_ids_query(user: User) -> Select:
        """
        Build a SELECT of the ids of every app the user may read.

        An app is viewable when any of these hold:
          - one of the user's groups has read permission on it
          - it is public and belongs to the user's organization
          - the user owns it

        The result is meant to be embedded as a subquery (``App.id.in_(...)``),
        so every caller shares the exact same boolean formula.
        """
        granted = (
            select(AppGroupPermission.app_id)
            .join(
                UserGroupPermission,
                UserGroupPermission.group_permission_id == AppGroupPermission.group_permission_id,
            )
            .where(
                UserGroupPermission.user_id == user.id,
                AppGroupPermission.read.is_(True),
            )
        )
        return select(App.id).where(
            or_(
                App.id.in_(granted),
                and_(App.is_public.is_(True), App.organization_id == user.organization_id),
                App.user_id == user.id,
            )
        )

    async def list_viewable_app_ids(self, user: User) -> List[UUID]:
        res = await self.scalars(self.viewable_app_ids_query(user))
        return list(res)

    async def has_viewable_apps(self, user: User) -> bool:
        stmt = select(self.viewable_app_ids_query(user).exists())
        return bool(await self.scalar_one(stmt))

    async def get_app(self, app_id: UUID) -> Optional[App]:
        stmt = select(App).where(App.id == app_id)
        return await self.scalar_one_or_none(stmt)

    async def count_viewable_among(self, user: User, app_ids: Collection[UUID]) -> int:
        """Count the apps in ``app_ids`` that the user may read."""
        stmt = select(func.count(App.id)).where(
            App.id.in_(list(app_ids)),
            App.id.in_(self.viewable_app_ids_query(user)),
        )
        return int(await self.scalar_one(stmt))

    async def list_viewable_among(
        self, user: User, app_ids: Collection[UUID], *, limit: int, offset: int
    ) -> List[App]:
        """
        Return one window of the apps in ``app_ids`` that the user may read,
        newest first. Ordering is applied to the whole set before the window.
        """
        stmt = (
            select(App)
            .where(
                App.id.in_(list(app_ids)),
                App.id.in_(self.viewable_app_ids_query(user)),
            )
            .options(
                selectinload(App.user),
                selectinload(App.group_permissions),
                selectinload(App.app_group_permissions),
            )
            .order_by(App.created_at.desc(), App.id.desc())
            .offset(offset)
            .limit(limit)
        )
        res = await self.scalars(stmt)
        return list(res)
