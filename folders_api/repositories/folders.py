from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy import Select, delete, exists, or_, select
from sqlalchemy.orm import selectinload

from folders_api.db.models import Folder, FolderApp
from .base import BaseRepository


class FolderRepository(BaseRepository):
    """Repository for folders."""

    async def get_folder(self, folder_id: UUID) -> Optional[Folder]:
        stmt = (
            select(Folder)
            .where(Folder.id == folder_id)
            .options(selectinload(Folder.folder_apps))
            .execution_options(populate_existing=True)
        )
        return await self.scalar_one_or_none(stmt)

    async def create_folder(self, *, name: str, organization_id: UUID) -> Folder:
        now = datetime.now(tz=timezone.utc)
        folder = Folder(
            name=name,
            organization_id=organization_id,
            created_at=now,
            updated_at=now,
        )
        await self.add(folder)
        await self.commit()
        # reload so the (empty) membership collection is populated
        return (await self.get_folder(folder.id))  # type: ignore

    async def list_folders(self, organization_id: UUID) -> List[Folder]:
        """All folders of an organization with every membership loaded."""
        stmt = (
            select(Folder)
            .where(Folder.organization_id == organization_id)
            .options(selectinload(Folder.folder_apps))
            .order_by(Folder.name.asc(), Folder.created_at.asc())
            .execution_options(populate_existing=True)
        )
        res = await self.scalars(stmt)
        return list(res)

    async def list_visible_folders(
        self, organization_id: UUID, viewable_app_ids: Optional[Select]
    ) -> List[Folder]:
        """
        Folders of an organization that are empty or hold at least one app
        whose id is returned by ``viewable_app_ids``.

        When ``viewable_app_ids`` is None only empty folders qualify. Loaded
        memberships are restricted to the viewable apps.
        """
        is_empty = ~exists().where(FolderApp.folder_id == Folder.id)
        if viewable_app_ids is None:
            visibility = is_empty
            loader = selectinload(Folder.folder_apps)
        else:
            holds_viewable = exists().where(
                FolderApp.folder_id == Folder.id,
                FolderApp.app_id.in_(viewable_app_ids),
            )
            visibility = or_(holds_viewable, is_empty)
            loader = selectinload(Folder.folder_apps.and_(FolderApp.app_id.in_(viewable_app_ids)))

        stmt = (
            select(Folder)
            .where(Folder.organization_id == organization_id, visibility)
            .options(loader)
            .order_by(Folder.name.asc(), Folder.created_at.asc())
            .execution_options(populate_existing=True)
        )
        res = await self.scalars(stmt)
        return list(res)


class FolderAppRepository(BaseRepository):
    """Repository for folder memberships."""

    async def list_app_ids(self, folder_id: UUID) -> List[UUID]:
        stmt = select(FolderApp.app_id).where(FolderApp.folder_id == folder_id)
        res = await self.scalars(stmt)
        return list(res)

    async def get_folder_app(self, folder_id: UUID, app_id: UUID) -> Optional[FolderApp]:
        stmt = select(FolderApp).where(FolderApp.folder_id == folder_id, FolderApp.app_id == app_id)
        return await self.scalar_one_or_none(stmt)

    async def create_folder_app(self, *, folder_id: UUID, app_id: UUID) -> FolderApp:
        now = datetime.now(tz=timezone.utc)
        folder_app = FolderApp(folder_id=folder_id, app_id=app_id, created_at=now, updated_at=now)
        await self.add(folder_app)
        await self.commit()
        return folder_app

    async def delete_folder_app(self, folder_id: UUID, app_id: UUID) -> int:
        stmt = delete(FolderApp).where(FolderApp.folder_id == folder_id, FolderApp.app_id == app_id)
        result = await self.execute(stmt)
        await self.commit()
        return result.rowcount
