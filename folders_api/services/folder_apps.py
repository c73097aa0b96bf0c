from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from folders_api.core.errors import AppNotFoundError, FolderAppAlreadyExistsError, FolderNotFoundError
from folders_api.db.models import FolderApp
from folders_api.repositories.apps import AppRepository
from folders_api.repositories.folders import FolderAppRepository, FolderRepository
from folders_api.services.base import BaseService

logger = logging.getLogger(__name__)


class FolderAppsService(BaseService):
    """Adds apps to folders and removes them."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)
        self.folder_repo = FolderRepository(session)
        self.folder_app_repo = FolderAppRepository(session)
        self.app_repo = AppRepository(session)

    # PUBLIC_INTERFACE
    async def create(self, folder_id: UUID, app_id: UUID) -> FolderApp:
        """
        Add an app to a folder.

        Raises:
            FolderNotFoundError / AppNotFoundError: if either side is missing.
            FolderAppAlreadyExistsError: if the app is already in the folder.
        """
        folder = await self.folder_repo.get_folder(folder_id)
        if folder is None:
            raise FolderNotFoundError(folder_id)
        app = await self.app_repo.get_app(app_id)
        # apps of other organizations are treated as missing
        if app is None or app.organization_id != folder.organization_id:
            raise AppNotFoundError(app_id)
        if await self.folder_app_repo.get_folder_app(folder_id, app_id) is not None:
            raise FolderAppAlreadyExistsError(folder_id, app_id)

        folder_app = await self.folder_app_repo.create_folder_app(folder_id=folder_id, app_id=app_id)
        logger.info("Added app %s to folder %s", app_id, folder_id)
        return folder_app

    # PUBLIC_INTERFACE
    async def remove(self, folder_id: UUID, app_id: UUID) -> None:
        """Remove an app from a folder; absent memberships are ignored."""
        deleted = await self.folder_app_repo.delete_folder_app(folder_id, app_id)
        logger.info("Removed app %s from folder %s (%d row(s))", app_id, folder_id, deleted)
