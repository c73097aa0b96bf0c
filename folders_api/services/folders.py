from __future__ import annotations

import logging
from typing import List, Optional, Protocol
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from folders_api.core.errors import FolderNotFoundError
from folders_api.core.settings import get_app_settings
from folders_api.db.models import App, Folder, User
from folders_api.repositories.apps import AppRepository
from folders_api.repositories.folders import FolderAppRepository, FolderRepository
from folders_api.repositories.users import UserRepository
from folders_api.services.base import BaseService

logger = logging.getLogger(__name__)

APPS_PER_PAGE = 10


class GroupMembership(Protocol):
    """Answers whether a user belongs to a named group."""

    async def has_group(self, user: User, group: str) -> bool: ...


class FoldersService(BaseService):
    """
    Folder listing and folder contents, filtered by app visibility.

    Admins see every folder of their organization. Everyone else sees the
    folders of their organization that are empty or contain at least one app
    they may read; folder contents are always filtered by the same rule.
    """

    def __init__(
        self,
        session: AsyncSession,
        group_membership: Optional[GroupMembership] = None,
        admin_group: Optional[str] = None,
    ) -> None:
        super().__init__(session)
        self.folder_repo = FolderRepository(session)
        self.folder_app_repo = FolderAppRepository(session)
        self.app_repo = AppRepository(session)
        self.group_membership = group_membership or UserRepository(session)
        self.admin_group = admin_group or get_app_settings().ADMIN_GROUP

    # PUBLIC_INTERFACE
    async def create(self, user: User, folder_name: str) -> Folder:
        """Create a folder in the user's organization."""
        folder = await self.folder_repo.create_folder(
            name=folder_name, organization_id=user.organization_id
        )
        logger.info("Created folder %s (%r) for user %s", folder.id, folder.name, user.id)
        return folder

    # PUBLIC_INTERFACE
    async def all(self, user: User) -> List[Folder]:
        """
        List the folders visible to the user, ordered by name.

        Folders without any app are listed for every member of the organization.
        """
        if await self.group_membership.has_group(user, self.admin_group):
            return await self.folder_repo.list_folders(user.organization_id)

        viewable = None
        if await self.app_repo.has_viewable_apps(user):
            viewable = self.app_repo.viewable_app_ids_query(user)
        else:
            logger.debug("User %s has no viewable apps; listing empty folders only", user.id)
        return await self.folder_repo.list_visible_folders(user.organization_id, viewable)

    # PUBLIC_INTERFACE
    async def find_one(self, folder_id: UUID) -> Folder:
        """
        Return the folder with the given id.

        No permission filtering is applied here.

        Raises:
            FolderNotFoundError: if no such folder exists.
        """
        folder = await self.folder_repo.get_folder(folder_id)
        if folder is None:
            raise FolderNotFoundError(folder_id)
        return folder

    # PUBLIC_INTERFACE
    async def user_app_count(self, user: User, folder: Folder) -> int:
        """Number of apps in the folder that the user may read."""
        folder_app_ids = await self.folder_app_repo.list_app_ids(folder.id)
        if not folder_app_ids:
            return 0
        return await self.app_repo.count_viewable_among(user, folder_app_ids)

    # PUBLIC_INTERFACE
    async def get_apps_for(self, user: User, folder: Folder, page: int) -> List[App]:
        """
        One page of the apps in the folder that the user may read, newest first.

        Parameters:
            user: acting user
            folder: folder whose apps are listed
            page: 1-indexed page number; pages hold APPS_PER_PAGE apps
        """
        if page < 1:
            raise ValueError(f"page must be >= 1, got {page}")
        folder_app_ids = await self.folder_app_repo.list_app_ids(folder.id)
        if not folder_app_ids:
            return []
        return await self.app_repo.list_viewable_among(
            user,
            folder_app_ids,
            limit=APPS_PER_PAGE,
            offset=APPS_PER_PAGE * (page - 1),
        )
