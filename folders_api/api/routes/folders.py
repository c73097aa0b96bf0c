from __future__ import annotations

import math
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from folders_api.core.deps import get_current_user
from folders_api.core.errors import FolderNotFoundError
from folders_api.db.models import Folder, User
from folders_api.db.session import get_async_session
from folders_api.schemas.apps import AppRead, FolderAppsMeta, FolderAppsPage
from folders_api.schemas.folders import FolderCreate, FolderList, FolderRead
from folders_api.services.folders import APPS_PER_PAGE, FoldersService

router = APIRouter(prefix="/folders", tags=["Folders"])


async def _get_folder_for(service: FoldersService, user: User, folder_id: UUID) -> Folder:
    """Look up a folder and hide folders of other organizations."""
    folder = await service.find_one(folder_id)
    if folder.organization_id != user.organization_id:
        raise FolderNotFoundError(folder_id)
    return folder


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=FolderRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create folder",
    description="Create a folder in the caller's organization.",
)
async def create_folder(
    payload: FolderCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_async_session),
) -> FolderRead:
    folder = await FoldersService(session).create(user, payload.name)
    return FolderRead.model_validate(folder)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=FolderList,
    summary="List folders",
    description=(
        "List folders visible to the caller ordered by name. Admins see every folder of "
        "their organization; other users see empty folders and folders holding an app they can read."
    ),
)
async def list_folders(
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_async_session),
) -> FolderList:
    folders = await FoldersService(session).all(user)
    return FolderList(folders=[FolderRead.model_validate(f) for f in folders])


# PUBLIC_INTERFACE
@router.get(
    "/{folder_id}/apps",
    response_model=FolderAppsPage,
    summary="List apps in folder",
    description=f"Page through the folder's apps readable by the caller, newest first ({APPS_PER_PAGE} per page).",
)
async def list_folder_apps(
    folder_id: UUID = Path(...),
    page: int = Query(1, ge=1),
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_async_session),
) -> FolderAppsPage:
    service = FoldersService(session)
    folder = await _get_folder_for(service, user, folder_id)

    count = await service.user_app_count(user, folder)
    apps = await service.get_apps_for(user, folder, page)
    return FolderAppsPage(
        apps=[AppRead.model_validate(a) for a in apps],
        meta=FolderAppsMeta(
            total_pages=math.ceil(count / APPS_PER_PAGE),
            folder_count=count,
            current_page=page,
        ),
    )
