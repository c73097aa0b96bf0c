from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from folders_api.core.deps import get_current_user
from folders_api.core.errors import FolderNotFoundError
from folders_api.db.models import User
from folders_api.db.session import get_async_session
from folders_api.schemas.common import MessageResponse
from folders_api.schemas.folders import FolderAppCreate, FolderAppRead
from folders_api.services.folder_apps import FolderAppsService
from folders_api.services.folders import FoldersService

router = APIRouter(prefix="/folder_apps", tags=["Folder Apps"])


async def _ensure_own_folder(session: AsyncSession, user: User, folder_id: UUID) -> None:
    folder = await FoldersService(session).find_one(folder_id)
    if folder.organization_id != user.organization_id:
        raise FolderNotFoundError(folder_id)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=FolderAppRead,
    status_code=status.HTTP_201_CREATED,
    summary="Add app to folder",
    description="Add an app to a folder of the caller's organization. Returns 409 if already added.",
)
async def add_app_to_folder(
    payload: FolderAppCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_async_session),
) -> FolderAppRead:
    await _ensure_own_folder(session, user, payload.folder_id)
    folder_app = await FolderAppsService(session).create(payload.folder_id, payload.app_id)
    return FolderAppRead.model_validate(folder_app)


# PUBLIC_INTERFACE
@router.delete(
    "/{folder_id}/{app_id}",
    response_model=MessageResponse,
    summary="Remove app from folder",
    description="Remove an app from a folder of the caller's organization.",
)
async def remove_app_from_folder(
    folder_id: UUID = Path(...),
    app_id: UUID = Path(...),
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_async_session),
) -> MessageResponse:
    await _ensure_own_folder(session, user, folder_id)
    await FolderAppsService(session).remove(folder_id, app_id)
    return MessageResponse(message="App removed from folder")
