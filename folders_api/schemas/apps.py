from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field


class AppOwnerRead(BaseModel):
    """Owner summary embedded in app listings."""
    id: UUID = Field(..., description="User id")
    email: str = Field(..., description="User email")
    first_name: Optional[str] = Field(None)
    last_name: Optional[str] = Field(None)

    class Config:
        from_attributes = True


class GroupPermissionRead(BaseModel):
    """Group with access rules on an app."""
    id: UUID = Field(..., description="Group permission id")
    group: str = Field(..., description="Group name")

    class Config:
        from_attributes = True


class AppGroupPermissionRead(BaseModel):
    """Rights a group holds on an app."""
    id: UUID = Field(..., description="App group permission id")
    group_permission_id: UUID = Field(..., description="Group permission id")
    read: bool = Field(...)
    update: bool = Field(...)
    delete: bool = Field(...)

    class Config:
        from_attributes = True


class AppRead(BaseModel):
    """App read model."""
    id: UUID = Field(..., description="App id")
    name: str = Field(..., description="App name")
    slug: Optional[str] = Field(None)
    is_public: bool = Field(..., description="Visible to the whole organization")
    organization_id: UUID = Field(..., description="Owning organization")
    user_id: UUID = Field(..., description="Owner id")
    created_at: datetime = Field(..., description="Created at")
    updated_at: datetime = Field(..., description="Updated at")
    user: Optional[AppOwnerRead] = Field(None)
    group_permissions: List[GroupPermissionRead] = Field(default_factory=list)
    app_group_permissions: List[AppGroupPermissionRead] = Field(default_factory=list)

    class Config:
        from_attributes = True


class FolderAppsMeta(BaseModel):
    """Pagination metadata for a folder's app listing."""
    total_pages: int = Field(..., ge=0)
    folder_count: int = Field(..., ge=0, description="Apps in the folder visible to the caller")
    current_page: int = Field(..., ge=1)


class FolderAppsPage(BaseModel):
    """One page of a folder's apps."""
    apps: List[AppRead] = Field(default_factory=list)
    meta: FolderAppsMeta
