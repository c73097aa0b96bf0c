from __future__ import annotations

from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel, Field


class FolderAppRead(BaseModel):
    """Folder membership read model."""
    id: UUID = Field(..., description="Membership id")
    folder_id: UUID = Field(..., description="Folder id")
    app_id: UUID = Field(..., description="App id")
    created_at: datetime = Field(..., description="Created at")
    updated_at: datetime = Field(..., description="Updated at")

    class Config:
        from_attributes = True


class FolderRead(BaseModel):
    """Folder read model including the memberships visible to the caller."""
    id: UUID = Field(..., description="Folder id")
    name: str = Field(..., description="Folder name")
    organization_id: UUID = Field(..., description="Owning organization")
    created_at: datetime = Field(..., description="Created at")
    updated_at: datetime = Field(..., description="Updated at")
    folder_apps: List[FolderAppRead] = Field(default_factory=list)

    class Config:
        from_attributes = True


class FolderList(BaseModel):
    """Folders visible to the caller, ordered by name."""
    folders: List[FolderRead] = Field(default_factory=list)


class FolderCreate(BaseModel):
    """Create folder payload."""
    name: str = Field(..., min_length=1, description="Folder name")


class FolderAppCreate(BaseModel):
    """Add an app to a folder."""
    folder_id: UUID = Field(..., description="Folder id")
    app_id: UUID = Field(..., description="App id")
