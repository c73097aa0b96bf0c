from __future__ import annotations

from uuid import UUID


class FoldersApiError(Exception):
    """Base class for domain errors raised by services."""


class NotFoundError(FoldersApiError):
    """A requested entity does not exist."""

    entity = "Entity"

    def __init__(self, entity_id: UUID) -> None:
        self.entity_id = entity_id
        super().__init__(f"{self.entity} {entity_id} not found")


class FolderNotFoundError(NotFoundError):
    entity = "Folder"


class AppNotFoundError(NotFoundError):
    entity = "App"


class FolderAppAlreadyExistsError(FoldersApiError):
    """The app is already a member of the folder."""

    def __init__(self, folder_id: UUID, app_id: UUID) -> None:
        self.folder_id = folder_id
        self.app_id = app_id
        super().__init__("App has been already added to the folder")
