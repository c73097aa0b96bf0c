"""
API route modules calling the folder services.

This package contains subrouters for:
- Folders: create, list visible folders, page through a folder's apps
- Folder apps: add an app to a folder, remove it

Routers are included from folders_api.api.main (under the /api/v1 prefix).
"""
