"""
ORM models for organizations, users, group permissions, apps and folders.

Importing this package ensures model classes are registered with the Base
metadata for table creation and runtime usage.
"""

# Re-export commonly used models for convenience and to ensure import side-effects
# register all mapped classes with SQLAlchemy metadata.

from .organization import (  # noqa: F401
    Organization,
    User,
)
from .permissions import (  # noqa: F401
    GroupPermission,
    UserGroupPermission,
    AppGroupPermission,
)
from .apps import App  # noqa: F401
from .folders import (  # noqa: F401
    Folder,
    FolderApp,
)
