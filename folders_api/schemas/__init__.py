"""
Public Pydantic schemas used by FastAPI routes and tests.

Schemas are grouped by domain module (folders, apps) and also include common
reusable models such as the standard error envelope.
"""

from .common import MessageResponse  # noqa: F401
