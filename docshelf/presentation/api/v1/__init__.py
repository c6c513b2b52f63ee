"""API v1 routers.

Resources:
    /api/v1/namespaces  - Documented projects and their version groups
"""

from fastapi import APIRouter

from docshelf.core.config import settings
from docshelf.presentation.api.v1.namespaces import router as namespaces_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)

v1_router.include_router(namespaces_router)

__all__ = ["v1_router", "namespaces_router"]
