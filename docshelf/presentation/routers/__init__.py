"""Non-API routers (system endpoints and documentation trees)."""

from docshelf.presentation.routers.docs import docs_router
from docshelf.presentation.routers.system import system_router

__all__ = ["docs_router", "system_router"]
