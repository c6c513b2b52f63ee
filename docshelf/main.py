"""
Main FastAPI application entry point.

Wires the documentation routes, the namespaces API and the system endpoints
into one application. The catalog is loaded at startup so a malformed YAML
file stops the process before it accepts traffic; open archives are closed
on shutdown.

Run locally:
    uvicorn docshelf.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from docshelf.core.config import settings
from docshelf.core.container import get_archive_provider, get_catalog, get_logger
from docshelf.presentation.api.middleware.trace_middleware import TraceMiddleware
from docshelf.presentation.api.v1 import v1_router
from docshelf.presentation.api.v1.errors import register_exception_handlers
from docshelf.presentation.openapi import install_openapi
from docshelf.presentation.routers import docs_router, system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Load the documentation catalog
    - Shutdown: Close cached archive handles

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    catalog = get_catalog()
    logger.info(
        "Docshelf started",
        environment=settings.environment.value,
        projects=len(catalog),
        storage_path=str(settings.storage_path),
    )

    yield

    get_archive_provider().close()
    logger.info("Docshelf stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.api_title,
    description="Versioned documentation server",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

# Fixed paths first; the documentation routes match any two segments
app.include_router(system_router)
app.include_router(v1_router)
app.include_router(docs_router)

install_openapi(app)
