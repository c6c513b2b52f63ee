"""OpenAPI document customization.

Publishes the configured API title and version, advertises ``api_base_url``
as the server when one is set, and sorts component schemas by name so the
generated document is stable across runs.
"""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from docshelf.core.config import settings


def build_openapi_schema(app: FastAPI) -> dict[str, Any]:
    """Generate the OpenAPI document for ``app``.

    Args:
        app: FastAPI application whose routes are documented.

    Returns:
        dict[str, Any]: OpenAPI document.
    """
    servers = [{"url": settings.api_base_url}] if settings.api_base_url else None
    schema = get_openapi(
        title=settings.api_title,
        version=settings.app_version,
        description=app.description,
        routes=app.routes,
        servers=servers,
    )
    components = schema.get("components", {})
    if "schemas" in components:
        components["schemas"] = dict(sorted(components["schemas"].items()))
    return schema


def install_openapi(app: FastAPI) -> None:
    """Replace ``app.openapi`` with a cached customized generator."""

    def openapi() -> dict[str, Any]:
        if app.openapi_schema is None:
            app.openapi_schema = build_openapi_schema(app)
        return app.openapi_schema

    app.openapi = openapi  # type: ignore[method-assign]
