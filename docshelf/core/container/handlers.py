"""Application service and handler factories.

Services are app-scoped singletons; handlers are built per request so the
presentation layer can inject them with ``Depends`` and tests can replace
them through ``app.dependency_overrides``.

Usage:
    from fastapi import Depends
    from docshelf.core.container import get_resolve_document_handler

    @router.get("/{project}/{version}/{path:path}")
    async def serve(
        handler: ResolveDocumentHandler = Depends(get_resolve_document_handler),
    ): ...
"""

from functools import lru_cache

from docshelf.application.queries.handlers import (
    ListNamespacesHandler,
    ResolveDocumentHandler,
)
from docshelf.application.services import VersionResolver
from docshelf.core.container.infrastructure import (
    get_archive_provider,
    get_catalog,
    get_logger,
)


@lru_cache()
def get_version_resolver() -> VersionResolver:
    """Return the version resolver singleton (wraps the catalog)."""
    return VersionResolver(get_catalog())


def get_resolve_document_handler() -> ResolveDocumentHandler:
    """Build a ResolveDocumentHandler (request-scoped).

    Returns:
        ResolveDocumentHandler: Handler wired to the shared resolver,
            archive provider and logger.
    """
    return ResolveDocumentHandler(
        resolver=get_version_resolver(),
        archives=get_archive_provider(),
        logger=get_logger(),
    )


def get_list_namespaces_handler() -> ListNamespacesHandler:
    """Build a ListNamespacesHandler (request-scoped)."""
    return ListNamespacesHandler(
        catalog=get_catalog(),
        resolver=get_version_resolver(),
    )
