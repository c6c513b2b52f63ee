"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from docshelf.core.container import get_logger, get_catalog

Organization:
- infrastructure: logger, catalog, archive provider
- handlers: version resolver and query handlers
"""

from docshelf.core.container.handlers import (
    get_list_namespaces_handler,
    get_resolve_document_handler,
    get_version_resolver,
)
from docshelf.core.container.infrastructure import (
    get_archive_provider,
    get_catalog,
    get_logger,
)

__all__ = [
    "get_archive_provider",
    "get_catalog",
    "get_list_namespaces_handler",
    "get_logger",
    "get_resolve_document_handler",
    "get_version_resolver",
]
