"""Query handlers."""

from docshelf.application.queries.handlers.list_namespaces_handler import (
    ListNamespacesHandler,
    NamespaceResult,
    VersionGroupResult,
)
from docshelf.application.queries.handlers.resolve_document_handler import (
    DocumentFile,
    DocumentRedirect,
    ResolveDocumentHandler,
)

__all__ = [
    "DocumentFile",
    "DocumentRedirect",
    "ListNamespacesHandler",
    "NamespaceResult",
    "ResolveDocumentHandler",
    "VersionGroupResult",
]
