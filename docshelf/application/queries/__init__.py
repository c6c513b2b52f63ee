"""Query dataclasses (read operations)."""

from docshelf.application.queries.doc_queries import ResolveDocument
from docshelf.application.queries.namespace_queries import GetNamespace, ListNamespaces

__all__ = ["GetNamespace", "ListNamespaces", "ResolveDocument"]
