"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_REASON naming. They travel inside DomainError
instances returned in Result types and surface in JSON API error bodies.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Resource errors
    NAMESPACE_NOT_FOUND = "namespace_not_found"
    ARCHIVE_NOT_FOUND = "archive_not_found"
    DOCUMENT_NOT_FOUND = "document_not_found"

    # Configuration errors
    CATALOG_INVALID = "catalog_invalid"
    CATALOG_UNREADABLE = "catalog_unreadable"
