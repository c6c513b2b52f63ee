"""Common error classes used across layers.

Usage:
    from docshelf.core.errors import NotFoundError
    from docshelf.core.enums import ErrorCode
    from docshelf.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.NAMESPACE_NOT_FOUND,
        message="Namespace not found",
        resource_type="namespace",
        resource_id=name,
    ))
"""

from dataclasses import dataclass

from docshelf.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Kind of resource (namespace, archive, document).
        resource_id: Identifier of the resource that was not found.
        details: Additional context.
    """

    resource_type: str | None = None
    resource_id: str | None = None
