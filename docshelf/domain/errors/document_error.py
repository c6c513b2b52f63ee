"""Document error types.

Returned (never raised) by the document resolution handler when a request
cannot be served. Missing archives and missing files both end in a 404 for
the client; the error code keeps them apart in logs.

Usage:
    from docshelf.domain.errors import DocumentError
    from docshelf.core.enums import ErrorCode
    from docshelf.core.result import Failure

    return Failure(error=DocumentError(
        code=ErrorCode.ARCHIVE_NOT_FOUND,
        message="No archive for project version",
        project="paper",
        version="9.9",
    ))
"""

from dataclasses import dataclass

from docshelf.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class DocumentError(DomainError):
    """A documentation request that resolves to nothing.

    Attributes:
        code: ARCHIVE_NOT_FOUND or DOCUMENT_NOT_FOUND.
        message: Human-readable message.
        project: Requested project name.
        version: Requested version.
        path: In-archive path, when the archive was found.
    """

    project: str
    version: str
    path: str | None = None
