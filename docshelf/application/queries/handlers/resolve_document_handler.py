"""ResolveDocument query handler.

Turns a documentation request into one of three outcomes:

    START
      -> no trailing slash ............................ redirect to path + "/"
      -> project known, group found, latest differs ... redirect to latest
      -> no archive for (project, version) ............ not found
      -> path not a regular file in the archive ....... not found
      -> file ......................................... serve

Unknown projects, versions outside every group and malformed version
strings skip the redirect step and fall through to the archive lookup with
the version exactly as requested. Missing archives and missing files are
both reported as DocumentError; the presentation layer answers 404 for
either.

Architecture:
- Application layer handler (orchestrates resolver and archive provider)
- Returns Result[DocumentRedirect | DocumentFile, DocumentError]
- No side effects; archives are read, never closed or modified
"""

from dataclasses import dataclass

from docshelf.application.queries.doc_queries import ResolveDocument
from docshelf.application.services.document_metadata import (
    CachePolicy,
    cache_policy_for,
    media_type_for,
)
from docshelf.application.services.version_resolver import VersionResolver
from docshelf.core.enums import ErrorCode
from docshelf.core.result import Failure, Result, Success
from docshelf.domain.errors import DocumentError
from docshelf.domain.protocols import ArchiveProvider, DocArchive, LoggerProtocol

INDEX_DOCUMENT = "index.html"


@dataclass(frozen=True, kw_only=True)
class DocumentRedirect:
    """Redirect outcome.

    Attributes:
        location: Target path (and query string) for the 302 response.
        version: Version the client is sent to, None for slash redirects.
    """

    location: str
    version: str | None = None


@dataclass(frozen=True, kw_only=True)
class DocumentFile:
    """File outcome.

    Attributes:
        archive: Archive holding the file (owned by the provider).
        path: In-archive path of the file.
        media_type: Content-Type to send.
        cache_policy: Cache-Control policy to send.
    """

    archive: DocArchive
    path: str
    media_type: str
    cache_policy: CachePolicy


type DocumentOutcome = DocumentRedirect | DocumentFile


class ResolveDocumentHandler:
    """Handler for ResolveDocument query.

    Dependencies (injected via constructor):
        - VersionResolver: group and latest-version lookup
        - ArchiveProvider: archives by exact (project, version)
        - LoggerProtocol: structured logging

    Returns:
        Result[DocumentOutcome, DocumentError]: Success(redirect or file)
        or Failure(not found).
    """

    def __init__(
        self,
        resolver: VersionResolver,
        archives: ArchiveProvider,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            resolver: Version resolver over the catalog.
            archives: Archive provider.
            logger: Structured logger (request-scoped when available).
        """
        self._resolver = resolver
        self._archives = archives
        self._logger = logger

    async def handle(
        self, query: ResolveDocument
    ) -> Result[DocumentOutcome, DocumentError]:
        """Handle ResolveDocument query.

        Args:
            query: Requested project, version and path.

        Returns:
            Success(DocumentRedirect): Trailing slash missing, or a newer
                version of the requested group exists.
            Success(DocumentFile): File found in the requested archive.
            Failure(DocumentError): Archive or file missing.
        """
        # Relative links inside a tree only resolve below a trailing slash.
        if query.path is None:
            return Success(
                value=DocumentRedirect(
                    location=self._with_query(f"{query.request_path}/", query)
                )
            )

        latest = self._resolver.redirect_target(query.project, query.version)
        if latest is not None:
            location = query.request_path.replace(query.version, latest.name, 1)
            self._logger.debug(
                "Redirecting to latest version",
                project=query.project,
                requested_version=query.version,
                latest_version=latest.name,
            )
            return Success(
                value=DocumentRedirect(
                    location=self._with_query(location, query),
                    version=latest.name,
                )
            )

        archive = self._archives.contents_for(query.project, query.version)
        if archive is None:
            self._logger.debug(
                "No archive for requested version",
                project=query.project,
                version=query.version,
            )
            return Failure(
                error=DocumentError(
                    code=ErrorCode.ARCHIVE_NOT_FOUND,
                    message="No documentation archive for this version",
                    project=query.project,
                    version=query.version,
                )
            )

        path = query.path or INDEX_DOCUMENT
        if not archive.exists(path):
            self._logger.debug(
                "Document not found in archive",
                project=query.project,
                version=query.version,
                path=path,
            )
            return Failure(
                error=DocumentError(
                    code=ErrorCode.DOCUMENT_NOT_FOUND,
                    message="Document not found in archive",
                    project=query.project,
                    version=query.version,
                    path=path,
                )
            )

        return Success(
            value=DocumentFile(
                archive=archive,
                path=path,
                media_type=media_type_for(path),
                cache_policy=cache_policy_for(path),
            )
        )

    @staticmethod
    def _with_query(location: str, query: ResolveDocument) -> str:
        if query.query_string:
            return f"{location}?{query.query_string}"
        return location
