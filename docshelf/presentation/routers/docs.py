"""Documentation tree router.

Serves files out of per-version documentation archives:

    GET /{project}/{version}          302 -> /{project}/{version}/
    GET /{project}/{version}/{path}   302 to the latest version of the group,
                                      200 with the file, or 404

``project`` is lowercase letters; ``version`` is digits and dots, optionally
followed by ``pre``/``SNAPSHOT`` and more digits (``1.20``, ``1.20.4``,
``1.20-SNAPSHOT``, ``1.21-pre1``). Other segments answer 404.
"""

import re

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse, Response, StreamingResponse

from docshelf.application.queries import ResolveDocument
from docshelf.application.queries.handlers import (
    DocumentFile,
    DocumentRedirect,
    ResolveDocumentHandler,
)
from docshelf.application.services import CachePolicy
from docshelf.core.config import settings
from docshelf.core.container import get_resolve_document_handler
from docshelf.core.result import Failure, Success

PROJECT_PATTERN = re.compile(r"[a-z]+")
VERSION_PATTERN = re.compile(r"[0-9.]+-?(?:pre|SNAPSHOT)?(?:[0-9.]+)?")

MARKER_HEADER = ("X-Docshelf", "Shelved")

docs_router = APIRouter(tags=["Documentation"])


def not_found_response() -> Response:
    """Empty 404 that clients and proxies must not cache."""
    return Response(
        status_code=status.HTTP_404_NOT_FOUND,
        headers={"Cache-Control": CachePolicy.NO_CACHE.value},
    )


def file_response(document: DocumentFile) -> StreamingResponse:
    """Stream an archive entry with its cache and type headers."""
    name, value = MARKER_HEADER
    return StreamingResponse(
        document.archive.iter_bytes(document.path, settings.stream_chunk_size),
        status_code=status.HTTP_200_OK,
        headers={
            "Cache-Control": document.cache_policy.value,
            "Content-Disposition": "inline",
            "Content-Type": document.media_type,
            name: value,
        },
    )


async def _resolve(
    request: Request,
    handler: ResolveDocumentHandler,
    project: str,
    version: str,
    path: str | None,
) -> Response:
    if not (PROJECT_PATTERN.fullmatch(project) and VERSION_PATTERN.fullmatch(version)):
        return not_found_response()

    query = ResolveDocument(
        project=project,
        version=version,
        path=path,
        request_path=request.url.path,
        query_string=request.url.query,
    )
    result = await handler.handle(query)

    match result:
        case Success(value=DocumentRedirect(location=location)):
            return RedirectResponse(location, status_code=status.HTTP_302_FOUND)
        case Success(value=DocumentFile() as document):
            return file_response(document)
        case Failure():
            return not_found_response()
    return not_found_response()


@docs_router.get(
    "/{project}/{version}",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    summary="Redirect to the documentation root",
)
async def redirect_to_tree_root(
    request: Request,
    project: str,
    version: str,
    handler: ResolveDocumentHandler = Depends(get_resolve_document_handler),
) -> Response:
    """Append the trailing slash so relative links inside the tree resolve."""
    return await _resolve(request, handler, project, version, None)


@docs_router.get(
    "/{project}/{version}/{path:path}",
    response_class=Response,
    summary="Serve a documentation file",
    responses={
        status.HTTP_200_OK: {"description": "File from the version's archive"},
        status.HTTP_302_FOUND: {"description": "Newer version of the same group"},
        status.HTTP_404_NOT_FOUND: {"description": "No such archive or file"},
    },
)
async def serve_document(
    request: Request,
    project: str,
    version: str,
    path: str,
    handler: ResolveDocumentHandler = Depends(get_resolve_document_handler),
) -> Response:
    """Serve a file from a project version's documentation archive.

    Requests for a version inside a configured group are redirected to the
    group's latest version when it differs. Otherwise the exact archive is
    consulted; an empty path serves ``index.html``.
    """
    return await _resolve(request, handler, project, version, path)
