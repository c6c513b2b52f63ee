"""Namespace resource endpoints.

    GET /api/v1/namespaces         - List every configured namespace
    GET /api/v1/namespaces/{name}  - Get one namespace (case-insensitive)
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from docshelf.application.queries import GetNamespace, ListNamespaces
from docshelf.application.queries.handlers import ListNamespacesHandler
from docshelf.core.container import get_list_namespaces_handler
from docshelf.core.result import Failure, Success
from docshelf.schemas import NamespacesResponse

router = APIRouter(prefix="/namespaces", tags=["Namespaces"])


@router.get("", response_model=NamespacesResponse, response_model_exclude_none=True)
async def list_namespaces(
    handler: ListNamespacesHandler = Depends(get_list_namespaces_handler),
) -> NamespacesResponse:
    """List every documented namespace with its version groups.

    Returns:
        NamespacesResponse: Namespaces in catalog order, each group carrying
            the latest version clients are redirected to.
    """
    result = await handler.handle(ListNamespaces())
    match result:
        case Success(value=namespaces):
            return NamespacesResponse.success(namespaces)
        case Failure(error=error):
            return NamespacesResponse.error(error)


@router.get(
    "/{name}",
    response_model=NamespacesResponse,
    response_model_exclude_none=True,
    responses={status.HTTP_404_NOT_FOUND: {"model": NamespacesResponse}},
)
async def get_namespace(
    name: str,
    handler: ListNamespacesHandler = Depends(get_list_namespaces_handler),
) -> NamespacesResponse | JSONResponse:
    """Get a single namespace.

    Args:
        name: Namespace name (case-insensitive).

    Returns:
        NamespacesResponse: Envelope holding the single namespace, or a 404
            envelope with ``ok`` false.
    """
    result = await handler.handle_get(GetNamespace(name=name))
    match result:
        case Success(value=namespace):
            return NamespacesResponse.success([namespace])
        case Failure(error=error):
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=NamespacesResponse.error(error).model_dump(exclude_none=True),
            )
