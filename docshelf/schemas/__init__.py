"""Pydantic request/response schemas for the JSON API."""

from docshelf.schemas.namespace_schemas import (
    NamespaceResponse,
    NamespacesResponse,
    VersionGroupResponse,
)

__all__ = ["NamespaceResponse", "NamespacesResponse", "VersionGroupResponse"]
