"""Namespace response schemas.

Responses use a small envelope: ``ok`` tells clients whether the call
succeeded; on success ``namespaces`` holds the payload, on failure ``code``
and ``message`` describe the error at the top level.

    {"ok": true, "namespaces": [{"name": "paper", "groups": [...]}]}
    {"ok": false, "code": "namespace_not_found", "message": "..."}
"""

from pydantic import BaseModel, ConfigDict, Field

from docshelf.application.queries.handlers import NamespaceResult
from docshelf.core.errors import DomainError


class VersionGroupResponse(BaseModel):
    """Version group in a namespace listing."""

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., description="Group key", examples=["1.20"])
    version: str = Field(
        ..., description="Representative group version", examples=["1.20"]
    )
    latest: str | None = Field(
        None,
        description="Latest version; requests for the group redirect here",
        examples=["1.20.4"],
    )
    versions: list[str] = Field(
        default_factory=list,
        description="Published versions",
        examples=[["1.20.1", "1.20.4"]],
    )


class NamespaceResponse(BaseModel):
    """A documented project and its version groups."""

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(..., description="Project name", examples=["paper"])
    groups: list[VersionGroupResponse] = Field(default_factory=list)


class NamespacesResponse(BaseModel):
    """Envelope for namespace endpoints."""

    ok: bool = Field(..., description="Whether the request succeeded")
    namespaces: list[NamespaceResponse] | None = Field(
        None, description="Namespaces (success only)"
    )
    code: str | None = Field(None, description="Error code (failure only)")
    message: str | None = Field(None, description="Error message (failure only)")

    @classmethod
    def success(cls, namespaces: list[NamespaceResult]) -> "NamespacesResponse":
        """Build a success envelope from handler DTOs."""
        return cls(
            ok=True,
            namespaces=[
                NamespaceResponse.model_validate(namespace) for namespace in namespaces
            ],
        )

    @classmethod
    def error(cls, error: DomainError) -> "NamespacesResponse":
        """Build a failure envelope from a domain error."""
        return cls(ok=False, code=error.code.value, message=error.message)
