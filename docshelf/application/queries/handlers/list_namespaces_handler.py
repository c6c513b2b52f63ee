"""Namespace query handlers.

Read-only views of the catalog for the JSON API. Returns DTOs rather than
domain entities so the presentation layer never depends on the catalog's
internal shape.
"""

from dataclasses import dataclass

from docshelf.application.queries.namespace_queries import GetNamespace, ListNamespaces
from docshelf.application.services.version_resolver import VersionResolver
from docshelf.core.enums import ErrorCode
from docshelf.core.errors import NotFoundError
from docshelf.core.result import Failure, Result, Success
from docshelf.domain.entities import Project, VersionCatalog


@dataclass(frozen=True, kw_only=True)
class VersionGroupResult:
    """Version group DTO.

    Attributes:
        name: Group key.
        version: Representative group version.
        latest: Latest member (the redirect target), None for empty groups.
        versions: Member version names in configured order.
    """

    name: str
    version: str
    latest: str | None
    versions: list[str]


@dataclass(frozen=True, kw_only=True)
class NamespaceResult:
    """Namespace DTO.

    Attributes:
        name: Project name.
        groups: Version groups in configured order.
    """

    name: str
    groups: list[VersionGroupResult]


class ListNamespacesHandler:
    """Handler for ListNamespaces and GetNamespace queries.

    Dependencies (injected via constructor):
        - VersionCatalog: configured projects
        - VersionResolver: latest-version computation
    """

    def __init__(self, catalog: VersionCatalog, resolver: VersionResolver) -> None:
        self._catalog = catalog
        self._resolver = resolver

    async def handle(
        self, query: ListNamespaces
    ) -> Result[list[NamespaceResult], NotFoundError]:
        """List all namespaces.

        Returns:
            Success(list[NamespaceResult]): Always succeeds; empty catalog
                yields an empty list.
        """
        namespaces = [self._to_dto(project) for project in self._catalog.endpoints()]
        return Success(value=namespaces)

    async def handle_get(
        self, query: GetNamespace
    ) -> Result[NamespaceResult, NotFoundError]:
        """Get one namespace.

        Args:
            query: GetNamespace with the namespace name.

        Returns:
            Success(NamespaceResult): Namespace found.
            Failure(NotFoundError): No project with that name.
        """
        project = self._catalog.find_project(query.name)
        if project is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.NAMESPACE_NOT_FOUND,
                    message=f"Namespace '{query.name}' does not exist",
                    resource_type="namespace",
                    resource_id=query.name,
                )
            )
        return Success(value=self._to_dto(project))

    def _to_dto(self, project: Project) -> NamespaceResult:
        groups = []
        for group in project.version_groups:
            latest = self._resolver.latest_of(group)
            groups.append(
                VersionGroupResult(
                    name=group.name,
                    version=group.version,
                    latest=latest.name if latest else None,
                    versions=[version.name for version in group.versions],
                )
            )
        return NamespaceResult(name=project.name, groups=groups)
