"""VersionCatalog aggregate.

Process-wide, read-only view of the configured projects. Lookups are linear
scans; catalogs hold tens of projects and groups.
"""

from collections.abc import Iterable

from docshelf.domain.entities.project import Project, VersionGroup
from docshelf.domain.value_objects.semver import SemVer


class VersionCatalog:
    """Configured projects in their configured order.

    Also serves as the configuration store: ``endpoints()`` returns the
    parsed catalog exactly as configured.

    Example:
        >>> catalog = VersionCatalog([paper])
        >>> project = catalog.find_project("Paper")
        >>> group = catalog.find_version_group(project, "1.20")
    """

    def __init__(self, projects: Iterable[Project] = ()) -> None:
        self._projects = tuple(projects)

    def endpoints(self) -> tuple[Project, ...]:
        """Return all projects in configured order."""
        return self._projects

    def find_project(self, name: str) -> Project | None:
        """Find a project by name, ignoring case.

        Args:
            name: Requested project name.

        Returns:
            First project whose name matches case-insensitively, or None.
        """
        wanted = name.casefold()
        for project in self._projects:
            if project.name.casefold() == wanted:
                return project
        return None

    def find_version_group(
        self, project: Project, requested_version: str
    ) -> VersionGroup | None:
        """Find the version group a requested version belongs to.

        Groups are tried in configured order; the first whose group version
        has the same minor component as the requested version wins. Only the
        minor component is compared.

        Args:
            project: Project to search.
            requested_version: Version string from the request (any form).

        Returns:
            Matching group, or None when no group matches.
        """
        requested = SemVer.parse(requested_version)
        for group in project.version_groups:
            if group.semver.same_minor(requested):
                return group
        return None

    def __len__(self) -> int:
        return len(self._projects)
