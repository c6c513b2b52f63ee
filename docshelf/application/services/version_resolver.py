"""Version resolution service.

Decides where a request for a project version should land. Clients may ask
for an abbreviated version (``1.20``) or an outdated patch (``1.20.1``);
both belong to the ``1.20`` group, whose latest member (``1.20.4``) is the
redirect target.

Latest-version rule:
    Scanning the group in configured order, a candidate replaces the
    running latest when no latest has been chosen yet, when it outranks the
    latest under semantic ordering, or when its patch number alone is
    greater. The patch comparison is applied independently of the semantic
    one, so ``1.2.5-SNAPSHOT`` listed after ``1.2.4`` wins even though a
    release normally outranks a pre-release only when the patches tie. This
    is relied upon by existing catalogs and kept as is.

Usage:
    resolver = VersionResolver(catalog)
    target = resolver.redirect_target("paper", "1.20")
    if target is not None:
        ...  # redirect to target.name
"""

from docshelf.domain.entities import Version, VersionCatalog, VersionGroup


class VersionResolver:
    """Resolve requested versions against the catalog.

    Dependencies (injected via constructor):
        - VersionCatalog: read-only project configuration
    """

    def __init__(self, catalog: VersionCatalog) -> None:
        """Initialize resolver with the catalog.

        Args:
            catalog: Process-wide version catalog.
        """
        self._catalog = catalog

    @staticmethod
    def latest_of(group: VersionGroup) -> Version | None:
        """Return the latest version of a group.

        Args:
            group: Version group to scan.

        Returns:
            Latest version, or None when the group has no versions.
        """
        latest: Version | None = None
        for candidate in group.versions:
            if latest is None:
                latest = candidate
                continue
            candidate_semver = candidate.semver
            latest_semver = latest.semver
            if (
                candidate_semver.is_greater_than(latest_semver)
                or candidate_semver.patch > latest_semver.patch
            ):
                latest = candidate
        return latest

    def latest_for(self, project_name: str, requested_version: str) -> Version | None:
        """Return the latest version of the group owning a requested version.

        Args:
            project_name: Project name (case-insensitive).
            requested_version: Version string as requested.

        Returns:
            Latest version of the matching group, or None when the project,
            the group or any version is missing.
        """
        project = self._catalog.find_project(project_name)
        if project is None:
            return None
        group = self._catalog.find_version_group(project, requested_version)
        if group is None:
            return None
        return self.latest_of(group)

    def redirect_target(
        self, project_name: str, requested_version: str
    ) -> Version | None:
        """Return the version a request should be redirected to.

        Args:
            project_name: Project name (case-insensitive).
            requested_version: Version string as requested.

        Returns:
            Latest version when it differs from the requested one, else None.
        """
        latest = self.latest_for(project_name, requested_version)
        if latest is None or latest.name == requested_version:
            return None
        return latest
