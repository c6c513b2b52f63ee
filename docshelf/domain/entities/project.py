"""Documentation catalog entities.

A Project (a documented artifact, also called a namespace) owns named
version groups. Each VersionGroup collects the published versions of one
minor release line, e.g. group ``1.20`` holds ``1.20.1`` and ``1.20.4``.
Every Version names exactly one documentation archive.

The catalog is configuration: entities are built once at startup and never
mutated, hence frozen dataclasses holding tuples.
"""

from dataclasses import dataclass

from docshelf.domain.value_objects.semver import SemVer


@dataclass(frozen=True, slots=True, kw_only=True)
class Version:
    """One published documentation archive of a project.

    Attributes:
        name: Version name as published (e.g. ``"1.20.4"``, ``"1.20-SNAPSHOT"``).
    """

    name: str

    @property
    def semver(self) -> SemVer:
        """Loosely parsed version."""
        return SemVer.parse(self.name)


@dataclass(frozen=True, slots=True, kw_only=True)
class VersionGroup:
    """Versions sharing a minor release line.

    Attributes:
        name: Opaque group key from the catalog.
        version: Representative group version (e.g. ``"1.20"``).
        versions: Member versions in configured order.
    """

    name: str
    version: str
    versions: tuple[Version, ...] = ()

    @property
    def semver(self) -> SemVer:
        """Loosely parsed group version."""
        return SemVer.parse(self.version)

    def stray_versions(self) -> tuple[Version, ...]:
        """Return members whose (major, minor) differs from the group's."""
        group_semver = self.semver
        return tuple(
            member
            for member in self.versions
            if not member.semver.same_minor_line(group_semver)
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class Project:
    """A documented artifact with its own namespace of versions.

    Attributes:
        name: Project identifier (lowercase, used in URLs).
        version_groups: Groups in configured (insertion) order.
    """

    name: str
    version_groups: tuple[VersionGroup, ...] = ()
