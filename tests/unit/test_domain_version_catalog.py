"""Unit tests for catalog entities and VersionCatalog lookups.

Tests cover:
- Case-insensitive project lookup
- First-match version group lookup by minor component
- Stray version detection on VersionGroup
"""

import pytest

from docshelf.domain.entities import Project, Version, VersionCatalog, VersionGroup


def make_group(name: str, version: str, *versions: str) -> VersionGroup:
    return VersionGroup(
        name=name,
        version=version,
        versions=tuple(Version(name=v) for v in versions),
    )


@pytest.mark.unit
class TestFindProject:
    """Test VersionCatalog.find_project."""

    def test_finds_project_ignoring_case(self, catalog):
        """Test project names match case-insensitively."""
        project = catalog.find_project("PROJ")

        assert project is not None
        assert project.name == "proj"

    def test_returns_none_for_unknown_project(self, catalog):
        """Test unknown names return None."""
        assert catalog.find_project("missing") is None

    def test_first_match_wins(self):
        """Test the first of two case-colliding projects is returned."""
        first = Project(name="paper")
        second = Project(name="Paper", version_groups=(make_group("x", "1.0"),))
        catalog = VersionCatalog([first, second])

        assert catalog.find_project("PAPER") is first

    def test_empty_catalog(self):
        """Test an empty catalog has no endpoints."""
        catalog = VersionCatalog()

        assert catalog.endpoints() == ()
        assert len(catalog) == 0
        assert catalog.find_project("proj") is None


@pytest.mark.unit
class TestFindVersionGroup:
    """Test VersionCatalog.find_version_group."""

    def test_matches_group_by_minor(self, catalog):
        """Test '1.2', '1.2.0' and '1.2-SNAPSHOT' all land in group 1.2."""
        project = catalog.find_project("proj")

        for requested in ("1.2", "1.2.0", "1.2.4", "1.2-SNAPSHOT"):
            group = catalog.find_version_group(project, requested)
            assert group is not None, requested
            assert group.name == "1.2"

    def test_returns_none_when_no_minor_matches(self, catalog):
        """Test versions on other minor lines have no group."""
        project = catalog.find_project("proj")

        assert catalog.find_version_group(project, "1.3") is None
        assert catalog.find_version_group(project, "1.20") is None

    def test_only_minor_component_is_compared(self, catalog):
        """Test a different major still matches on minor alone."""
        project = catalog.find_project("proj")

        group = catalog.find_version_group(project, "9.2.1")

        assert group is not None
        assert group.name == "1.2"

    def test_first_configured_group_wins(self):
        """Test lookup is order dependent when two groups share a minor."""
        first = make_group("one", "1.2", "1.2.1")
        second = make_group("two", "2.2", "2.2.1")
        project = Project(name="proj", version_groups=(first, second))
        catalog = VersionCatalog([project])

        assert catalog.find_version_group(project, "2.2.0") is first


@pytest.mark.unit
class TestVersionGroup:
    """Test VersionGroup helpers."""

    def test_stray_versions_lists_other_minor_lines(self):
        """Test members off the (major, minor) line are reported."""
        group = make_group("1.2", "1.2", "1.2.1", "1.3.0", "2.2.0")

        strays = group.stray_versions()

        assert [v.name for v in strays] == ["1.3.0", "2.2.0"]
