"""Domain value objects (immutable, no identity)."""

from docshelf.domain.value_objects.semver import SemVer, compare_versions

__all__ = ["SemVer", "compare_versions"]
