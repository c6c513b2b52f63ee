"""Domain entities."""

from docshelf.domain.entities.project import Project, Version, VersionGroup
from docshelf.domain.entities.version_catalog import VersionCatalog

__all__ = ["Project", "Version", "VersionCatalog", "VersionGroup"]
