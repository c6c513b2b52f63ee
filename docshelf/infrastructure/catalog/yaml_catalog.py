"""YAML catalog loader.

The catalog file lists every documented project, its version groups and the
published versions inside each group::

    endpoints:
      - name: paper
        version_groups:
          "1.20":
            version: "1.20"
            versions: ["1.20.1", "1.20.4", "1.20-SNAPSHOT"]

Group order and version order are kept as written. Version strings must be
quoted: YAML reads an unquoted ``1.20`` as the float ``1.2``.

Validation (pydantic):
- project names are lowercase letters only (they appear in URLs)
- project names are unique (case-insensitive)
- every version of a group shares the group's (major, minor) line
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from docshelf.core.enums import ErrorCode
from docshelf.domain.entities import Project, Version, VersionCatalog, VersionGroup
from docshelf.domain.protocols import LoggerProtocol


class CatalogError(Exception):
    """Raised when the catalog file cannot be read or is invalid.

    Attributes:
        code: CATALOG_UNREADABLE or CATALOG_INVALID.
        path: Catalog file location.
    """

    def __init__(self, message: str, *, code: ErrorCode, path: Path) -> None:
        super().__init__(message)
        self.code = code
        self.path = path


class VersionGroupConfig(BaseModel):
    """One version group as written in the catalog file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    version: str = Field(
        ..., min_length=1, description="Representative group version"
    )
    versions: list[str] = Field(default_factory=list, description="Member versions")

    @field_validator("versions", mode="before")
    @classmethod
    def accept_named_versions(cls, v: Any) -> Any:
        """Accept ``{"name": "1.20.4"}`` entries next to plain strings."""
        if isinstance(v, list):
            return [
                item["name"] if isinstance(item, dict) and "name" in item else item
                for item in v
            ]
        return v

    @model_validator(mode="after")
    def check_minor_line(self) -> "VersionGroupConfig":
        """Reject versions outside the group's (major, minor) line."""
        strays = self.to_entity("").stray_versions()
        if strays:
            names = ", ".join(version.name for version in strays)
            raise ValueError(
                f"versions [{names}] are not on the minor line of group {self.version}"
            )
        return self

    def to_entity(self, name: str) -> VersionGroup:
        return VersionGroup(
            name=name,
            version=self.version,
            versions=tuple(Version(name=version) for version in self.versions),
        )


class EndpointConfig(BaseModel):
    """One project as written in the catalog file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(
        ..., pattern=r"^[a-z]+$", description="Project name used in URLs"
    )
    version_groups: dict[str, VersionGroupConfig] = Field(default_factory=dict)

    def to_entity(self) -> Project:
        return Project(
            name=self.name,
            version_groups=tuple(
                group.to_entity(key) for key, group in self.version_groups.items()
            ),
        )


class CatalogConfig(BaseModel):
    """Catalog file root."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    endpoints: list[EndpointConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_names(self) -> "CatalogConfig":
        """Reject duplicate project names."""
        seen: set[str] = set()
        for endpoint in self.endpoints:
            key = endpoint.name.casefold()
            if key in seen:
                raise ValueError(f"duplicate project name: {endpoint.name}")
            seen.add(key)
        return self

    def to_catalog(self) -> VersionCatalog:
        return VersionCatalog(endpoint.to_entity() for endpoint in self.endpoints)


def parse_catalog(data: Any, *, path: Path) -> VersionCatalog:
    """Validate already-parsed YAML data and build the catalog.

    Args:
        data: Result of ``yaml.safe_load`` (None for an empty file).
        path: Catalog file location, for error reporting.

    Returns:
        VersionCatalog: Immutable catalog.

    Raises:
        CatalogError: If the data does not describe a valid catalog.
    """
    try:
        config = CatalogConfig.model_validate(data or {})
    except ValidationError as e:
        raise CatalogError(
            f"Invalid catalog {path}: {e}", code=ErrorCode.CATALOG_INVALID, path=path
        ) from e
    return config.to_catalog()


def load_catalog(path: Path, *, logger: LoggerProtocol) -> VersionCatalog:
    """Load the catalog file.

    A missing file yields an empty catalog: every request then falls
    through to exact-version archive lookup.

    Args:
        path: YAML catalog file.
        logger: Structured logger.

    Returns:
        VersionCatalog: Immutable catalog.

    Raises:
        CatalogError: If the file exists but cannot be read or validated.
    """
    if not path.exists():
        logger.warning(
            "Catalog file not found, starting with empty catalog", path=str(path)
        )
        return VersionCatalog()

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CatalogError(
            f"Cannot read catalog {path}: {e}",
            code=ErrorCode.CATALOG_UNREADABLE,
            path=path,
        ) from e

    catalog = parse_catalog(data, path=path)
    logger.info("Catalog loaded", path=str(path), projects=len(catalog))
    return catalog
