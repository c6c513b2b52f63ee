"""Catalog loading."""

from docshelf.infrastructure.catalog.yaml_catalog import (
    CatalogConfig,
    CatalogError,
    load_catalog,
    parse_catalog,
)

__all__ = ["CatalogConfig", "CatalogError", "load_catalog", "parse_catalog"]
