"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console adapter)
- Catalog (YAML file, loaded once)
- Archive provider (zip/jar files under storage_path)

``lru_cache`` makes each factory publish-once: the first caller builds the
instance, every later caller (from any request) gets the same object.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from docshelf.core.config import settings
from docshelf.core.enums import Environment

if TYPE_CHECKING:
    from docshelf.domain.entities import VersionCatalog
    from docshelf.domain.protocols.logger_protocol import LoggerProtocol
    from docshelf.infrastructure.archives import ZipArchiveProvider


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from docshelf.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = settings.environment != Environment.DEVELOPMENT
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_catalog() -> "VersionCatalog":
    """Return the version catalog singleton.

    Loaded from ``settings.catalog_path`` on first use and never reloaded.

    Returns:
        VersionCatalog: Immutable catalog.

    Raises:
        CatalogError: If the catalog file is unreadable or invalid.
    """
    from docshelf.infrastructure.catalog import load_catalog

    return load_catalog(settings.catalog_path, logger=get_logger())


@lru_cache()
def get_archive_provider() -> "ZipArchiveProvider":
    """Return the archive provider singleton.

    The provider owns every archive it opens; ``close()`` is called from
    the application lifespan on shutdown.

    Returns:
        ZipArchiveProvider: Provider rooted at ``settings.storage_path``.
    """
    from docshelf.infrastructure.archives import ZipArchiveProvider

    return ZipArchiveProvider(
        settings.storage_path,
        logger=get_logger(),
        suffixes=settings.archive_suffixes,
    )
