"""Documentation archive adapters."""

from docshelf.infrastructure.archives.zip_archive import (
    ZipDocArchive,
    normalize_entry_path,
)
from docshelf.infrastructure.archives.zip_archive_provider import ZipArchiveProvider

__all__ = ["ZipArchiveProvider", "ZipDocArchive", "normalize_entry_path"]
