"""Filesystem archive provider.

Archives are looked up on local disk as
``{storage_path}/{project}/{version}{suffix}``, trying each configured
suffix in order (``.zip`` then ``.jar`` by default).

Lifecycle:
- An archive is opened on first request and kept open for the life of the
  process; later requests reuse the same handle.
- Absent archives are not remembered, so an archive dropped into storage
  becomes available without a restart.
- ``close()`` closes every open archive (application shutdown).
"""

import threading
import zipfile
from collections.abc import Iterable
from pathlib import Path

from docshelf.domain.protocols import LoggerProtocol
from docshelf.infrastructure.archives.zip_archive import ZipDocArchive


def _is_safe_segment(segment: str) -> bool:
    return (
        bool(segment)
        and segment not in (".", "..")
        and not any(char in segment for char in ("/", "\\", "\x00"))
    )


class ZipArchiveProvider:
    """ArchiveProvider backed by zip/jar files under a storage directory.

    Args:
        storage_path: Root directory of the archive store.
        logger: Structured logger.
        suffixes: File suffixes tried in order.
    """

    def __init__(
        self,
        storage_path: Path,
        *,
        logger: LoggerProtocol,
        suffixes: Iterable[str] = (".zip", ".jar"),
    ) -> None:
        self._root = storage_path
        self._suffixes = tuple(suffixes)
        self._logger = logger
        self._archives: dict[tuple[str, str], ZipDocArchive] = {}
        self._lock = threading.Lock()

    def contents_for(self, project: str, version: str) -> ZipDocArchive | None:
        """Return the archive for an exact (project, version).

        Args:
            project: Project directory name.
            version: Exact version name.

        Returns:
            ZipDocArchive | None: Open archive, or None if absent or unreadable.
        """
        key = (project, version)
        archive = self._archives.get(key)
        if archive is not None:
            return archive
        if not (_is_safe_segment(project) and _is_safe_segment(version)):
            return None

        with self._lock:
            # Another request may have opened it while we waited.
            archive = self._archives.get(key)
            if archive is None:
                archive = self._open(project, version)
                if archive is not None:
                    self._archives[key] = archive
        return archive

    def archive_path(self, project: str, version: str) -> Path | None:
        """Return the first existing archive file for a key, if any."""
        directory = self._root / project
        for suffix in self._suffixes:
            candidate = directory / f"{version}{suffix}"
            try:
                if candidate.is_file():
                    return candidate
            except OSError as e:
                # e.g. ENAMETOOLONG for an oversized version segment
                self._logger.warning(
                    "Archive lookup failed",
                    project=project,
                    version=version[:64],
                    error_message=str(e),
                )
                return None
        return None

    def close(self) -> None:
        """Close every open archive."""
        with self._lock:
            for (project, version), archive in self._archives.items():
                try:
                    archive.close()
                except OSError as e:
                    self._logger.warning(
                        "Failed to close archive",
                        project=project,
                        version=version,
                        error_message=str(e),
                    )
            self._archives.clear()

    def __len__(self) -> int:
        return len(self._archives)

    def _open(self, project: str, version: str) -> ZipDocArchive | None:
        path = self.archive_path(project, version)
        if path is None:
            self._logger.debug(
                "Archive not found", project=project, version=version
            )
            return None
        try:
            archive = ZipDocArchive(path)
        except (zipfile.BadZipFile, OSError) as e:
            self._logger.error(
                "Failed to open archive",
                error=e,
                project=project,
                version=version,
                path=str(path),
            )
            return None
        self._logger.info(
            "Archive opened",
            project=project,
            version=version,
            path=str(archive.path),
            entries=len(archive),
        )
        return archive
