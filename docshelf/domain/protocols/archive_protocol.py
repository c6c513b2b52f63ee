"""Archive protocols.

A DocArchive is the read-only file tree of one exact documentation
version. An ArchiveProvider hands out DocArchive instances by
(project, version) key and owns their lifecycle: callers read from an
archive but never close it.

Paths inside an archive are POSIX-style and relative to the archive root
(``index.html``, ``org/example/Foo.html``). A leading ``/`` is ignored.
Paths that escape the root (``../secret``) are treated as absent.
"""

from collections.abc import Iterator
from typing import IO, Protocol


class DocArchive(Protocol):
    """Read-only documentation tree for one version."""

    def exists(self, path: str) -> bool:
        """Return True if ``path`` is a regular file (not a directory).

        Args:
            path: Path inside the archive.
        """
        ...

    def open(self, path: str) -> IO[bytes]:
        """Open a file for binary reading.

        Args:
            path: Path inside the archive.

        Returns:
            Binary stream; the caller closes it.

        Raises:
            FileNotFoundError: If ``path`` is not a regular file.
        """
        ...

    def iter_bytes(self, path: str, chunk_size: int) -> Iterator[bytes]:
        """Yield the file's bytes in chunks of at most ``chunk_size``.

        Raises:
            FileNotFoundError: If ``path`` is not a regular file.
        """
        ...


class ArchiveProvider(Protocol):
    """Source of documentation archives keyed by (project, version)."""

    def contents_for(self, project: str, version: str) -> DocArchive | None:
        """Return the archive for an exact project version.

        Implementations open each archive at most once and reuse it across
        requests.

        Args:
            project: Project name as requested.
            version: Exact version name (no alias resolution).

        Returns:
            The archive, or None when no archive exists for the key.
        """
        ...
