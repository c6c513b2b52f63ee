"""Zip-backed documentation archive.

Javadoc jars and zipped HTML trees are both plain zip files. The entry
index is read once when the archive is opened; lookups afterwards are
dictionary hits. ``zipfile`` serializes reads on the shared file handle, so
one open archive can serve concurrent requests.
"""

import zipfile
from collections.abc import Iterator
from pathlib import Path
from typing import IO


def normalize_entry_path(path: str) -> str | None:
    """Normalize an in-archive path.

    Leading slashes, empty segments and ``.`` segments are dropped and
    ``..`` segments are collapsed.

    Args:
        path: Requested path, e.g. ``"/org/example/../Foo.html"``.

    Returns:
        str | None: Normalized relative path, or None when the path is empty
            or escapes the archive root.
    """
    parts: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if not parts:
                return None
            parts.pop()
            continue
        parts.append(part)
    return "/".join(parts) or None


class ZipDocArchive:
    """Read-only documentation tree stored in a zip file.

    Args:
        path: Zip (or jar) file on disk.

    Raises:
        zipfile.BadZipFile: If the file is not a zip archive.
        OSError: If the file cannot be read.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._zip = zipfile.ZipFile(path)
        self._entries: dict[str, zipfile.ZipInfo] = {}
        for info in self._zip.infolist():
            if info.is_dir():
                continue
            name = normalize_entry_path(info.filename)
            if name is not None:
                self._entries.setdefault(name, info)

    @property
    def path(self) -> Path:
        """Location of the archive file."""
        return self._path

    def exists(self, path: str) -> bool:
        """Return True if ``path`` names a regular file entry."""
        return self._lookup(path) is not None

    def open(self, path: str) -> IO[bytes]:
        """Open a file entry for binary reading.

        Raises:
            FileNotFoundError: If ``path`` is not a regular file entry.
        """
        info = self._lookup(path)
        if info is None:
            raise FileNotFoundError(path)
        return self._zip.open(info)

    def iter_bytes(self, path: str, chunk_size: int) -> Iterator[bytes]:
        """Yield a file entry's bytes in chunks.

        Raises:
            FileNotFoundError: If ``path`` is not a regular file entry.
        """
        with self.open(path) as stream:
            while chunk := stream.read(chunk_size):
                yield chunk

    def close(self) -> None:
        """Close the underlying zip file."""
        self._zip.close()

    def __len__(self) -> int:
        return len(self._entries)

    def _lookup(self, path: str) -> zipfile.ZipInfo | None:
        name = normalize_entry_path(path)
        if name is None:
            return None
        return self._entries.get(name)
