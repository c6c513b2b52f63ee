"""Shared pytest fixtures.

Documentation archives are built on the fly under ``tmp_path`` so every
test gets a private storage directory:

    storage/
      proj/1.2.9.zip    (index.html, style.css, search-index.js, ...)
      proj/1.2.0.zip    (index.html)
      other/2.0.jar     (index.html)

The test catalog holds one project, ``proj``, with group ``1.2`` whose
latest version is ``1.2.9``. ``other`` is not in the catalog, so its
versions are only reachable by exact name.
"""

import zipfile
from collections.abc import Iterator, Mapping
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from docshelf.application.services import VersionResolver
from docshelf.domain.entities import Project, Version, VersionCatalog, VersionGroup
from docshelf.domain.protocols import LoggerProtocol
from docshelf.infrastructure.archives import ZipArchiveProvider

INDEX_HTML = b"<html><body>proj 1.2.9</body></html>"
STYLE_CSS = b"body { color: #222; }"
SEARCH_INDEX_JS = b"searchIndex = [];"
SCRIPT_JS = b"function go() {}"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
BLOB_BYTES = bytes(range(256)) * 4

PROJ_1_2_9_ENTRIES: Mapping[str, bytes] = {
    "index.html": INDEX_HTML,
    "style.css": STYLE_CSS,
    "search-index.js": SEARCH_INDEX_JS,
    "script.js": SCRIPT_JS,
    "resources/logo.png": PNG_BYTES,
    "org/example/Foo.html": b"<html>Foo</html>",
    "data.blob": BLOB_BYTES,
    "element-list": b"org.example\n",
}


def build_zip(
    path: Path, entries: Mapping[str, bytes], *, dirs: tuple[str, ...] = ()
) -> Path:
    """Write a zip file holding ``entries`` (and optional directory entries)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for directory in dirs:
            archive.writestr(directory.rstrip("/") + "/", b"")
        for name, data in entries.items():
            archive.writestr(name, data)
    return path


def make_catalog() -> VersionCatalog:
    """Catalog with project ``proj`` and group ``1.2`` (latest ``1.2.9``)."""
    return VersionCatalog(
        [
            Project(
                name="proj",
                version_groups=(
                    VersionGroup(
                        name="1.2",
                        version="1.2",
                        versions=(Version(name="1.2.0"), Version(name="1.2.9")),
                    ),
                ),
            )
        ]
    )


@pytest.fixture
def catalog() -> VersionCatalog:
    """Test catalog (see module docstring)."""
    return make_catalog()


@pytest.fixture
def resolver(catalog: VersionCatalog) -> VersionResolver:
    """Version resolver over the test catalog."""
    return VersionResolver(catalog)


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double satisfying LoggerProtocol."""
    return MagicMock(spec=LoggerProtocol)


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    """Archive storage populated with the test archives."""
    root = tmp_path / "storage"
    build_zip(
        root / "proj" / "1.2.9.zip",
        PROJ_1_2_9_ENTRIES,
        dirs=("resources", "org", "org/example"),
    )
    build_zip(root / "proj" / "1.2.0.zip", {"index.html": b"<html>old</html>"})
    build_zip(root / "other" / "2.0.jar", {"index.html": b"<html>other</html>"})
    return root


@pytest.fixture
def archive_provider(
    storage_path: Path, mock_logger: MagicMock
) -> Iterator[ZipArchiveProvider]:
    """Archive provider over the test storage, closed after the test."""
    provider = ZipArchiveProvider(storage_path, logger=mock_logger)
    yield provider
    provider.close()
