"""Unit tests for ZipArchiveProvider.

Tests cover:
- Exact (project, version) lookup across configured suffixes
- Handle reuse across lookups
- Absent, oversized and unreadable archives
- Shutdown cleanup
"""

import errno
from pathlib import Path
from unittest.mock import ANY, patch

import pytest

from docshelf.infrastructure.archives import ZipArchiveProvider
from tests.conftest import build_zip


@pytest.mark.unit
class TestContentsFor:
    """Test ZipArchiveProvider.contents_for."""

    def test_opens_zip_archive(self, archive_provider):
        """Test a .zip archive is found by exact version."""
        archive = archive_provider.contents_for("proj", "1.2.9")

        assert archive is not None
        assert archive.exists("style.css")

    def test_opens_jar_archive(self, archive_provider):
        """Test a .jar archive is found when no .zip exists."""
        archive = archive_provider.contents_for("other", "2.0")

        assert archive is not None
        assert archive.path.suffix == ".jar"

    def test_zip_preferred_over_jar(self, storage_path, mock_logger):
        """Test suffixes are tried in configured order."""
        build_zip(storage_path / "other" / "2.0.zip", {"zip.html": b"zip"})
        provider = ZipArchiveProvider(storage_path, logger=mock_logger)

        archive = provider.contents_for("other", "2.0")

        assert archive.exists("zip.html")
        provider.close()

    def test_custom_suffixes(self, storage_path, mock_logger):
        """Test only configured suffixes are considered."""
        provider = ZipArchiveProvider(
            storage_path, logger=mock_logger, suffixes=[".zip"]
        )

        assert provider.contents_for("other", "2.0") is None

    def test_handle_is_reused(self, archive_provider):
        """Test repeated lookups return the same open archive."""
        first = archive_provider.contents_for("proj", "1.2.9")
        second = archive_provider.contents_for("proj", "1.2.9")

        assert first is second
        assert len(archive_provider) == 1

    def test_version_is_not_resolved(self, archive_provider):
        """Test abbreviated versions do not match published archives."""
        assert archive_provider.contents_for("proj", "1.2") is None

    def test_absent_archive_is_not_cached(self, archive_provider, storage_path):
        """Test an archive added after a miss is picked up."""
        assert archive_provider.contents_for("proj", "1.3.0") is None

        build_zip(storage_path / "proj" / "1.3.0.zip", {"index.html": b"new"})

        assert archive_provider.contents_for("proj", "1.3.0") is not None

    @pytest.mark.parametrize(
        ("project", "version"),
        [("..", "1.2.9"), ("proj", ".."), ("proj/..", "x"), ("", "1.0")],
    )
    def test_unsafe_segments_are_rejected(self, archive_provider, project, version):
        """Test keys that would leave the storage root are absent."""
        assert archive_provider.contents_for(project, version) is None

    def test_oversized_version_is_absent(self, archive_provider):
        """Test a version too long for a file name is simply absent."""
        assert archive_provider.contents_for("proj", "9" * 5000) is None

    def test_filesystem_error_is_logged_and_absent(
        self, archive_provider, mock_logger
    ):
        """Test an OS error while probing storage yields None and a warning."""
        error = OSError(errno.ENAMETOOLONG, "File name too long")

        with patch.object(Path, "is_file", side_effect=error):
            assert archive_provider.contents_for("proj", "1.2.9") is None

        mock_logger.warning.assert_called_once_with(
            "Archive lookup failed",
            project="proj",
            version="1.2.9",
            error_message=str(error),
        )

    def test_unreadable_archive_is_logged_and_absent(
        self, storage_path, mock_logger
    ):
        """Test a corrupt archive yields None and an error log."""
        broken = storage_path / "proj" / "0.1.zip"
        broken.write_bytes(b"garbage")
        provider = ZipArchiveProvider(storage_path, logger=mock_logger)

        assert provider.contents_for("proj", "0.1") is None
        mock_logger.error.assert_called_once_with(
            "Failed to open archive",
            error=ANY,
            project="proj",
            version="0.1",
            path=str(broken),
        )

    def test_open_is_logged(self, archive_provider, storage_path, mock_logger):
        """Test opening an archive logs its location and entry count."""
        archive_provider.contents_for("other", "2.0")

        mock_logger.info.assert_called_once_with(
            "Archive opened",
            project="other",
            version="2.0",
            path=str(storage_path / "other" / "2.0.jar"),
            entries=1,
        )


@pytest.mark.unit
class TestClose:
    """Test ZipArchiveProvider.close."""

    def test_close_releases_all_archives(self, archive_provider):
        """Test close() empties the cache."""
        archive_provider.contents_for("proj", "1.2.9")
        archive_provider.contents_for("other", "2.0")

        archive_provider.close()

        assert len(archive_provider) == 0

    def test_lookup_after_close_reopens(self, archive_provider):
        """Test archives are reopened on demand after close()."""
        first = archive_provider.contents_for("proj", "1.2.9")
        archive_provider.close()

        second = archive_provider.contents_for("proj", "1.2.9")

        assert second is not first
        assert second.exists("index.html")
