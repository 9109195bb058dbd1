"""Tests for file helpers."""

import os

import pytest

from composer_i18n_map.core.filesystem import unlink_if_exists, write_if_modified


class TestWriteIfModified:
    """Tests for content-addressed writes."""

    def test_creates_file_and_parents(self, tmp_path):
        """Test a new file is written, parents created."""
        path = tmp_path / "jetpack_vendor" / "i18n-map.php"

        assert write_if_modified(path, "<?php\n") is True
        assert path.read_text() == "<?php\n"

    def test_identical_content_not_rewritten(self, tmp_path):
        """Test identical content leaves the mtime untouched."""
        path = tmp_path / "map.php"
        path.write_text("same")
        os.utime(path, (1_000_000, 1_000_000))

        assert write_if_modified(path, "same") is False
        assert path.stat().st_mtime == 1_000_000

    def test_changed_content_rewritten(self, tmp_path):
        """Test different content replaces the file."""
        path = tmp_path / "map.php"
        path.write_text("old")

        assert write_if_modified(path, "new") is True
        assert path.read_text() == "new"

    def test_unwritable_target_raises(self, tmp_path):
        """Test I/O failures propagate."""
        target = tmp_path / "is-a-directory"
        target.mkdir()

        with pytest.raises(OSError):
            write_if_modified(target, "content")


class TestUnlinkIfExists:
    """Tests for missing-tolerant deletes."""

    def test_deletes_existing_file(self, tmp_path):
        """Test an existing file is removed."""
        path = tmp_path / "map.php"
        path.write_text("x")

        assert unlink_if_exists(path) is True
        assert not path.exists()

    def test_missing_file_ignored(self, tmp_path):
        """Test a missing file is not an error."""
        assert unlink_if_exists(tmp_path / "missing.php") is False
