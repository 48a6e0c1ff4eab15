"""Tests for output storage backends."""

import pytest

from site_bundler.storage.local import OutputDirectoryStorage


class TestOutputDirectoryStorageReset:
    def test_reset_removes_previous_output(self, tmp_path):
        """Reset wipes stale files from an earlier run.

        Purpose: Verify the output tree is fully regenerated each run.
        Category: Normal case
        Target: OutputDirectoryStorage.reset()
        Technique: State transition
        Test data: Output root containing a stale nested file
        """
        root = tmp_path / "dist"
        (root / "old").mkdir(parents=True)
        (root / "old" / "stale.html").write_text("stale")

        OutputDirectoryStorage(root).reset()

        assert root.is_dir()
        assert list(root.iterdir()) == []

    def test_reset_creates_missing_root(self, tmp_path):
        root = tmp_path / "nested" / "dist"

        OutputDirectoryStorage(root).reset()

        assert root.is_dir()


class TestOutputDirectoryStorageSave:
    def test_save_creates_parents_and_returns_relative_url(self, output_storage):
        url = output_storage.save("css/bundle.css", "a{b:c}")

        assert url == "./css/bundle.css"
        assert (output_storage.root / "css" / "bundle.css").read_text() == "a{b:c}"

    def test_save_overwrites(self, output_storage):
        output_storage.save("index.html", "first")
        output_storage.save("index.html", "second")

        assert (output_storage.root / "index.html").read_text() == "second"

    def test_save_writes_utf8(self, output_storage):
        output_storage.save("page.html", "café")

        assert (output_storage.root / "page.html").read_bytes() == "café".encode("utf-8")

    @pytest.mark.parametrize(
        "path",
        ["../escape.css", "css/../../escape.css", "/etc/passwd"],
    )
    def test_path_traversal_rejected(self, output_storage, path):
        with pytest.raises(ValueError, match="Path traversal detected"):
            output_storage.save(path, "x")


class TestOutputDirectoryStorageCopy:
    def test_copy_file_is_byte_exact(self, tmp_path, output_storage):
        source = tmp_path / "logo.png"
        source.write_bytes(b"\x89PNG\r\n\x00\xff")

        output_storage.copy_file(source, "images/logo.png")

        assert (output_storage.root / "images" / "logo.png").read_bytes() == source.read_bytes()

    def test_copy_file_traversal_rejected(self, tmp_path, output_storage):
        source = tmp_path / "x.txt"
        source.write_text("x")

        with pytest.raises(ValueError):
            output_storage.copy_file(source, "../x.txt")

    def test_makedirs_creates_empty_directory(self, output_storage):
        output_storage.makedirs("images/empty")

        assert (output_storage.root / "images" / "empty").is_dir()
