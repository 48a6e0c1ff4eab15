"""Tests for site_bundler.copying."""

import logging
from unittest import mock

from site_bundler.copying import copy_entry
from site_bundler.manifest import CopyEntry


def test_copies_single_file(source_tree, output_storage):
    assert copy_entry(CopyEntry("index.html", "index.html"), source_tree, output_storage)

    copied = (output_storage.root / "index.html").read_bytes()
    assert copied == (source_tree / "index.html").read_bytes()


def test_copies_file_under_new_name(source_tree, output_storage):
    copy_entry(CopyEntry("index.html", "pages/home.html"), source_tree, output_storage)

    assert (output_storage.root / "pages" / "home.html").is_file()


def test_directory_copied_recursively(source_tree, output_storage):
    """Nested directories keep their relative structure and bytes."""
    assert copy_entry(CopyEntry("images", "images", True), source_tree, output_storage)

    root = output_storage.root / "images"
    assert (root / "logo.png").read_bytes() == b"\x89PNG\r\n\x1a\n\x00binary"
    assert (root / "icons" / "menu.svg").read_bytes() == b"<svg></svg>"


def test_empty_directory_is_mirrored(source_tree, output_storage):
    (source_tree / "config").mkdir()

    copy_entry(CopyEntry("config", "config", True), source_tree, output_storage)

    assert (output_storage.root / "config").is_dir()


def test_directory_walk_is_depth_first_in_name_order(source_tree, output_storage):
    storage = mock.Mock(wraps=output_storage)

    copy_entry(CopyEntry("images", "assets", True), source_tree, storage)

    copied = [call.args[1] for call in storage.copy_file.call_args_list]
    assert copied == ["assets/icons/menu.svg", "assets/logo.png"]


def test_missing_source_warns_and_returns_false(source_tree, output_storage, caplog):
    with caplog.at_level(logging.WARNING, logger="site_bundler.copying"):
        result = copy_entry(CopyEntry("missing", "missing", True), source_tree, output_storage)

    assert result is False
    assert not (output_storage.root / "missing").exists()
    assert "Source not found: missing" in caplog.text


def test_file_flagged_as_directory_is_still_copied(source_tree, output_storage, caplog):
    with caplog.at_level(logging.WARNING, logger="site_bundler.copying"):
        result = copy_entry(CopyEntry("index.html", "index.html", True), source_tree, output_storage)

    assert result is True
    assert (output_storage.root / "index.html").is_file()
    assert "Expected a directory" in caplog.text
