"""Declared inputs of a site build."""

from __future__ import annotations

from typing import NamedTuple

ASSET_TYPES = ("css", "js")


class CopyEntry(NamedTuple):
    """A file or directory mirrored verbatim into the output tree."""

    src: str
    dest: str
    is_dir: bool = False


class Manifest(NamedTuple):
    """Ordered bundle membership, copy spec and page list.

    Fragment order is the cascade order for styles and the initialization
    order for scripts, so it is never derived from directory listings.
    """

    styles: tuple[str, ...]
    scripts: tuple[str, ...]
    copy_entries: tuple[CopyEntry, ...] = ()
    pages: tuple[str, ...] = ()

    def fragments(self, asset_type: str) -> tuple[str, ...]:
        if asset_type == "css":
            return self.styles
        if asset_type == "js":
            return self.scripts
        raise ValueError(f"Unknown asset type: {asset_type!r}")
