"""Mirror verbatim assets (pages, images, config) into the output tree."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from .manifest import CopyEntry
from .storage.base import BaseOutputStorage

logger = logging.getLogger(__name__)


def copy_entry(entry: CopyEntry, source_root: Path, storage: BaseOutputStorage) -> bool:
    """Copy one copy-spec entry.

    Returns False (after logging a warning) when the source does not exist.
    """
    source = source_root / entry.src
    if not source.exists():
        logger.warning("Source not found: %s", entry.src)
        return False
    if entry.is_dir and not source.is_dir():
        logger.warning("Expected a directory, found a file: %s", entry.src)
    _copy_tree(source, PurePosixPath(entry.dest), storage)
    return True


def _copy_tree(source: Path, dest: PurePosixPath, storage: BaseOutputStorage) -> None:
    if source.is_dir():
        storage.makedirs(str(dest))
        for child in sorted(source.iterdir()):
            _copy_tree(child, dest / child.name, storage)
        return
    storage.copy_file(source, str(dest))
