"""Concatenate manifest fragments into one bundle per asset type."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import NamedTuple

from .minifiers.base import BaseMinifier
from .storage.base import BaseOutputStorage

logger = logging.getLogger(__name__)


class Bundle(NamedTuple):
    """A written bundle."""

    asset_type: str
    path: str
    url: str
    content: str

    @property
    def size(self) -> int:
        """Size in bytes of the written file."""
        return len(self.content.encode("utf-8"))


def bundle(fragments: Iterable[str], asset_type: str, source_root: Path) -> str:
    """Concatenate fragments in declared order.

    Each fragment is preceded by a ``/* <path> */`` marker line. Missing
    fragments are logged and skipped.
    """
    parts: list[str] = []
    for fragment in fragments:
        file_path = source_root / fragment
        if not file_path.is_file():
            logger.warning("%s file not found: %s", asset_type.upper(), fragment)
            continue
        content = file_path.read_text(encoding="utf-8")
        parts.append(f"\n/* {fragment} */\n{content}\n")
    return "".join(parts)


def build_bundle(
    fragments: Iterable[str],
    asset_type: str,
    source_root: Path,
    path: str,
    minifier: BaseMinifier,
    storage: BaseOutputStorage,
) -> Bundle:
    """Bundle, minify and save one asset type."""
    minified = minifier.minify(bundle(fragments, asset_type, source_root), asset_type)
    url = storage.save(path, minified)
    result = Bundle(asset_type=asset_type, path=path, url=url, content=minified)
    logger.info("%s bundled: %s (%d bytes)", asset_type.upper(), path, result.size)
    return result
