from __future__ import annotations

import shutil
from pathlib import Path

from .base import BaseOutputStorage


class OutputDirectoryStorage(BaseOutputStorage):
    """Local filesystem output tree (the ``dist`` directory).

    Every path is resolved under the root; anything that escapes it is
    rejected before touching the disk.
    """

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def _get_full_path(self, path: str) -> Path:
        full_path = (self.root / path).resolve()
        root_resolved = self.root.resolve()
        if not full_path.is_relative_to(root_resolved):
            raise ValueError(
                f"Path traversal detected: {path!r} resolves outside {self.root}"
            )
        return full_path

    def _get_url(self, path: str) -> str:
        return f"./{path.lstrip('/')}"

    def reset(self) -> None:
        if self.root.exists():
            shutil.rmtree(self.root)
        self.root.mkdir(parents=True, exist_ok=True)

    def save(self, path: str, content: str) -> str:
        full_path = self._get_full_path(path)
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
        return self._get_url(path)

    def makedirs(self, path: str) -> None:
        self._get_full_path(path).mkdir(parents=True, exist_ok=True)

    def copy_file(self, source: Path, path: str) -> None:
        full_path = self._get_full_path(path)
        full_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, full_path)
