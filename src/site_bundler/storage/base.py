from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class BaseOutputStorage(ABC):
    """Abstract base class for build output backends.

    Backends own the output tree: they are wiped at the start of a build,
    then receive bundles, copied files and rewritten pages.
    """

    @abstractmethod
    def reset(self) -> None:
        """Remove everything previously written and start from an empty tree."""
        ...

    @abstractmethod
    def save(self, path: str, content: str) -> str:
        """Save text content to the output tree.

        Args:
            path: Output-relative path (e.g., "css/bundle.css")
            content: The text to write (UTF-8)

        Returns:
            The page-relative URL of the saved file (e.g., "./css/bundle.css")
        """
        ...

    @abstractmethod
    def makedirs(self, path: str) -> None:
        """Create an output-relative directory and its parents."""
        ...

    @abstractmethod
    def copy_file(self, source: Path, path: str) -> None:
        """Copy a source file byte-for-byte to an output-relative path."""
        ...
