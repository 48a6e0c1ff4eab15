"""Base class for bundle minifiers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseMinifier(ABC):
    """Abstract base class for minifiers.

    Minifiers receive one concatenated bundle and return its minified text.
    """

    @abstractmethod
    def minify(self, content: str, asset_type: str) -> str:
        """Minify a bundle.

        Args:
            content: Concatenated bundle text.
            asset_type: "css" or "js".

        Returns:
            Minified content. Raises ValueError for an unknown asset type.
        """
        ...
