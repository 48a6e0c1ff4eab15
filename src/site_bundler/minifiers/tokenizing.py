"""Tokenizing minifier backed by rcssmin and rjsmin.

Opt-in replacement for the lexical minifier. Both libraries scan string
literals and regex literals, so they leave ``"https://..."`` and embedded
comment markers intact.

Enable with::

    SITE_BUNDLER = {
        "CSS_MINIFIER": "site_bundler.minifiers.tokenizing.TokenizingMinifier",
        "JS_MINIFIER": "site_bundler.minifiers.tokenizing.TokenizingMinifier",
    }
"""

from __future__ import annotations

import rcssmin  # type: ignore[import-untyped]
import rjsmin  # type: ignore[import-untyped]

from .base import BaseMinifier


class TokenizingMinifier(BaseMinifier):
    def minify(self, content: str, asset_type: str) -> str:
        if asset_type == "css":
            return rcssmin.cssmin(content).strip()  # type: ignore[no-any-return]
        if asset_type == "js":
            return rjsmin.jsmin(content).strip()  # type: ignore[no-any-return]
        raise ValueError(f"Unknown asset type: {asset_type!r}")
