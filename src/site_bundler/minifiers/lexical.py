"""Regex-based minifier for CSS and JS bundles.

This is a lexical rewrite, not a parser. String literals that contain
comment-like text (``"/* ... */"``, ``"https://..."``) or CSS values with
embedded ``;}`` sequences can be corrupted. Use the tokenizing minifier when
that matters.
"""

from __future__ import annotations

import re

from .base import BaseMinifier

BLOCK_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
LINE_COMMENT_RE = re.compile(r"//.*$", re.MULTILINE)
WHITESPACE_RE = re.compile(r"\s+")
SEMICOLON_BEFORE_CLOSE_RE = re.compile(r";\s*}")
OPEN_BRACE_RE = re.compile(r"\s*{\s*")
SEMICOLON_RE = re.compile(r";\s*")
COLON_RE = re.compile(r"\s*:\s*")


def minify_css(css: str) -> str:
    css = BLOCK_COMMENT_RE.sub("", css)
    css = WHITESPACE_RE.sub(" ", css)
    css = SEMICOLON_BEFORE_CLOSE_RE.sub("}", css)
    css = OPEN_BRACE_RE.sub("{", css)
    css = SEMICOLON_RE.sub(";", css)
    css = COLON_RE.sub(":", css)
    return css.strip()


def minify_js(js: str) -> str:
    # Line comments go before whitespace collapsing, while lines still exist.
    js = BLOCK_COMMENT_RE.sub("", js)
    js = LINE_COMMENT_RE.sub("", js)
    js = WHITESPACE_RE.sub(" ", js)
    js = SEMICOLON_BEFORE_CLOSE_RE.sub("}", js)
    js = OPEN_BRACE_RE.sub("{", js)
    return js.strip()


def minify(content: str, asset_type: str) -> str:
    """Minify ``content`` as ``asset_type`` ("css" or "js")."""
    if asset_type == "css":
        return minify_css(content)
    if asset_type == "js":
        return minify_js(content)
    raise ValueError(f"Unknown asset type: {asset_type!r}")


class LexicalMinifier(BaseMinifier):
    """Default minifier: comment stripping and whitespace collapsing."""

    def minify(self, content: str, asset_type: str) -> str:
        return minify(content, asset_type)
