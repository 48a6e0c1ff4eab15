"""Pytest fixtures for site-bundler tests."""

from pathlib import Path

import pytest

from site_bundler.conf import BuildConfig, DEFAULTS
from site_bundler.manifest import CopyEntry, Manifest
from site_bundler.storage.local import OutputDirectoryStorage

PAGE_HTML = """<!DOCTYPE html>
<html>
<head>
    <title>Home</title>
    <link rel="stylesheet" href="./css/a.css">
    <link rel="stylesheet" href="./css/b.css">
</head>
<body>
    <h1>Home</h1>
    <!-- Scripts -->
    <script src="./js/one.js"></script>
    <script src="./js/two.js"></script>
</body>
</html>
"""


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def page_html():
    return PAGE_HTML


@pytest.fixture
def source_tree(tmp_path):
    """A small site: two CSS fragments, two JS fragments, one page, images."""
    root = tmp_path / "site"
    _write(root / "css" / "a.css", "body { color: red; }\n")
    _write(root / "css" / "b.css", "/* note */ .x { color:  blue ; }\n")
    _write(root / "js" / "one.js", "// first\nvar one = 1;\n")
    _write(root / "js" / "two.js", "function two() {\n  return one + 1;\n}\n")
    _write(root / "index.html", PAGE_HTML)
    (root / "images" / "icons").mkdir(parents=True)
    (root / "images" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00binary")
    (root / "images" / "icons" / "menu.svg").write_bytes(b"<svg></svg>")
    return root


@pytest.fixture
def build_config(source_tree, tmp_path):
    """BuildConfig pointing at ``source_tree`` with a private output root."""
    return BuildConfig(
        source_root=source_tree,
        output_root=tmp_path / "dist",
        manifest=Manifest(
            styles=("css/a.css", "css/b.css"),
            scripts=("js/one.js", "js/two.js"),
            copy_entries=(
                CopyEntry("index.html", "index.html"),
                CopyEntry("images", "images", True),
            ),
            pages=("index.html",),
        ),
        style_bundle=DEFAULTS["STYLE_BUNDLE"],
        script_bundle=DEFAULTS["SCRIPT_BUNDLE"],
        css_minifier=DEFAULTS["CSS_MINIFIER"],
        js_minifier=DEFAULTS["JS_MINIFIER"],
        storage_backend=DEFAULTS["STORAGE_BACKEND"],
        scripts_marker=DEFAULTS["SCRIPTS_MARKER"],
        cdn_host=DEFAULTS["CDN_HOST"],
        email_widget_script=DEFAULTS["EMAIL_WIDGET_SCRIPT"],
    )


@pytest.fixture
def output_storage(tmp_path):
    storage = OutputDirectoryStorage(tmp_path / "out")
    storage.reset()
    return storage
