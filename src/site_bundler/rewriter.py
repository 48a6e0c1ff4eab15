"""Point HTML pages at the bundles instead of per-fragment includes.

Every transformation here is idempotent, so rewriting an already-built page
yields the same document.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

DEFAULT_SCRIPTS_MARKER = "<!-- Scripts"
DEFAULT_CDN_HOST = "https://cdn.jsdelivr.net"
DEFAULT_EMAIL_WIDGET_SCRIPT = (
    "https://cdn.jsdelivr.net/npm/@emailjs/browser@3/dist/email.min.js"
)

INDENT = "    "

# Local stylesheets only; absolute and protocol-relative hrefs are CDN assets.
_STYLESHEET_LINK_RE = re.compile(
    r'(?P<indent>[ \t]*)<link\s+rel="stylesheet"\s+'
    r'href="(?![a-zA-Z][a-zA-Z0-9+.-]*:|//)[^"]*\.css"\s*/?>'
    r"(?P<newline>[ \t]*\r?\n)?",
)
_DEFER_ATTR_RE = re.compile(
    r"\s+defer(?:\s*=\s*(?:\"[^\"]*\"|'[^']*'|[^\s>]+))?(?=[\s/>])"
)
_BODY_CLOSE_RE = re.compile(r"</body\s*>", re.IGNORECASE)
_HEAD_CLOSE_RE = re.compile(r"</head\s*>", re.IGNORECASE)


def _escape_attr(value: str) -> str:
    """Escape a string for safe use in an HTML attribute."""
    return (
        value.replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def _strip_dot_slash(path: str) -> str:
    return path[2:] if path.startswith("./") else path


def collapse_stylesheets(html: str, style_href: str) -> str:
    """Replace all local stylesheet links with one link to ``style_href``.

    The bundle link takes the position of the first matched link; the other
    matched lines are removed.
    """
    tag = f'<link rel="stylesheet" href="{_escape_attr(style_href)}">'
    inserted = False

    def replace(match: re.Match[str]) -> str:
        nonlocal inserted
        if inserted:
            return ""
        inserted = True
        return f"{match.group('indent')}{tag}{match.group('newline') or ''}"

    return _STYLESHEET_LINK_RE.sub(replace, html)


def remove_script_tags(html: str, paths: Iterable[str]) -> str:
    """Remove ``<script src=...>`` tags for any of ``paths`` (with or without ``./``)."""
    alternatives = sorted(
        {re.escape(_strip_dot_slash(path)) for path in paths}, key=len, reverse=True
    )
    if not alternatives:
        return html
    pattern = re.compile(
        r"[ \t]*<script\b[^>]*?\ssrc=\"(?:\./)?(?:"
        + "|".join(alternatives)
        + r")\"[^>]*>\s*</script>[ \t]*(?:\r?\n)?"
    )
    return pattern.sub("", html)


def insert_bundle_script(html: str, script_src: str, marker: str) -> str:
    """Insert the bundle script tag after the marker comment line.

    Falls back to just before ``</body>``, then to the end of the document.
    """
    line = f'{INDENT}<script src="{_escape_attr(script_src)}"></script>\n'

    marker_match = re.search(re.escape(marker) + r"[^>]*>", html)
    if marker_match:
        line_end = html.find("\n", marker_match.end())
        if line_end == -1:
            return f"{html}\n{line}"
        return html[: line_end + 1] + line + html[line_end + 1 :]

    body_match = _BODY_CLOSE_RE.search(html)
    if body_match:
        position = body_match.start()
        line_start = html.rfind("\n", 0, position) + 1
        if not html[line_start:position].strip():
            position = line_start
        return html[:position] + line + html[position:]

    if html and not html.endswith("\n"):
        html += "\n"
    return html + line


def normalize_widget_script(html: str, script_url: str) -> str:
    """Drop ``defer`` from the email widget's CDN script tag.

    The page's inline initialization waits for the widget itself; deferring
    the library would race that wait.
    """
    if script_url not in html:
        return html
    pattern = re.compile(
        r"<script\s+[^>]*src=\"" + re.escape(script_url) + r"\"[^>]*>"
    )
    return pattern.sub(lambda match: _DEFER_ATTR_RE.sub("", match.group(0)), html)


def add_cdn_hints(html: str, cdn_host: str) -> str:
    """Add dns-prefetch and preconnect hints unless the page has a dns-prefetch."""
    head_close = _HEAD_CLOSE_RE.search(html)
    if "dns-prefetch" in html or head_close is None:
        return html
    host = _escape_attr(cdn_host)
    hints = (
        f'{INDENT}<link rel="dns-prefetch" href="{host}">\n'
        f'{INDENT}<link rel="preconnect" href="{host}" crossorigin>\n'
    )
    return html[: head_close.start()] + hints + html[head_close.start() :]


def rewrite_page(
    html: str,
    style_bundle: str,
    script_bundle: str,
    script_fragments: Iterable[str],
    *,
    scripts_marker: str = DEFAULT_SCRIPTS_MARKER,
    cdn_host: str = DEFAULT_CDN_HOST,
    email_widget_script: str = DEFAULT_EMAIL_WIDGET_SCRIPT,
) -> str:
    """Rewrite a page to load the bundles.

    Args:
        html: Source page.
        style_bundle: Page-relative URL of the style bundle ("./css/bundle.css").
        script_bundle: Page-relative URL of the script bundle ("./js/bundle.js").
        script_fragments: Manifest script paths whose tags must disappear.

    Returns:
        The rewritten page, with exactly one reference to each bundle.
    """
    html = collapse_stylesheets(html, style_bundle)
    html = remove_script_tags(html, [*script_fragments, script_bundle])
    html = insert_bundle_script(html, script_bundle, scripts_marker)
    html = normalize_widget_script(html, email_widget_script)
    return add_cdn_hints(html, cdn_host)
