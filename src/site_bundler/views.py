"""Development file server for the built site."""

from __future__ import annotations

import logging
from pathlib import Path

from django.http import (
    HttpRequest,
    HttpResponse,
    HttpResponseForbidden,
    HttpResponseNotFound,
    HttpResponseServerError,
)
from django.utils.html import escape

logger = logging.getLogger(__name__)

MIME_TYPES = {
    ".html": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"
INDEX_PAGE = "index.html"


def content_type_for(path: str | Path) -> str:
    return MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_CONTENT_TYPE)


def resolve_path(document_root: Path | str, path: str) -> Path | None:
    """Resolve a request path under ``document_root``.

    Returns None when the resolved path escapes the root or the path is not
    a valid filesystem path.
    """
    root = Path(document_root).resolve()
    relative = path.lstrip("/") or INDEX_PAGE
    try:
        resolved = (root / relative).resolve()
    except ValueError:
        # embedded null byte
        return None
    if not resolved.is_relative_to(root):
        return None
    return resolved


def serve_output(
    request: HttpRequest, path: str, document_root: Path | str
) -> HttpResponse:
    """Serve a file from the built output tree."""
    logger.info("%s /%s", request.method, path)

    resolved = resolve_path(document_root, path)
    if resolved is None:
        logger.warning("Rejected path outside document root: %s", path)
        return HttpResponseForbidden("<h1>403 - Forbidden</h1>")

    try:
        content = resolved.read_bytes()
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError):
        logger.warning("Not found: %s", resolved)
        return HttpResponseNotFound(
            f"<h1>404 - File Not Found</h1><p>File: /{escape(path)}</p>"
        )
    except OSError as e:
        logger.error("Error reading %s: %s", resolved, e)
        return HttpResponseServerError(
            f"<h1>500 - Server Error</h1><p>Error: {escape(type(e).__name__)}</p>"
        )

    return HttpResponse(content, content_type=content_type_for(resolved))
