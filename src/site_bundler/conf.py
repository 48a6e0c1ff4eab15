"""Configuration and settings for site-bundler."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from django.conf import settings

from .manifest import CopyEntry, Manifest

DEFAULTS: dict[str, Any] = {
    # Source and output trees
    "SOURCE_ROOT": None,  # falls back to settings.BASE_DIR
    "OUTPUT_ROOT": None,  # falls back to SOURCE_ROOT / "dist"
    # Manifest (order is significant)
    "STYLE_FRAGMENTS": [
        "css/base.css",
        "css/layout.css",
        "css/components.css",
        "css/theme.css",
        "css/homepage.css",
        "css/premium-design.css",
        "css/how-it-works.css",
        "css/vendor-onboarding.css",
        "css/coming-soon.css",
    ],
    "SCRIPT_FRAGMENTS": [
        "config/constants.js",
        "js/theme.js",
        "js/components.js",
        "js/main.js",
    ],
    "PAGES": [
        "index.html",
        "about.html",
        "contact.html",
        "customers.html",
        "vendors.html",
    ],
    "COPY_ENTRIES": [
        ("index.html", "index.html", False),
        ("about.html", "about.html", False),
        ("contact.html", "contact.html", False),
        ("customers.html", "customers.html", False),
        ("vendors.html", "vendors.html", False),
        ("images", "images", True),
        ("config", "config", True),
    ],
    # Bundle output paths, relative to OUTPUT_ROOT
    "STYLE_BUNDLE": "css/bundle.css",
    "SCRIPT_BUNDLE": "js/bundle.js",
    # Pluggable classes
    "CSS_MINIFIER": "site_bundler.minifiers.lexical.LexicalMinifier",
    "JS_MINIFIER": "site_bundler.minifiers.lexical.LexicalMinifier",
    "STORAGE_BACKEND": "site_bundler.storage.local.OutputDirectoryStorage",
    # Page rewriting
    "SCRIPTS_MARKER": "<!-- Scripts",
    "CDN_HOST": "https://cdn.jsdelivr.net",
    "EMAIL_WIDGET_SCRIPT": (
        "https://cdn.jsdelivr.net/npm/@emailjs/browser@3/dist/email.min.js"
    ),
    # Development server (defaults to OUTPUT_ROOT)
    "SERVE_ROOT": None,
    # Contact relay
    "CONTACT_RECIPIENT_EMAIL": None,  # falls back to $RECIPIENT_EMAIL
    "CONTACT_SENDER_EMAIL": None,  # falls back to $SENDER_EMAIL
    "CONTACT_SITE_NAME": "Click IT",
}

DEFAULT_RECIPIENT_EMAIL = "your-email@example.com"
DEFAULT_SENDER_EMAIL = "noreply@clickit.com"


_UNSET = object()


def get_setting(key: str, default: Any = _UNSET) -> Any:
    """Get a setting from SITE_BUNDLER dict or return default."""
    user_settings: dict[str, Any] = getattr(settings, "SITE_BUNDLER", {})
    fallback = DEFAULTS.get(key) if default is _UNSET else default
    return user_settings.get(key, fallback)


@dataclass(frozen=True)
class BuildConfig:
    """Everything one build run needs, resolved once from settings."""

    source_root: Path
    output_root: Path
    manifest: Manifest
    style_bundle: str
    script_bundle: str
    css_minifier: str
    js_minifier: str
    storage_backend: str
    scripts_marker: str
    cdn_host: str
    email_widget_script: str

    def bundle_path(self, asset_type: str) -> str:
        if asset_type == "css":
            return self.style_bundle
        if asset_type == "js":
            return self.script_bundle
        raise ValueError(f"Unknown asset type: {asset_type!r}")

    def minifier_path(self, asset_type: str) -> str:
        if asset_type == "css":
            return self.css_minifier
        if asset_type == "js":
            return self.js_minifier
        raise ValueError(f"Unknown asset type: {asset_type!r}")


@dataclass(frozen=True)
class ContactConfig:
    """Addresses and branding used by the contact relay."""

    recipient_email: str
    sender_email: str
    site_name: str


def load_build_config() -> BuildConfig:
    """Freeze the current settings into a BuildConfig.

    ``SOURCE_ROOT`` defaults to ``settings.BASE_DIR`` and ``OUTPUT_ROOT``
    defaults to ``dist`` inside the source root.
    """
    source_root = get_setting("SOURCE_ROOT") or getattr(settings, "BASE_DIR", None)
    if not source_root:
        raise ValueError("SITE_BUNDLER['SOURCE_ROOT'] or BASE_DIR must be configured")
    source_root = Path(source_root)

    output_root = get_setting("OUTPUT_ROOT")
    output_root = Path(output_root) if output_root else source_root / "dist"

    manifest = Manifest(
        styles=tuple(get_setting("STYLE_FRAGMENTS")),
        scripts=tuple(get_setting("SCRIPT_FRAGMENTS")),
        copy_entries=tuple(CopyEntry(*entry) for entry in get_setting("COPY_ENTRIES")),
        pages=tuple(get_setting("PAGES")),
    )

    return BuildConfig(
        source_root=source_root,
        output_root=output_root,
        manifest=manifest,
        style_bundle=get_setting("STYLE_BUNDLE"),
        script_bundle=get_setting("SCRIPT_BUNDLE"),
        css_minifier=get_setting("CSS_MINIFIER"),
        js_minifier=get_setting("JS_MINIFIER"),
        storage_backend=get_setting("STORAGE_BACKEND"),
        scripts_marker=get_setting("SCRIPTS_MARKER"),
        cdn_host=get_setting("CDN_HOST"),
        email_widget_script=get_setting("EMAIL_WIDGET_SCRIPT"),
    )


def load_contact_config() -> ContactConfig:
    """Resolve contact relay addresses: settings, then environment, then defaults."""
    recipient = get_setting("CONTACT_RECIPIENT_EMAIL") or os.environ.get(
        "RECIPIENT_EMAIL", DEFAULT_RECIPIENT_EMAIL
    )
    sender = get_setting("CONTACT_SENDER_EMAIL") or os.environ.get(
        "SENDER_EMAIL", DEFAULT_SENDER_EMAIL
    )
    return ContactConfig(
        recipient_email=recipient,
        sender_email=sender,
        site_name=get_setting("CONTACT_SITE_NAME"),
    )
