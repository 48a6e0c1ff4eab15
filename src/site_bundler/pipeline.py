"""Build orchestration for site-bundler.

Pipeline: Reset -> Bundle CSS -> Bundle JS -> Copy -> Rewrite pages
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib import import_module
from typing import Any

from .bundler import Bundle, build_bundle
from .conf import BuildConfig
from .copying import copy_entry
from .manifest import ASSET_TYPES, CopyEntry
from .minifiers.base import BaseMinifier
from .rewriter import rewrite_page
from .storage.base import BaseOutputStorage

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    """What one build run produced, for the operator summary."""

    bundles: list[Bundle] = field(default_factory=list)
    copied: list[CopyEntry] = field(default_factory=list)
    missing_copies: list[CopyEntry] = field(default_factory=list)
    pages: list[str] = field(default_factory=list)
    missing_pages: list[str] = field(default_factory=list)


def build_site(config: BuildConfig) -> BuildReport:
    """Main entry point: regenerate the whole output tree.

    Raises:
        ValueError: If the output root is the source root or contains it,
            because resetting it deletes the sources.
    """
    source_root = config.source_root.resolve()
    output_root = config.output_root.resolve()
    if source_root.is_relative_to(output_root):
        raise ValueError(
            f"Output root {config.output_root} must not contain the source root "
            f"{config.source_root}"
        )

    storage = get_storage(config)
    storage.reset()
    logger.info("Output directory reset: %s", config.output_root)

    report = BuildReport()
    for asset_type in ASSET_TYPES:
        report.bundles.append(_process_bundle(config, storage, asset_type))

    for entry in config.manifest.copy_entries:
        if copy_entry(entry, config.source_root, storage):
            report.copied.append(entry)
        else:
            report.missing_copies.append(entry)

    style_bundle, script_bundle = report.bundles
    for page in config.manifest.pages:
        if _process_page(config, storage, page, style_bundle.url, script_bundle.url):
            report.pages.append(page)
        else:
            report.missing_pages.append(page)

    return report


def _process_bundle(
    config: BuildConfig, storage: BaseOutputStorage, asset_type: str
) -> Bundle:
    return build_bundle(
        config.manifest.fragments(asset_type),
        asset_type,
        config.source_root,
        config.bundle_path(asset_type),
        get_minifier(config.minifier_path(asset_type)),
        storage,
    )


def _process_page(
    config: BuildConfig,
    storage: BaseOutputStorage,
    page: str,
    style_url: str,
    script_url: str,
) -> bool:
    """Rewrite one page into the output tree. Returns False if the source is missing."""
    source = config.source_root / page
    if not source.is_file():
        logger.warning("HTML file not found: %s", page)
        return False

    html = rewrite_page(
        source.read_text(encoding="utf-8"),
        style_url,
        script_url,
        config.manifest.scripts,
        scripts_marker=config.scripts_marker,
        cdn_host=config.cdn_host,
        email_widget_script=config.email_widget_script,
    )
    storage.save(page, html)
    logger.info("Updated page: %s", page)
    return True


def get_minifier(minifier_path: str) -> BaseMinifier:
    """Import and instantiate a minifier class."""
    cls = import_class(minifier_path)
    return cls()


def get_storage(config: BuildConfig) -> BaseOutputStorage:
    """Import and instantiate the configured output backend."""
    cls = import_class(config.storage_backend)
    return cls(config.output_root)


def import_class(dotted_path: str) -> Any:
    """Import a class from a dotted path string."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = import_module(module_path)
    return getattr(module, class_name)
