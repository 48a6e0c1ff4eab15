"""Management command to build the static site into the output directory."""

from __future__ import annotations

from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Bundle CSS/JS, copy static assets and rewrite pages into the output directory."

    def handle(self, **options: object) -> None:
        from site_bundler.conf import load_build_config
        from site_bundler.pipeline import build_site

        config = load_build_config()
        self.stdout.write("Starting build process...\n")

        report = build_site(config)

        for bundle in report.bundles:
            self.stdout.write(
                f"  {bundle.asset_type.upper()} bundled: {bundle.path} "
                f"({bundle.size / 1024:.2f} KB)"
            )

        self.stdout.write("\nCopying static files...")
        for entry in report.copied:
            self.stdout.write(f"  Copied: {entry.src} -> {entry.dest}")
        for entry in report.missing_copies:
            self.stdout.write(self.style.WARNING(f"  Skipped (not found): {entry.src}"))

        self.stdout.write("\nUpdating HTML files...")
        for page in report.pages:
            self.stdout.write(f"  Updated: {page}")
        for page in report.missing_pages:
            self.stdout.write(self.style.WARNING(f"  Skipped (not found): {page}"))

        self.stdout.write(f"\nBuild complete! Output directory: {config.output_root}")
        self.stdout.write(self.style.SUCCESS("Ready for deployment!"))
