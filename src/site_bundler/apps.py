"""Django app configuration for site-bundler."""

from django.apps import AppConfig


class SiteBundlerConfig(AppConfig):
    name = "site_bundler"
    verbose_name = "Site Bundler"
