"""Default Django settings for running site-bundler against the current directory.

The source tree is the working directory; email delivery is configured from
the environment.
"""

import os
from pathlib import Path

BASE_DIR = Path(os.environ.get("SITE_SOURCE_ROOT", Path.cwd()))

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "site-bundler-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "1") == "1"

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "[::1]"]

INSTALLED_APPS = [
    "site_bundler",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "site_bundler.urls"

DATABASES: dict[str, dict[str, str]] = {}

USE_TZ = True

EMAIL_BACKEND = os.environ.get(
    "EMAIL_BACKEND", "django.core.mail.backends.smtp.EmailBackend"
)
EMAIL_HOST = os.environ.get("EMAIL_HOST", "localhost")
EMAIL_PORT = int(os.environ.get("EMAIL_PORT", "25"))
EMAIL_HOST_USER = os.environ.get("EMAIL_HOST_USER", "")
EMAIL_HOST_PASSWORD = os.environ.get("EMAIL_HOST_PASSWORD", "")
EMAIL_USE_TLS = os.environ.get("EMAIL_USE_TLS", "0") == "1"

SITE_BUNDLER = {
    "SOURCE_ROOT": BASE_DIR,
    "OUTPUT_ROOT": os.environ.get("SITE_OUTPUT_ROOT") or BASE_DIR / "dist",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {
        "site_bundler": {"handlers": ["console"], "level": "INFO"},
    },
}
