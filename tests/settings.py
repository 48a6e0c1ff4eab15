"""Django settings for testing site-bundler."""

import os

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

SECRET_KEY = "test-secret-key-not-for-production"

DEBUG = True

ALLOWED_HOSTS: list[str] = ["testserver"]

INSTALLED_APPS = [
    "site_bundler",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "site_bundler.urls"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

EMAIL_BACKEND = "django.core.mail.backends.locmem.EmailBackend"

SITE_BUNDLER = {
    "OUTPUT_ROOT": os.path.join(BASE_DIR, "dist"),
    "CONTACT_RECIPIENT_EMAIL": "owner@example.com",
    "CONTACT_SENDER_EMAIL": "noreply@example.com",
    "CONTACT_SITE_NAME": "Test Site",
}
