"""
Pytest configuration for django-coerce tests.

Tests run against minimal Django settings unless ``DJANGO_SETTINGS_MODULE``
points at a project settings module.
"""

import os

import django
from django.conf import settings


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")

    if settings.configured or os.environ.get("DJANGO_SETTINGS_MODULE"):
        return

    settings.configure(
        DEBUG=False,
        USE_TZ=True,
        TIME_ZONE="UTC",
        INSTALLED_APPS=["django_coerce"],
        DJANGO_COERCE={},
    )
    django.setup()
