"""
Django app configuration for the django-coerce library.

Adding ``django_coerce`` to ``INSTALLED_APPS`` is optional; when installed,
the ``DJANGO_COERCE`` settings are validated at startup.
"""

import logging

from django.apps import AppConfig as BaseAppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for django-coerce."""

    name = "django_coerce"
    verbose_name = "Django Coerce"
    label = "django_coerce"

    def ready(self):
        """Validate library configuration once Django has loaded."""
        self._validate_configuration()

    def _validate_configuration(self):
        from .config_proxy import settings_proxy
        from .defaults import validate_settings

        errors = validate_settings(settings_proxy.as_dict())
        if not errors:
            logger.debug("DJANGO_COERCE configuration validation completed")
            return

        message = "Invalid DJANGO_COERCE settings: " + "; ".join(errors)
        logger.warning(message)
        if getattr(settings, "DEBUG", False):
            raise ImproperlyConfigured(message)
