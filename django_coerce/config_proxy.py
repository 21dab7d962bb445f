"""
Configuration management for django-coerce.

Settings are resolved in the following order:
1. The project's ``DJANGO_COERCE`` dictionary in Django settings
2. Library defaults (``LIBRARY_DEFAULTS``)

Values are read on every call so that ``override_settings`` takes effect
immediately in tests.
"""

from typing import Any, Dict

from django.conf import settings

from .defaults import LIBRARY_DEFAULTS, SETTINGS_NAME, merge_settings


class SettingsProxy:
    """Proxy for accessing django-coerce settings with layered resolution."""

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value.

        Args:
            key: Setting key to retrieve
            default: Default value if setting is not found

        Returns:
            The setting value from the highest priority source
        """
        django_value = self._get_django_setting(key)
        if django_value is not None:
            return django_value

        library_value = LIBRARY_DEFAULTS.get(key)
        if library_value is not None:
            return library_value

        return default

    def _get_django_setting(self, key: str) -> Any:
        """Get setting from the ``DJANGO_COERCE`` Django setting."""
        project_settings = getattr(settings, SETTINGS_NAME, None) or {}
        if not isinstance(project_settings, dict):
            return None
        return project_settings.get(key)

    def as_dict(self) -> Dict[str, Any]:
        """Return the effective settings (defaults merged with overrides)."""
        project_settings = getattr(settings, SETTINGS_NAME, None) or {}
        return merge_settings(LIBRARY_DEFAULTS, dict(project_settings))


# Global settings proxy instance
settings_proxy = SettingsProxy()


def get_setting(key: str, default: Any = None) -> Any:
    """
    Get a setting value using the layered settings system.

    Args:
        key: Setting key to retrieve
        default: Default value if setting is not found

    Returns:
        The setting value from the highest priority source
    """
    return settings_proxy.get(key, default)
