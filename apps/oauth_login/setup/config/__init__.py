"""Configuration."""

from apps.oauth_login.setup.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
