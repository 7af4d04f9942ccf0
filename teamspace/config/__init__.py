"""Configuration for the Team service."""

from teamspace.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
