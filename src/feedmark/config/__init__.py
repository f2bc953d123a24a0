"""Configuration package."""

from feedmark.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
