"""
Configuration Module

Provides centralized configuration with environment variable support.

Usage:
    from flowgraph.config import get_settings, Defaults

    settings = get_settings()
    shape = settings.default_export_shape
"""

from .settings import Settings, get_settings
from .defaults import Defaults

__all__ = [
    "Settings",
    "get_settings",
    "Defaults",
]
