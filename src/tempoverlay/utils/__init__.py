"""
Utilities submodule for TempOverlay.

Provides helper functions and configuration management.
"""

from .config import ConfigManager, ConfigError
from .helpers import get_app_data_path, format_widget_temperature, format_screen_temperature

__all__ = [
    "ConfigManager",
    "ConfigError",
    "get_app_data_path",
    "format_widget_temperature",
    "format_screen_temperature",
]
