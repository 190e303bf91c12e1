"""Configuration management for boxdraw.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- MetricsConfig: Overrides for the font metrics
- LoggingConfig: Logging settings
- BoxDrawSettings: Main application settings
"""

from boxdraw.config.settings import (
    BoxDrawSettings,
    LoggingConfig,
    MetricsConfig,
    get_default_settings,
)

__all__ = [
    "BoxDrawSettings",
    "LoggingConfig",
    "MetricsConfig",
    "get_default_settings",
]
