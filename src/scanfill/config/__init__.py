"""Configuration management for scanfill.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- RasterConfig: Rasterizer settings
- RenderConfig: Scene rendering and preview settings
- LoggingConfig: Logging settings
- ScanfillSettings: Main application settings
"""

from scanfill.config.settings import (
    LoggingConfig,
    RasterConfig,
    RenderConfig,
    ScanfillSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "RasterConfig",
    "RenderConfig",
    "ScanfillSettings",
    "get_default_settings",
]
