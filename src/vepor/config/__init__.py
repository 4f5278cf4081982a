"""Configuration management for vepor.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ReportConfig: Inspection report settings
- LoggingConfig: Logging settings
- VeporSettings: Main application settings
"""

from vepor.config.settings import (
    LoggingConfig,
    ReportConfig,
    VeporSettings,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "ReportConfig",
    "VeporSettings",
    "get_default_settings",
]
