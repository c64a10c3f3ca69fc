"""Configuration management for glyphforge.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GeometryConfig: Stroke-width solver settings
- OutputConfig: Export settings
- LoggingConfig: Logging settings
- GlyphforgeSettings: Main application settings
"""

from glyphforge.config.settings import (
    GeometryConfig,
    GlyphforgeSettings,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
)

__all__ = [
    "GeometryConfig",
    "GlyphforgeSettings",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
]
