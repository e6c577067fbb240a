"""Configuration management for svgcombiner.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FlattenConfig: Curve flattening settings
- CombineConfig: Offset, simplification and area filter settings
- OutputConfig: Output document formatting
- LoggingConfig: Logging settings
- CombinerSettings: Main application settings
"""

from svgcombiner.config.settings import (
    CombineConfig,
    CombinerSettings,
    FlattenConfig,
    LoggingConfig,
    OutputConfig,
    get_default_settings,
)

__all__ = [
    "CombineConfig",
    "CombinerSettings",
    "FlattenConfig",
    "LoggingConfig",
    "OutputConfig",
    "get_default_settings",
]
