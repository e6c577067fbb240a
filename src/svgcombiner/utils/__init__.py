"""Utility functions for svgcombiner.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics
"""

from svgcombiner.utils.logging import (
    CombineStats,
    ProcessingLogger,
    configure_logging,
)

__all__ = [
    "CombineStats",
    "ProcessingLogger",
    "configure_logging",
]
