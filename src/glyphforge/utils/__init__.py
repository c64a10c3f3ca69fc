"""Utility functions for glyphforge.

This module provides logging setup and per-build statistics.
"""

from glyphforge.utils.logging import (
    GenerationLogger,
    GenerationStats,
    configure_logging,
)

__all__ = [
    "GenerationLogger",
    "GenerationStats",
    "configure_logging",
]
