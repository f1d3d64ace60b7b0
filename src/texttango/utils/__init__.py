"""Utility functions for TextTango.

This module provides utility functions including:

- Logging setup and configuration
- Per-run generation statistics
"""

from texttango.utils.logging import (
    GenerationLogger,
    GenerationStats,
    configure_logging,
)

__all__ = [
    "GenerationLogger",
    "GenerationStats",
    "configure_logging",
]
