"""Utility functions for bdfont.

This module provides logging setup and the statistics collected while a
font is assembled.
"""

from bdfont.utils.logging import (
    AssemblyLogger,
    AssemblyStats,
    SkippedChar,
    configure_logging,
)

__all__ = [
    "AssemblyLogger",
    "AssemblyStats",
    "SkippedChar",
    "configure_logging",
]
