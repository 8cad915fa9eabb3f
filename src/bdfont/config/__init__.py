"""Configuration management for bdfont.

This module provides configuration management using Pydantic models.
Every reader and writer entry point accepts an optional ``BdfSettings``
and falls back to the defaults.

Key classes:
- ReaderConfig: Input decoding and codepoint strictness
- WriterConfig: Output encoding, line endings and ordering
- LoggingConfig: Logging settings
- BdfSettings: Main library settings
"""

from bdfont.config.settings import (
    BdfSettings,
    LoggingConfig,
    ReaderConfig,
    WriterConfig,
    get_default_settings,
)

__all__ = [
    "BdfSettings",
    "LoggingConfig",
    "ReaderConfig",
    "WriterConfig",
    "get_default_settings",
]
