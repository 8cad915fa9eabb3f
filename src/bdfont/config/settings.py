"""Configuration settings for bdfont."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field


class ReaderConfig(BaseModel):
    """Configuration for reading BDF documents."""

    encoding: str = Field(
        default="utf-8",
        description="Text encoding used to decode byte lines",
    )
    strict_codepoints: bool = Field(
        default=False,
        description="Fail on an unmappable ENCODING instead of skipping the glyph",
    )


class WriterConfig(BaseModel):
    """Configuration for writing BDF documents."""

    encoding: str = Field(
        default="utf-8",
        description="Text encoding used when producing bytes",
    )
    line_ending: Literal["\n", "\r\n"] = Field(
        default="\n",
        description="Line terminator written after every record",
    )
    sort_properties: bool = Field(
        default=False,
        description="Write properties sorted by name instead of table order",
    )
    sort_glyphs: bool = Field(
        default=False,
        description="Write glyphs sorted by codepoint instead of table order",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BdfSettings(BaseModel):
    """Main library settings."""

    reader: ReaderConfig = Field(default_factory=ReaderConfig)
    writer: WriterConfig = Field(default_factory=WriterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BdfSettings:
    """Get default library settings."""
    return BdfSettings()
