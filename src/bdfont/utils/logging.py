"""Logging utilities for bdfont."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass(frozen=True)
class SkippedChar:
    """A character block dropped because its codepoint was unmappable.

    Attributes:
        name: Glyph name from `STARTCHAR`
        line_number: Line of the offending `ENCODING` record
        line: Text of that line
    """

    name: str
    line_number: int
    line: str


@dataclass
class AssemblyStats:
    """Statistics from assembling one font.

    ``glyph_count`` counts every finished character block, including ones
    that replaced an earlier glyph at the same codepoint.
    """

    glyph_count: int = 0
    property_count: int = 0
    declared_glyphs: int | None = None
    declared_properties: int | None = None
    skipped: list[SkippedChar] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        """Number of character blocks that were dropped."""
        return len(self.skipped)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging for applications embedding bdfont.

    The library itself only emits through ``structlog.get_logger``; calling
    this is optional.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("bdfont")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class AssemblyLogger:
    """Logger for tracking font assembly and its statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("bdfont")
        self._stats = AssemblyStats()

    def log_glyph_added(self, name: str, codepoint: str, replaced: bool) -> None:
        """Log a finished glyph; replacements still count as glyphs read."""
        if replaced:
            self._logger.warning(
                "Duplicate codepoint, replacing glyph",
                glyph=name,
                codepoint=ord(codepoint),
            )
        self._stats.glyph_count += 1

    def log_property(self, name: str) -> None:
        """Log a property entering the table."""
        self._logger.debug("Property read", property=name)
        self._stats.property_count += 1

    def log_char_skipped(self, skipped: SkippedChar) -> None:
        """Log a character dropped for an unmappable codepoint."""
        self._logger.warning(
            "Invalid codepoint, skipping character",
            glyph=skipped.name,
            line_number=skipped.line_number,
            line=skipped.line,
        )
        self._stats.skipped.append(skipped)

    def log_declared(self, kind: str, count: int) -> None:
        """Remember a declared `CHARS` or `STARTPROPERTIES` count."""
        if kind == "glyphs":
            self._stats.declared_glyphs = count
        else:
            self._stats.declared_properties = count

    def log_font_complete(self, name: str | None) -> None:
        """Log a finished font and check declared counts."""
        stats = self._stats
        if stats.declared_glyphs is not None and (
            stats.declared_glyphs != stats.glyph_count + stats.skipped_count
        ):
            self._logger.warning(
                "Glyph count mismatch",
                declared=stats.declared_glyphs,
                read=stats.glyph_count,
                skipped=stats.skipped_count,
            )
        if stats.declared_properties is not None and (
            stats.declared_properties != stats.property_count
        ):
            self._logger.warning(
                "Property count mismatch",
                declared=stats.declared_properties,
                read=stats.property_count,
            )
        self._logger.debug(
            "Font assembled",
            font=name,
            glyphs=stats.glyph_count,
            properties=stats.property_count,
            skipped=stats.skipped_count,
        )

    @property
    def stats(self) -> AssemblyStats:
        """Get current assembly statistics."""
        return self._stats
