"""BDF writer: renders fonts and records as lines of text.

This module provides the EntryWriter, which renders one record at a time,
and font_entries, which walks a Font in canonical order. The write_font
family of functions ties them together.
"""

import io
from collections.abc import Iterator
from typing import TextIO

import structlog

from bdfont.config import BdfSettings, get_default_settings
from bdfont.core.bitmap_codec import encode_bitmap
from bdfont.domain import (
    WIDTH_ENTRIES,
    BitmapEntry,
    BoundingBoxEntry,
    Chars,
    Comment,
    ContentVersion,
    Direction,
    Encoding,
    EndChar,
    EndFont,
    EndProperties,
    Entry,
    Font,
    FontBoundingBox,
    FontName,
    Glyph,
    MetricsSet,
    PropertyEntry,
    SizeEntry,
    StartChar,
    StartFont,
    StartProperties,
    Unknown,
    quote,
)
from bdfont.exceptions import MalformedCharError, MalformedFontError

logger = structlog.get_logger(__name__)


class EntryWriter:
    """Renders records as BDF text, the inverse of EntryReader.

    Example:
        writer = EntryWriter(sys.stdout)
        writer.write(FontName("fixed"))
    """

    def __init__(self, sink: TextIO, *, line_ending: str = "\n") -> None:
        """Initialize the writer.

        Args:
            sink: Text stream to write to; the caller owns it
            line_ending: Terminator written after every line
        """
        self._sink = sink
        self._line_ending = line_ending

    def render(self, entry: Entry) -> str:
        """Render a record as text, including line terminators.

        A `BITMAP` record renders as several lines, one per row.

        Args:
            entry: Record to render

        Returns:
            Rendered text

        Raises:
            TypeError: If ``entry`` is not one of the record types
        """
        return "".join(line + self._line_ending for line in render_lines(entry))

    def write(self, entry: Entry) -> None:
        """Render a record and write it to the sink."""
        self._sink.write(self.render(entry))


def render_lines(entry: Entry) -> list[str]:
    """Render a record as a list of lines without terminators."""
    match entry:
        case Comment(text=text):
            return [f"COMMENT {quote(text)}"]
        case PropertyEntry(name=name, value=str() as value):
            return [f"{name} {quote(value)}"]
        case PropertyEntry(name=name, value=value):
            return [f"{name} {value}"]
        case StartFont(version=text) | ContentVersion(version=text) | FontName(
            name=text
        ) | StartChar(name=text):
            return [f"{entry.keyword} {text}"]
        case SizeEntry(pt=pt, x_dpi=x_dpi, y_dpi=y_dpi):
            return [f"SIZE {pt} {x_dpi} {y_dpi}"]
        case Chars(count=count) | StartProperties(count=count):
            return [f"{entry.keyword} {count}"]
        case FontBoundingBox(bounds=bounds) | BoundingBoxEntry(bounds=bounds):
            return [f"{entry.keyword} {bounds.width} {bounds.height} {bounds.x} {bounds.y}"]
        case Encoding(codepoint=codepoint):
            return [f"ENCODING {ord(codepoint)}"]
        case MetricsSet(direction=direction):
            return [f"METRICSSET {direction.value}"]
        case BitmapEntry(bitmap=bitmap):
            return ["BITMAP", *encode_bitmap(bitmap)]
        case EndFont() | EndProperties() | EndChar():
            return [entry.keyword]
        case Unknown(identifier=identifier):
            return [identifier]
        case _ if type(entry) in WIDTH_ENTRIES.values():
            return [f"{entry.keyword} {entry.x} {entry.y}"]  # type: ignore[attr-defined]
        case _:
            raise TypeError(f"Not a BDF record: {entry!r}")


def _width_entries(owner: Font | Glyph) -> Iterator[Entry]:
    if owner.direction != Direction.DEFAULT:
        yield MetricsSet(owner.direction)
    for attribute, entry_type in WIDTH_ENTRIES.items():
        pair = getattr(owner, attribute)
        if pair is not None:
            yield entry_type(*pair)


def font_entries(font: Font, settings: BdfSettings | None = None) -> Iterator[Entry]:
    """Walk a font in canonical order, yielding its records.

    The font and all of its glyphs are validated before the first record
    is yielded.

    Args:
        font: Font to serialize
        settings: Library settings (defaults if None)

    Yields:
        Records from `STARTFONT` to `ENDFONT`

    Raises:
        MalformedFontError: If the font lacks its name, size or bounding box
        MalformedCharError: If any glyph lacks its bounding box or bitmap, or its
            table key is not a single Unicode scalar value
    """
    settings = settings or get_default_settings()
    if not font.validate():
        raise MalformedFontError("Font is missing its name, size or bounding box")
    for codepoint, glyph in font.glyphs.items():
        if len(codepoint) != 1 or 0xD800 <= ord(codepoint) <= 0xDFFF:
            raise MalformedCharError(
                f"Character '{glyph.name}' is keyed by {codepoint!r}, not a Unicode scalar"
            )
        if not glyph.validate():
            raise MalformedCharError(
                f"Character '{glyph.name}' is missing its bounding box or bitmap"
            )
    return _font_entries(font, settings)


def _font_entries(font: Font, settings: BdfSettings) -> Iterator[Entry]:
    assert font.name is not None and font.size is not None and font.bounds is not None

    yield StartFont(font.format)
    yield FontName(font.name)
    yield SizeEntry(font.size.pt, font.size.x_dpi, font.size.y_dpi)
    if font.version is not None:
        yield ContentVersion(font.version)
    yield FontBoundingBox(font.bounds)
    yield from _width_entries(font)

    if font.properties:
        properties = list(font.properties.items())
        if settings.writer.sort_properties:
            properties.sort()
        yield StartProperties(len(properties))
        for name, value in properties:
            yield PropertyEntry(name, value)
        yield EndProperties()

    # ENCODING comes from the table key
    glyphs = list(font.glyphs.items())
    if settings.writer.sort_glyphs:
        glyphs.sort(key=lambda item: item[0])
    yield Chars(len(glyphs))

    for codepoint, glyph in glyphs:
        assert glyph.bounds is not None and glyph.bitmap is not None
        yield StartChar(glyph.name)
        yield Encoding(codepoint)
        yield from _width_entries(glyph)
        yield BoundingBoxEntry(glyph.bounds)
        yield BitmapEntry(glyph.bitmap)
        yield EndChar()

    yield EndFont()


def write_font(sink: TextIO, font: Font, settings: BdfSettings | None = None) -> None:
    """Write a font to a text stream.

    Validation happens before anything is written. Records already written
    to ``sink`` are not rolled back if the sink itself fails.

    Args:
        sink: Open text stream; the caller owns it
        font: Font to write
        settings: Library settings (defaults if None)

    Raises:
        MalformedFontError: If the font is incomplete
        MalformedCharError: If a glyph is incomplete
    """
    settings = settings or get_default_settings()
    entries = font_entries(font, settings)
    writer = EntryWriter(sink, line_ending=settings.writer.line_ending)
    for entry in entries:
        writer.write(entry)
    logger.debug("Font written", font=font.name, glyphs=len(font.glyphs))


def dumps(font: Font, settings: BdfSettings | None = None) -> str:
    """Serialize a font to a string."""
    buffer = io.StringIO(newline="")
    write_font(buffer, font, settings)
    return buffer.getvalue()


def dump_bytes(font: Font, settings: BdfSettings | None = None) -> bytes:
    """Serialize a font to bytes in the configured encoding."""
    settings = settings or get_default_settings()
    return dumps(font, settings).encode(settings.writer.encoding)
