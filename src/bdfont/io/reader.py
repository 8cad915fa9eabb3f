"""BDF reader: turns lines of text into typed records and fonts.

This module provides the EntryReader tokenizer, which parses one record per
call, and the read_font family of functions that feed it into the
FontAssembler.
"""

import io
import re
from collections.abc import Iterable, Iterator

from bdfont.config import BdfSettings, get_default_settings
from bdfont.core.assembler import FontAssembler
from bdfont.core.bitmap_codec import decode_bitmap
from bdfont.domain import (
    AlternateDeviceWidth,
    AlternateScalableWidth,
    BitmapEntry,
    BoundingBox,
    BoundingBoxEntry,
    Chars,
    Comment,
    ContentVersion,
    DeviceWidth,
    Direction,
    Encoding,
    EndChar,
    EndFont,
    EndProperties,
    Entry,
    Font,
    FontBoundingBox,
    FontName,
    MetricsSet,
    PropertyEntry,
    ScalableWidth,
    SizeEntry,
    StartChar,
    StartFont,
    StartProperties,
    Unknown,
    Vector,
    parse_property,
    unquote,
)
from bdfont.exceptions import (
    EndOfInputError,
    InvalidCodepointError,
    MissingBoundingBoxError,
    MissingValueError,
    MissingVersionError,
    ParseError,
    UnexpectedEndError,
)

# Integer ranges of the numeric fields, inclusive
U16 = (0, 2**16 - 1)
U32 = (0, 2**32 - 1)
I32 = (-(2**31), 2**31 - 1)
COUNT = (0, 2**64 - 1)

MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")

_PAIR_ENTRIES = {
    "SWIDTH": ScalableWidth,
    "DWIDTH": DeviceWidth,
    "SWIDTH1": AlternateScalableWidth,
    "DWIDTH1": AlternateDeviceWidth,
    "VVECTOR": Vector,
}

_DIRECTIONS = {str(direction.value): direction for direction in Direction}


class EntryReader:
    """Parses BDF lines into records, one record per call.

    The reader keeps only the state needed to size the next `BITMAP`: the
    last `FONTBOUNDINGBOX` and the `BBX` of the current character.

    Example:
        reader = EntryReader(stream)
        for entry in reader:
            print(entry)
    """

    def __init__(self, lines: Iterable[str | bytes], *, encoding: str = "utf-8") -> None:
        """Initialize the reader.

        Args:
            lines: Any source of lines: a text or binary stream, or an
                iterable of strings. Byte lines are decoded with ``encoding``.
            encoding: Encoding for byte lines
        """
        self._lines = iter(lines)
        self._encoding = encoding
        self.line_number = 0
        self._default_bounds: BoundingBox | None = None
        self._char_bounds: BoundingBox | None = None

    def _next_line(self) -> str | None:
        try:
            raw = next(self._lines)
        except StopIteration:
            return None
        self.line_number += 1
        if isinstance(raw, bytes):
            raw = raw.decode(self._encoding)
        return raw.rstrip("\r\n")

    def next_entry(self) -> Entry:
        """Read the next record.

        Blank lines are skipped.

        Returns:
            The parsed record

        Raises:
            EndOfInputError: If the input ends before another record
            UnexpectedEndError: If the input ends inside a bitmap
            ParseError: If a numeric or hex field is invalid
            MissingValueError: If a record lacks its value(s)
            MissingVersionError: If `STARTFONT` has no version
            MissingBoundingBoxError: If `BITMAP` has no bounding box to size it
            InvalidCodepointError: If `ENCODING` is not a Unicode scalar
        """
        line = self._next_line()
        while line is not None and not line.strip():
            line = self._next_line()
        if line is None:
            raise EndOfInputError(self.line_number)

        line_number = self.line_number
        identifier, _, rest = line.strip().partition(" ")
        value = rest.strip() or None

        match identifier:
            case "COMMENT":
                return Comment(unquote(value) if value is not None else "")
            case "STARTFONT":
                if value is None:
                    raise MissingVersionError(line_number, line)
                return StartFont(value)
            case "FONT":
                return FontName(self._require(identifier, value, line_number))
            case "CONTENTVERSION":
                return ContentVersion(self._require(identifier, value, line_number))
            case "STARTCHAR":
                return StartChar(self._require(identifier, value, line_number))
            case "SIZE":
                pt, x_dpi, y_dpi = self._fields(identifier, value, 3, line_number)
                return SizeEntry(
                    self._int(pt, U16, line_number, line),
                    self._int(x_dpi, U16, line_number, line),
                    self._int(y_dpi, U16, line_number, line),
                )
            case "FONTBOUNDINGBOX":
                bounds = self._bounds(identifier, value, line_number, line)
                self._default_bounds = bounds
                return FontBoundingBox(bounds)
            case "BBX":
                bounds = self._bounds(identifier, value, line_number, line)
                self._char_bounds = bounds
                return BoundingBoxEntry(bounds)
            case "CHARS":
                (count,) = self._fields(identifier, value, 1, line_number)
                return Chars(self._int(count, COUNT, line_number, line))
            case "STARTPROPERTIES":
                (count,) = self._fields(identifier, value, 1, line_number)
                return StartProperties(self._int(count, COUNT, line_number, line))
            case "ENCODING":
                text = self._require(identifier, value, line_number)
                return Encoding(self._codepoint(text, line_number, line))
            case "METRICSSET":
                direction = _DIRECTIONS.get(self._require(identifier, value, line_number))
                if direction is None:
                    raise MissingValueError(identifier, line_number)
                return MetricsSet(direction)
            case "SWIDTH" | "DWIDTH" | "SWIDTH1" | "DWIDTH1" | "VVECTOR":
                x, y = self._fields(identifier, value, 2, line_number)
                return _PAIR_ENTRIES[identifier](
                    self._int(x, U32, line_number, line),
                    self._int(y, U32, line_number, line),
                )
            case "BITMAP":
                return self._bitmap(line_number, line)
            case "ENDCHAR":
                return EndChar()
            case "ENDFONT":
                return EndFont()
            case "ENDPROPERTIES":
                return EndProperties()
            case _:
                if value is None:
                    return Unknown(identifier)
                return PropertyEntry(identifier, parse_property(value))

    def __iter__(self) -> Iterator[Entry]:
        """Yield records until the input is exhausted.

        Only a clean end of input at a record boundary stops iteration;
        every other error propagates.
        """
        while True:
            try:
                entry = self.next_entry()
            except EndOfInputError:
                return
            yield entry

    @staticmethod
    def _require(identifier: str, value: str | None, line_number: int) -> str:
        if value is None:
            raise MissingValueError(identifier, line_number)
        return value

    def _fields(
        self, identifier: str, value: str | None, count: int, line_number: int
    ) -> list[str]:
        fields = self._require(identifier, value, line_number).split()
        if len(fields) != count:
            raise MissingValueError(identifier, line_number)
        return fields

    @staticmethod
    def _int(text: str, bounds: tuple[int, int], line_number: int, line: str) -> int:
        if not _INTEGER.fullmatch(text):
            raise ParseError(f"invalid digit in {text!r}", line_number, line)
        number = int(text)
        low, high = bounds
        if not low <= number <= high:
            raise ParseError(
                f"number {number} out of range [{low}, {high}]", line_number, line
            )
        return number

    def _bounds(
        self, identifier: str, value: str | None, line_number: int, line: str
    ) -> BoundingBox:
        width, height, x, y = self._fields(identifier, value, 4, line_number)
        return BoundingBox(
            width=self._int(width, U32, line_number, line),
            height=self._int(height, U32, line_number, line),
            x=self._int(x, I32, line_number, line),
            y=self._int(y, I32, line_number, line),
        )

    @staticmethod
    def _codepoint(text: str, line_number: int, line: str) -> str:
        if not _UNSIGNED.fullmatch(text):
            raise InvalidCodepointError(line_number, line)
        number = int(text)
        if number > MAX_CODEPOINT or number in SURROGATES:
            raise InvalidCodepointError(line_number, line)
        return chr(number)

    def _bitmap(self, line_number: int, line: str) -> BitmapEntry:
        bounds = self._char_bounds if self._char_bounds is not None else self._default_bounds
        if bounds is None:
            raise MissingBoundingBoxError(line_number, line)

        rows = []
        for _ in range(bounds.height):
            row = self._next_line()
            if row is None:
                raise UnexpectedEndError(
                    self.line_number, f"{bounds.height} rows after BITMAP on line {line_number}"
                )
            rows.append(row)

        try:
            bitmap = decode_bitmap(bounds.width, bounds.height, rows)
        except ValueError as e:
            raise ParseError(str(e), self.line_number, line) from e

        self._char_bounds = None
        return BitmapEntry(bitmap)


def read_font(
    source: Iterable[str | bytes],
    settings: BdfSettings | None = None,
) -> Font:
    """Read a BDF document into a Font.

    The caller owns the stream: it is read sequentially and never closed.

    Args:
        source: Open text or binary stream, or any iterable of lines
        settings: Library settings (defaults if None)

    Returns:
        The assembled, validated font

    Raises:
        BdfError: If the document is not a valid BDF font
    """
    settings = settings or get_default_settings()
    reader = EntryReader(source, encoding=settings.reader.encoding)
    return FontAssembler(reader, settings).assemble()


def loads(text: str, settings: BdfSettings | None = None) -> Font:
    """Read a BDF document held in a string."""
    return read_font(io.StringIO(text), settings)


def load_bytes(data: bytes, settings: BdfSettings | None = None) -> Font:
    """Read a BDF document held in bytes."""
    return read_font(io.BytesIO(data), settings)
