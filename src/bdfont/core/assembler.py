"""Assembly of a record stream into a Font.

The FontAssembler folds the flat stream of records produced by an
EntryReader into a Font. It tracks which block it is in with an explicit
Scope and keeps the glyph under construction in a single slot.

Scopes:
- OUTSIDE_FONT: before `STARTFONT`; only comments are allowed
- FONT: global records, `STARTPROPERTIES`, `STARTCHAR`, `ENDFONT`
- PROPERTIES: property records until `ENDPROPERTIES`
- CHAR: glyph records until `ENDCHAR`

Every error aborts assembly except an unmappable `ENCODING` inside a
character, which drops that character and carries on.
"""

from enum import Enum, auto
from typing import Protocol

from bdfont.config import BdfSettings, get_default_settings
from bdfont.domain import (
    WIDTH_ENTRIES,
    BitmapEntry,
    BoundingBoxEntry,
    Chars,
    Comment,
    ContentVersion,
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
    Size,
    SizeEntry,
    StartChar,
    StartFont,
    StartProperties,
)
from bdfont.exceptions import (
    EndOfInputError,
    InvalidCodepointError,
    MalformedCharError,
    MalformedFontError,
    MalformedPropertiesError,
    UnexpectedEndError,
)
from bdfont.utils import AssemblyLogger, AssemblyStats, SkippedChar

_WIDTH_ATTRIBUTES = {entry_type: attribute for attribute, entry_type in WIDTH_ENTRIES.items()}


class EntrySource(Protocol):
    """Anything that hands out records one at a time, like EntryReader."""

    line_number: int

    def next_entry(self) -> Entry: ...


class Scope(Enum):
    """Block the assembler is currently in."""

    OUTSIDE_FONT = auto()
    FONT = auto()
    PROPERTIES = auto()
    CHAR = auto()


class FontAssembler:
    """Builds a Font from a stream of records.

    Example:
        assembler = FontAssembler(EntryReader(stream))
        font = assembler.assemble()
        for skipped in assembler.stats.skipped:
            print(skipped.name, skipped.line_number)
    """

    def __init__(self, source: EntrySource, settings: BdfSettings | None = None) -> None:
        """Initialize the assembler.

        Args:
            source: Record source, usually an EntryReader
            settings: Library settings (defaults if None)
        """
        self._source = source
        self._settings = settings or get_default_settings()
        self._logger = AssemblyLogger()
        self._font = Font()
        self._scope = Scope.OUTSIDE_FONT
        self._glyph: Glyph | None = None
        self._skip_glyph = False

    @property
    def scope(self) -> Scope:
        """Current scope."""
        return self._scope

    @property
    def stats(self) -> AssemblyStats:
        """Counts and skipped characters collected so far."""
        return self._logger.stats

    def assemble(self) -> Font:
        """Consume records up to `ENDFONT` and return the finished font.

        Returns:
            A font that passes ``Font.validate()``

        Raises:
            MalformedFontError: If records are out of place at font level or
                the font lacks its name, size or bounding box
            MalformedPropertiesError: If the property block is malformed
            MalformedCharError: If a character block is malformed or a glyph
                lacks its bounding box or bitmap
            UnexpectedEndError: If the input ends before `ENDFONT`
            BdfError: Any reader error other than a recoverable codepoint
        """
        while True:
            try:
                entry = self._source.next_entry()
            except InvalidCodepointError as e:
                self._invalid_codepoint(e)
                continue
            except EndOfInputError as e:
                raise UnexpectedEndError(e.line_number, self._expected()) from e

            if self._feed(entry):
                return self._font

    def _feed(self, entry: Entry) -> bool:
        """Apply one record; return True once the font is finished."""
        match self._scope:
            case Scope.OUTSIDE_FONT:
                self._outside_font(entry)
            case Scope.FONT:
                return self._in_font(entry)
            case Scope.PROPERTIES:
                self._in_properties(entry)
            case Scope.CHAR:
                self._in_char(entry)
        return False

    def _outside_font(self, entry: Entry) -> None:
        match entry:
            case Comment():
                pass
            case StartFont(version=version):
                self._font.format = version
                self._scope = Scope.FONT
            case _:
                raise MalformedFontError(f"Expected STARTFONT, found {type(entry).__name__}")

    def _in_font(self, entry: Entry) -> bool:
        font = self._font
        match entry:
            case EndFont():
                if not font.validate():
                    raise MalformedFontError("Font is missing its name, size or bounding box")
                self._logger.log_font_complete(font.name)
                return True
            case StartProperties(count=count):
                self._logger.log_declared("properties", count)
                self._scope = Scope.PROPERTIES
            case StartChar(name=name):
                self._glyph = Glyph(name=name)
                self._skip_glyph = False
                self._scope = Scope.CHAR
            case Comment():
                pass
            case Chars(count=count):
                self._logger.log_declared("glyphs", count)
            case ContentVersion(version=version):
                font.version = version
            case FontName(name=name):
                font.name = name
            case SizeEntry(pt=pt, x_dpi=x_dpi, y_dpi=y_dpi):
                font.size = Size(pt, x_dpi, y_dpi)
            case FontBoundingBox(bounds=bounds):
                font.bounds = bounds
            case MetricsSet(direction=direction):
                font.direction = direction
            case _ if type(entry) in _WIDTH_ATTRIBUTES:
                setattr(font, _WIDTH_ATTRIBUTES[type(entry)], (entry.x, entry.y))  # type: ignore[attr-defined]
            case _:
                raise MalformedFontError(f"Unexpected {type(entry).__name__} in font")
        return False

    def _in_properties(self, entry: Entry) -> None:
        match entry:
            case EndProperties():
                self._scope = Scope.FONT
            case PropertyEntry(name=name, value=value):
                self._font.properties[name] = value
                self._logger.log_property(name)
            case EndFont():
                raise MalformedPropertiesError("ENDFONT inside property block")
            case _:
                raise MalformedPropertiesError(
                    f"Unexpected {type(entry).__name__} in property block"
                )

    def _in_char(self, entry: Entry) -> None:
        glyph = self._glyph
        assert glyph is not None
        match entry:
            case EndChar():
                self._finish_glyph(glyph)
            case Encoding(codepoint=codepoint):
                glyph.codepoint = codepoint
            case MetricsSet(direction=direction):
                glyph.direction = direction
            case BoundingBoxEntry(bounds=bounds):
                glyph.bounds = bounds
            case BitmapEntry(bitmap=bitmap):
                glyph.bitmap = bitmap
            case _ if type(entry) in _WIDTH_ATTRIBUTES:
                setattr(glyph, _WIDTH_ATTRIBUTES[type(entry)], (entry.x, entry.y))  # type: ignore[attr-defined]
            case EndFont():
                raise MalformedCharError(f"ENDFONT inside character '{glyph.name}'")
            case _:
                raise MalformedCharError(
                    f"Unexpected {type(entry).__name__} in character '{glyph.name}'"
                )

    def _finish_glyph(self, glyph: Glyph) -> None:
        if not self._skip_glyph:
            if not glyph.validate():
                raise MalformedCharError(
                    f"Character '{glyph.name}' is missing its bounding box or bitmap"
                )
            replaced = glyph.codepoint in self._font.glyphs
            self._font.add_glyph(glyph)
            self._logger.log_glyph_added(glyph.name, glyph.codepoint, replaced)
        self._glyph = None
        self._skip_glyph = False
        self._scope = Scope.FONT

    def _invalid_codepoint(self, error: InvalidCodepointError) -> None:
        if self._settings.reader.strict_codepoints:
            raise error
        match self._scope:
            case Scope.CHAR:
                assert self._glyph is not None
                self._skip_glyph = True
                self._logger.log_char_skipped(
                    SkippedChar(self._glyph.name, error.line_number, error.line)
                )
            case Scope.PROPERTIES:
                raise MalformedPropertiesError("ENCODING in property block") from error
            case _:
                raise MalformedFontError("ENCODING outside a character") from error

    def _expected(self) -> str:
        match self._scope:
            case Scope.OUTSIDE_FONT:
                return "STARTFONT"
            case Scope.FONT:
                return "ENDFONT"
            case Scope.PROPERTIES:
                return "ENDPROPERTIES"
            case Scope.CHAR:
                return "ENDCHAR"
