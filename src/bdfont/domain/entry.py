"""Typed records, one per line of a BDF document.

Each record kind is a frozen dataclass deriving from ``Entry``. The set is
closed: the reader only ever produces these types and the writer renders
exactly these types. ``ENTRY_TYPES`` lists them all.

Records carry no cross-line state; sizing a ``BITMAP`` block from the
preceding bounding box is the reader's job.
"""

from dataclasses import dataclass
from typing import ClassVar

from bdfont.domain.bitmap import Bitmap
from bdfont.domain.metrics import BoundingBox, Direction
from bdfont.domain.property import PropertyValue


@dataclass(frozen=True)
class Entry:
    """Base class of all records."""

    keyword: ClassVar[str] = ""


@dataclass(frozen=True)
class StartFont(Entry):
    """`STARTFONT` opens the font and names the format version."""

    keyword: ClassVar[str] = "STARTFONT"
    version: str


@dataclass(frozen=True)
class Comment(Entry):
    """`COMMENT` with its (unquoted) body."""

    keyword: ClassVar[str] = "COMMENT"
    text: str = ""


@dataclass(frozen=True)
class ContentVersion(Entry):
    """`CONTENTVERSION` holds the font's own version."""

    keyword: ClassVar[str] = "CONTENTVERSION"
    version: str


@dataclass(frozen=True)
class FontName(Entry):
    """`FONT` holds the font name, usually an XLFD string."""

    keyword: ClassVar[str] = "FONT"
    name: str


@dataclass(frozen=True)
class SizeEntry(Entry):
    """`SIZE` holds the point size and the x/y resolution."""

    keyword: ClassVar[str] = "SIZE"
    pt: int
    x_dpi: int
    y_dpi: int


@dataclass(frozen=True)
class Chars(Entry):
    """`CHARS` declares how many glyphs follow."""

    keyword: ClassVar[str] = "CHARS"
    count: int


@dataclass(frozen=True)
class FontBoundingBox(Entry):
    """`FONTBOUNDINGBOX` holds the font's default bounding box."""

    keyword: ClassVar[str] = "FONTBOUNDINGBOX"
    bounds: BoundingBox


@dataclass(frozen=True)
class EndFont(Entry):
    """`ENDFONT` closes the font."""

    keyword: ClassVar[str] = "ENDFONT"


@dataclass(frozen=True)
class StartProperties(Entry):
    """`STARTPROPERTIES` opens the property block and declares its length."""

    keyword: ClassVar[str] = "STARTPROPERTIES"
    count: int


@dataclass(frozen=True)
class PropertyEntry(Entry):
    """A property line: any other keyword followed by a value."""

    name: str
    value: PropertyValue


@dataclass(frozen=True)
class EndProperties(Entry):
    """`ENDPROPERTIES` closes the property block."""

    keyword: ClassVar[str] = "ENDPROPERTIES"


@dataclass(frozen=True)
class StartChar(Entry):
    """`STARTCHAR` opens a glyph and names it."""

    keyword: ClassVar[str] = "STARTCHAR"
    name: str


@dataclass(frozen=True)
class Encoding(Entry):
    """`ENCODING` holds the glyph's codepoint as a one-character string."""

    keyword: ClassVar[str] = "ENCODING"
    codepoint: str


@dataclass(frozen=True)
class MetricsSet(Entry):
    """`METRICSSET` selects the writing direction."""

    keyword: ClassVar[str] = "METRICSSET"
    direction: Direction


@dataclass(frozen=True)
class ScalableWidth(Entry):
    """`SWIDTH` holds the scalable width (x, y)."""

    keyword: ClassVar[str] = "SWIDTH"
    x: int
    y: int


@dataclass(frozen=True)
class DeviceWidth(Entry):
    """`DWIDTH` holds the device width (x, y)."""

    keyword: ClassVar[str] = "DWIDTH"
    x: int
    y: int


@dataclass(frozen=True)
class AlternateScalableWidth(Entry):
    """`SWIDTH1` holds the alternate scalable width (x, y)."""

    keyword: ClassVar[str] = "SWIDTH1"
    x: int
    y: int


@dataclass(frozen=True)
class AlternateDeviceWidth(Entry):
    """`DWIDTH1` holds the alternate device width (x, y)."""

    keyword: ClassVar[str] = "DWIDTH1"
    x: int
    y: int


@dataclass(frozen=True)
class Vector(Entry):
    """`VVECTOR` holds the offset between the two origins (x, y)."""

    keyword: ClassVar[str] = "VVECTOR"
    x: int
    y: int


@dataclass(frozen=True)
class BoundingBoxEntry(Entry):
    """`BBX` holds a glyph's bounding box."""

    keyword: ClassVar[str] = "BBX"
    bounds: BoundingBox


@dataclass(frozen=True)
class BitmapEntry(Entry):
    """`BITMAP` followed by one hex row per scanline."""

    keyword: ClassVar[str] = "BITMAP"
    bitmap: Bitmap


@dataclass(frozen=True)
class EndChar(Entry):
    """`ENDCHAR` closes a glyph."""

    keyword: ClassVar[str] = "ENDCHAR"


@dataclass(frozen=True)
class Unknown(Entry):
    """A bare keyword with no value that is not part of the grammar."""

    identifier: str


# Records holding an (x, y) pair, keyed by the glyph/font attribute they set
WIDTH_ENTRIES: dict[str, type[Entry]] = {
    "scalable_width": ScalableWidth,
    "device_width": DeviceWidth,
    "alternate_scalable_width": AlternateScalableWidth,
    "alternate_device_width": AlternateDeviceWidth,
    "vector": Vector,
}

ENTRY_TYPES: tuple[type[Entry], ...] = (
    StartFont,
    Comment,
    ContentVersion,
    FontName,
    SizeEntry,
    Chars,
    FontBoundingBox,
    EndFont,
    StartProperties,
    PropertyEntry,
    EndProperties,
    StartChar,
    Encoding,
    MetricsSet,
    ScalableWidth,
    DeviceWidth,
    AlternateScalableWidth,
    AlternateDeviceWidth,
    Vector,
    BoundingBoxEntry,
    BitmapEntry,
    EndChar,
    Unknown,
)
