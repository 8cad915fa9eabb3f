"""Domain models for bdfont.

This module contains the record model of the BDF format and the font and
glyph objects the records are assembled into:

- Value types are immutable (frozen dataclasses)
- Records are a closed family of frozen dataclasses, one per line kind
- Font and Glyph are mutable and built up record by record

Key classes:
- Bitmap: Pixel matrix of a glyph
- BoundingBox, Size, Direction: Metric values
- Entry and its subclasses: One parsed line each
- Glyph: A single character
- Font: Global metadata, properties and glyphs
"""

from bdfont.domain.bitmap import Bitmap
from bdfont.domain.entry import (
    ENTRY_TYPES,
    WIDTH_ENTRIES,
    AlternateDeviceWidth,
    AlternateScalableWidth,
    BitmapEntry,
    BoundingBoxEntry,
    Chars,
    Comment,
    ContentVersion,
    DeviceWidth,
    Encoding,
    EndChar,
    EndFont,
    EndProperties,
    Entry,
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
)
from bdfont.domain.font import DEFAULT_FORMAT, Font
from bdfont.domain.glyph import Glyph
from bdfont.domain.metrics import BoundingBox, Direction, Size, WidthPair
from bdfont.domain.property import PropertyValue, parse_property, quote, unquote

__all__: list[str] = [
    # Value types
    "Bitmap",
    "BoundingBox",
    "Direction",
    "Size",
    "WidthPair",
    "PropertyValue",
    "parse_property",
    "quote",
    "unquote",
    # Records
    "ENTRY_TYPES",
    "WIDTH_ENTRIES",
    "Entry",
    "StartFont",
    "Comment",
    "ContentVersion",
    "FontName",
    "SizeEntry",
    "Chars",
    "FontBoundingBox",
    "EndFont",
    "StartProperties",
    "PropertyEntry",
    "EndProperties",
    "StartChar",
    "Encoding",
    "MetricsSet",
    "ScalableWidth",
    "DeviceWidth",
    "AlternateScalableWidth",
    "AlternateDeviceWidth",
    "Vector",
    "BoundingBoxEntry",
    "BitmapEntry",
    "EndChar",
    "Unknown",
    # Model
    "DEFAULT_FORMAT",
    "Font",
    "Glyph",
]
