"""Font representation.

A font holds the global metadata of a BDF document, its property table and
its glyphs keyed by codepoint.
"""

from dataclasses import dataclass, field

from bdfont.domain.glyph import Glyph
from bdfont.domain.metrics import BoundingBox, Direction, Size, WidthPair
from bdfont.domain.property import PropertyValue

DEFAULT_FORMAT = "2.2"


@dataclass
class Font:
    """A BDF font.

    Name, size and bounds are optional while the font is being assembled but
    required before it can be used; see ``validate()``.

    Attributes:
        format: BDF format version from `STARTFONT`
        name: Font name from `FONT`
        version: Content version from `CONTENTVERSION`
        size: Point size and resolution from `SIZE`
        bounds: Default bounding box from `FONTBOUNDINGBOX`
        direction: Default writing direction
        scalable_width: Default `SWIDTH` pair
        device_width: Default `DWIDTH` pair
        alternate_scalable_width: Default `SWIDTH1` pair
        alternate_device_width: Default `DWIDTH1` pair
        vector: Default `VVECTOR` pair
        properties: Property table
        glyphs: Glyphs keyed by codepoint
    """

    format: str = DEFAULT_FORMAT
    name: str | None = None
    version: str | None = None
    size: Size | None = None
    bounds: BoundingBox | None = None
    direction: Direction = Direction.DEFAULT
    scalable_width: WidthPair | None = None
    device_width: WidthPair | None = None
    alternate_scalable_width: WidthPair | None = None
    alternate_device_width: WidthPair | None = None
    vector: WidthPair | None = None
    properties: dict[str, PropertyValue] = field(default_factory=dict)
    glyphs: dict[str, Glyph] = field(default_factory=dict)

    def validate(self) -> bool:
        """Check that name, size and bounds are present.

        Returns:
            True if the font is complete enough to be used and written
        """
        return self.name is not None and self.size is not None and self.bounds is not None

    def add_glyph(self, glyph: Glyph) -> None:
        """Insert a glyph at its codepoint, replacing any previous one."""
        self.glyphs[glyph.codepoint] = glyph

    def get_glyph(self, codepoint: str | int) -> Glyph | None:
        """Look up a glyph by character or integer codepoint.

        Args:
            codepoint: One-character string or Unicode scalar value

        Returns:
            The glyph, or None if the font has none at that codepoint
        """
        if isinstance(codepoint, int):
            codepoint = chr(codepoint)
        return self.glyphs.get(codepoint)
