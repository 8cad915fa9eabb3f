"""Glyph representation.

This module defines the glyph domain model: one character of a bitmap
font with its metrics and pixels.
"""

from dataclasses import dataclass

from bdfont.domain.bitmap import Bitmap
from bdfont.domain.metrics import BoundingBox, Direction, WidthPair


@dataclass
class Glyph:
    """A single character of a font.

    A glyph is built field by field while its `STARTCHAR` ... `ENDCHAR`
    block is read, so every field starts out empty. ``validate()`` tells
    whether the required fields have been filled in.

    Attributes:
        name: Glyph name from `STARTCHAR`
        codepoint: Character the glyph is encoded at (one-character string)
        bounds: Bounding box of the bitmap (required)
        bitmap: Pixels (required)
        direction: Writing direction of the metrics
        scalable_width: `SWIDTH` pair
        device_width: `DWIDTH` pair
        alternate_scalable_width: `SWIDTH1` pair
        alternate_device_width: `DWIDTH1` pair
        vector: `VVECTOR` pair
    """

    name: str = ""
    codepoint: str = "\0"
    bounds: BoundingBox | None = None
    bitmap: Bitmap | None = None
    direction: Direction = Direction.DEFAULT
    scalable_width: WidthPair | None = None
    device_width: WidthPair | None = None
    alternate_scalable_width: WidthPair | None = None
    alternate_device_width: WidthPair | None = None
    vector: WidthPair | None = None

    def validate(self) -> bool:
        """Check that the bounding box and bitmap are present.

        Returns:
            True if the glyph can be written
        """
        return self.bounds is not None and self.bitmap is not None

    @property
    def width(self) -> int:
        """Bitmap width, 0 if there is no bitmap yet."""
        return self.bitmap.width if self.bitmap is not None else 0

    @property
    def height(self) -> int:
        """Bitmap height, 0 if there is no bitmap yet."""
        return self.bitmap.height if self.bitmap is not None else 0

    def get(self, x: int, y: int) -> bool:
        """Get a pixel of the bitmap.

        Raises:
            IndexError: If there is no bitmap or (x, y) lies outside it
        """
        if self.bitmap is None:
            raise IndexError(f"Glyph '{self.name}' has no bitmap")
        return self.bitmap.get(x, y)
