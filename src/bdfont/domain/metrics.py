"""Metric value types shared by fonts and glyphs.

This module defines the small immutable values the format stores:
- BoundingBox: pixel extent and origin offset
- Size: point size and resolution
- Direction: which writing-direction metric set applies
"""

from dataclasses import dataclass
from enum import Enum

# (x, y) pair for SWIDTH, DWIDTH, SWIDTH1, DWIDTH1 and VVECTOR
WidthPair = tuple[int, int]


class Direction(Enum):
    """Writing direction a font or glyph declares metrics for.

    The value is the number written after `METRICSSET`.
    """

    DEFAULT = 0
    ALTERNATE = 1
    BOTH = 2


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Rectangle describing a glyph's or font's pixel extent.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        x: Horizontal offset of the lower-left corner from the origin
        y: Vertical offset of the lower-left corner from the baseline
    """

    width: int
    height: int
    x: int
    y: int

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Convert to a (width, height, x, y) tuple."""
        return (self.width, self.height, self.x, self.y)


@dataclass(frozen=True, slots=True)
class Size:
    """Point size and device resolution of a font.

    Attributes:
        pt: Point size
        x_dpi: Horizontal resolution
        y_dpi: Vertical resolution
    """

    pt: int
    x_dpi: int
    y_dpi: int
