"""bdfont - Read and write BDF bitmap fonts.

bdfont parses the Glyph Bitmap Distribution Format into a Font object with
its properties and glyphs, and writes Font objects back out in canonical
order.

Example:
    >>> import bdfont
    >>> with open("gohufont.bdf", "rb") as stream:
    ...     font = bdfont.read_font(stream)
    >>> glyph = font.get_glyph("A")
    >>> for y in range(glyph.height):
    ...     print("".join("#" if glyph.get(x, y) else "." for x in range(glyph.width)))
"""

from bdfont.domain import Bitmap, BoundingBox, Direction, Font, Glyph, Size
from bdfont.exceptions import BdfError
from bdfont.io import (
    EntryReader,
    EntryWriter,
    dump_bytes,
    dumps,
    load_bytes,
    loads,
    read_font,
    write_font,
)

__version__ = "0.1.0"

__all__ = [
    "BdfError",
    "Bitmap",
    "BoundingBox",
    "Direction",
    "EntryReader",
    "EntryWriter",
    "Font",
    "Glyph",
    "Size",
    "__version__",
    "dump_bytes",
    "dumps",
    "load_bytes",
    "loads",
    "read_font",
    "write_font",
]
