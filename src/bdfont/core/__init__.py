"""Core algorithms for bdfont.

This module contains:

- The bitmap codec (hex rows <-> pixel matrix)
- The FontAssembler state machine (record stream -> Font)

Key functions:
- decode_bitmap / encode_bitmap: Convert whole bitmaps
- decode_row / encode_row: Convert single scanlines
- row_padding / row_digits: Row layout arithmetic

Key classes:
- FontAssembler: Folds records into a validated Font
- Scope: Block the assembler is in
"""

from bdfont.core.assembler import EntrySource, FontAssembler, Scope
from bdfont.core.bitmap_codec import (
    decode_bitmap,
    decode_row,
    encode_bitmap,
    encode_row,
    row_digits,
    row_padding,
)

__all__ = [
    "EntrySource",
    "FontAssembler",
    "Scope",
    "decode_bitmap",
    "decode_row",
    "encode_bitmap",
    "encode_row",
    "row_digits",
    "row_padding",
]
