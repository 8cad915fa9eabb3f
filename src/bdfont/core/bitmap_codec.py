"""Conversion between bitmaps and BDF hex rows.

Each scanline is written as a big-endian hex number. Pixels are packed
most-significant bit first and the row is padded with zero bits on the
right up to a whole number of bytes, so a row of ``width`` pixels always
takes ``2 * ceil(width / 8)`` hex digits.

Example (width 6):
    ``.###..`` -> bits ``011100`` + padding ``00`` -> ``0x70`` -> ``"70"``
"""

import re
from collections.abc import Sequence

from bdfont.domain.bitmap import Bitmap

_HEX_ROW = re.compile(r"[0-9A-Fa-f]+")


def row_padding(width: int) -> int:
    """Number of zero bits appended to a row of ``width`` pixels."""
    return -width % 8


def row_digits(width: int) -> int:
    """Number of hex digits in a row of ``width`` pixels."""
    return (width + 7) // 8 * 2


def decode_row(text: str, width: int) -> int:
    """Parse one hex row and drop its padding bits.

    Args:
        text: Hex digits, optionally surrounded by whitespace
        width: Pixel width of the row

    Returns:
        Row value whose lowest ``width`` bits are the pixels, leftmost pixel
        in the most significant position

    Raises:
        ValueError: If ``text`` is not a hex number
    """
    digits = text.strip()
    if not _HEX_ROW.fullmatch(digits):
        raise ValueError(f"invalid hex row {text!r}")
    return int(digits, 16) >> row_padding(width)


def decode_bitmap(width: int, height: int, rows: Sequence[str]) -> Bitmap:
    """Decode hex rows into a bitmap.

    Args:
        width: Pixel width
        height: Pixel height; ``rows`` must hold exactly this many rows
        rows: Hex rows, top to bottom

    Returns:
        Decoded bitmap

    Raises:
        ValueError: If the row count is wrong or a row is not a hex number
    """
    if len(rows) != height:
        raise ValueError(f"expected {height} bitmap rows, got {len(rows)}")
    bitmap = Bitmap(width, height)
    for y, text in enumerate(rows):
        value = decode_row(text, width)
        if value.bit_length() > width:
            value &= (1 << width) - 1
        # Visit the digits of the row, never the full width
        bits = format(value, "b") if value else ""
        offset = width - len(bits)
        for index, bit in enumerate(bits):
            if bit == "1":
                bitmap.set(offset + index, y)
    return bitmap


def _format_row(value: int, width: int) -> str:
    value <<= row_padding(width)
    return format(value, "X").zfill(row_digits(width))


def encode_row(bitmap: Bitmap, y: int) -> str:
    """Encode row ``y`` of a bitmap as uppercase, zero-padded hex."""
    value = 0
    for x in range(bitmap.width):
        value = value << 1 | bitmap.get(x, y)
    return _format_row(value, bitmap.width)


def encode_bitmap(bitmap: Bitmap) -> list[str]:
    """Encode every row of a bitmap, top to bottom.

    Only the set pixels are visited, so sparse wide bitmaps stay cheap.
    """
    width = bitmap.width
    values = [0] * bitmap.height
    for position in bitmap:
        y, x = divmod(position, width)
        values[y] |= 1 << (width - 1 - x)
    return [_format_row(value, width) for value in values]
