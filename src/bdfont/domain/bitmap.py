"""Glyph bitmap representation.

A bitmap is a fixed-size matrix of pixels, stored sparsely as the set of
row-major positions (``y * width + x``) that are switched on.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field


@dataclass
class Bitmap:
    """The pixels of a glyph.

    Coordinates run from the top-left corner: ``x`` is the column, ``y`` the
    row. Accessing a coordinate outside the bitmap is a programming error and
    raises ``IndexError``.

    Attributes:
        width: Number of columns
        height: Number of rows
    """

    width: int = 0
    height: int = 0
    _bits: set[int] = field(default_factory=set, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Invalid bitmap size {self.width}x{self.height}")

    def _position(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) out of bounds for {self.width}x{self.height} bitmap"
            )
        return y * self.width + x

    def get(self, x: int, y: int) -> bool:
        """Get a pixel.

        Args:
            x: Column
            y: Row

        Returns:
            True if the pixel is set

        Raises:
            IndexError: If (x, y) lies outside the bitmap
        """
        return self._position(x, y) in self._bits

    def set(self, x: int, y: int, value: bool = True) -> None:
        """Set or clear a pixel.

        Args:
            x: Column
            y: Row
            value: New pixel value

        Raises:
            IndexError: If (x, y) lies outside the bitmap
        """
        position = self._position(x, y)
        if value:
            self._bits.add(position)
        else:
            self._bits.discard(position)

    def rows(self) -> list[tuple[bool, ...]]:
        """Return the pixels as a list of rows, top to bottom."""
        return [
            tuple(y * self.width + x in self._bits for x in range(self.width))
            for y in range(self.height)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[Iterable[bool | int]]) -> "Bitmap":
        """Build a bitmap from a sequence of equally long rows.

        Args:
            rows: Rows of truthy/falsy pixel values, top to bottom

        Returns:
            Bitmap instance

        Raises:
            ValueError: If the rows have different lengths
        """
        matrix = [list(row) for row in rows]
        width = len(matrix[0]) if matrix else 0
        bitmap = cls(width, len(matrix))
        for y, row in enumerate(matrix):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} pixels, expected {width}")
            for x, pixel in enumerate(row):
                if pixel:
                    bitmap.set(x, y)
        return bitmap

    def __iter__(self) -> Iterator[int]:
        """Iterate over the row-major positions of set pixels, in order."""
        return iter(sorted(self._bits))

    def __len__(self) -> int:
        return len(self._bits)

    def copy(self) -> "Bitmap":
        """Return an independent copy of this bitmap."""
        return Bitmap(self.width, self.height, set(self._bits))
