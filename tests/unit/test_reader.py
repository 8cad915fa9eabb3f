"""Unit tests for the EntryReader tokenizer."""

import io

import pytest

from bdfont.domain import (
    AlternateDeviceWidth,
    AlternateScalableWidth,
    Bitmap,
    BitmapEntry,
    BoundingBox,
    BoundingBoxEntry,
    Chars,
    Comment,
    ContentVersion,
    DeviceWidth,
    Direction,
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
from bdfont.exceptions import (
    EndOfInputError,
    InvalidCodepointError,
    MissingBoundingBoxError,
    MissingValueError,
    MissingVersionError,
    ParseError,
    UnexpectedEndError,
)
from bdfont.io.reader import EntryReader


def read_all(text: str) -> list[Entry]:
    """Parse every record of a document."""
    return list(EntryReader(io.StringIO(text)))


def last_entry(text: str) -> Entry:
    """Parse a document and return its last record."""
    return read_all(text)[-1]


class TestRecords:
    """Tests for parsing each record kind."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("STARTFONT 2.2\n", StartFont("2.2")),
            ('COMMENT "hue"\n', Comment("hue")),
            ("COMMENT plain words\n", Comment("plain words")),
            ("COMMENT\n", Comment("")),
            ("CONTENTVERSION 1.0.0\n", ContentVersion("1.0.0")),
            (
                "FONT -Gohu-GohuFont-Bold-R-Normal--11-80-100-100-C-60-ISO10646-1\n",
                FontName("-Gohu-GohuFont-Bold-R-Normal--11-80-100-100-C-60-ISO10646-1"),
            ),
            ("SIZE 16 100 100\n", SizeEntry(16, 100, 100)),
            ("CHARS 42\n", Chars(42)),
            ("FONTBOUNDINGBOX 6 11 0 -2\n", FontBoundingBox(BoundingBox(6, 11, 0, -2))),
            ("ENDFONT\n", EndFont()),
            ("STARTPROPERTIES 23\n", StartProperties(23)),
            ('FOUNDRY "GohuFont"\n', PropertyEntry("FOUNDRY", "GohuFont")),
            ("X_HEIGHT 4\n", PropertyEntry("X_HEIGHT", 4)),
            ("ENDPROPERTIES\n", EndProperties()),
            ("STARTCHAR <control>\n", StartChar("<control>")),
            ("ENCODING 0\n", Encoding("\0")),
            ("ENCODING 65\n", Encoding("A")),
            ("METRICSSET 0\n", MetricsSet(Direction.DEFAULT)),
            ("METRICSSET 1\n", MetricsSet(Direction.ALTERNATE)),
            ("METRICSSET 2\n", MetricsSet(Direction.BOTH)),
            ("SWIDTH 392 0\n", ScalableWidth(392, 0)),
            ("DWIDTH 6 0\n", DeviceWidth(6, 0)),
            ("SWIDTH1 392 0\n", AlternateScalableWidth(392, 0)),
            ("DWIDTH1 6 0\n", AlternateDeviceWidth(6, 0)),
            ("VVECTOR 6 0\n", Vector(6, 0)),
            ("BBX 6 11 0 -2\n", BoundingBoxEntry(BoundingBox(6, 11, 0, -2))),
            ("ENDCHAR\n", EndChar()),
            ("HUE", Unknown("HUE")),
        ],
    )
    def test_record(self, text: str, expected: Entry) -> None:
        """Test a single line parses into the expected record."""
        assert last_entry(text) == expected

    def test_quoted_property_keeps_inner_quotes(self) -> None:
        """Test doubled quotes in a property value are undoubled."""
        entry = last_entry('FAMILY_NAME "Sample ""Quoted"" Family"\n')
        assert entry == PropertyEntry("FAMILY_NAME", 'Sample "Quoted" Family')

    def test_quoted_number_stays_string(self) -> None:
        """Test a quoted number is a string property."""
        assert last_entry('POINT_SIZE "41"\n') == PropertyEntry("POINT_SIZE", "41")

    def test_extra_spaces_between_fields(self) -> None:
        """Test fields may be separated by more than one space."""
        assert last_entry("SIZE 16  100   100\n") == SizeEntry(16, 100, 100)

    def test_crlf_line_endings(self) -> None:
        """Test CRLF terminators are stripped."""
        assert read_all("STARTFONT 2.1\r\nFONT x\r\n") == [StartFont("2.1"), FontName("x")]

    def test_byte_lines(self) -> None:
        """Test binary streams are decoded."""
        reader = EntryReader(io.BytesIO(b"STARTFONT 2.1\nCOMMENT \"caf\xc3\xa9\"\n"))
        assert list(reader) == [StartFont("2.1"), Comment("café")]

    def test_byte_lines_with_encoding(self) -> None:
        """Test the configured encoding is used for byte lines."""
        reader = EntryReader([b'COMMENT "caf\xe9"'], encoding="latin-1")
        assert reader.next_entry() == Comment("café")


class TestBitmap:
    """Tests for BITMAP blocks and their sizing."""

    def test_bitmap_after_bbx(self) -> None:
        """Test the character bounding box sizes the bitmap."""
        entry = last_entry("BBX 6 2 0 0\nBITMAP\n70\nD8\n")
        assert isinstance(entry, BitmapEntry)
        assert entry.bitmap == Bitmap.from_rows([[0, 1, 1, 1, 0, 0], [1, 1, 0, 1, 1, 0]])

    def test_bitmap_falls_back_to_font_bounds(self) -> None:
        """Test the font bounding box sizes a bitmap without BBX."""
        entry = last_entry("FONTBOUNDINGBOX 8 1 0 0\nBITMAP\n81\n")
        assert entry == BitmapEntry(Bitmap.from_rows([[1, 0, 0, 0, 0, 0, 0, 1]]))

    def test_bbx_cleared_after_bitmap(self) -> None:
        """Test a second bitmap reverts to the font bounding box."""
        entries = read_all(
            "FONTBOUNDINGBOX 8 1 0 0\n"
            "BBX 4 2 0 0\nBITMAP\nF0\n90\n"
            "BITMAP\nFF\n"
        )
        first, second = entries[2], entries[3]
        assert isinstance(first, BitmapEntry) and isinstance(second, BitmapEntry)
        assert (first.bitmap.width, first.bitmap.height) == (4, 2)
        assert (second.bitmap.width, second.bitmap.height) == (8, 1)

    def test_bitmap_without_bounds(self) -> None:
        """Test a bitmap with no bounding box to size it."""
        reader = EntryReader(io.StringIO("STARTCHAR A\nBITMAP\n00\n"))
        reader.next_entry()
        with pytest.raises(MissingBoundingBoxError) as excinfo:
            reader.next_entry()
        assert excinfo.value.line_number == 2
        assert excinfo.value.line == "BITMAP"

    def test_bad_row_reports_post_advance_line(self) -> None:
        """Test a bad row reports the last row's line number and the BITMAP line."""
        reader = EntryReader(io.StringIO("BBX 8 3 0 0\nBITMAP\nFF\nZZ\n00\n"))
        reader.next_entry()
        with pytest.raises(ParseError) as excinfo:
            reader.next_entry()
        assert excinfo.value.line_number == 5
        assert excinfo.value.line == "BITMAP"

    def test_truncated_bitmap(self) -> None:
        """Test the input ending inside a bitmap is an error, not a clean end."""
        reader = EntryReader(io.StringIO("BBX 8 3 0 0\nBITMAP\nFF\n"))
        reader.next_entry()
        with pytest.raises(UnexpectedEndError):
            reader.next_entry()

    def test_truncated_bitmap_not_swallowed_by_iteration(self) -> None:
        """Test iteration propagates a truncated bitmap."""
        with pytest.raises(UnexpectedEndError):
            read_all("BBX 8 3 0 0\nBITMAP\nFF\n")

    def test_widest_bounding_box(self) -> None:
        """Test a maximal BBX width with a short row is read without scanning every column."""
        entry = last_entry("BBX 4294967295 1 0 0\nBITMAP\n00\n")
        assert entry == BitmapEntry(Bitmap(4294967295, 1))

    def test_zero_height_bitmap(self) -> None:
        """Test an empty bitmap consumes no rows."""
        entries = read_all("BBX 0 0 0 0\nBITMAP\nENDCHAR\n")
        assert entries[1] == BitmapEntry(Bitmap(0, 0))
        assert entries[2] == EndChar()


class TestErrors:
    """Tests for diagnostics."""

    def test_startfont_missing_version(self) -> None:
        """Test STARTFONT without a version has its own error."""
        with pytest.raises(MissingVersionError) as excinfo:
            last_entry("STARTFONT\n")
        assert not isinstance(excinfo.value, MissingValueError)
        assert excinfo.value.line_number == 1

    @pytest.mark.parametrize(
        "text",
        [
            "FONT\n",
            "CONTENTVERSION\n",
            "STARTCHAR\n",
            "SIZE 16 100\n",
            "SIZE 16 100 100 100\n",
            "FONTBOUNDINGBOX 6 11 0\n",
            "BBX\n",
            "CHARS\n",
            "STARTPROPERTIES 1 2\n",
            "SWIDTH 392\n",
            "DWIDTH1 6 0 0\n",
            "ENCODING\n",
            "METRICSSET\n",
            "METRICSSET 3\n",
        ],
    )
    def test_missing_value(self, text: str) -> None:
        """Test records with a missing or miscounted value."""
        identifier = text.split()[0]
        with pytest.raises(MissingValueError) as excinfo:
            last_entry(text)
        assert excinfo.value.property_name == identifier
        assert excinfo.value.line_number == 1

    @pytest.mark.parametrize(
        "text",
        [
            "SIZE 16 abc 100\n",
            "SIZE 70000 100 100\n",
            "CHARS -1\n",
            "BBX 6 11 0 x\n",
            "BBX -6 11 0 0\n",
            "DWIDTH 6.5 0\n",
            "VVECTOR 4294967296 0\n",
        ],
    )
    def test_parse_error(self, text: str) -> None:
        """Test integer fields that fail to parse or do not fit."""
        with pytest.raises(ParseError) as excinfo:
            last_entry("COMMENT first\n" + text)
        assert excinfo.value.line_number == 2
        assert excinfo.value.line == text.rstrip("\n")

    @pytest.mark.parametrize(
        "text",
        [
            "ENCODING -1\n",
            "ENCODING -1 128\n",
            "ENCODING 55296\n",
            "ENCODING 1114112\n",
            "ENCODING A\n",
        ],
    )
    def test_invalid_codepoint(self, text: str) -> None:
        """Test codepoints without a Unicode scalar mapping."""
        with pytest.raises(InvalidCodepointError) as excinfo:
            last_entry(text)
        assert excinfo.value.line_number == 1

    def test_highest_codepoint(self) -> None:
        """Test the last Unicode scalar value is accepted."""
        assert last_entry("ENCODING 1114111\n") == Encoding("\U0010ffff")

    def test_end_of_input(self) -> None:
        """Test a clean end of input at a record boundary."""
        reader = EntryReader(io.StringIO("ENDFONT\n\n\n"))
        assert reader.next_entry() == EndFont()
        with pytest.raises(EndOfInputError) as excinfo:
            reader.next_entry()
        assert excinfo.value.line_number == 3


class TestLineNumbers:
    """Tests for line counting."""

    def test_blank_lines_skipped_and_counted(self) -> None:
        """Test blank lines are skipped but still advance the counter."""
        reader = EntryReader(io.StringIO("\n   \nFONT x\n\nENDFONT\n"))
        assert reader.next_entry() == FontName("x")
        assert reader.line_number == 3
        assert reader.next_entry() == EndFont()
        assert reader.line_number == 5

    def test_bitmap_rows_counted(self) -> None:
        """Test bitmap rows advance the counter."""
        reader = EntryReader(io.StringIO("BBX 8 2 0 0\nBITMAP\nFF\n00\nENDCHAR\n"))
        entries = [reader.next_entry() for _ in range(3)]
        assert entries[-1] == EndChar()
        assert reader.line_number == 5
