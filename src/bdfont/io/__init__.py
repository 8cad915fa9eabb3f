"""BDF I/O layer for bdfont.

This module reads and writes the line-oriented BDF text format. It works on
streams and in-memory documents that the caller provides; it never opens
files itself.

Key responsibilities:
- Tokenize lines into typed records (EntryReader)
- Feed records into the FontAssembler
- Walk a Font in canonical record order (font_entries)
- Render records back to text (EntryWriter)

Key functions:
- read_font / loads / load_bytes: Parse a document into a Font
- write_font / dumps / dump_bytes: Serialize a Font
"""

from bdfont.io.reader import EntryReader, load_bytes, loads, read_font
from bdfont.io.writer import (
    EntryWriter,
    dump_bytes,
    dumps,
    font_entries,
    render_lines,
    write_font,
)

__all__ = [
    "EntryReader",
    "EntryWriter",
    "dump_bytes",
    "dumps",
    "font_entries",
    "load_bytes",
    "loads",
    "read_font",
    "render_lines",
    "write_font",
]
