"""Font property values.

A property value is either a signed 64-bit integer or a string. String
values are written between double quotes, with every embedded quote
doubled.
"""

import re

PropertyValue = int | str

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


def quote(text: str) -> str:
    """Quote a string value, doubling embedded quotes.

    Args:
        text: Raw string

    Returns:
        Quoted string: each embedded quote is doubled and the result is
        wrapped in a pair of quotes
    """
    return '"' + text.replace('"', '""') + '"'


def unquote(text: str) -> str:
    """Strip the outer quotes from a quoted value and undouble inner quotes.

    A value without a leading quote is returned unchanged. A missing closing
    quote is tolerated.

    Args:
        text: Quoted string as found after the keyword

    Returns:
        The unescaped string
    """
    if not text.startswith('"'):
        return text
    inner = text[1:-1] if len(text) >= 2 and text.endswith('"') else text[1:]
    return inner.replace('""', '"')


def parse_property(text: str) -> PropertyValue:
    """Parse the raw value of a property line.

    A leading quote marks a string. Otherwise the value is tried as a
    signed 64-bit integer, falling back to the raw string.

    Examples:
        ``"41"`` -> ``"41"``, ``41`` -> ``41``,
        ``"Hello World"`` -> ``"Hello World"``,
        ``Hello World`` -> ``"Hello World"``

    Args:
        text: Everything after the property name, stripped

    Returns:
        An ``int`` or a ``str``
    """
    if text.startswith('"'):
        return unquote(text)
    if _INTEGER.fullmatch(text):
        value = int(text)
        if INT64_MIN <= value <= INT64_MAX:
            return value
    return text
