"""Exception hierarchy for bdfont."""


class BdfError(Exception):
    """Base exception for all bdfont errors."""

    pass


class LineError(BdfError):
    """An error tied to a specific line of the input."""

    def __init__(self, message: str, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"{message} on line {line_number}: `{line}`")


class ParseError(LineError):
    """An integer or hex field could not be parsed."""

    def __init__(self, reason: str, line_number: int, line: str) -> None:
        self.reason = reason
        super().__init__(reason, line_number, line)


class MissingVersionError(LineError):
    """`STARTFONT` is missing the format version."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__("Missing version from STARTFONT", line_number, line)


class MissingBoundingBoxError(LineError):
    """A bitmap was declared before any bounding box."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__("Missing bounding box", line_number, line)


class InvalidCodepointError(LineError):
    """An `ENCODING` value has no Unicode scalar mapping."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__("Invalid codepoint", line_number, line)


class MissingValueError(BdfError):
    """A record is missing its value or has the wrong number of fields."""

    def __init__(self, property_name: str, line_number: int) -> None:
        self.property_name = property_name
        self.line_number = line_number
        super().__init__(
            f"Missing value for property `{property_name}` on line {line_number}"
        )


class EndOfInputError(BdfError):
    """The stream ended at a record boundary."""

    def __init__(self, line_number: int) -> None:
        self.line_number = line_number
        super().__init__(f"End of input reached after line {line_number}")


class UnexpectedEndError(BdfError):
    """The stream ended while a structure was still open."""

    def __init__(self, line_number: int, expected: str) -> None:
        self.line_number = line_number
        self.expected = expected
        super().__init__(
            f"Unexpected end of input after line {line_number}: expected {expected}"
        )


class MalformedError(BdfError):
    """Errors in the nesting or content of a font structure."""

    pass


class MalformedFontError(MalformedError):
    """The font declaration is malformed."""

    def __init__(self, reason: str = "Malformed font definition") -> None:
        self.reason = reason
        super().__init__(reason)


class MalformedPropertiesError(MalformedError):
    """The property declarations are malformed."""

    def __init__(self, reason: str = "Malformed properties definition") -> None:
        self.reason = reason
        super().__init__(reason)


class MalformedCharError(MalformedError):
    """A character declaration is malformed."""

    def __init__(self, reason: str = "Malformed character definition") -> None:
        self.reason = reason
        super().__init__(reason)
