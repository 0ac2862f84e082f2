"""Exceptions for aei-tag-parser: malformed hex input and tag decode failures."""


class AEITagError(Exception):
    """Base exception for aei-tag-parser."""

    pass


class HexParsingError(AEITagError):
    """Raised when a tag string cannot be turned into the 16-byte tag buffer."""

    pass


class OddLengthError(HexParsingError):
    """Raised when the hex string has an odd number of digits."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__("Odd number of digits")


class InvalidCharacterError(HexParsingError):
    """Raised when a character outside [0-9a-fA-F] is found."""

    def __init__(self, char: str, index: int) -> None:
        self.char = char
        self.index = index
        super().__init__(f"Invalid character {char!r} at position {index}")


class InvalidLengthError(HexParsingError):
    """Raised when the input decodes to a byte count other than 16."""

    def __init__(self, actual: int, expected: int = 16) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"Invalid string length: got {actual} bytes, expected {expected}")


class TagDecodeError(AEITagError):
    """
    Raised when a tag could not be decoded.

    Wraps the specific HexParsingError as ``cause`` (also chained as __cause__)
    so callers can handle every malformed tag the same way.
    """

    def __init__(self, tag: str, cause: HexParsingError) -> None:
        self.tag = tag
        self.cause = cause
        super().__init__(f"the provided string couldn't be parsed as an hexadecimal number: {cause}")
