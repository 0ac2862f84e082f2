"""Raw loader: validate a 32-digit hex string and turn it into the 16-byte tag buffer."""

import string

from .errors import InvalidCharacterError, InvalidLengthError, OddLengthError

TAG_SIZE = 16

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_raw(tag: str) -> bytes:
    """
    Decode a hex tag string (case-insensitive) into exactly 16 bytes.

    Checks run in a fixed order: odd digit count, then byte count, then
    characters. Raises OddLengthError, InvalidLengthError or
    InvalidCharacterError; never anything else.
    """
    if len(tag) % 2 != 0:
        raise OddLengthError(len(tag))

    if len(tag) // 2 != TAG_SIZE:
        raise InvalidLengthError(len(tag) // 2, TAG_SIZE)

    for index, char in enumerate(tag):
        if char not in _HEX_DIGITS:
            raise InvalidCharacterError(char, index)

    return bytes.fromhex(tag)


def check_raw(raw: bytes) -> bytes:
    """Return raw as immutable bytes; raise InvalidLengthError unless it is 16 bytes long."""
    if len(raw) != TAG_SIZE:
        raise InvalidLengthError(len(raw), TAG_SIZE)
    return bytes(raw)
