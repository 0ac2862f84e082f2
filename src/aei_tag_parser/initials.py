"""
Equipment initial (owner mark) base-27 codec.

The 19-bit code holds four base-27 digits, most significant first. The first
digit is a letter (A=0 .. Z=25); the other three are blank (0) or a letter
(A=1 .. Z=26).
"""

import string

_LETTERS = string.ascii_uppercase
_BLANK = " "

MAX_INITIAL_CODE = (1 << 19) - 1


def decode_equipment_initial(code: int) -> str:
    """
    Decode an equipment initial code into its 4-character mark (e.g. 325659 -> "QNSL").

    A first digit of 26 only occurs for codes above 511757, which no valid mark
    produces; it is rendered as "Z" so the mark always starts with a letter.
    """
    n1, rest = divmod(code, 27**3)
    n2, rest = divmod(rest, 27**2)
    n3, n4 = divmod(rest, 27)

    first = _LETTERS[min(n1, len(_LETTERS) - 1)]
    others = [_BLANK if n == 0 else _LETTERS[n - 1] for n in (n2, n3, n4)]
    return first + "".join(others)


def encode_equipment_initial(mark: str) -> int:
    """Encode a 1-4 character mark (e.g. "IOCC") into its 19-bit equipment initial code."""
    s = mark.upper().ljust(4, _BLANK)
    if len(s) != 4:
        raise ValueError(f"Equipment initial must be 1-4 characters, got {mark!r}")
    if s[0] not in _LETTERS:
        raise ValueError(f"Equipment initial must start with a letter, got {mark!r}")

    code = _LETTERS.index(s[0])
    for c in s[1:]:
        if c == _BLANK:
            digit = 0
        elif c in _LETTERS:
            digit = _LETTERS.index(c) + 1
        else:
            raise ValueError(f"Invalid character {c!r} in equipment initial {mark!r}")
        code = code * 27 + digit
    return code
