"""Tests for the base-27 equipment initial codec."""

import pytest

from aei_tag_parser import decode_equipment_initial, encode_equipment_initial
from aei_tag_parser.initials import MAX_INITIAL_CODE


@pytest.mark.parametrize(
    ("code", "mark"),
    [
        (325659, "QNSL"),
        (168483, "IOCC"),
        (0, "A   "),
        (25 * 27**3, "Z   "),
        (2 * 27**3 + 14 * 27**2, "CN  "),
        (27**3 - 1, "AZZZ"),
    ],
)
def test_decode(code: int, mark: str) -> None:
    assert decode_equipment_initial(code) == mark


@pytest.mark.parametrize(
    ("mark", "code"),
    [
        ("QNSL", 325659),
        ("IOCC", 168483),
        ("iocc", 168483),
        ("A", 0),
        ("CN", 2 * 27**3 + 14 * 27**2),
    ],
)
def test_encode(mark: str, code: int) -> None:
    assert encode_equipment_initial(mark) == code


def test_blank_only_after_first_character() -> None:
    mark = decode_equipment_initial(27**3)
    assert mark == "B   "
    assert mark[0] != " "


def test_first_digit_beyond_z_still_a_letter() -> None:
    mark = decode_equipment_initial(MAX_INITIAL_CODE)
    assert len(mark) == 4
    assert mark[0] == "Z"


@pytest.mark.parametrize("malformed", ["", "1ABC", " ABC", "ABCDE", "AB-C"])
def test_encode_invalid_raises(malformed: str) -> None:
    with pytest.raises(ValueError):
        encode_equipment_initial(malformed)
