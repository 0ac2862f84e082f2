"""Tests pinning every layout field to its exact byte and bit positions."""

import pytest

from aei_tag_parser import Side
from aei_tag_parser.fields import (
    FIELD_LAYOUT,
    extract_fields,
    parse_car_number,
    parse_equipment_group_code,
    parse_equipment_initial_code,
    parse_length_dm,
    parse_number_axles,
    parse_side,
    parse_tag_type,
)

from tags import TAG1, TAG2, TAG3, make_raw


def test_zero_buffer() -> None:
    fields = extract_fields(bytes(16))
    assert fields == {
        "equipment_group_code": 0,
        "tag_type_code": 0,
        "equipment_initial_code": 0,
        "car_number": 0,
        "side_indicator": Side.LEFT,
        "length_dm": 0,
        "number_axles": 1,
    }


def test_layout_names_match_extracted_fields() -> None:
    assert [f.name for f in FIELD_LAYOUT] == list(extract_fields(bytes(16)))


def test_group_code_high_five_bits_of_byte0() -> None:
    assert parse_equipment_group_code(make_raw(b0=0xF8)) == 31
    assert parse_equipment_group_code(make_raw(b0=0x08)) == 1
    assert parse_equipment_group_code(make_raw(b0=0x07)) == 0


def test_tag_type_bits_2_1_of_byte0() -> None:
    assert parse_tag_type(make_raw(b0=0x06)) == 3
    assert parse_tag_type(make_raw(b0=0x02)) == 1
    assert parse_tag_type(make_raw(b0=0xF9)) == 0


def test_initial_code_spans_bytes_0_to_3() -> None:
    assert parse_equipment_initial_code(make_raw(b0=0x01)) == 1 << 18
    assert parse_equipment_initial_code(make_raw(b1=0xFF)) == 0xFF << 10
    assert parse_equipment_initial_code(make_raw(b2=0x01)) == 1 << 2
    assert parse_equipment_initial_code(make_raw(b3=0x40)) == 1
    assert parse_equipment_initial_code(make_raw(b3=0x3F)) == 0
    assert parse_equipment_initial_code(make_raw(b0=0x01, b1=0xFF, b2=0xFF, b3=0xC0)) == 524287


def test_car_number_spans_bytes_3_to_5() -> None:
    assert parse_car_number(make_raw(b3=0x3F, b4=0xFF, b5=0xFC)) == 1048575
    assert parse_car_number(make_raw(b5=0x04)) == 1
    assert parse_car_number(make_raw(b3=0xC0, b5=0x03)) == 0


def test_car_number_above_documented_maximum_is_kept() -> None:
    # 1000000 = 0xF4240, shifted into bits 26-45
    value = 1_000_000 << 2
    raw = make_raw(b3=(value >> 16) & 0xFF, b4=(value >> 8) & 0xFF, b5=value & 0xFF)
    assert parse_car_number(raw) == 1_000_000


def test_side_bit1_of_byte5() -> None:
    assert parse_side(make_raw(b5=0x02)) is Side.RIGHT
    assert parse_side(make_raw(b5=0xFD)) is Side.LEFT


def test_length_gathers_bytes_11_12_5_and_6() -> None:
    assert parse_length_dm(make_raw(b6=0xFF)) == 255
    assert parse_length_dm(make_raw(b5=0x01)) == 256
    assert parse_length_dm(make_raw(b12=0x80)) == 512
    assert parse_length_dm(make_raw(b11=0x03)) == 3072
    assert parse_length_dm(make_raw(b5=0x01, b6=0xFF, b11=0x03, b12=0x80)) == 4095
    assert parse_length_dm(make_raw(b11=0xFC, b12=0x7F, b5=0xFE)) == 0


def test_axles_from_bytes_7_and_8_plus_one() -> None:
    assert parse_number_axles(make_raw(b7=0xF0)) == 31
    assert parse_number_axles(make_raw(b8=0x80)) == 2
    assert parse_number_axles(make_raw(b7=0xF0, b8=0x80)) == 32
    assert parse_number_axles(make_raw(b7=0x0F, b8=0x7F)) == 1


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        (TAG1, (5, 3, 325659, 502, Side.RIGHT, 286, 4)),
        (TAG2, (19, 3, 168483, 3088, Side.RIGHT, 106, 4)),
        (TAG3, (19, 3, 168483, 85123, Side.LEFT, 192, 4)),
    ],
)
def test_known_tags(tag: str, expected: tuple) -> None:
    assert tuple(extract_fields(bytes.fromhex(tag)).values()) == expected
