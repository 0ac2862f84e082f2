"""
Bit-field extraction from the 16-byte AEI tag buffer.

Bytes are numbered from 0 and bits within a byte are MSB first, as on the
wire. Several fields are not byte-aligned: the initial code straddles bytes
0-3, and the length gathers bits from bytes 5, 11 and 12 in front of byte 6.
Every function here is total over a 16-byte buffer.
"""

from .types import FieldDef, Side

FIELD_LAYOUT: tuple[FieldDef, ...] = (
    FieldDef("equipment_group_code", 5, "byte 0 bits 7-3"),
    FieldDef("tag_type_code", 2, "byte 0 bits 2-1"),
    FieldDef("equipment_initial_code", 19, "byte 0 bit 0, bytes 1-2, byte 3 bits 7-6"),
    FieldDef("car_number", 20, "byte 3 bits 5-0, byte 4, byte 5 bits 7-2"),
    FieldDef("side_indicator", 1, "byte 5 bit 1"),
    FieldDef("length_dm", 12, "byte 11 bits 1-0, byte 12 bit 7, byte 5 bit 0, byte 6"),
    FieldDef("number_axles", 5, "byte 7 bits 7-4, byte 8 bit 7 (+1)"),
)


def parse_equipment_group_code(raw: bytes) -> int:
    """Equipment group code, 0-31."""
    return (raw[0] & 0xF8) >> 3


def parse_tag_type(raw: bytes) -> int:
    return (raw[0] & 0x06) >> 1


def parse_equipment_initial_code(raw: bytes) -> int:
    """19-bit base-27 owner mark code, 0-524287."""
    value = int.from_bytes(bytes((raw[0] & 0x01, raw[1], raw[2], raw[3] & 0xC0)), "big")
    return value >> 6


def parse_car_number(raw: bytes) -> int:
    """
    20-bit car number.

    The documented range stops at 999999 but nothing above that is rejected;
    values up to 1048575 decode as-is.
    """
    value = int.from_bytes(raw[3:6], "big")
    return (value >> 2) & 0x0F_FF_FF


def parse_side(raw: bytes) -> Side:
    if raw[5] & 0b0000_0010 == 0:
        return Side.LEFT
    return Side.RIGHT


def parse_length_dm(raw: bytes) -> int:
    """Car length in decimeters, 0-4095."""
    high = ((raw[11] & 0x03) << 2) | ((raw[12] & 0x80) >> 6) | (raw[5] & 0x01)
    return (high << 8) | raw[6]


def parse_number_axles(raw: bytes) -> int:
    """Axle count: 5 raw bits offset by one, 1-32."""
    return (((raw[7] >> 3) & 0x1E) | (raw[8] >> 7)) + 1


def extract_fields(raw: bytes) -> dict[str, int | Side]:
    """Extract every layout field from raw, keyed by FieldDef.name."""
    return {
        "equipment_group_code": parse_equipment_group_code(raw),
        "tag_type_code": parse_tag_type(raw),
        "equipment_initial_code": parse_equipment_initial_code(raw),
        "car_number": parse_car_number(raw),
        "side_indicator": parse_side(raw),
        "length_dm": parse_length_dm(raw),
        "number_axles": parse_number_axles(raw),
    }
