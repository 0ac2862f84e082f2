"""aei-tag-parser: decode 128-bit railway AEI RFID tags into wagon identity and dimensions."""

__version__ = "1.0.0"

from .batch import DecodeResult, decode_many
from .errors import (
    AEITagError,
    HexParsingError,
    InvalidCharacterError,
    InvalidLengthError,
    OddLengthError,
    TagDecodeError,
)
from .groups import EQUIPMENT_GROUPS, equipment_group_name
from .initials import decode_equipment_initial, encode_equipment_initial
from .rawtag import parse_raw
from .tag import AEITagData, decimeters_to_feet, is_same_wagon
from .types import FieldDef, Side

__all__ = [
    "__version__",
    "AEITagData",
    "AEITagError",
    "DecodeResult",
    "EQUIPMENT_GROUPS",
    "FieldDef",
    "HexParsingError",
    "InvalidCharacterError",
    "InvalidLengthError",
    "OddLengthError",
    "Side",
    "TagDecodeError",
    "decimeters_to_feet",
    "decode_equipment_initial",
    "decode_many",
    "encode_equipment_initial",
    "equipment_group_name",
    "is_same_wagon",
    "parse_raw",
]
