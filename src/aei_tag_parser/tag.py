"""AEITagData: immutable decoded view of a 128-bit railway AEI tag."""

import logging
from dataclasses import dataclass
from typing import Any

from .errors import HexParsingError, TagDecodeError
from .fields import extract_fields
from .groups import equipment_group_name
from .initials import decode_equipment_initial
from .rawtag import check_raw, parse_raw
from .types import Side

logger = logging.getLogger(__name__)

DM_TO_FT = 0.328084


def decimeters_to_feet(length_dm: int) -> int:
    """Convert a length in decimeters to whole feet (rounded to nearest)."""
    return round(length_dm * DM_TO_FT)


@dataclass(frozen=True)
class AEITagData:
    """
    Decoded AEI tag. Built once by from_hex/from_bytes and never mutated.

    Text mark, group name and length in feet are recomputed from the stored
    codes on each access.
    """

    raw: bytes
    equipment_group_code: int
    tag_type_code: int
    equipment_initial_code: int
    car_number: int
    side_indicator: Side
    length_dm: int
    number_axles: int

    @classmethod
    def from_hex(cls, tag: str) -> "AEITagData":
        """
        Decode a 32-digit hex tag string.

        Raises TagDecodeError wrapping OddLengthError, InvalidCharacterError or
        InvalidLengthError.
        """
        try:
            raw = parse_raw(tag)
        except HexParsingError as e:
            logger.debug("Cannot decode tag %r: %s", tag, e)
            raise TagDecodeError(tag, e) from e
        return cls.from_bytes(raw)

    @classmethod
    def from_bytes(cls, raw: bytes) -> "AEITagData":
        """Decode a 16-byte tag buffer; raises InvalidLengthError for any other size."""
        raw = check_raw(raw)
        return cls(raw=raw, **extract_fields(raw))

    @property
    def equipment_initial(self) -> str:
        return decode_equipment_initial(self.equipment_initial_code)

    @property
    def equipment_group(self) -> str:
        return equipment_group_name(self.equipment_group_code)

    @property
    def length_ft(self) -> int:
        return decimeters_to_feet(self.length_dm)

    @property
    def raw_hex(self) -> str:
        return self.raw.hex().upper()

    def is_same_wagon(self, other: "AEITagData") -> bool:
        """True if both tags identify the same car; the side is ignored."""
        return is_same_wagon(self, other)

    def to_short_string(self, detailed: bool = False) -> str:
        """Tab-separated description; detailed adds raw hex, equipment type and side."""
        if not detailed:
            return f"Initials : {self.equipment_initial}\tCar number : {self.car_number}"
        return (
            f"Raw : {self.raw_hex}\tInitials : {self.equipment_initial}\tCar number : {self.car_number}"
            f"\tEquipment type : {self.equipment_group}({self.equipment_group_code})"
            f"\tSide : {self.side_indicator}"
        )

    def to_row(self) -> list[str]:
        """Raw hex, initials, car number, equipment type, group code, side."""
        return [
            self.raw_hex,
            self.equipment_initial,
            str(self.car_number),
            self.equipment_group,
            str(self.equipment_group_code),
            str(self.side_indicator),
        ]

    def to_csv(self, delimiter: str = ";") -> str:
        return delimiter.join(self.to_row())

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe dict of stored and derived values."""
        return {
            "raw": self.raw_hex,
            "equipment_group_code": self.equipment_group_code,
            "equipment_group": self.equipment_group,
            "tag_type_code": self.tag_type_code,
            "equipment_initial_code": self.equipment_initial_code,
            "equipment_initial": self.equipment_initial,
            "car_number": self.car_number,
            "side_indicator": self.side_indicator.value,
            "length_dm": self.length_dm,
            "length_ft": self.length_ft,
            "number_axles": self.number_axles,
        }


def is_same_wagon(a: AEITagData, b: AEITagData) -> bool:
    """Two reads belong to the same wagon when group, initial code and car number match."""
    return (
        a.equipment_group_code == b.equipment_group_code
        and a.equipment_initial_code == b.equipment_initial_code
        and a.car_number == b.car_number
    )
