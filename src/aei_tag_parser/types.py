"""Core data model: side indicator enum and bit-field layout entries."""

from dataclasses import dataclass
from enum import Enum


class Side(str, Enum):
    """Side of the car the tag is mounted on."""

    LEFT = "Left"
    RIGHT = "Right"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FieldDef:
    """One field of the tag layout: where its bits come from and how wide it is."""

    name: str
    width: int
    source: str

    def __post_init__(self) -> None:
        if not 1 <= self.width <= 32:
            raise ValueError(f"width must be in 1..32, got {self.width}")
