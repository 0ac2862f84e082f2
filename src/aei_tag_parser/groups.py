"""Equipment group code to category name lookup (5-bit code, 32 entries)."""

RESERVED = "Reserved"

EQUIPMENT_GROUPS: tuple[str, ...] = (
    "Other",  # 0
    "Railcar cover",
    RESERVED,
    RESERVED,
    "Train number tag (locomotive variable data)",
    "Locomotive",  # 5
    "End-of-train device",
    RESERVED,
    "Generator set",
    RESERVED,
    "Intermodal container",  # 10
    RESERVED,
    "Marker tags",
    RESERVED,
    "Reserved (formerly nonrevenue rail)",
    RESERVED,  # 15
    RESERVED,
    "Tractor (power)",
    "Straight truck",
    "Railcar",
    "Dolly",  # 20
    "Trailer",
    RESERVED,
    RESERVED,
    "Rail-compatible multimodal equipment",
    RESERVED,  # 25
    RESERVED,
    "Chassis",
    "Passive alarm tag",
    RESERVED,
    RESERVED,  # 30
    "Experimental use/other",
)


def equipment_group_name(code: int) -> str:
    """Return the category name for a group code; anything outside 0-31 is "Reserved"."""
    if 0 <= code < len(EQUIPMENT_GROUPS):
        return EQUIPMENT_GROUPS[code]
    return RESERVED
