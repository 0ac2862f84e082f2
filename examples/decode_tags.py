#!/usr/bin/env python3
"""Example: decode a few tags, spot repeated reads of the same wagon, build a tag from scratch."""

import sys

from aei_tag_parser import AEITagData, TagDecodeError, decode_many, encode_equipment_initial


def main() -> None:
    reads = [
        "2F3E06C007DB1E139000000000000331",
        "9EA488C030426A179000000000000331",
        "9EA488C5320CC01B9000000000000331",
        "2F3E06C007D91E139000000000000331",  # QNSL 502, other side
        "00F",
    ]

    seen: list[AEITagData] = []
    for result in decode_many(reads):
        if not result.ok:
            print(f"{result.tag}: {result.error}", file=sys.stderr)
            continue
        tag = result.data
        if any(tag.is_same_wagon(other) for other in seen):
            print(f"{tag.equipment_initial} {tag.car_number}: already seen ({tag.side_indicator} side)")
            continue
        seen.append(tag)
        print(tag.to_short_string(detailed=True))

    # Owner mark code for a given reporting mark
    print(f"IOCC -> {encode_equipment_initial('IOCC')}")

    try:
        AEITagData.from_hex("9EA488C5320CC01B900000000000033T")
    except TagDecodeError as e:
        print(f"Rejected: {e} (cause: {type(e.cause).__name__})")


if __name__ == "__main__":
    main()
