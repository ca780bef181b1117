from __future__ import annotations

from pirev.revision.model import LookupTable

# Index 15 of the manufacturer and revision fields is never assigned in
# current-format codes; legacy codes use it for Qisda boards and for PCB 2.0.
RESERVED_INDEX = 0xF

TYPE_TABLE = LookupTable(
    name="type",
    entries=(
        "A",                  # 0x00
        "B",                  # 0x01
        "A+",                 # 0x02
        "B+",                 # 0x03
        "2B",                 # 0x04
        "Alpha",              # 0x05
        "CM1",                # 0x06
        "0x07",               # 0x07
        "3B",                 # 0x08
        "Zero",               # 0x09
        "CM3",                # 0x0A
        "0x0B",               # 0x0B
        "Zero W",             # 0x0C
        "3B+",                # 0x0D
        "3A+",                # 0x0E
        "Internal use only",  # 0x0F
        "CM3+",               # 0x10
        "4B",                 # 0x11
        "Zero 2 W",           # 0x12
        "400",                # 0x13
        "CM4",                # 0x14
        "CM4S",               # 0x15
        # 8-bit field, remaining indices unassigned
    ),
)

PROCESSOR_TABLE = LookupTable(
    name="processor",
    entries=(
        "BCM2835",
        "BCM2836",
        "BCM2837",
        "BCM2711",
    ),
)

MANUFACTURER_TABLE = LookupTable(
    name="manufacturer",
    entries=(
        "Sony UK",
        "Egoman",
        "Embest",
        "Sony Japan",
        "Embest",
        "Stadium",
    ),
    reserved_index=RESERVED_INDEX,
    reserved_label="Qisda",
)

REVISION_TABLE = LookupTable(
    name="revision",
    entries=("1.0", "1.1", "1.2", "1.3", "1.4", "1.5"),
    reserved_index=RESERVED_INDEX,
    reserved_label="2.0",
)

# Megabytes rather than bytes so 8GB stays a small number.
MEMORY_MBYTES: tuple[int, ...] = (
    256,
    512,
    1 * 1024,
    2 * 1024,
    4 * 1024,
    8 * 1024,
    # 6 and 7 unassigned
)
