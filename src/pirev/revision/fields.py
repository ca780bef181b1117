from __future__ import annotations

from pirev.revision.model import BitField
from pirev.utils.bits import extract_bits

# Current-format layout, most significant first.
OVERVOLTAGE = BitField(name="overvoltage", bit_offset=31, bit_width=1)
OTP_PROGRAM = BitField(name="otp_program", bit_offset=30, bit_width=1)
OTP_READ = BitField(name="otp_read", bit_offset=29, bit_width=1)
WARRANTY = BitField(name="warranty", bit_offset=25, bit_width=1)
NEW_STYLE = BitField(name="new_style", bit_offset=23, bit_width=1)
MEMORY = BitField(name="memory", bit_offset=20, bit_width=3)
MANUFACTURER = BitField(name="manufacturer", bit_offset=16, bit_width=4)
PROCESSOR = BitField(name="processor", bit_offset=12, bit_width=4)
TYPE = BitField(name="type", bit_offset=4, bit_width=8)
REVISION = BitField(name="revision", bit_offset=0, bit_width=4)

ALL_FIELDS: tuple[BitField, ...] = (
    OVERVOLTAGE,
    OTP_PROGRAM,
    OTP_READ,
    WARRANTY,
    NEW_STYLE,
    MEMORY,
    MANUFACTURER,
    PROCESSOR,
    TYPE,
    REVISION,
)


def extract(code: int, field: BitField) -> int:
    return extract_bits(code, field.bit_offset, field.bit_width)


def flag_clear(code: int, field: BitField) -> bool:
    # permission bits: 0 means allowed/intact, 1 means disallowed/voided
    return extract(code, field) == 0


def is_new_style(code: int) -> bool:
    return extract(code, NEW_STYLE) == 1


def pack(**values: int) -> int:
    """Build a code from field values keyed by field name (inverse of extract)."""
    by_name = {f.name: f for f in ALL_FIELDS}
    code = 0
    for name, value in values.items():
        f = by_name.get(name)
        if f is None:
            raise KeyError(f"unknown field: {name}")
        if value < 0 or value >> f.bit_width:
            raise ValueError(f"value {value} does not fit {f.bit_width}-bit field {name}")
        code |= value << f.bit_offset
    return code
