from __future__ import annotations

from dataclasses import dataclass

from pirev.revision import fields as F
from pirev.revision.tables import (
    MANUFACTURER_TABLE,
    MEMORY_MBYTES,
    PROCESSOR_TABLE,
    REVISION_TABLE,
    TYPE_TABLE,
)


def _allowed(v: bool) -> str:
    return "Allowed" if v else "Disallowed"


def format_memory(mbytes: int) -> str:
    """
    Render a memory size as "<n>GB" from 1GB upwards, otherwise "<n>MB".

    Fractional gigabytes are truncated (3.5GB reads "3GB"). No padding and no
    leading zeros. An unknown size (0) and anything that would need more than
    four GB digits render as an empty string.
    """
    if mbytes <= 0:
        return ""
    if mbytes >= 1024:
        gbytes = mbytes >> 10
        if gbytes > 9999:
            return ""
        return f"{gbytes}GB"
    return f"{mbytes}MB"


@dataclass(frozen=True)
class RevisionFields:
    """Field accessors over a current-format revision code."""
    code: int

    # ---- permission / status flags

    @property
    def overvoltage_allowed(self) -> bool:
        return F.flag_clear(self.code, F.OVERVOLTAGE)

    @property
    def otp_programming_allowed(self) -> bool:
        return F.flag_clear(self.code, F.OTP_PROGRAM)

    @property
    def otp_reading_allowed(self) -> bool:
        return F.flag_clear(self.code, F.OTP_READ)

    @property
    def warranty_intact(self) -> bool:
        return F.flag_clear(self.code, F.WARRANTY)

    @property
    def is_new_style(self) -> bool:
        return F.is_new_style(self.code)

    def overvoltage_str(self) -> str:
        return _allowed(self.overvoltage_allowed)

    def otp_programming_str(self) -> str:
        return _allowed(self.otp_programming_allowed)

    def otp_reading_str(self) -> str:
        return _allowed(self.otp_reading_allowed)

    def warranty_str(self) -> str:
        return "Intact" if self.warranty_intact else "Voided"

    # ---- categorical fields

    @property
    def type_index(self) -> int:
        return F.extract(self.code, F.TYPE)

    def type_str(self) -> str:
        return TYPE_TABLE.resolve(self.type_index)

    @property
    def processor_index(self) -> int:
        return F.extract(self.code, F.PROCESSOR)

    def processor_str(self) -> str:
        return PROCESSOR_TABLE.resolve(self.processor_index)

    @property
    def manufacturer_index(self) -> int:
        return F.extract(self.code, F.MANUFACTURER)

    def manufacturer_str(self) -> str:
        return MANUFACTURER_TABLE.resolve(self.manufacturer_index)

    @property
    def revision_index(self) -> int:
        return F.extract(self.code, F.REVISION)

    def revision_str(self) -> str:
        return REVISION_TABLE.resolve(self.revision_index)

    # ---- memory

    @property
    def memory_index(self) -> int:
        return F.extract(self.code, F.MEMORY)

    @property
    def memory_mbytes(self) -> int:
        idx = self.memory_index
        if idx >= len(MEMORY_MBYTES):
            return 0
        return MEMORY_MBYTES[idx]

    def memory_str(self) -> str:
        return format_memory(self.memory_mbytes)
