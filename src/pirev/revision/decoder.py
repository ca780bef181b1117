from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from pirev.revision.errors import UnparsableCode
from pirev.revision.interpret import RevisionFields
from pirev.revision.legacy import normalize
from pirev.utils.bits import mask
from pirev.utils.logger import get_logger

log = get_logger(__name__)

MAX_CODE = mask(32)

_HEX_RE = re.compile(r"(?:0[xX])?([0-9a-fA-F]+)")


@dataclass(frozen=True)
class DecodedResult:
    raw_code: int
    code: int  # normalized, current format
    new_style: bool
    type: str
    revision: str
    memory: str
    manufacturer: str
    # only present for new-style codes
    overvoltage_allowed: Optional[bool] = None
    otp_programming_allowed: Optional[bool] = None
    otp_reading_allowed: Optional[bool] = None
    warranty_intact: Optional[bool] = None
    processor: Optional[str] = None
    # display strings for the flags above
    overvoltage: Optional[str] = None
    otp_programming: Optional[str] = None
    otp_reading: Optional[str] = None
    warranty: Optional[str] = None

    @property
    def style(self) -> str:
        return "new" if self.new_style else "old"


def parse_code(text: str) -> int:
    """Parse a hex revision code, with or without a 0x/0X prefix."""
    s = text.strip()
    m = _HEX_RE.fullmatch(s)
    if m is None:
        raise UnparsableCode(text)
    value = int(m.group(1), 16)
    if value > MAX_CODE:
        raise UnparsableCode(text, reason="larger than 32 bits")
    return value


def decode(raw_code: int) -> DecodedResult:
    if not 0 <= raw_code <= MAX_CODE:
        raise UnparsableCode(hex(raw_code), reason="not an unsigned 32-bit value")

    code = normalize(raw_code)
    f = RevisionFields(code)
    log.debug(
        "0x%08X: type=%d rev=%d proc=%d mem=%d mfr=%d",
        code, f.type_index, f.revision_index, f.processor_index, f.memory_index, f.manufacturer_index,
    )

    common = dict(
        raw_code=raw_code,
        code=code,
        new_style=f.is_new_style,
        type=f.type_str(),
        revision=f.revision_str(),
        memory=f.memory_str(),
        manufacturer=f.manufacturer_str(),
    )
    if not f.is_new_style:
        # legacy hardware has no such bits; leave them unset
        return DecodedResult(**common)

    return DecodedResult(
        **common,
        overvoltage_allowed=f.overvoltage_allowed,
        otp_programming_allowed=f.otp_programming_allowed,
        otp_reading_allowed=f.otp_reading_allowed,
        warranty_intact=f.warranty_intact,
        processor=f.processor_str(),
        overvoltage=f.overvoltage_str(),
        otp_programming=f.otp_programming_str(),
        otp_reading=f.otp_reading_str(),
        warranty=f.warranty_str(),
    )


def decode_str(text: str) -> DecodedResult:
    return decode(parse_code(text))
