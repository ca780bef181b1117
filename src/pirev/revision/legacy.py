from __future__ import annotations

from typing import Optional

from pirev.revision.errors import UnknownLegacyCode
from pirev.revision.fields import is_new_style, pack
from pirev.revision.model import LegacyEntry
from pirev.revision.tables import RESERVED_INDEX
from pirev.utils.logger import get_logger

log = get_logger(__name__)

# type indices
MODEL_A = 0x0
MODEL_B = 0x1
MODEL_APLUS = 0x2
MODEL_BPLUS = 0x3
MODEL_CM1 = 0x6

# revision indices
REV_1_0 = 0x0
REV_1_1 = 0x1
REV_1_2 = 0x2
REV_2_0 = RESERVED_INDEX

# memory indices
MEM_256M = 0x0
MEM_512M = 0x1

# manufacturer indices
SONY_UK = 0x0
EGOMAN = 0x1
EMBEST = 0x2
QISDA = RESERVED_INDEX


def _entry(legacy: int, model: int, rev: int, mem: int, maker: int, note: str = "") -> LegacyEntry:
    code = pack(type=model, revision=rev, memory=mem, manufacturer=maker)
    return LegacyEntry(legacy=legacy, code=code, note=note)


# Position is the legacy code; None marks codes that were never issued.
# Revisions follow the published board list (B+ 1.2, A+ 1.1); older tools
# that collapse every 1.x revision to 1.0 disagree on 0x10, 0x12, 0x13 and 0x15.
LEGACY_TABLE: tuple[Optional[LegacyEntry], ...] = (
    None,                                                 # 0x00
    None,                                                 # 0x01
    _entry(0x02, MODEL_B, REV_1_0, MEM_256M, EGOMAN),
    _entry(0x03, MODEL_B, REV_1_0, MEM_256M, EGOMAN),
    _entry(0x04, MODEL_B, REV_2_0, MEM_256M, SONY_UK),
    _entry(0x05, MODEL_B, REV_2_0, MEM_256M, QISDA),
    _entry(0x06, MODEL_B, REV_2_0, MEM_256M, EGOMAN),
    _entry(0x07, MODEL_A, REV_2_0, MEM_256M, EGOMAN),
    _entry(0x08, MODEL_A, REV_2_0, MEM_256M, SONY_UK),
    _entry(0x09, MODEL_A, REV_2_0, MEM_256M, QISDA),
    None,                                                 # 0x0A
    None,                                                 # 0x0B
    None,                                                 # 0x0C
    _entry(0x0D, MODEL_B, REV_2_0, MEM_512M, EGOMAN),
    _entry(0x0E, MODEL_B, REV_2_0, MEM_512M, SONY_UK),
    _entry(0x0F, MODEL_B, REV_2_0, MEM_512M, EGOMAN),
    _entry(0x10, MODEL_BPLUS, REV_1_2, MEM_512M, SONY_UK),
    _entry(0x11, MODEL_CM1, REV_1_0, MEM_512M, SONY_UK),
    _entry(0x12, MODEL_APLUS, REV_1_1, MEM_256M, SONY_UK),
    _entry(0x13, MODEL_BPLUS, REV_1_2, MEM_512M, EMBEST),
    _entry(0x14, MODEL_CM1, REV_1_0, MEM_512M, EMBEST),
    _entry(
        0x15, MODEL_APLUS, REV_1_1, MEM_256M, EMBEST,
        note="shipped with 256MB or 512MB under the same code, reporting 256MB",
    ),
)


def lookup(code: int) -> Optional[LegacyEntry]:
    if 0 <= code < len(LEGACY_TABLE):
        return LEGACY_TABLE[code]
    return None


def normalize(code: int) -> int:
    """
    Map a revision code onto the current (bit-packed) format.

    Current-format codes pass through untouched. Legacy codes are looked up in
    the historical table; a code that was never issued raises UnknownLegacyCode.
    """
    if is_new_style(code):
        return code

    entry = lookup(code)
    if entry is None:
        raise UnknownLegacyCode(code)

    if entry.note:
        log.warning("Legacy code 0x%04X: %s", code, entry.note)
    log.debug("Legacy code 0x%04X -> 0x%08X", code, entry.code)
    return entry.code


def valid_legacy_codes() -> list[int]:
    return [e.legacy for e in LEGACY_TABLE if e is not None]
