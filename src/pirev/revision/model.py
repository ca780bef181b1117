from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

UNKNOWN = "???"


@dataclass(frozen=True)
class BitField:
    name: str
    bit_offset: int
    bit_width: int


@dataclass(frozen=True)
class LookupTable:
    """
    Ordered display strings indexed by a small integer taken from a revision code.

    A table may reserve one index past its last entry (``reserved_index``) that
    resolves to ``reserved_label`` instead of the generic unknown marker.
    """
    name: str
    entries: tuple[str, ...]
    reserved_index: Optional[int] = None
    reserved_label: Optional[str] = None

    def __len__(self) -> int:
        return len(self.entries)

    def resolve(self, index: int) -> str:
        if 0 <= index < len(self.entries):
            return self.entries[index]
        if self.reserved_label is not None and index == self.reserved_index:
            return self.reserved_label
        return UNKNOWN


@dataclass(frozen=True)
class LegacyEntry:
    legacy: int
    code: int  # equivalent current-format code
    note: str = ""
