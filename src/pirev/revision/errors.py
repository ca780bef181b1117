from __future__ import annotations


class RevisionError(ValueError):
    """Base class for input that cannot be decoded."""


class UnparsableCode(RevisionError):
    def __init__(self, text: str, reason: str = "not a hexadecimal revision code") -> None:
        super().__init__(f'Could not parse revision code "{text}": {reason}')
        self.text = text


class UnknownLegacyCode(RevisionError):
    def __init__(self, code: int) -> None:
        super().__init__(f"Invalid old style revision code 0x{code:X}")
        self.code = code


class CpuinfoError(Exception):
    """The host cpuinfo file is unreadable or carries no revision."""
