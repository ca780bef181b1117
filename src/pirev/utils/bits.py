from __future__ import annotations


def mask(width: int) -> int:
    return (1 << width) - 1


def extract_bits(value: int, offset: int, width: int) -> int:
    return (value >> offset) & mask(width)
