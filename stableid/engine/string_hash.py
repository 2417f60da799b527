"""
string_hash.py — 32-bit rolling string hash over UTF-16 code units.

h = 31*h + c, seeded at 0, wrapping like a signed 32-bit integer. Python
strings hold code points, so characters outside the BMP are split into their
surrogate pair before hashing.
"""

from typing import Iterator

_MASK = 0xFFFFFFFF
_SIGN = 0x80000000


def code_units(s: str) -> Iterator[int]:
    """Yield the UTF-16 code units of s. Lone surrogates are yielded as-is."""
    for ch in s:
        cp = ord(ch)
        if cp > 0xFFFF:
            cp -= 0x10000
            yield 0xD800 | (cp >> 10)
            yield 0xDC00 | (cp & 0x3FF)
        else:
            yield cp


def utf16_length(s: str) -> int:
    return sum(2 if ord(ch) > 0xFFFF else 1 for ch in s)


def string_hash(s: str) -> int:
    """Return the signed 32-bit hash of s. The empty string hashes to 0."""
    h = 0
    for unit in code_units(s):
        h = (31 * h + unit) & _MASK
    return h - (1 << 32) if h & _SIGN else h


def to_hex8(value: int) -> str:
    """Two's-complement 32-bit rendering, zero-padded to 8 lowercase hex digits."""
    return f"{value & _MASK:08x}"
