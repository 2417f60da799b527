from .digest import sha1_hex
from .string_hash import code_units, string_hash, to_hex8, utf16_length

__all__ = [
    "code_units",
    "sha1_hex",
    "string_hash",
    "to_hex8",
    "utf16_length",
]
