"""
identifier.py — Field records behind the dash-joined identifier strings.

    path-id := len "-" segments "-" name-hash8 "-" sha1-40
    uri-id  := len "-" scheme-hash8 "-" host-hash8 "-" path-hash8 "-" sha1-40
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from stableid.engine.string_hash import to_hex8
from stableid.errors import InvalidInputError

_HEX = r"[0-9a-f]+"
_HEX8 = r"[0-9a-f]{8}"
_HEX40 = r"[0-9a-f]{40}"

_PATH_ID = re.compile(rf"({_HEX})-({_HEX})-({_HEX8})-({_HEX40})")
_URI_ID = re.compile(rf"({_HEX})-({_HEX8})-({_HEX8})-({_HEX8})-({_HEX40})")


# ── Enums ────────────────────────────────────────────────────────────────────

class IdKind(StrEnum):
    PATH = "path"
    URI = "uri"


# ── Field records ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PathId:
    length: int
    segments: int
    name_hash: int
    digest: str

    kind = IdKind.PATH

    def __str__(self) -> str:
        return f"{self.length:x}-{self.segments:x}-{to_hex8(self.name_hash)}-{self.digest}"

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "length": self.length,
            "segments": self.segments,
            "name_hash": to_hex8(self.name_hash),
            "digest": self.digest,
        }


@dataclass(frozen=True)
class UriId:
    length: int
    scheme_hash: int
    host_hash: int
    path_hash: int
    digest: str

    kind = IdKind.URI

    def __str__(self) -> str:
        return "-".join(
            (
                f"{self.length:x}",
                to_hex8(self.scheme_hash),
                to_hex8(self.host_hash),
                to_hex8(self.path_hash),
                self.digest,
            )
        )

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "length": self.length,
            "scheme_hash": to_hex8(self.scheme_hash),
            "host_hash": to_hex8(self.host_hash),
            "path_hash": to_hex8(self.path_hash),
            "digest": self.digest,
        }


# ── Parsing ──────────────────────────────────────────────────────────────────

def _signed32(hex8: str) -> int:
    value = int(hex8, 16)
    return value - (1 << 32) if value & 0x80000000 else value


def parse_identifier(text: str) -> PathId | UriId:
    """Split an identifier string back into its fields.

    Raises InvalidInputError if text matches neither grammar.
    """
    m = _PATH_ID.fullmatch(text)
    if m:
        length, segments, name_hash, digest = m.groups()
        return PathId(
            length=int(length, 16),
            segments=int(segments, 16),
            name_hash=_signed32(name_hash),
            digest=digest,
        )

    m = _URI_ID.fullmatch(text)
    if m:
        length, scheme_hash, host_hash, path_hash, digest = m.groups()
        return UriId(
            length=int(length, 16),
            scheme_hash=_signed32(scheme_hash),
            host_hash=_signed32(host_hash),
            path_hash=_signed32(path_hash),
            digest=digest,
        )

    raise InvalidInputError(f"Not a path or uri identifier: {text!r}", text)
