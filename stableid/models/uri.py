"""
uri.py — Minimal URI value with the accessors the identifier needs.

Components follow generic hierarchical URI semantics rather than WHATWG URL
rules: the scheme keeps its case, the host is taken verbatim from the
authority (no lowercasing, no IDNA), and the path is percent-decoded.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

from stableid.errors import InvalidInputError

_FORBIDDEN = re.compile(r"[\x00-\x20\x7f]")


@dataclass(frozen=True)
class Uri:
    scheme: str
    host: str
    path: str
    text: str

    @staticmethod
    def parse(text: str) -> Uri:
        if _FORBIDDEN.search(text):
            raise InvalidInputError(
                f"URI contains whitespace or control characters: {text!r}", text
            )
        try:
            parts = urlsplit(text)
        except ValueError as ex:
            raise InvalidInputError(f"Malformed URI {text!r}: {ex}", text) from ex

        # urlsplit lowercases the scheme; keep it as written.
        scheme = text[: len(parts.scheme)]
        return Uri(
            scheme=scheme,
            host=_host_from_netloc(parts.netloc),
            path=unquote(parts.path),
            text=text,
        )

    def __str__(self) -> str:
        return self.text


def _host_from_netloc(netloc: str) -> str:
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        end = hostport.find("]")
        return hostport[: end + 1] if end != -1 else hostport
    return hostport.partition(":")[0]
