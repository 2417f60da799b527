"""
stableid

Deterministic identifiers for local file paths and http(s) URIs.
"""

from __future__ import annotations

__all__ = [
    "__version__",
    "IdGenerator",
    "InvalidInputError",
    "StableIdError",
    "PathId",
    "Uri",
    "UriId",
    "generate_id_from_path",
    "generate_id_from_uri",
    "parse_identifier",
]

__version__ = "1.0.0"


from .errors import InvalidInputError, StableIdError  # noqa: E402
from .identifier import (  # noqa: E402
    IdGenerator,
    generate_id_from_path,
    generate_id_from_uri,
)
from .models.identifier import PathId, UriId, parse_identifier  # noqa: E402
from .models.uri import Uri  # noqa: E402
