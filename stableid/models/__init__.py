from .configuration import Configuration
from .identifier import IdKind, PathId, UriId, parse_identifier
from .uri import Uri

__all__ = [
    "Configuration",
    "IdKind",
    "PathId",
    "Uri",
    "UriId",
    "parse_identifier",
]
