"""
identifier.py — Stable identifiers for local files and http(s) URIs.

The same path (after making it absolute) or the same URI string always yields
the same identifier. Nothing is read from the file itself: the directory check
is the only filesystem query. Only POSIX-style paths are supported.
"""

from __future__ import annotations

import os
from pathlib import Path

from stableid.engine.digest import sha1_hex
from stableid.engine.string_hash import string_hash, utf16_length
from stableid.errors import InvalidInputError
from stableid.misc.logger import logger
from stableid.models.configuration import Configuration
from stableid.models.identifier import PathId, UriId
from stableid.models.uri import Uri


def absolute_path(path: str | bytes | os.PathLike) -> Path:
    """Anchor path at the working directory and collapse ".", ".." and "//".

    Symlinks are left as they are. os.getcwd() errors propagate.
    """
    absolute = os.path.abspath(os.fsdecode(path))
    # POSIX keeps exactly two leading slashes as implementation-defined.
    if absolute.startswith("//"):
        absolute = absolute[1:]
    return Path(absolute)


def segment_count(path: Path) -> int:
    return len(path.parts) - (1 if path.anchor else 0)


class IdGenerator:
    """Generates ids from paths and http/https URIs.

    Instances keep no per-call state and can be shared between threads.
    """

    def __init__(self, configuration: Configuration | None = None) -> None:
        self.configuration = configuration or Configuration()

    # --- Paths ---

    def path_fields(self, path: str | bytes | os.PathLike) -> PathId:
        absolute = absolute_path(path)
        if os.path.isdir(absolute):
            logger.debug(f"Rejecting directory {os.fsdecode(path)} ({absolute})")
            raise InvalidInputError(f"Path is a directory! {os.fsdecode(path)}", path)

        path_string = str(absolute)
        return PathId(
            length=utf16_length(path_string),
            segments=segment_count(absolute),
            name_hash=string_hash(absolute.name),
            digest=sha1_hex(path_string),
        )

    def generate_id_from_path(self, path: str | bytes | os.PathLike) -> str:
        """Generate an id from a file path.

        Length, segment count, file name and the full absolute path are
        hashed into the id.

        Raises InvalidInputError if path is a directory.
        """
        generated = str(self.path_fields(path))
        logger.trace(f"path {os.fsdecode(path)} -> {generated}")
        return generated

    # --- URIs ---

    def uri_fields(self, uri: str | Uri) -> UriId:
        if not isinstance(uri, Uri):
            uri = Uri.parse(uri)

        if uri.scheme not in self.configuration.allowed_schemes:
            logger.debug(f"Rejecting uri {uri.text}: scheme {uri.scheme!r}")
            raise InvalidInputError(f"Invalid Uri Scheme: {uri.scheme or None}", uri.scheme)
        if not uri.host:
            logger.debug(f"Rejecting uri {uri.text}: no host")
            raise InvalidInputError(f"Uri has no host: {uri.text}", uri.text)

        return UriId(
            length=utf16_length(uri.text),
            scheme_hash=string_hash(uri.scheme),
            host_hash=string_hash(uri.host),
            path_hash=string_hash(uri.path),
            digest=sha1_hex(uri.text),
        )

    def generate_id_from_uri(self, uri: str | Uri) -> str:
        """Generate an id from an http/https URI.

        The URI is never fetched, so unreachable URIs still get an id.

        Raises InvalidInputError for any other scheme or a missing host.
        """
        generated = str(self.uri_fields(uri))
        logger.trace(f"uri {uri} -> {generated}")
        return generated


_default = IdGenerator()


def generate_id_from_path(path: str | bytes | os.PathLike) -> str:
    return _default.generate_id_from_path(path)


def generate_id_from_uri(uri: str | Uri) -> str:
    return _default.generate_id_from_uri(uri)
