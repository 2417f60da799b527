import hashlib


def sha1_hex(s: str) -> str:
    """Return the 40-digit lowercase hex SHA-1 of the UTF-8 encoding of s.

    A new hash object is built per call. Lone surrogates (undecodable bytes
    surfaced by os.fsdecode) are encoded as "?".
    """
    h = hashlib.sha1()
    h.update(s.encode("utf-8", errors="replace"))
    return h.hexdigest()
