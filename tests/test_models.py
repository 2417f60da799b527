"""Tests for models/identifier.py — PathId, UriId, parse_identifier."""

import pytest

from stableid import InvalidInputError, PathId, UriId, parse_identifier
from stableid.models.identifier import IdKind

SONG = "14-3-5b71f297-18f666e0822dc27c8fb077df47270569b9e257f2"
GOOGLE = "12-00310888-a46e044c-0000002f-ac4cbe16220c61319d192bf9078f01de42e383e3"


def test_parse_path_id():
    pid = parse_identifier(SONG)
    assert isinstance(pid, PathId)
    assert pid.kind == IdKind.PATH
    assert pid.length == 20
    assert pid.segments == 3
    assert pid.digest == "18f666e0822dc27c8fb077df47270569b9e257f2"
    assert str(pid) == SONG


def test_parse_uri_id():
    uid = parse_identifier(GOOGLE)
    assert isinstance(uid, UriId)
    assert uid.kind == IdKind.URI
    assert uid.length == 18
    assert uid.scheme_hash == 0x310888
    assert uid.path_hash == 0x2F
    assert str(uid) == GOOGLE


def test_negative_hash_formats_as_unsigned():
    pid = PathId(length=1, segments=1, name_hash=-1, digest="0" * 40)
    assert str(pid) == "1-1-ffffffff-" + "0" * 40
    assert parse_identifier(str(pid)).name_hash == -1


def test_to_dict():
    d = parse_identifier(GOOGLE).to_dict()
    assert d["kind"] == "uri"
    assert d["scheme_hash"] == "00310888"
    assert d["host_hash"] == "a46e044c"
    assert d["length"] == 18


@pytest.mark.parametrize(
    "text",
    [
        "",
        "14-3-5b71f297",
        SONG.upper(),
        SONG + "-00",
        "14-3-5b71f29-18f666e0822dc27c8fb077df47270569b9e257f2",
        "12-00310888-a46e044c-0000002f-ac4cbe",
    ],
)
def test_parse_rejects_malformed(text):
    with pytest.raises(InvalidInputError):
        parse_identifier(text)
