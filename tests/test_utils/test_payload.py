"""Tests for payload parsing."""

import pytest

from spring_exporter.utils.errors import PayloadParseError
from spring_exporter.utils.payload import parse_payload


def test_parse_flat_object():
    rows = parse_payload(b'{"jvm.memory.used": 12345.0, "disk free": 999}')

    assert rows == [("jvm.memory.used", 12345.0), ("disk free", 999.0)]
    assert all(isinstance(value, float) for _, value in rows)


def test_parse_keeps_document_order():
    rows = parse_payload(b'{"z": 1, "a": 2, "m": 3}')
    assert [key for key, _ in rows] == ["z", "a", "m"]


def test_parse_empty_object():
    assert parse_payload(b"{}") == []


def test_parse_negative_and_exponent():
    rows = parse_payload(b'{"a": -1.5, "b": 2e3}')
    assert rows == [("a", -1.5), ("b", 2000.0)]


@pytest.mark.parametrize("body", [
    b"not json",
    b"",
    b"[1, 2, 3]",
    b"42",
    b'"string"',
    b'{"nested": {"a": 1}}',
    b'{"list": [1, 2]}',
    b'{"text": "1"}',
    b'{"flag": true}',
    b'{"missing": null}',
    b'{"nan": NaN}',
    b'{"inf": Infinity}',
    b'{"big": 1e400}',
    b'{"small": -1e400}',
    b"\xff\xfe\x00",
])
def test_parse_rejects_invalid_bodies(body):
    with pytest.raises(PayloadParseError):
        parse_payload(body)
