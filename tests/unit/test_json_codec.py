"""Unit tests for JsonCodec and decode error classification."""

import json

import pytest

from sticky import DecodeError, DecodeErrorKind, EncodeError
from sticky.repositories import JsonCodec
from fakes import Item, Note


@pytest.fixture
def codec():
    return JsonCodec()


class TestJsonCodec:
    """Test encoding and decoding collections."""

    def test_encode_is_json_array(self, codec, items):
        data = codec.encode(items, Item)

        assert json.loads(data) == [{"key": 1, "val": "a"}, {"key": 2, "val": "b"}]

    def test_encode_is_indented(self, codec, items):
        assert b"\n  " in codec.encode(items, Item)

    def test_encode_empty(self, codec):
        assert json.loads(codec.encode([], Item)) == []

    def test_decode(self, codec):
        decoded = codec.decode(b'[{"title": "a", "body": "x"}]', Note)
        assert decoded == [Note(title="a", body="x")]

    def test_decode_preserves_order(self, codec, items):
        assert codec.decode(codec.encode(items, Item), Item) == items

    def test_unicode(self, codec):
        notes = [Note(title="日本語タイトル", body="🎨")]
        data = codec.encode(notes, Note)

        assert "日本語タイトル" in data.decode("utf-8")
        assert codec.decode(data, Note) == notes

    def test_encode_failure_raises_encode_error(self, codec):
        class Blob(Note):
            payload: object = None

        with pytest.raises(EncodeError):
            codec.encode([Blob(title="a", payload=object())], Blob)


class TestDecodeErrorClassification:
    """Test mapping of pydantic errors onto DecodeErrorKind."""

    @pytest.mark.parametrize(
        "data,kind",
        [
            (b"[{not json", DecodeErrorKind.DATA_CORRUPTED),
            (b'[{"val": "a"}]', DecodeErrorKind.KEY_NOT_FOUND),
            (b'[{"key": "one", "val": "a"}]', DecodeErrorKind.TYPE_MISMATCH),
            (b'{"key": 1}', DecodeErrorKind.TYPE_MISMATCH),
            (b'[{"key": null, "val": "a"}]', DecodeErrorKind.VALUE_NOT_FOUND),
        ],
    )
    def test_kinds(self, codec, data, kind):
        with pytest.raises(DecodeError) as excinfo:
            codec.decode(data, Item)

        assert excinfo.value.kind == kind

    def test_context_names_location(self, codec):
        with pytest.raises(DecodeError) as excinfo:
            codec.decode(b'[{"key": 1}, {"val": "b"}]', Item)

        assert excinfo.value.context.startswith("1.key")
        assert "1.key" in str(excinfo.value)
